from lifeatdev.services.tags_service import get_player_tags


def _labels(stats):
    return [tag.label for tag in get_player_tags(stats)]


def test_ten_x_engineer(make_stats):
    labels = _labels(make_stats("staff-engineer", coding=900, reputation=900))
    assert "10x Engineer" in labels
    assert "The Ghost" not in labels
    assert labels[-1] == "Architect"


def test_ghost_and_script_kiddie(make_stats):
    assert "The Ghost" in _labels(make_stats("senior-dev", coding=900, reputation=100))
    assert "Script Kiddie" in _labels(make_stats("unemployed", coding=10, reputation=10))


def test_money_tags(make_stats):
    assert "F.I.R.E. Achieved" in _labels(make_stats("tech-mogul", money=2_000_000))
    assert "Golden Handcuffs" in _labels(make_stats("engineering-manager", money=500))
    assert "Ramen Profitable" in _labels(make_stats("script-kiddie", years_worked=6))


def test_mental_state_tags(make_stats):
    assert "Zen Master" in _labels(make_stats("junior-dev", stress=5, years_worked=11))
    assert "Burnout Speedrun" in _labels(make_stats("junior-dev", stress=100, years_worked=1))
    assert "Caffeine IV" in _labels(make_stats("senior-dev", stress=95, coding=750))


def test_one_path_tag(make_stats):
    path_labels = {"Corporate Drone", "The Suit", "Lone Wolf", "Architect", "Visionary"}
    labels = _labels(make_stats("freelancer"))
    assert [label for label in labels if label in path_labels] == ["Lone Wolf"]


def test_special_tags(make_stats):
    stats = make_stats(
        "cs-student-easy",
        years_worked=7,
        job_changes=6,
        starting_job_id="cs-student-easy",
        coffee_binges=51,
    )
    tags = {tag.label: tag for tag in get_player_tags(stats)}
    assert "Job Hopper" in tags
    assert "Eternal Student" in tags
    assert "Nepo Baby" in tags
    assert tags["Coffee Addict"].description == "Consumed 51+ coffee binges"

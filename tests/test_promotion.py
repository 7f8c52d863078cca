import itertools

import pytest

from lifeatdev.models import CareerPath
from lifeatdev.services.catalog_service import get_all_jobs, get_catalog_index, get_job
from lifeatdev.services.promotion_service import (
    apply_promotion,
    get_available_promotions,
    get_next_job_suggestion,
    is_promotion_move,
    is_eligible_for_promotion,
    meets_job_requirements,
    requires_interview,
    should_show_graduation_ceremony,
)

STAT_GRID = list(itertools.product((0, 250, 600, 1000), (0, 300, 1000), (0, 10_000, 10_000_000)))


def _ids(jobs):
    return [job.id for job in jobs]


@pytest.mark.parametrize("job", get_all_jobs(), ids=lambda job: job.id)
def test_never_demotes(job):
    for coding, reputation, money in STAT_GRID:
        for candidate in get_available_promotions(job, coding, reputation, money):
            assert candidate.level >= job.level
            assert candidate.id != job.id


@pytest.mark.parametrize("job", get_all_jobs(), ids=lambda job: job.id)
def test_same_level_moves_pay_more(job):
    for candidate in get_available_promotions(job, 1000, 1000, 10_000_000):
        if candidate.level == job.level:
            assert candidate.yearly_pay > job.yearly_pay


def test_student_variants_exclude_each_other():
    for coding, reputation, money in STAT_GRID:
        assert "cs-student" not in _ids(get_available_promotions(get_job("cs-student-easy"), coding, reputation, money))
        assert "cs-student-easy" not in _ids(get_available_promotions(get_job("cs-student"), coding, reputation, money))


def test_student_graduates_into_corporate_or_hustler_only():
    offers = get_available_promotions(get_job("cs-student"), 1000, 1000, 10_000_000)
    assert {job.path for job in offers} <= {CareerPath.CORPORATE, CareerPath.HUSTLER}
    assert "junior-dev" in _ids(offers)
    assert "freelancer" in _ids(offers)
    assert "team-lead" not in _ids(offers)


def test_senior_dev_bridges_to_management_and_ic():
    offers = _ids(get_available_promotions(get_job("senior-dev"), 1000, 1000, 10_000_000))
    assert "team-lead" in offers
    assert "staff-engineer" in offers
    assert "tech-mogul" not in offers
    assert "consultant" not in offers


def test_hustler_level_two_bridges_to_business_and_specialist():
    offers = _ids(get_available_promotions(get_job("freelancer"), 1000, 1000, 10_000_000))
    assert {"agency-owner", "tech-mogul", "contractor", "consultant", "industry-architect"} <= set(offers)
    assert "senior-dev" not in offers
    assert "team-lead" not in offers


def test_non_bridge_stays_on_path():
    offers = get_available_promotions(get_job("mid-dev"), 1000, 1000, 10_000_000)
    assert _ids(offers) == ["senior-dev"]


def test_results_in_catalog_order():
    offers = get_available_promotions(get_job("freelancer"), 1000, 1000, 10_000_000)
    indexes = [get_catalog_index(job) for job in offers]
    assert indexes == sorted(indexes)


def test_no_promotion_is_an_empty_list():
    assert get_available_promotions(get_job("unemployed"), 0, 0, 0) == []
    assert not is_eligible_for_promotion(get_job("unemployed"), 0, 0, 0)


def test_money_requirement_gates_candidates():
    assert "freelancer" not in _ids(get_available_promotions(get_job("script-kiddie"), 300, 0, 1000))
    assert "freelancer" in _ids(get_available_promotions(get_job("script-kiddie"), 300, 0, 1500))


def test_requirement_reasons_list_every_failure_in_order():
    check = meets_job_requirements(get_job("junior-dev"), 0, 0, 0)
    assert not check.meets
    assert check.failure_reasons == [
        "Need 250 coding skill (you have 0)",
        "Need 50 reputation (you have 0)",
    ]


def test_requirement_reasons_include_money():
    check = meets_job_requirements(get_job("freelancer"), 0, 0, 0)
    assert len(check.failure_reasons) == 2
    assert check.failure_reasons[-1] == "Need $1,500 (you have $0)"


def test_requirements_met():
    check = meets_job_requirements(get_job("junior-dev"), 250, 50, 0)
    assert check.meets
    assert check.failure_reasons == []


@pytest.mark.parametrize(
    "job_id,expected",
    [
        ("unemployed", False),
        ("script-kiddie", False),
        ("intern", True),
        ("junior-dev", True),
        ("freelancer", True),
        ("cto", True),
    ],
)
def test_requires_interview(job_id, expected):
    assert requires_interview(get_job(job_id)) is expected


@pytest.mark.parametrize(
    "current,target,expected",
    [
        ("cs-student", "junior-dev", True),
        ("cs-student-easy", "freelancer", True),
        ("cs-student", "intern", False),
        ("cs-student", "script-kiddie", False),
        ("intern", "junior-dev", False),
    ],
)
def test_graduation_ceremony(current, target, expected):
    assert should_show_graduation_ceremony(get_job(current), get_job(target)) is expected


@pytest.mark.parametrize(
    "current,expected",
    [
        ("intern", "junior-dev"),
        ("senior-dev", "team-lead"),
        ("unemployed", "script-kiddie"),
        ("industry-architect", None),
    ],
)
def test_next_job_suggestion(current, expected):
    suggestion = get_next_job_suggestion(get_job(current))
    assert (suggestion.id if suggestion else None) == expected


def test_apply_promotion_counts_job_change_and_ends_support(make_stats):
    stats = make_stats("cs-student-easy", family_support_years_left=3)
    promoted = apply_promotion(stats, get_job("junior-dev"))
    assert promoted.current_job.id == "junior-dev"
    assert promoted.job_changes == 1
    assert promoted.family_support_years_left == 0
    assert stats.current_job.id == "cs-student-easy"


@pytest.mark.parametrize(
    "current,candidate,expected",
    [
        ("unemployed", "cto", False),
        ("senior-dev", "team-lead", True),
        ("mid-dev", "junior-dev", False),
        ("senior-dev", "senior-dev", False),
        ("cs-student", "freelancer", True),
        ("cs-student", "cs-student-easy", False),
    ],
)
def test_is_promotion_move(current, candidate, expected):
    assert is_promotion_move(get_job(current), get_job(candidate)) is expected

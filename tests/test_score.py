import pytest

from lifeatdev.models import GameOverReason
from lifeatdev.services.score_service import (
    calculate_efficiency_bonus,
    calculate_score,
    calculate_wealth_bonus,
    get_outcome_multiplier,
    get_score_breakdown_text,
)


@pytest.fixture
def winner(make_stats):
    return make_stats("cto", money=100000, coding=900, reputation=850, age=26)


def test_worked_victory_example(winner):
    score = calculate_score(winner, GameOverReason.VICTORY, False)
    assert score.base_points == 100
    assert score.job_level_bonus == 500
    assert score.wealth_bonus == 200
    assert score.coding_bonus == 1350
    assert score.reputation_bonus == 1700
    assert score.efficiency_bonus == 160
    assert score.subtotal == 4010
    assert score.outcome_multiplier == 2.0
    assert score.total_score == 8020


def test_special_win_multiplier(winner):
    assert calculate_score(winner, GameOverReason.VICTORY, True).total_score == 10025


def test_score_is_deterministic(winner):
    assert calculate_score(winner, GameOverReason.VICTORY) == calculate_score(winner, GameOverReason.VICTORY)


@pytest.mark.parametrize(
    "reason,special,expected",
    [
        (GameOverReason.VICTORY, True, 2.5),
        (GameOverReason.VICTORY, False, 2.0),
        (GameOverReason.BURNOUT, False, 0.5),
        (GameOverReason.BANKRUPTCY, False, 0.3),
    ],
)
def test_outcome_multiplier(reason, special, expected):
    assert get_outcome_multiplier(reason, special) == expected


@pytest.mark.parametrize("money,expected", [(-5000, 0), (0, 0), (9, 40), (999, 120)])
def test_wealth_bonus(money, expected):
    assert calculate_wealth_bonus(money) == expected


@pytest.mark.parametrize(
    "years,reason,expected",
    [
        (2, GameOverReason.VICTORY, 200),
        (4, GameOverReason.VICTORY, 200),
        (5, GameOverReason.VICTORY, 190),
        (25, GameOverReason.VICTORY, 0),
        (3, GameOverReason.BURNOUT, 15),
        (30, GameOverReason.BANKRUPTCY, 100),
    ],
)
def test_efficiency_bonus(years, reason, expected):
    assert calculate_efficiency_bonus(years, reason) == expected


def test_level_table(make_stats):
    for job_id, bonus in [("intern", 50), ("junior-dev", 150), ("senior-dev", 300), ("staff-engineer", 500)]:
        stats = make_stats(job_id, money=0, coding=0, reputation=0)
        assert calculate_score(stats, GameOverReason.BURNOUT).job_level_bonus == bonus


def test_burnout_score(make_stats):
    stats = make_stats("junior-dev", money=0, coding=101, reputation=33, age=21)
    score = calculate_score(stats, GameOverReason.BURNOUT)
    # 100 + 150 + 0 + 151 + 66 + 15 = 482
    assert score.subtotal == 482
    assert score.total_score == 241


def test_breakdown_text(winner):
    text = get_score_breakdown_text(calculate_score(winner, GameOverReason.VICTORY))
    assert text.startswith("Base: 100 | Job Level: +500")
    assert "× 2" in text
    assert text.endswith("= 8,020")

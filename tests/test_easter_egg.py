import pytest

from lifeatdev.data.narrative import SPECIAL_WIN_EVENTS
from lifeatdev.services.easter_egg_service import check_action_pattern, check_special_win

PATTERN = ["side-project"] * 3 + ["network-online"] * 3 + ["grind-leetcode"] * 2


@pytest.fixture
def disciplined(make_stats):
    return make_stats(
        "junior-dev",
        age=19,
        coding=300,
        reputation=200,
        stress=10,
        energy=80,
        money=5000,
        action_history=list(PATTERN),
    )


def test_pattern_met():
    assert check_action_pattern(PATTERN)


def test_pattern_needs_eight_actions():
    assert not check_action_pattern(PATTERN[:7])


def test_pattern_only_counts_last_24():
    history = ["side-project"] * 3 + ["hackathon"] * 24
    assert not check_action_pattern(history)


def test_special_win(disciplined, rng):
    assert check_special_win(disciplined, rng) in SPECIAL_WIN_EVENTS


def test_no_special_win_in_first_year(disciplined, rng):
    assert check_special_win(disciplined.copy(age=18), rng) is None


def test_no_special_win_from_terminal_job(disciplined, rng):
    from lifeatdev.services.catalog_service import get_job

    assert check_special_win(disciplined.copy(current_job=get_job("cto")), rng) is None


@pytest.mark.parametrize(
    "changes",
    [
        {"coding": 99},
        {"reputation": 99},
        {"stress": 61},
        {"energy": 39},
        {"money": 99},
    ],
)
def test_stat_gates(disciplined, rng, changes):
    assert check_special_win(disciplined.copy(**changes), rng) is None

import asyncio
import json
import random

import pytest

from lifeatdev.data.narrative import SPECIAL_WIN_EVENTS
from lifeatdev.errors import GameStateError
from lifeatdev.models import GameOverReason, GamePhase, LogType
from lifeatdev.services.catalog_service import get_job
from lifeatdev.services.game_service import GameService
from lifeatdev.services.interview_service import InterviewPhase

PATTERN = ["side-project"] * 3 + ["network-online"] * 3 + ["grind-leetcode"] * 2


@pytest.fixture
def game():
    return GameService(
        random.Random(7),
        deterministic_events=True,
        event_delay=0,
        action_event_delay=0,
        action_event_chance=0.0,
    )


def _answer_all(session, correct: bool):
    while session.phase == InterviewPhase.ASKING:
        question = session.current_question
        choice = question.correct_index if correct else (question.correct_index + 1) % len(question.options)
        session.answer(choice)
        session.advance()
    return session


def test_start_paths(game):
    stats = game.start_game("self-taught").stats
    assert (stats.current_job.id, stats.money, stats.coding, stats.reputation) == ("unemployed", 1000, 50, 0)
    assert (stats.weeks, stats.stress, stats.energy, stats.age) == (52, 0, 100, 18)

    stats = game.start_game("student-easy").stats
    assert stats.current_job.id == "cs-student-easy"
    assert stats.family_support_years_left == 4
    assert stats.starting_job_id == "cs-student-easy"
    assert game.state.phase == GamePhase.PLAYING
    assert len(game.state.event_log) == 2


def test_unknown_start_path(game):
    with pytest.raises(GameStateError):
        game.start_game("astronaut")


def test_cannot_act_before_start(game):
    with pytest.raises(GameStateError):
        game.perform_action("grind-leetcode")


def test_take_turn(game):
    game.start_game()
    turn = asyncio.run(game.take_turn("grind-leetcode"))
    assert game.stats.weeks == 51
    assert turn.event is None
    assert turn.year_end is None
    assert game.state.event_log[-1].type == LogType.SUCCESS


def test_last_week_triggers_settlement(game):
    game.start_game()
    game.state.stats = game.stats.copy(weeks=1, money=100_000)
    turn = asyncio.run(game.take_turn("grind-leetcode"))
    assert turn.year_end is not None
    assert game.stats.weeks == 52
    assert game.stats.age == 19
    assert game.deck.counter == 1


def test_bankruptcy_after_one_event(game):
    game.start_game("self-taught")
    game.state.stats = game.stats.copy(coding=0)
    asyncio.run(game.end_year())

    assert game.state.phase == GamePhase.GAME_OVER
    assert game.state.game_over.reason == GameOverReason.BANKRUPTCY
    assert game.deck.counter == 1

    messages = [entry.message for entry in game.state.event_log]
    year_line = next(i for i, m in enumerate(messages) if "Year 1 complete" in m)
    event_lines = [i for i, entry in enumerate(game.state.event_log) if entry.type == LogType.EVENT]
    assert len(event_lines) == 1
    assert year_line < event_lines[0] < len(messages) - 1
    assert messages[-1].startswith("> GAME OVER")


def test_settlement_surfaces_interview_and_blocks_actions(game):
    game.start_game("student")
    game.state.stats = game.stats.copy(current_job=get_job("intern"), weeks=0, money=0, coding=250, reputation=50)
    asyncio.run(game.end_year())

    assert game.state.phase == GamePhase.PLAYING
    assert game.state.pending_interview_job_id == "junior-dev"
    with pytest.raises(GameStateError):
        game.perform_action("grind-leetcode")


def test_settlement_cannot_overlap(game):
    game.start_game()
    game._settling = True
    with pytest.raises(GameStateError):
        asyncio.run(game.end_year())


def test_passing_interview_promotes(game):
    game.start_game("student")
    game.state.stats = game.stats.copy(current_job=get_job("intern"), coding=250, reputation=50)
    game.state.pending_interview_job_id = "junior-dev"

    session = _answer_all(game.start_interview(), correct=True)
    assert game.finish_interview(session) is True
    assert game.stats.current_job.id == "junior-dev"
    assert game.stats.job_changes == 1
    assert game.state.pending_interview_job_id is None


def test_failing_interview_adds_stress(game):
    game.start_game("student")
    game.state.pending_interview_job_id = "intern"

    session = _answer_all(game.start_interview(), correct=False)
    assert game.finish_interview(session) is False
    assert game.stats.current_job.id == "cs-student"
    assert game.stats.stress == 10
    assert game.state.pending_interview_job_id is None


def test_cancelled_interview_is_not_a_fail(game):
    game.start_game("student")
    game.state.pending_interview_job_id = "intern"

    session = game.start_interview()
    game.cancel_interview(session)
    assert game.stats.stress == 0
    assert game.stats.current_job.id == "cs-student"
    assert game.state.pending_interview_job_id is None


def test_job_hunt_rejection(game):
    game.start_game("self-taught")
    game.state.stats = game.stats.copy(coding=0)
    result = game.job_hunt()
    assert not result.offers
    assert result.rejection_reasons[0] == "No positions match your current profile."
    assert "Script Kiddie: Need 50 coding skill (you have 0)" in result.rejection_reasons


def test_job_hunt_single_offer_without_interview(game):
    game.start_game("self-taught")
    result = game.job_hunt()
    assert result.application.accepted
    assert game.stats.current_job.id == "script-kiddie"


def test_job_hunt_graduation(game):
    game.start_game("student")
    game.state.stats = game.stats.copy(coding=300, reputation=60, money=5000)
    result = game.job_hunt()

    assert result.graduation
    assert [job.id for job in result.offers] == ["junior-dev", "unemployed", "script-kiddie", "freelancer"]
    assert game.state.pending_is_graduation

    with pytest.raises(GameStateError):
        game.choose_job("cto")

    application = game.choose_job("junior-dev")
    assert application.interview_required
    assert game.state.pending_interview_job_id == "junior-dev"
    assert game.state.pending_job_ids == []


def test_apply_for_job_rejection(game):
    game.start_game()
    application = game.apply_for_job("freelancer")
    assert not application.accepted
    assert application.reasons == ("Need 200 coding skill (you have 50)", "Need $1,500 (you have $1,000)")


def test_apply_to_off_path_job_raises(game):
    game.start_game()
    game.state.stats = game.stats.copy(coding=1000, reputation=1000, money=1_000_000)
    with pytest.raises(GameStateError):
        game.apply_for_job("cto")
    assert game.state.pending_interview_job_id is None
    assert game.stats.current_job.id == "unemployed"


@pytest.mark.parametrize("current,target", [("senior-dev", "junior-dev"), ("mid-dev", "junior-dev"), ("intern", "cs-student")])
def test_apply_to_lower_rung_raises(game, current, target):
    game.start_game()
    game.state.stats = game.stats.copy(current_job=get_job(current), coding=1000, reputation=1000)
    with pytest.raises(GameStateError):
        game.apply_for_job(target)
    assert game.stats.current_job.id == current


def test_apply_while_decision_pending_raises(game):
    game.start_game()
    game.state.pending_interview_job_id = "freelancer"
    with pytest.raises(GameStateError):
        game.apply_for_job("script-kiddie")


def test_victory_through_interview(game):
    game.start_game()
    game.state.stats = game.stats.copy(current_job=get_job("engineering-manager"), coding=800, reputation=950, age=24)
    game.state.pending_interview_job_id = "cto"

    game.finish_interview(_answer_all(game.start_interview(), correct=True))
    assert game.state.phase == GamePhase.GAME_OVER
    assert game.state.game_over.reason == GameOverReason.VICTORY

    report = game.build_final_report()
    assert report.score.outcome_multiplier == 2.0
    assert report.summary_key.startswith("summary-management-lvl4-score")
    assert len(report.summary) == 6
    assert any(tag.label == "The Suit" for tag in report.tags)
    assert report.summary[-1] == "GG. You beat the game of life."


def test_hidden_victory_at_year_end(game):
    game.start_game()
    game.state.stats = game.stats.copy(
        current_job=get_job("junior-dev"),
        weeks=0,
        coding=300,
        reputation=200,
        stress=10,
        energy=80,
        money=5000,
        action_history=list(PATTERN),
    )
    asyncio.run(game.end_year())

    game_over = game.state.game_over
    assert game_over.reason == GameOverReason.VICTORY
    assert game_over.is_special_win
    assert game_over.message in SPECIAL_WIN_EVENTS
    assert game.calculate_final_score().outcome_multiplier == 2.5


def test_burnout_from_action(game):
    game.start_game()
    game.state.stats = game.stats.copy(stress=95)
    asyncio.run(game.take_turn("grind-leetcode"))
    assert game.state.game_over.reason == GameOverReason.BURNOUT
    with pytest.raises(GameStateError):
        game.perform_action("sleep-in")


def test_burnout_gets_the_burnout_story(game):
    game.start_game()
    game.state.stats = game.stats.copy(stress=95)
    asyncio.run(game.take_turn("grind-leetcode"))

    report = game.build_final_report()
    assert report.summary_key == "summary-hustler-lvl1-score0"
    assert report.summary[0] == "You tried to become a hustler legend, but made it only to level 1."
    assert report.summary[1].startswith("After 1 weeks of endless sprints")
    assert "GG" not in " ".join(report.summary)


def test_bankruptcy_gets_the_average_story(game):
    game.start_game("self-taught")
    game.state.stats = game.stats.copy(coding=0)
    asyncio.run(game.end_year())

    report = game.build_final_report()
    assert report.summary[1] == "After 52 weeks, you survived the grind, barely."
    assert report.summary_key == "summary-hustler-lvl1-score50"


def test_score_needs_game_over(game):
    game.start_game()
    with pytest.raises(GameStateError):
        game.calculate_final_score()


def test_save_and_restore(game):
    game.start_game("student")
    asyncio.run(game.take_turn("hackathon"))
    game.state.pending_job_ids = ["junior-dev", "freelancer"]
    game.deck.counter = 3

    data = json.loads(json.dumps(game.save()))
    other = GameService(random.Random(1), deterministic_events=True, event_delay=0)
    other.restore(data)

    assert other.state.stats == game.state.stats
    assert other.state.phase == GamePhase.PLAYING
    assert other.state.event_log == game.state.event_log
    assert other.state.pending_job_ids == ["junior-dev", "freelancer"]
    assert other.deck.counter == 3

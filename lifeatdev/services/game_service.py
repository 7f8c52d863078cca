# services/game_service.py
"""
Game session orchestration.

One GameService drives one player's game: starting paths, weekly actions,
the job hunt, interviews, year-end settlement and game over. Every state
change is written to the event log; `save()` / `restore()` move the whole
session through plain dicts.
"""
from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..config import LifeAtDevConfig
from ..data.actions import JOB_HUNT_ACTION_ID
from ..data.jobs import DEFAULT_STARTING_PATH, INTERNSHIP_JOB_ID, STARTING_PATHS
from ..data.narrative import GAME_OVER_MESSAGES
from ..errors import GameStateError
from ..models import (
    GameOver,
    GameOverReason,
    GamePhase,
    Job,
    LogEntry,
    LogType,
    PlayerStats,
    PlayerTag,
    ScoreBreakdown,
)
from ..utils.constants import Bounds, Emojis, GameOverRules, Lifecycle
from ..utils.format import money as fmt_money
from .actions_service import ActionResult, execute_action
from .base_service import BaseService
from .catalog_service import find_job, get_job, validate_catalog
from .easter_egg_service import check_special_win
from .events_service import EventDeck, GameEvent, apply_stat_changes
from .interview_service import InterviewPhase, InterviewSession, validate_template_bank
from .promotion_service import (
    apply_promotion,
    get_available_promotions,
    get_next_job_suggestion,
    is_promotion_move,
    meets_job_requirements,
    requires_interview,
    should_show_graduation_ceremony,
)
from .score_service import calculate_score, get_score_breakdown_text
from .settlement_service import SettlementResult, SettlementWithEvent, settle_and_roll_event
from .summary_service import generate_offline_summary, generate_summary_hash
from .tags_service import get_player_tags


@dataclass
class GameState:
    phase: GamePhase = GamePhase.START
    stats: Optional[PlayerStats] = None
    event_log: List[LogEntry] = field(default_factory=list)
    game_over: Optional[GameOver] = None
    pending_interview_job_id: Optional[str] = None
    pending_job_ids: List[str] = field(default_factory=list)
    pending_is_graduation: bool = False
    event_counter: int = 0

    @property
    def has_pending_decision(self) -> bool:
        return self.pending_interview_job_id is not None or bool(self.pending_job_ids)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "phase": self.phase.value,
            "stats": self.stats.to_dict() if self.stats else None,
            "event_log": [entry.to_dict() for entry in self.event_log],
            "game_over": self.game_over.to_dict() if self.game_over else None,
            "pending_interview_job_id": self.pending_interview_job_id,
            "pending_job_ids": list(self.pending_job_ids),
            "pending_is_graduation": self.pending_is_graduation,
            "event_counter": self.event_counter,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameState":
        stats = data.get("stats")
        game_over = data.get("game_over")
        return cls(
            phase=GamePhase(data.get("phase", GamePhase.START.value)),
            stats=PlayerStats.from_dict(stats) if stats else None,
            event_log=[LogEntry.from_dict(entry) for entry in data.get("event_log", [])],
            game_over=GameOver.from_dict(game_over) if game_over else None,
            pending_interview_job_id=data.get("pending_interview_job_id"),
            pending_job_ids=[str(job_id) for job_id in data.get("pending_job_ids", [])],
            pending_is_graduation=bool(data.get("pending_is_graduation", False)),
            event_counter=int(data.get("event_counter", 0)),
        )


@dataclass(frozen=True)
class ApplicationResult:
    job: Job
    accepted: bool
    interview_required: bool = False
    reasons: Tuple[str, ...] = ()


@dataclass(frozen=True)
class JobHuntResult:
    offers: Tuple[Job, ...] = ()
    graduation: bool = False
    rejection_reasons: Tuple[str, ...] = ()
    application: Optional[ApplicationResult] = None


@dataclass
class TurnResult:
    action: ActionResult
    job_hunt: Optional[JobHuntResult] = None
    year_end: Optional[SettlementWithEvent] = None
    event: Optional[GameEvent] = None
    game_over: Optional[GameOver] = None


@dataclass(frozen=True)
class FinalReport:
    game_over: GameOver
    score: ScoreBreakdown
    breakdown_text: str
    summary_key: str
    summary: List[str]
    tags: List[PlayerTag]


def check_game_over(stats: PlayerStats) -> Optional[GameOver]:
    """Burnout beats victory when both hold."""
    if stats.stress >= GameOverRules.BURNOUT_STRESS:
        return GameOver(
            reason=GameOverReason.BURNOUT,
            final_stats=stats,
            message=GAME_OVER_MESSAGES["burnout"],
        )

    if stats.current_job.is_game_end:
        return GameOver(
            reason=GameOverReason.VICTORY,
            final_stats=stats,
            message=GAME_OVER_MESSAGES["victory"].format(
                title=stats.current_job.title,
                total_earned=fmt_money(stats.total_earned),
            ),
        )

    return None


def create_starting_stats(path: str = DEFAULT_STARTING_PATH) -> PlayerStats:
    start = STARTING_PATHS.get(path)
    if start is None:
        raise GameStateError(f"Unknown starting path '{path}'")

    job = get_job(start["job_id"])
    return PlayerStats(
        weeks=Bounds.WEEKS_PER_YEAR,
        stress=0,
        energy=Bounds.MAX_ENERGY,
        money=start["money"],
        coding=start["coding"],
        reputation=start["reputation"],
        current_job=job,
        age=Lifecycle.STARTING_AGE,
        starting_job_id=job.id,
        family_support_years_left=start["family_support_years"],
    )


class GameService(BaseService):
    def __init__(
        self,
        rng: Optional[random.Random] = None,
        *,
        deterministic_events: Optional[bool] = None,
        event_delay: Optional[float] = None,
        action_event_delay: Optional[float] = None,
        action_event_chance: Optional[float] = None,
    ):
        super().__init__("game", rng)

        # Broken game data must stop the host from starting at all
        validate_catalog()
        validate_template_bank()

        if deterministic_events is None:
            deterministic_events = LifeAtDevConfig.EVENTS.DETERMINISTIC
        self.deck = EventDeck(self.rng, deterministic=deterministic_events)
        self.event_delay = (
            LifeAtDevConfig.SETTLEMENT.EVENT_DELAY_SECONDS if event_delay is None else event_delay
        )
        self.action_event_delay = (
            LifeAtDevConfig.EVENTS.ACTION_EVENT_DELAY_SECONDS if action_event_delay is None else action_event_delay
        )
        self.action_event_chance = (
            LifeAtDevConfig.EVENTS.ACTION_EVENT_CHANCE if action_event_chance is None else action_event_chance
        )
        self.state = GameState()
        self._settling = False

    # ==================== HELPERS ====================

    @property
    def stats(self) -> PlayerStats:
        if self.state.stats is None:
            raise GameStateError("No game in progress")
        return self.state.stats

    def _log(self, message: str, type: LogType = LogType.INFO) -> None:
        self.state.event_log.append(LogEntry(message=message, type=type))

    def _require_playing(self) -> None:
        if self.state.phase != GamePhase.PLAYING:
            raise GameStateError(f"Game is not in progress (phase: {self.state.phase.value})")

    def _require_no_pending(self) -> None:
        if self.state.pending_interview_job_id is not None:
            raise GameStateError(f"Interview for '{self.state.pending_interview_job_id}' is pending")
        if self.state.pending_job_ids:
            raise GameStateError("A job selection is pending")

    def _clear_pending(self) -> None:
        self.state.pending_interview_job_id = None
        self.state.pending_job_ids = []
        self.state.pending_is_graduation = False

    def _end_game(self, game_over: GameOver) -> GameOver:
        self.state.phase = GamePhase.GAME_OVER
        self.state.game_over = game_over
        self.state.stats = game_over.final_stats
        self._clear_pending()

        log_type = LogType.SUCCESS if game_over.reason == GameOverReason.VICTORY else LogType.ERROR
        self._log(f"> GAME OVER: {game_over.message}", log_type)
        self.logger.info(
            f"Game over: {game_over.reason.value}"
            + (" (hidden victory)" if game_over.is_special_win else "")
            + f" as {game_over.final_stats.current_job.id}, age {game_over.final_stats.age}"
        )
        return game_over

    def _check_game_over(self) -> Optional[GameOver]:
        game_over = check_game_over(self.stats)
        if game_over:
            return self._end_game(game_over)
        return None

    def _promote(self, job: Job) -> None:
        self.state.stats = apply_promotion(self.stats, job)
        self._log(
            f"> {Emojis.PARTY} PROMOTED to {job.title}! New salary: {fmt_money(job.yearly_pay)}/year",
            LogType.SUCCESS,
        )

    # ==================== LIFECYCLE ====================

    def start_game(self, path: str = DEFAULT_STARTING_PATH) -> GameState:
        stats = create_starting_stats(path)
        start = STARTING_PATHS[path]

        self.state = GameState(phase=GamePhase.PLAYING, stats=stats)
        self.deck.counter = 0
        self._settling = False

        self._log(f"> {start['intro']}", LogType(start["log_type"]))
        self._log("> Journey started. You have 52 weeks per year. Plan wisely!")
        self.logger.info(f"Game started on '{path}' as {stats.current_job.id}")
        return self.state

    def save(self) -> Dict[str, Any]:
        self.state.event_counter = self.deck.counter
        return self.state.to_dict()

    def restore(self, data: Dict[str, Any]) -> GameState:
        self.state = GameState.from_dict(data)
        self.deck.counter = self.state.event_counter
        self._settling = False
        return self.state

    # ==================== ACTIONS ====================

    def perform_action(self, action_id: str) -> ActionResult:
        """Apply one weekly action. Does not settle the year or roll events; see take_turn."""
        self._require_playing()
        self._require_no_pending()

        result = execute_action(action_id, self.stats, self.rng)
        self.state.stats = result.stats
        self._log(result.message, LogType.SUCCESS)
        self._check_game_over()
        return result

    async def take_turn(self, action_id: str) -> TurnResult:
        """
        One full turn: the action, then either the year-end settlement (weeks
        used up) or the job hunt / chance of a world event.
        """
        turn = TurnResult(action=self.perform_action(action_id))
        if self.state.game_over:
            turn.game_over = self.state.game_over
            return turn

        if turn.action.year_ended:
            turn.year_end = await self.end_year()
            turn.game_over = self.state.game_over
            return turn

        if action_id == JOB_HUNT_ACTION_ID:
            turn.job_hunt = self.job_hunt()

        turn.event = await self.maybe_roll_action_event()
        turn.game_over = self.state.game_over
        return turn

    async def maybe_roll_action_event(self) -> Optional[GameEvent]:
        self._require_playing()

        event = self.deck.roll(self.action_event_chance, self.stats)
        if event is None:
            return None

        if self.action_event_delay > 0:
            await asyncio.sleep(self.action_event_delay)

        # The game may have ended while we waited
        if self.state.phase != GamePhase.PLAYING:
            return None

        self._apply_event(event)
        self._check_game_over()
        return event

    def _apply_event(self, event: GameEvent) -> None:
        self.state.stats = apply_stat_changes(self.stats, event.effects)
        self.state.event_counter = self.deck.counter
        self._log(f"> {event.message}", LogType.EVENT)

    # ==================== YEAR END ====================

    def _on_settled(self, settlement: SettlementResult) -> None:
        self.state.stats = settlement.stats
        finances = settlement.finances

        message = (
            f"> Year {settlement.stats.years_worked} complete. "
            f"Income: {fmt_money(finances.income)}, Rent: -{fmt_money(finances.expenses)}"
        )
        if settlement.stats.family_support_years_left > 0:
            message += f" (family support: {settlement.stats.family_support_years_left} years left)"
        self._log(message)

        if settlement.promoted_to:
            job = settlement.promoted_to
            self._log(
                f"> {Emojis.PARTY} PROMOTED to {job.title}! New salary: {fmt_money(job.yearly_pay)}/year",
                LogType.SUCCESS,
            )
        elif settlement.pending_interview:
            self.state.pending_interview_job_id = settlement.pending_interview.id
            self._log(f"> {Emojis.BRIEFCASE} Interview offer: {settlement.pending_interview.title}")
        elif settlement.pending_selection:
            self.state.pending_job_ids = [job.id for job in settlement.pending_selection]
            self._log(f"> {Emojis.BRIEFCASE} Multiple career opportunities available! Pick your next move.")

        if settlement.support_ended:
            self._log(
                f"> {Emojis.GRADUATE} Family support has ended. Time to find a job!",
                LogType.WARNING,
            )

    async def end_year(self) -> SettlementWithEvent:
        """
        Year-end settlement for the current game. Promotion prompts are
        surfaced into the game state before the world event lands.
        """
        self._require_playing()
        if self._settling:
            raise GameStateError("A settlement is already in progress")

        self._settling = True
        try:
            outcome = await settle_and_roll_event(
                self.stats,
                self.deck,
                delay=self.event_delay,
                on_settled=self._on_settled,
            )
        except Exception as e:
            self._log_error("end_year", e)
            raise
        finally:
            self._settling = False

        self.state.stats = outcome.stats
        self.state.event_counter = self.deck.counter
        self._log(f"> {outcome.event.message}", LogType.EVENT)

        if outcome.settlement.bankrupt:
            self._end_game(GameOver(
                reason=GameOverReason.BANKRUPTCY,
                final_stats=outcome.stats,
                message=GAME_OVER_MESSAGES["bankruptcy"],
            ))
            return outcome

        special = check_special_win(outcome.stats, self.rng)
        if special:
            self._end_game(GameOver(
                reason=GameOverReason.VICTORY,
                final_stats=outcome.stats,
                message=special,
                is_special_win=True,
                special_win_event=special,
            ))
            return outcome

        self._check_game_over()
        return outcome

    # ==================== JOB HUNT ====================

    def job_hunt(self) -> JobHuntResult:
        """Look for openings right now and surface the next step."""
        self._require_playing()
        self._require_no_pending()
        stats = self.stats
        current = stats.current_job

        offers = get_available_promotions(current, stats.coding, stats.reputation, stats.money)

        if not offers:
            reasons: List[str] = ["No positions match your current profile."]
            suggestion = get_next_job_suggestion(current)
            if suggestion:
                check = meets_job_requirements(suggestion, stats.coding, stats.reputation, stats.money)
                reasons += [f"{suggestion.title}: {reason}" for reason in check.failure_reasons]
            for reason in reasons:
                self._log(f"> {reason}", LogType.WARNING)
            return JobHuntResult(rejection_reasons=tuple(reasons))

        if any(should_show_graduation_ceremony(current, job) for job in offers):
            graduation_offers = tuple(job for job in offers if job.id != INTERNSHIP_JOB_ID)
            self.state.pending_job_ids = [job.id for job in graduation_offers]
            self.state.pending_is_graduation = True
            self._log(f"> {Emojis.GRADUATE} Graduation! Choose where to start your career.", LogType.SUCCESS)
            return JobHuntResult(offers=graduation_offers, graduation=True)

        if len(offers) == 1:
            return JobHuntResult(offers=tuple(offers), application=self.apply_for_job(offers[0].id))

        self.state.pending_job_ids = [job.id for job in offers]
        self._log(f"> {Emojis.BRIEFCASE} {len(offers)} openings found. Pick one to apply.")
        return JobHuntResult(offers=tuple(offers))

    def apply_for_job(self, job_id: str) -> ApplicationResult:
        """Apply to a job the current one leads to. Off-path jobs, demotions and pay cuts raise."""
        self._require_playing()
        self._require_no_pending()
        job = get_job(job_id)
        stats = self.stats

        if not is_promotion_move(stats.current_job, job):
            raise GameStateError(f"{job.title} is not a next step from {stats.current_job.title}")

        check = meets_job_requirements(job, stats.coding, stats.reputation, stats.money)
        if not check.meets:
            self._log(f"> {Emojis.ERROR} {job.title} rejected your application.", LogType.ERROR)
            for reason in check.failure_reasons:
                self._log(f"> {reason}", LogType.WARNING)
            return ApplicationResult(job=job, accepted=False, reasons=tuple(check.failure_reasons))

        if requires_interview(job):
            self.state.pending_interview_job_id = job.id
            self._log(f"> {Emojis.BRIEFCASE} {job.title} wants to interview you.")
            return ApplicationResult(job=job, accepted=False, interview_required=True)

        self._promote(job)
        self._check_game_over()
        return ApplicationResult(job=job, accepted=True)

    def choose_job(self, job_id: str) -> ApplicationResult:
        """Pick one of the offered jobs from a pending selection."""
        self._require_playing()
        if job_id not in self.state.pending_job_ids:
            raise GameStateError(f"'{job_id}' is not among the offered jobs")

        self.state.pending_job_ids = []
        self.state.pending_is_graduation = False
        return self.apply_for_job(job_id)

    def decline_offers(self) -> None:
        self._require_playing()
        if self.state.pending_job_ids:
            self._log("> You passed on the open positions for now.")
        self.state.pending_job_ids = []
        self.state.pending_is_graduation = False

    # ==================== INTERVIEWS ====================

    def pending_interview_job(self) -> Optional[Job]:
        job_id = self.state.pending_interview_job_id
        return find_job(job_id) if job_id else None

    def start_interview(self) -> InterviewSession:
        self._require_playing()
        job = self.pending_interview_job()
        if job is None:
            raise GameStateError("No interview is pending")
        return InterviewSession.for_job(job, self.rng)

    def finish_interview(self, session: InterviewSession) -> bool:
        """Apply a finished session's verdict. A cancelled session counts as not taken."""
        self._require_playing()
        if session.job.id != self.state.pending_interview_job_id:
            raise GameStateError(f"No pending interview for '{session.job.id}'")

        if session.phase == InterviewPhase.CANCELLED:
            self.cancel_interview()
            return False

        passed = session.passed
        self.state.pending_interview_job_id = None

        if passed:
            self._log(
                f"> {Emojis.SUCCESS} Interview passed ({session.score}/{len(session.questions)})!",
                LogType.SUCCESS,
            )
            self._promote(session.job)
        else:
            fail_stress = LifeAtDevConfig.INTERVIEW.FAIL_STRESS
            self.state.stats = self.stats.copy(stress=self.stats.stress + fail_stress).clamped()
            self._log(
                f"> {Emojis.ERROR} Interview failed ({session.score}/{len(session.questions)}). "
                f"Stress +{fail_stress}.",
                LogType.ERROR,
            )

        self.logger.info(f"Interview for {session.job.id}: {'passed' if passed else 'failed'} ({session.score})")
        self._check_game_over()
        return passed

    def cancel_interview(self, session: Optional[InterviewSession] = None) -> None:
        self._require_playing()
        if session is not None and session.phase != InterviewPhase.CANCELLED:
            session.cancel()

        if self.state.pending_interview_job_id is not None:
            self._log("> Interview cancelled. Maybe next time.")
        self.state.pending_interview_job_id = None

    # ==================== GAME OVER ====================

    def calculate_final_score(self) -> ScoreBreakdown:
        game_over = self.state.game_over
        if game_over is None:
            raise GameStateError("The game is not over yet")
        return calculate_score(game_over.final_stats, game_over.reason, game_over.is_special_win)

    def build_final_report(self) -> FinalReport:
        game_over = self.state.game_over
        if game_over is None:
            raise GameStateError("The game is not over yet")

        score = self.calculate_final_score()
        final = game_over.final_stats
        job = final.current_job
        weeks = final.weeks_played
        return FinalReport(
            game_over=game_over,
            score=score,
            breakdown_text=get_score_breakdown_text(score),
            summary_key=generate_summary_hash(job.path, job.level, weeks),
            summary=generate_offline_summary(job.path, job.level, weeks, game_over.reason),
            tags=get_player_tags(final),
        )

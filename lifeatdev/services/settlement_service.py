# services/settlement_service.py
"""
Year-End Settlement.

Runs when the year's weeks are used up:
1. credit salary (negative for tuition)
2. debit rent
3. age, years worked, total earned (losses never reduce it)
4. weeks back to 52
5. promotion check: auto-promote, pending interview, or pending choice
6. exactly one world event, after a short delay

Steps 1-5 are `settle_year` (pure). Step 6 is `settle_and_roll_event`, which
awaits the configured delay so the host can show prompts before the event.
Callers must not start a second settlement while one is in flight.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..config import LifeAtDevConfig
from ..models import Job, PlayerStats
from ..utils.constants import Bounds, GameOverRules
from ..utils.format import money as fmt_money
from .events_service import EventDeck, GameEvent, apply_stat_changes
from .promotion_service import apply_promotion, get_available_promotions, requires_interview

logger = logging.getLogger("lifeatdev.services.settlement")


@dataclass(frozen=True)
class YearEndFinances:
    income: int
    expenses: int

    @property
    def net(self) -> int:
        return self.income - self.expenses

    @property
    def breakdown(self) -> str:
        return (
            f"Salary: {fmt_money(self.income)} | Rent: -{fmt_money(self.expenses)} | "
            f"Net: {fmt_money(self.net)}"
        )


@dataclass(frozen=True)
class SettlementResult:
    stats: PlayerStats
    finances: YearEndFinances
    candidates: Tuple[Job, ...] = ()
    promoted_to: Optional[Job] = None
    pending_interview: Optional[Job] = None
    pending_selection: Tuple[Job, ...] = ()
    bankrupt: bool = False
    support_ended: bool = False

    @property
    def has_pending_decision(self) -> bool:
        return self.pending_interview is not None or bool(self.pending_selection)


@dataclass(frozen=True)
class SettlementWithEvent:
    settlement: SettlementResult
    event: GameEvent
    stats: PlayerStats


def calculate_year_end_finances(stats: PlayerStats) -> YearEndFinances:
    return YearEndFinances(
        income=stats.current_job.yearly_pay,
        expenses=stats.current_job.rent_per_year,
    )


def settle_year(stats: PlayerStats) -> SettlementResult:
    """Steps 1-5. Always runs in full; debouncing is the caller's job."""
    finances = calculate_year_end_finances(stats)
    job = stats.current_job

    money = stats.money + finances.income
    money -= finances.expenses
    bankrupt = money <= GameOverRules.BANKRUPTCY_MONEY

    new_stats = stats.copy(
        money=money,
        age=stats.age + 1,
        years_worked=stats.years_worked + 1,
        total_earned=stats.total_earned + max(0, finances.income),
        weeks=Bounds.WEEKS_PER_YEAR,
    )

    candidates = tuple(
        get_available_promotions(new_stats.current_job, new_stats.coding, new_stats.reputation, new_stats.money)
    )
    promoted_to: Optional[Job] = None
    pending_interview: Optional[Job] = None
    pending_selection: Tuple[Job, ...] = ()

    if len(candidates) == 1:
        target = candidates[0]
        if requires_interview(target):
            pending_interview = target
        else:
            promoted_to = target
            new_stats = apply_promotion(new_stats, target)
    elif len(candidates) > 1:
        pending_selection = candidates

    support_ended = False
    if new_stats.family_support_years_left > 0:
        left = new_stats.family_support_years_left - 1
        new_stats = new_stats.copy(family_support_years_left=left)
        support_ended = left == 0 and new_stats.current_job.is_student

    logger.info(
        f"Year {new_stats.years_worked} settled as {job.id}: {finances.breakdown}; "
        f"{len(candidates)} candidate(s)"
        + (f", promoted to {promoted_to.id}" if promoted_to else "")
        + (", BANKRUPT" if bankrupt else "")
    )

    return SettlementResult(
        stats=new_stats,
        finances=finances,
        candidates=candidates,
        promoted_to=promoted_to,
        pending_interview=pending_interview,
        pending_selection=pending_selection,
        bankrupt=bankrupt,
        support_ended=support_ended,
    )


async def settle_and_roll_event(
    stats: PlayerStats,
    deck: EventDeck,
    *,
    delay: Optional[float] = None,
    on_settled: Optional[Callable[[SettlementResult], None]] = None,
) -> SettlementWithEvent:
    """
    Full settlement: steps 1-5, then the delay, then exactly one event.

    `on_settled` runs before the delay so promotion and interview prompts
    are surfaced before the event is rolled.
    """
    settlement = settle_year(stats)
    if on_settled is not None:
        on_settled(settlement)

    if delay is None:
        delay = LifeAtDevConfig.SETTLEMENT.EVENT_DELAY_SECONDS
    if delay > 0:
        await asyncio.sleep(delay)

    event = deck.draw_for(settlement.stats)
    after_event = apply_stat_changes(settlement.stats, event.effects)
    logger.info(f"Year-end event '{event.id}' applied: {event.effects.as_dict()}")

    return SettlementWithEvent(settlement=settlement, event=event, stats=after_event)

# services/events_service.py
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..data.events import (
    EMPLOYED_EVENT_MIN_LEVEL,
    EMPLOYED_EVENTS,
    SENIOR_EVENT_MIN_LEVEL,
    SENIOR_EVENTS,
    STUDENT_EVENTS,
    UNEMPLOYED_EVENT_JOB_IDS,
    UNEMPLOYED_EVENTS,
    UNIVERSAL_EVENTS,
)
from ..models import PlayerStats, StatDelta
from .base_service import BaseService


@dataclass(frozen=True)
class GameEvent:
    id: str
    title: str
    description: str
    effects: StatDelta

    @property
    def message(self) -> str:
        return f"{self.title}: {self.description}"


def build_event(raw: Dict[str, Any]) -> GameEvent:
    return GameEvent(
        id=raw["id"],
        title=raw["title"],
        description=raw["description"],
        effects=StatDelta(**raw.get("effects", {})),
    )


def apply_stat_changes(stats: PlayerStats, delta: StatDelta) -> PlayerStats:
    """Add every set field of `delta`, then clamp to the stat bounds. Money is never clamped."""
    changes: Dict[str, int] = {}
    for name, value in delta.as_dict().items():
        changes[name] = getattr(stats, name) + value
    return stats.copy(**changes).clamped()


def get_event_pool(stats: PlayerStats) -> List[GameEvent]:
    """Universal events plus whatever pool the current job qualifies for."""
    raw_pool: List[dict] = list(UNIVERSAL_EVENTS)
    job = stats.current_job

    if job.is_student:
        raw_pool += STUDENT_EVENTS
    elif job.id in UNEMPLOYED_EVENT_JOB_IDS:
        raw_pool += UNEMPLOYED_EVENTS
    elif job.level >= EMPLOYED_EVENT_MIN_LEVEL:
        raw_pool += EMPLOYED_EVENTS
        if job.level >= SENIOR_EVENT_MIN_LEVEL:
            raw_pool += SENIOR_EVENTS

    return [build_event(raw) for raw in raw_pool]


class EventDeck(BaseService):
    """
    Source of world events for one game.

    In deterministic mode it cycles through the universal events with an
    explicit counter (saved with the game); otherwise it draws uniformly from
    the job-appropriate pool using the injected randomness source.
    """

    def __init__(self, rng: Optional[random.Random] = None, *, deterministic: bool = False, counter: int = 0):
        super().__init__("events", rng)
        self.deterministic = deterministic
        self.counter = counter

    def next_cycled(self) -> GameEvent:
        event = build_event(UNIVERSAL_EVENTS[self.counter % len(UNIVERSAL_EVENTS)])
        self.counter += 1
        return event

    def draw_for(self, stats: Optional[PlayerStats] = None) -> GameEvent:
        if self.deterministic:
            return self.next_cycled()
        if stats is None:
            return build_event(self.rng.choice(UNIVERSAL_EVENTS))
        return self.rng.choice(get_event_pool(stats))

    def roll(self, chance: float, stats: PlayerStats) -> Optional[GameEvent]:
        """An event with probability `chance`, else None."""
        if self.rng.random() >= chance:
            return None
        return self.draw_for(stats)

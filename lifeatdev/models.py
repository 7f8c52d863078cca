"""
Core data models for the career engine (UI and storage independent).

Jobs are immutable catalog rows. PlayerStats is the per-game mutable
snapshot; services hand back fresh copies instead of editing in place.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .utils.constants import Bounds, Lifecycle


class CareerPath(str, Enum):
    CORPORATE = "corporate"
    HUSTLER = "hustler"
    MANAGEMENT = "management"
    IC = "ic"
    BUSINESS = "business"
    SPECIALIST = "specialist"


class GameOverReason(str, Enum):
    VICTORY = "victory"
    BURNOUT = "burnout"
    BANKRUPTCY = "bankruptcy"


class GamePhase(str, Enum):
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "gameover"


class LogType(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    EVENT = "event"


def clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))


@dataclass(frozen=True)
class Requirements:
    coding: int = 0
    reputation: int = 0
    money: Optional[int] = None


@dataclass(frozen=True)
class Job:
    """A node in the career graph."""

    id: str
    title: str
    path: CareerPath
    level: int
    requirements: Requirements
    yearly_pay: int
    rent_per_year: int
    is_game_end: bool = False
    is_intermediate: bool = False
    is_student: bool = False
    # Paths this node fans out into besides its own
    bridges_to: Tuple[CareerPath, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "path": self.path.value,
            "level": self.level,
            "requirements": {
                "coding": self.requirements.coding,
                "reputation": self.requirements.reputation,
                "money": self.requirements.money,
            },
            "yearly_pay": self.yearly_pay,
            "rent_per_year": self.rent_per_year,
            "is_game_end": self.is_game_end,
            "is_intermediate": self.is_intermediate,
            "is_student": self.is_student,
            "bridges_to": [p.value for p in self.bridges_to],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Job":
        req = data.get("requirements") or {}
        return cls(
            id=str(data["id"]),
            title=str(data.get("title", data["id"])),
            path=CareerPath(data["path"]),
            level=int(data["level"]),
            requirements=Requirements(
                coding=int(req.get("coding", 0)),
                reputation=int(req.get("reputation", 0)),
                money=None if req.get("money") is None else int(req["money"]),
            ),
            yearly_pay=int(data.get("yearly_pay", 0)),
            rent_per_year=int(data.get("rent_per_year", 0)),
            is_game_end=bool(data.get("is_game_end", False)),
            is_intermediate=bool(data.get("is_intermediate", False)),
            is_student=bool(data.get("is_student", False)),
            bridges_to=tuple(CareerPath(p) for p in data.get("bridges_to", ())),
        )


@dataclass(frozen=True)
class StatDelta:
    """Closed set of optional stat changes. None means 'untouched'."""

    weeks: Optional[int] = None
    stress: Optional[int] = None
    energy: Optional[int] = None
    money: Optional[int] = None
    coding: Optional[int] = None
    reputation: Optional[int] = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def as_dict(self) -> Dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


@dataclass
class PlayerStats:
    weeks: int
    stress: int
    energy: int
    money: int
    coding: int
    reputation: int
    current_job: Job
    age: int = Lifecycle.STARTING_AGE
    years_worked: int = 0
    total_earned: int = 0
    action_history: List[str] = field(default_factory=list)
    job_changes: int = 0
    starting_job_id: Optional[str] = None
    family_support_years_left: int = 0
    # Untracked in action_history, counted here for the end-screen tag
    coffee_binges: int = 0

    @property
    def years_played(self) -> int:
        return self.age - Lifecycle.STARTING_AGE

    @property
    def weeks_played(self) -> int:
        """Settled years plus the weeks already spent this year."""
        return self.years_worked * Bounds.WEEKS_PER_YEAR + (Bounds.WEEKS_PER_YEAR - self.weeks)

    def copy(self, **changes: Any) -> "PlayerStats":
        changes.setdefault("action_history", list(self.action_history))
        return replace(self, **changes)

    def clamped(self) -> "PlayerStats":
        return self.copy(
            weeks=clamp(self.weeks, Bounds.MIN_STAT, Bounds.WEEKS_PER_YEAR),
            stress=clamp(self.stress, Bounds.MIN_STAT, Bounds.MAX_STRESS),
            energy=clamp(self.energy, Bounds.MIN_STAT, Bounds.MAX_ENERGY),
            coding=clamp(self.coding, Bounds.MIN_STAT, Bounds.MAX_SKILL),
            reputation=clamp(self.reputation, Bounds.MIN_STAT, Bounds.MAX_SKILL),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["current_job"] = self.current_job.to_dict()
        data["action_history"] = list(self.action_history)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerStats":
        """Rebuild from saved data; the job is re-attached to the catalog row by id."""
        from .services.catalog_service import get_job

        job_data = data["current_job"]
        job_id = job_data["id"] if isinstance(job_data, dict) else str(job_data)

        return cls(
            weeks=int(data["weeks"]),
            stress=int(data["stress"]),
            energy=int(data["energy"]),
            money=int(data["money"]),
            coding=int(data["coding"]),
            reputation=int(data["reputation"]),
            current_job=get_job(job_id),
            age=int(data.get("age", Lifecycle.STARTING_AGE)),
            years_worked=int(data.get("years_worked", 0)),
            total_earned=int(data.get("total_earned", 0)),
            action_history=[str(a) for a in data.get("action_history", [])],
            job_changes=int(data.get("job_changes", 0)),
            starting_job_id=data.get("starting_job_id"),
            family_support_years_left=int(data.get("family_support_years_left", 0)),
            coffee_binges=int(data.get("coffee_binges", 0)),
        )


@dataclass(frozen=True)
class InterviewQuestion:
    question: str
    options: Tuple[str, ...]
    correct_index: int
    explanation: str


@dataclass(frozen=True)
class ScoreBreakdown:
    base_points: int
    job_level_bonus: int
    wealth_bonus: int
    coding_bonus: int
    reputation_bonus: int
    efficiency_bonus: int
    outcome_multiplier: float
    total_score: int

    @property
    def subtotal(self) -> int:
        return (
            self.base_points
            + self.job_level_bonus
            + self.wealth_bonus
            + self.coding_bonus
            + self.reputation_bonus
            + self.efficiency_bonus
        )


@dataclass(frozen=True)
class GameOver:
    reason: GameOverReason
    final_stats: PlayerStats
    message: str
    is_special_win: bool = False
    special_win_event: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reason": self.reason.value,
            "final_stats": self.final_stats.to_dict(),
            "message": self.message,
            "is_special_win": self.is_special_win,
            "special_win_event": self.special_win_event,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameOver":
        return cls(
            reason=GameOverReason(data["reason"]),
            final_stats=PlayerStats.from_dict(data["final_stats"]),
            message=str(data.get("message", "")),
            is_special_win=bool(data.get("is_special_win", False)),
            special_win_event=data.get("special_win_event"),
        )


@dataclass(frozen=True)
class PlayerTag:
    label: str
    emoji: str
    description: str


@dataclass(frozen=True)
class LogEntry:
    message: str
    type: LogType = LogType.INFO

    def to_dict(self) -> Dict[str, str]:
        return {"message": self.message, "type": self.type.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogEntry":
        return cls(message=str(data["message"]), type=LogType(data.get("type", "info")))

# services/summary_service.py
"""
Career summaries.

The remote narrative service is keyed by `generate_summary_hash`; careers
of similar length share a key so cached text gets reused.
`generate_offline_summary` is the local stand-in used when no remote text is available.
"""
from __future__ import annotations

import re
from typing import List, Optional

from ..data.narrative import SUMMARY_TEMPLATES, SUMMARY_TIER_BY_OUTCOME
from ..models import CareerPath, GameOverReason
from ..utils.constants import SummaryRules


def _bucket(weeks: int) -> int:
    return (int(weeks) // SummaryRules.WEEKS_BUCKET) * SummaryRules.WEEKS_BUCKET


def generate_summary_hash(path: CareerPath, level: int, weeks: int) -> str:
    """Stable cache key: exact level, weeks played floored to a multiple of 50."""
    path = CareerPath(path).value
    return f"summary-{path}-lvl{int(level)}-score{_bucket(weeks)}"


def get_summary_tier(weeks: int, reason: Optional[GameOverReason] = None) -> str:
    """The outcome picks the story; without one, a longer career reads as a better one."""
    if reason is not None:
        return SUMMARY_TIER_BY_OUTCOME[GameOverReason(reason).value]
    if weeks >= SummaryRules.SUCCESS_WEEKS:
        return "success"
    if weeks >= SummaryRules.AVERAGE_WEEKS:
        return "average"
    return "burnout"


def generate_offline_summary(
    path: CareerPath,
    level: int,
    weeks: int,
    reason: Optional[GameOverReason] = None,
) -> List[str]:
    values = {
        "path": CareerPath(path).value,
        "level": str(level),
        "weeks": str(weeks),
    }
    lines = SUMMARY_TEMPLATES[get_summary_tier(weeks, reason)]
    return [re.sub(r"\{\{(\w+)\}\}", lambda m: values.get(m.group(1), m.group(0)), line) for line in lines]

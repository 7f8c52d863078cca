# services/easter_egg_service.py
"""
Hidden victory.

A disciplined player who keeps building, networking and practicing
(without already holding a terminal job) can be handed an early win.
Checked once per settlement.
"""
from __future__ import annotations

import random
from collections import Counter
from typing import List, Optional

from ..data.narrative import SPECIAL_WIN_EVENTS, SPECIAL_WIN_GATES, SPECIAL_WIN_PATTERN
from ..models import PlayerStats
from ..utils.constants import Lifecycle


def check_action_pattern(action_history: List[str]) -> bool:
    if len(action_history) < SPECIAL_WIN_GATES["min_history"]:
        return False

    counts = Counter(action_history[-Lifecycle.ACTION_HISTORY_SIZE:])
    return all(counts[action_id] >= required for action_id, required in SPECIAL_WIN_PATTERN.items())


def meets_stat_gates(stats: PlayerStats) -> bool:
    gates = SPECIAL_WIN_GATES
    return (
        stats.coding >= gates["min_coding"]
        and stats.reputation >= gates["min_reputation"]
        and stats.stress <= gates["max_stress"]
        and stats.energy >= gates["min_energy"]
        and stats.money >= gates["min_money"]
    )


def check_special_win(stats: PlayerStats, rng: random.Random) -> Optional[str]:
    """The hidden-victory narrative if every gate passes, else None."""
    if stats.years_played < SPECIAL_WIN_GATES["min_years_played"]:
        return None

    if stats.current_job.is_game_end:
        return None

    if not meets_stat_gates(stats):
        return None

    if not check_action_pattern(stats.action_history):
        return None

    return rng.choice(SPECIAL_WIN_EVENTS)

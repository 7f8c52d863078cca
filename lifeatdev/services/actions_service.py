# services/actions_service.py
from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..data.actions import (
    ACTION_CATEGORIES,
    ACTIONS,
    COFFEE_LOW_ENERGY,
    COFFEE_LOW_ENERGY_BONUS,
    FREELANCE_BASE_PAY,
    FREELANCE_CODING_WEIGHT,
    FREELANCE_MIN_PAY,
    FREELANCE_REPUTATION_WEIGHT,
    FREELANCE_VARIANCE,
    UNTRACKED_ACTION_IDS,
)
from ..errors import GameStateError
from ..models import PlayerStats
from ..utils.constants import Lifecycle
from ..utils.format import money as fmt_money

logger = logging.getLogger("lifeatdev.services.actions")

REWARD_KEYS = ("coding", "reputation", "money", "energy", "stress")


@dataclass(frozen=True)
class ActionResult:
    action_id: str
    stats: PlayerStats
    reward: Dict[str, int]
    year_ended: bool

    @property
    def message(self) -> str:
        action = ACTIONS[self.action_id]
        cost = action["cost"]
        text = f"> {action['name']}: -{cost['weeks']}w, -{cost['energy']}e"
        earned = self.reward.get("money", 0)
        if earned > 0:
            text += f", +{fmt_money(earned)}"
        return text


def get_action(action_id: str) -> Optional[dict]:
    return ACTIONS.get(action_id)


def get_actions_by_category(category: str) -> List[str]:
    if category not in ACTION_CATEGORIES:
        return []
    return [action_id for action_id, action in ACTIONS.items() if action["category"] == category]


def get_unavailability_reason(action_id: str, energy: int, money: int, reputation: int) -> Optional[str]:
    """First unmet requirement (energy, then money, then reputation), or None."""
    req = ACTIONS[action_id].get("requirements", {})

    min_energy = req.get("min_energy", 0)
    if energy < min_energy:
        return f"Need {min_energy} energy (have {energy})"

    min_money = req.get("min_money", 0)
    if money < min_money:
        return f"Need {fmt_money(min_money)} (have {fmt_money(money)})"

    min_reputation = req.get("min_reputation", 0)
    if reputation < min_reputation:
        return f"Need {min_reputation} reputation (have {reputation})"

    return None


def is_action_available(action_id: str, energy: int, money: int, reputation: int) -> bool:
    return get_unavailability_reason(action_id, energy, money, reputation) is None


def should_track_action(action_id: str) -> bool:
    return action_id not in UNTRACKED_ACTION_IDS


def add_to_action_history(history: List[str], action_id: str) -> List[str]:
    """Append a tracked action, keeping only the most recent 24."""
    if not should_track_action(action_id):
        return list(history)
    updated = list(history) + [action_id]
    return updated[-Lifecycle.ACTION_HISTORY_SIZE:]


def calculate_freelance_payout(coding: int, reputation: int, rng: random.Random) -> int:
    skill_factor = coding * FREELANCE_CODING_WEIGHT + reputation * FREELANCE_REPUTATION_WEIGHT
    variance = rng.uniform(*FREELANCE_VARIANCE)
    payout = math.floor((FREELANCE_BASE_PAY + skill_factor) * variance)
    return max(FREELANCE_MIN_PAY, payout)


def roll_reward(action_id: str, stats: PlayerStats, rng: random.Random) -> Dict[str, int]:
    action = ACTIONS[action_id]
    reward = dict(action["reward"])

    if action_id == "freelance-gig":
        reward["money"] = calculate_freelance_payout(stats.coding, stats.reputation, rng)

    if action_id == "coffee-binge" and stats.energy < COFFEE_LOW_ENERGY:
        reward["energy"] = action["reward"]["energy"] + COFFEE_LOW_ENERGY_BONUS

    return reward


def execute_action(action_id: str, stats: PlayerStats, rng: random.Random) -> ActionResult:
    """Pay the cost, collect the reward, clamp. Raises GameStateError for unknown or unavailable actions."""
    action = get_action(action_id)
    if action is None:
        raise GameStateError(f"Unknown action '{action_id}'")

    reason = get_unavailability_reason(action_id, stats.energy, stats.money, stats.reputation)
    if reason:
        raise GameStateError(f"{action['name']} unavailable: {reason}")

    cost = action["cost"]
    reward = roll_reward(action_id, stats, rng)

    year_ended = stats.weeks - cost["weeks"] <= 0
    updated = stats.copy(
        weeks=stats.weeks - cost["weeks"],
        energy=stats.energy - cost["energy"] + reward.get("energy", 0),
        stress=stats.stress + cost["stress"] + reward.get("stress", 0),
        money=stats.money - cost["money"] + reward.get("money", 0),
        coding=stats.coding + reward.get("coding", 0),
        reputation=stats.reputation + reward.get("reputation", 0),
        action_history=add_to_action_history(stats.action_history, action_id),
        coffee_binges=stats.coffee_binges + (1 if action_id == "coffee-binge" else 0),
    ).clamped()

    logger.debug(f"{action_id}: reward={reward} weeks_left={updated.weeks}")
    return ActionResult(
        action_id=action_id,
        stats=updated,
        reward={key: reward[key] for key in REWARD_KEYS if key in reward},
        year_ended=year_ended,
    )

# services/score_service.py
from __future__ import annotations

import math

from ..models import GameOverReason, PlayerStats, ScoreBreakdown
from ..utils.constants import ScoreRules
from ..utils.format import format_number


def calculate_wealth_bonus(money: int) -> int:
    """Log curve so a billionaire doesn't outscore everything else."""
    if money <= 0:
        return 0
    return math.floor(math.log10(money + 1) * ScoreRules.WEALTH_FACTOR)


def calculate_efficiency_bonus(years_played: int, reason: GameOverReason) -> int:
    if reason == GameOverReason.VICTORY:
        if years_played <= ScoreRules.OPTIMAL_YEARS:
            return ScoreRules.MAX_EFFICIENCY_BONUS
        penalty = (years_played - ScoreRules.OPTIMAL_YEARS) * ScoreRules.EFFICIENCY_DECAY_PER_YEAR
        return max(0, ScoreRules.MAX_EFFICIENCY_BONUS - penalty)

    # Survived-longer consolation
    return min(ScoreRules.MAX_LONGEVITY_BONUS, years_played * ScoreRules.LONGEVITY_PER_YEAR)


def get_outcome_multiplier(reason: GameOverReason, is_special_win: bool = False) -> float:
    reason = GameOverReason(reason)
    if reason == GameOverReason.VICTORY:
        return ScoreRules.MULTIPLIER_SPECIAL_WIN if is_special_win else ScoreRules.MULTIPLIER_VICTORY
    if reason == GameOverReason.BURNOUT:
        return ScoreRules.MULTIPLIER_BURNOUT
    return ScoreRules.MULTIPLIER_BANKRUPTCY


def calculate_score(
    final_stats: PlayerStats,
    reason: GameOverReason,
    is_special_win: bool = False,
) -> ScoreBreakdown:
    """
    Final score for a finished game. Pure; inputs are trusted to be clamped.

    total = floor((base + level + wealth + coding + reputation + efficiency) * multiplier)
    """
    reason = GameOverReason(reason)

    base_points = ScoreRules.BASE_POINTS
    job_level_bonus = ScoreRules.JOB_LEVEL_BONUS.get(final_stats.current_job.level, 0)
    wealth_bonus = calculate_wealth_bonus(final_stats.money)
    coding_bonus = math.floor(final_stats.coding * ScoreRules.CODING_FACTOR)
    reputation_bonus = math.floor(final_stats.reputation * ScoreRules.REPUTATION_FACTOR)
    efficiency_bonus = calculate_efficiency_bonus(final_stats.years_played, reason)
    outcome_multiplier = get_outcome_multiplier(reason, is_special_win)

    subtotal = (
        base_points
        + job_level_bonus
        + wealth_bonus
        + coding_bonus
        + reputation_bonus
        + efficiency_bonus
    )

    return ScoreBreakdown(
        base_points=base_points,
        job_level_bonus=job_level_bonus,
        wealth_bonus=wealth_bonus,
        coding_bonus=coding_bonus,
        reputation_bonus=reputation_bonus,
        efficiency_bonus=efficiency_bonus,
        outcome_multiplier=outcome_multiplier,
        total_score=math.floor(subtotal * outcome_multiplier),
    )


def get_score_breakdown_text(breakdown: ScoreBreakdown) -> str:
    """One-line breakdown for logs and end screens."""
    parts = [
        f"Base: {breakdown.base_points}",
        f"Job Level: +{breakdown.job_level_bonus}",
        f"Wealth: +{breakdown.wealth_bonus}",
        f"Coding: +{breakdown.coding_bonus}",
        f"Reputation: +{breakdown.reputation_bonus}",
        f"Efficiency: +{breakdown.efficiency_bonus}",
    ]
    return (
        " | ".join(parts)
        + f" = {breakdown.subtotal} × {breakdown.outcome_multiplier:g}"
        + f" = {format_number(breakdown.total_score)}"
    )

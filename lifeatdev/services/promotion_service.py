# services/promotion_service.py
"""
Promotion Resolver.

Given where the player sits in the career graph and their current stats,
decide which jobs they can move into. Cross-path moves only happen at
bridge nodes (Job.bridges_to) and at graduation (student -> corporate or
hustler).
"""
from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional

from ..data.jobs import GRADUATION_PATHS, INTERNSHIP_JOB_ID, NO_INTERVIEW_JOB_IDS
from ..models import CareerPath, Job, PlayerStats
from ..utils.format import money as fmt_money
from .catalog_service import get_all_jobs, get_catalog_index

logger = logging.getLogger("lifeatdev.services.promotion")

_GRADUATION_PATHS = frozenset(CareerPath(p) for p in GRADUATION_PATHS)


class RequirementCheck(NamedTuple):
    meets: bool
    failure_reasons: List[str]


def _meets(job: Job, coding: int, reputation: int, money: int) -> bool:
    req = job.requirements
    return (
        coding >= req.coding
        and reputation >= req.reputation
        and (req.money is None or money >= req.money)
    )


def is_path_compatible(current_job: Job, candidate: Job) -> bool:
    """Can a player on `current_job` cross into `candidate`'s path?"""
    if current_job.is_student:
        return candidate.path in _GRADUATION_PATHS
    return candidate.path == current_job.path or candidate.path in current_job.bridges_to


def is_promotion_move(current_job: Job, candidate: Job) -> bool:
    """Every resolver rule except the stat thresholds: is `candidate` a legal next rung from `current_job`?"""
    if candidate.id == current_job.id or candidate.level < current_job.level:
        return False

    if candidate.level == current_job.level and candidate.yearly_pay <= current_job.yearly_pay:
        return False

    if current_job.is_student and candidate.is_student:
        return False

    return is_path_compatible(current_job, candidate)


def get_available_promotions(current_job: Job, coding: int, reputation: int, money: int) -> List[Job]:
    """
    Jobs the player can move into right now, in catalog order.

    1. never the current job, never a lower level
    2. same-level moves must pay strictly more
    3. the two student variants never lead to each other
    4. coding / reputation / (optional) money thresholds
    5. path compatibility (graduation fork, bridge nodes)
    """
    return [
        job for job in get_all_jobs()
        if is_promotion_move(current_job, job) and _meets(job, coding, reputation, money)
    ]


def meets_job_requirements(job: Job, coding: int, reputation: int, money: int) -> RequirementCheck:
    """Every unmet requirement, in coding -> reputation -> money order."""
    reasons: List[str] = []
    req = job.requirements

    if coding < req.coding:
        reasons.append(f"Need {req.coding} coding skill (you have {coding})")

    if reputation < req.reputation:
        reasons.append(f"Need {req.reputation} reputation (you have {reputation})")

    if req.money is not None and money < req.money:
        reasons.append(f"Need {fmt_money(req.money)} (you have {fmt_money(money)})")

    return RequirementCheck(meets=not reasons, failure_reasons=reasons)


def requires_interview(job: Job) -> bool:
    return job.id not in NO_INTERVIEW_JOB_IDS


def should_show_graduation_ceremony(current_job: Job, target_job: Job) -> bool:
    is_real_job = target_job.id != INTERNSHIP_JOB_ID and target_job.level >= 2
    return current_job.is_student and is_real_job


def get_next_job_suggestion(current_job: Job) -> Optional[Job]:
    """
    The next rung to aim for, ignoring stats: the first job after the current
    one that is on the same path at the same or higher level, or on a path the
    current job bridges into.
    """
    jobs = get_all_jobs()
    index = get_catalog_index(current_job)
    if index == -1:
        return None

    for job in jobs[index + 1:]:
        if job.path == current_job.path and job.level >= current_job.level:
            return job
        if job.path in current_job.bridges_to:
            return job

    return None


def is_eligible_for_promotion(current_job: Job, coding: int, reputation: int, money: int) -> bool:
    return bool(get_available_promotions(current_job, coding, reputation, money))


def apply_promotion(stats: PlayerStats, job: Job) -> PlayerStats:
    """Move the player into `job`. Leaving school ends any family support."""
    changes = {"current_job": job, "job_changes": stats.job_changes + 1}
    if stats.current_job.is_student:
        changes["family_support_years_left"] = 0
    logger.info(f"Promoted {stats.current_job.id} -> {job.id}")
    return stats.copy(**changes)

# services/catalog_service.py
"""
Job Catalog: builds immutable Job rows from data/jobs.py and answers lookups.

`validate_catalog()` is the startup gate. A catalog that fails it is a
deployment defect, so it raises instead of degrading.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from ..data.jobs import GRADUATION_PATHS, JOBS, NO_INTERVIEW_JOB_IDS, STARTING_JOB_ID
from ..errors import CatalogIntegrityError, UnknownJobError
from ..models import CareerPath, Job, Requirements

logger = logging.getLogger("lifeatdev.services.catalog")


def _build_job(job_id: str, raw: dict) -> Job:
    req = raw.get("requirements", {})
    return Job(
        id=job_id,
        title=raw["title"],
        path=CareerPath(raw["path"]),
        level=int(raw["level"]),
        requirements=Requirements(
            coding=int(req.get("coding", 0)),
            reputation=int(req.get("reputation", 0)),
            money=req.get("money"),
        ),
        yearly_pay=int(raw["yearly_pay"]),
        rent_per_year=int(raw["rent_per_year"]),
        is_game_end=bool(raw.get("game_end", False)),
        is_intermediate=bool(raw.get("intermediate", False)),
        is_student=bool(raw.get("student", False)),
        bridges_to=tuple(CareerPath(p) for p in raw.get("bridges_to", ())),
    )


@lru_cache(maxsize=1)
def get_all_jobs() -> Tuple[Job, ...]:
    """Every job, in catalog order."""
    return tuple(_build_job(job_id, raw) for job_id, raw in JOBS.items())


@lru_cache(maxsize=1)
def _jobs_by_id() -> Dict[str, Job]:
    return {job.id: job for job in get_all_jobs()}


def find_job(job_id: str) -> Optional[Job]:
    return _jobs_by_id().get(job_id)


def get_job(job_id: str) -> Job:
    job = find_job(job_id)
    if job is None:
        raise UnknownJobError(job_id)
    return job


def get_jobs_by_path(path: CareerPath) -> List[Job]:
    path = CareerPath(path)
    return [job for job in get_all_jobs() if job.path == path]


def get_catalog_index(job: Job) -> int:
    """Position of a job in catalog order (-1 when absent)."""
    for index, candidate in enumerate(get_all_jobs()):
        if candidate.id == job.id:
            return index
    return -1


def get_starting_job() -> Job:
    """The hustler-path 'no job' entry that self-taught runs start from."""
    job = find_job(STARTING_JOB_ID)
    if job is None:
        logger.error(f"Starting job '{STARTING_JOB_ID}' missing from catalog")
        raise CatalogIntegrityError(f"Catalog has no starting job '{STARTING_JOB_ID}'")
    return job


def get_victory_jobs() -> List[Job]:
    return [job for job in get_all_jobs() if job.is_game_end]


def validate_catalog(jobs: Optional[Tuple[Job, ...]] = None) -> None:
    """
    Raise CatalogIntegrityError unless:
    - the catalog is non-empty with unique ids and a starting job
    - levels are 1-4
    - every terminal job has a non-terminal job on its path at the same or lower level
    - no-interview ids and graduation paths point at real data
    """
    jobs = get_all_jobs() if jobs is None else tuple(jobs)
    problems: List[str] = []

    if not jobs:
        problems.append("catalog is empty")

    seen = set()
    for job in jobs:
        if job.id in seen:
            problems.append(f"duplicate job id '{job.id}'")
        seen.add(job.id)
        if not 1 <= job.level <= 4:
            problems.append(f"job '{job.id}' has level {job.level} outside 1-4")
        if job.path in job.bridges_to:
            problems.append(f"job '{job.id}' bridges into its own path")

    if STARTING_JOB_ID not in seen:
        problems.append(f"starting job '{STARTING_JOB_ID}' missing")

    for job in jobs:
        if not job.is_game_end:
            continue
        feeders = [
            other for other in jobs
            if other.path == job.path and not other.is_game_end and other.level <= job.level
        ]
        if not feeders:
            problems.append(f"terminal job '{job.id}' is unreachable on path '{job.path.value}'")

    for job_id in NO_INTERVIEW_JOB_IDS:
        if job_id not in seen:
            problems.append(f"no-interview job '{job_id}' missing")

    for path in GRADUATION_PATHS:
        try:
            CareerPath(path)
        except ValueError:
            problems.append(f"graduation path '{path}' is not a career path")

    if problems:
        for problem in problems:
            logger.error(f"Catalog integrity: {problem}")
        raise CatalogIntegrityError("; ".join(problems))

    logger.debug(f"Catalog validated: {len(jobs)} jobs")

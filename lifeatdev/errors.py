from __future__ import annotations


class LifeAtDevError(Exception):
    """Base exception for the career engine"""
    pass


class CatalogIntegrityError(LifeAtDevError):
    """Static game data is misconfigured; startup must not continue"""
    pass


class UnknownJobError(LifeAtDevError, KeyError):
    """A job id that is not part of the catalog"""

    def __init__(self, job_id: str):
        super().__init__(job_id)
        self.job_id = job_id

    def __str__(self) -> str:
        return f"Unknown job id: {self.job_id!r}"


class InterviewStateError(LifeAtDevError):
    """Illegal transition in an interview session"""
    pass


class GameStateError(LifeAtDevError):
    """Operation not allowed in the current game phase"""
    pass

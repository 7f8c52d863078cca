# services/base_service.py
import logging
import random
from abc import ABC
from typing import Optional

from ..config import LifeAtDevConfig


def make_rng(seed: Optional[int] = None) -> random.Random:
    """
    The single randomness source for a game. Every draw (templates, fillers,
    option order, events, payouts) goes through the instance this returns.
    Falls back to LIFEATDEV_SEED when no seed is passed.
    """
    if seed is None:
        seed = LifeAtDevConfig.RANDOM.SEED
    return random.Random(seed)


class BaseService(ABC):
    """
    The abstract base class for stateful services.
    Provides a named logger and the injected randomness source.
    """
    def __init__(self, service_name: str, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else make_rng()
        self.logger = logging.getLogger(f"lifeatdev.services.{service_name}")
        self.logger.debug(f"Service '{service_name}' initialized.")

    def _log_error(self, method: str, error: Exception):
        """Standardized error logging."""
        self.logger.error(f"[{method}] {type(error).__name__}: {error}", exc_info=True)

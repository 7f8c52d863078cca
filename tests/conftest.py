import random

import pytest

from lifeatdev.models import PlayerStats
from lifeatdev.services.catalog_service import get_job


def _build_stats(job_id: str = "unemployed", **overrides) -> PlayerStats:
    values = dict(weeks=52, stress=0, energy=100, money=1000, coding=50, reputation=0)
    values.update(overrides)
    return PlayerStats(current_job=get_job(job_id), **values)


@pytest.fixture
def make_stats():
    """Factory for PlayerStats on a given catalog job."""
    return _build_stats


@pytest.fixture
def rng():
    return random.Random(1234)


class SequenceRNG:
    """choice() walks the sequence in order; shuffle() reverses; uniform() is fixed."""

    def __init__(self, uniform_value: float = 1.0):
        self.calls = 0
        self.uniform_value = uniform_value

    def choice(self, seq):
        item = seq[self.calls % len(seq)]
        self.calls += 1
        return item

    def shuffle(self, items):
        items.reverse()

    def uniform(self, a, b):
        return self.uniform_value

    def random(self):
        return 0.0


@pytest.fixture
def sequence_rng():
    return SequenceRNG

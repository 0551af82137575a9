"""Shared fixtures for the colonyguard test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from colonyguard.colony.colony import Colony
from colonyguard.simulation.config import GameConfig
from colonyguard.simulation.events import EventLog


class FixedRng:
    """Random source that always rolls the same values.

    ``random()`` returns ``roll``; ``integers(n)`` returns ``pick``
    clamped into ``range(n)``.
    """

    def __init__(self, roll: float = 0.0, pick: int = 0) -> None:
        self.roll = roll
        self.pick = pick

    def random(self) -> float:
        return self.roll

    def integers(self, high: int) -> int:
        return min(self.pick, high - 1)


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def fixed_rng() -> type[FixedRng]:
    """The FixedRng class, for tests that need to force a roll."""
    return FixedRng


@pytest.fixture
def events() -> EventLog:
    return EventLog()


@pytest.fixture
def lane(rng: Generator, events: EventLog) -> Colony:
    """A single dry tunnel of 6 cells with plenty of food."""
    return Colony(food=20, tunnels=1, tunnel_length=6, rng=rng, events=events)


@pytest.fixture
def colony(rng: Generator, events: EventLog) -> Colony:
    """A 2x4 dry board with 10 food."""
    return Colony(food=10, tunnels=2, tunnel_length=4, rng=rng, events=events)


@pytest.fixture
def default_config() -> GameConfig:
    """Default game config (no YAML file needed)."""
    return GameConfig()

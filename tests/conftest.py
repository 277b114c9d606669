"""
Shared pytest fixtures for Stellar Legacy tests.

Provides:
  - ScriptedRandom: a random source that replays queued draws
  - ManualClock: millisecond clock that only moves when told to
  - make_game: builds a fresh game with deterministic ids, rng and clock
"""

import itertools
import random
from collections import deque
from dataclasses import replace

import pytest

from stellar_legacy.entities import Resources
from stellar_legacy.game.game_state import GameState, create_initial_snapshot
from stellar_legacy.game.settings import GameSettings


class ScriptedRandom:
    """Replays queued values for ``randint`` and ``choice``.

    ``choice`` accepts either the option itself or its index. Once the script
    runs out, draws fall through to a seeded ``random.Random``.
    """

    def __init__(self, *values, fallback_seed=0):
        self.values = deque(values)
        self.fallback = random.Random(fallback_seed)
        self.calls = []

    def push(self, *values):
        self.values.extend(values)

    def randint(self, low, high):
        self.calls.append(("randint", low, high))
        if not self.values:
            return self.fallback.randint(low, high)
        value = self.values.popleft()
        assert low <= value <= high, f"scripted {value} outside [{low}, {high}]"
        return value

    def choice(self, options):
        options = list(options)
        self.calls.append(("choice", options))
        if not self.values:
            return self.fallback.choice(options)
        value = self.values.popleft()
        if value in options:
            return value
        assert isinstance(value, int), f"scripted {value!r} not among {options!r}"
        return options[value]


class ManualClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


def sequential_ids(prefix):
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


@pytest.fixture()
def clock():
    return ManualClock()


@pytest.fixture()
def make_game(clock):
    """Factory for games; keyword overrides replace parts of the starting snapshot."""

    def _make(rng=None, settings=None, **overrides):
        settings = settings or GameSettings()
        snapshot = create_initial_snapshot(settings)
        if overrides:
            snapshot = replace(snapshot, **overrides)
        return GameState(
            snapshot,
            settings,
            rng=rng if rng is not None else random.Random(1234),
            clock=clock,
            crew_id_factory=sequential_ids("recruit"),
            notification_id_factory=sequential_ids("note"),
        )

    return _make


@pytest.fixture()
def game(make_game):
    return make_game()


@pytest.fixture()
def rich_resources():
    return Resources(credits=10_000, energy=1_000, minerals=1_000, food=1_000, influence=100)

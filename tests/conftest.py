import copy
import os

import pytest

# Headless pygame for the UI / shell tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from ball_blast.entities import Block
from ball_blast.progression import Loadout, Progression, ProgressionState
from ball_blast.simulation import Simulation
from ball_blast.spawner import block_color


class FixedRandom:
    """random.Random stand-in: returns queued values, then a constant."""

    def __init__(self, value=0.5, pick=None):
        self.value = value
        self.queue = []
        self.pick = pick

    def random(self):
        if self.queue:
            return self.queue.pop(0)
        return self.value

    def choice(self, seq):
        if self.pick is not None:
            return self.pick
        return seq[0]


class MemoryStore:
    """In-memory ProgressStore with a switchable write failure."""

    def __init__(self, data=None, fail=False):
        self.data = copy.deepcopy(data)
        self.fail = fail
        self.saves = 0

    def load(self):
        return copy.deepcopy(self.data)

    def save(self, data):
        if self.fail:
            return False
        self.saves += 1
        self.data = copy.deepcopy(data)
        return True


def make_block(x=100, y=100, hp=50):
    return Block(x=x, y=y, hp=hp, max_hp=hp, color=block_color(hp))


@pytest.fixture
def loadout():
    return Loadout.from_upgrades(ProgressionState().upgrades)


@pytest.fixture
def rng():
    return FixedRandom(0.5)


@pytest.fixture
def sim(loadout, rng):
    """800x600 session with an empty field and firing disabled."""
    s = Simulation(800, 600, loadout, rng=rng)
    s.blocks = []
    s.fire_interval = 10 ** 6
    return s


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def progression(store):
    return Progression(store)

"""Pytest fixtures for deck simulation tests."""

import pytest
from random import Random

from config import SimulationConfig
from deck_sim.deck import SUIT_PARTITION
from deck_sim.game import RandomDiscardGame


class ZeroIndexRandom(Random):
    """Random source that always discards the first card of a hand."""

    def randrange(self, *args, **kwargs) -> int:
        return 0


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def zero_rng():
    """Random source whose discard position is always 0."""
    return ZeroIndexRandom(42)


@pytest.fixture
def sim_config():
    """Default 4 x 13 configuration, independent of the environment."""
    return SimulationConfig(num_hands=4, hand_size=13, shuffle_method="random_key", seed=None)


@pytest.fixture
def game(sim_config, rng):
    """A new game instance."""
    return RandomDiscardGame(config=sim_config, rng=rng)


@pytest.fixture
def suit_hands():
    """The four suits as a fixed deal: clubs, diamonds, hearts, spades."""
    return [list(suit) for suit in SUIT_PARTITION]

"""Shared fixtures for the antdefense test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from antdefense.colony.colony import Colony
from antdefense.colony.hive import Hive
from antdefense.simulation.game import Game
from antdefense.world.place import Place


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def colony(rng: Generator) -> Colony:
    """One dry tunnel of 8 places with plenty of food."""
    return Colony(food=50, tunnels=1, tunnel_length=8, rng=rng)


@pytest.fixture
def wet_colony(rng: Generator) -> Colony:
    """Three tunnels of 8 places, every third step water."""
    return Colony(food=50, tunnels=3, tunnel_length=8, moat_frequency=3, rng=rng)


@pytest.fixture
def small_hive() -> Hive:
    """Two bees of armor 3, arriving on turns 2 and 3."""
    return Hive(bee_armor=3).schedule_wave(2, 1).schedule_wave(3, 1)


@pytest.fixture
def game(colony: Colony, small_hive: Hive) -> Game:
    """A fresh game on the one-tunnel colony against the test hive."""
    return Game(colony=colony, hive=small_hive)


@pytest.fixture
def chain() -> list[Place]:
    """Five places linked entrance-ward: chain[0] is nearest the queen."""
    places = [Place(f"p{i}") for i in range(5)]
    for near, far in zip(places, places[1:]):
        near.entrance = far
        far.exit = near
    return places

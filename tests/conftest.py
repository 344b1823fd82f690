"""Pytest fixtures for all tests."""

import io

import pytest

from communication.bus import EventBus
from config import Config, LoggingConfig, RaceConfig
from simulation.arena import Arena
from simulation.engine import RaceEngine
from simulation.track import Track


@pytest.fixture
def race_config():
    """Small, fast, reproducible race."""
    return RaceConfig(racer_count=3, tick_delay=0, goal_line=10, seed=7)


@pytest.fixture
def config(race_config, tmp_path):
    """Full config writing its logs under tmp_path."""
    return Config(race_config, LoggingConfig(level="ERROR",
                                             file=str(tmp_path / "race.log"),
                                             crash_file=str(tmp_path / "crash.log")))


@pytest.fixture
def track():
    return Track(goal_line=10, lanes=3)


@pytest.fixture
def out():
    """Captured terminal output."""
    return io.StringIO()


@pytest.fixture
async def arena():
    """Seeded arena, stopped after the test."""
    arena = Arena.open(seed=42)
    yield arena
    await arena.stop()


@pytest.fixture
async def bus():
    return EventBus(queue_size=10)


@pytest.fixture
async def engine(race_config, bus, out):
    eng = RaceEngine(config=race_config, bus=bus, out=out, clear=False)
    yield eng
    await eng.stop()

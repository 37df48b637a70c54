from __future__ import annotations

import logging
import random
from collections.abc import Iterator

import pytest

from salvo.ai.sweep import SweepTargeting
from salvo.core.engine import GameEngine
from salvo.core.models import Coordinate
from salvo.infra.logging import LoggingConfig, configure_logging


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def engine() -> GameEngine:
    game = GameEngine(SweepTargeting())
    game.initialize(6)
    return game


@pytest.fixture
def ready_engine(engine: GameEngine) -> GameEngine:
    engine.register_ship("SH1", 2, Coordinate(1, 5), Coordinate(4, 4))
    return engine


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    handlers = root.handlers[:]
    yield
    configure_logging(LoggingConfig(level_name="WARNING"))
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)

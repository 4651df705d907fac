import os
import random

import pytest

# Keep test runs from writing log files; must happen before the package is imported.
os.environ["LOG_TO_FILE"] = "false"

from wordle_engine import create_app  # noqa: E402
from wordle_engine.config import TestingConfig  # noqa: E402
from wordle_engine.services.game_engine import Game  # noqa: E402
from wordle_engine.services.game_service import initialize_game_service  # noqa: E402


@pytest.fixture
def dyson_game():
    return Game("DYSON")


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def game_service():
    return initialize_game_service(seed=7)


@pytest.fixture
def client(game_service):
    app = create_app(TestingConfig)
    with app.test_client() as client:
        yield client

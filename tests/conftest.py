import pytest

from lottostats.games import Game
from tests.helpers import make_history, random_history


@pytest.fixture
def scenario_draws():
    # Oldest first: [1..5] is the oldest of the three draws.
    return make_history([
        [1, 2, 3, 4, 5],
        [1, 2, 6, 7, 8],
        [9, 10, 11, 12, 13],
    ])


@pytest.fixture
def powerball_history():
    return random_history(Game.POWERBALL, 300)


@pytest.fixture
def take5_history():
    return random_history(Game.TAKE5, 150, seed=11)

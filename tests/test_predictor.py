import random

import pytest

from lottostats.exceptions import ConfigurationError
from lottostats.games import Game
from lottostats.models.weighted_scoring import STRATEGIES, score_numbers
from lottostats.predictor import (
    SelectionState,
    generate_all_strategies,
    generate_recommendations,
    pair_bonus,
    select_next,
)
from tests.helpers import random_history


def _assert_valid(sets, schema, count):
    assert len(sets) == count
    for s in sets:
        assert len(s.numbers) == schema.main_count
        assert len(set(s.numbers)) == schema.main_count
        assert all(1 <= n <= schema.main_max for n in s.numbers)
        assert list(s.numbers) == sorted(s.numbers)
        if schema.has_bonus:
            assert 1 <= s.bonus_number <= schema.bonus_max
        else:
            assert s.bonus_number is None


@pytest.mark.parametrize("game", list(Game))
@pytest.mark.parametrize("strategy", list(STRATEGIES))
def test_sets_are_valid_for_every_game(game, strategy):
    draws = random_history(game, 120, seed=3)
    _assert_valid(generate_recommendations(draws, game, strategy, 3), game.schema, 3)


@pytest.mark.parametrize("game", list(Game))
def test_zero_draws_still_produce_sets(game):
    _assert_valid(generate_recommendations([], game, "balanced", 4), game.schema, 4)


def test_deterministic_without_seed(powerball_history):
    first = generate_recommendations(powerball_history, Game.POWERBALL)
    second = generate_recommendations(list(reversed(powerball_history)), Game.POWERBALL)
    assert first == second


def test_explicit_seed_is_reproducible(powerball_history):
    a = generate_recommendations(powerball_history, Game.POWERBALL, "trending", 5, seed=99)
    b = generate_recommendations(powerball_history, Game.POWERBALL, "trending", 5, seed=99)
    assert a == b
    assert all(s.strategy == "trending" for s in a)


def test_first_set_starts_from_best_number(powerball_history):
    best = score_numbers(powerball_history, Game.POWERBALL, "balanced")["rankings"][0][0]
    first_set = generate_recommendations(powerball_history, Game.POWERBALL, "balanced", 1)[0]
    assert best in first_set.numbers


def test_sets_vary(powerball_history):
    sets = generate_recommendations(powerball_history, Game.POWERBALL, "balanced", 3)
    assert len({s.numbers for s in sets}) > 1


def test_set_count_bounds(powerball_history):
    assert generate_recommendations(powerball_history, Game.POWERBALL, set_count=0) == []
    with pytest.raises(ConfigurationError):
        generate_recommendations(powerball_history, Game.POWERBALL, set_count=-1)


def test_pair_bonus_normalised_against_chosen():
    table = {(1, 2): 5, (1, 3): 1}
    assert pair_bonus([2, 3, 4], (1,), table) == {2: 1.0, 3: 0.2, 4: 0.0}
    assert pair_bonus([2, 3], (), table) == {2: 0.0, 3: 0.0}


def test_later_picks_depend_on_earlier_ones():
    base = {1: 0.9, 2: 0.5, 3: 0.6}
    table = {(1, 2): 10}
    state = SelectionState().add(1, 0.9)
    state = select_next(state, base, table, pair_weight=0.5, breadth=1, rng=random.Random(0))
    # 3 scores higher on its own, but 2 pairs with the already chosen 1.
    assert state.chosen == (1, 2)
    assert state.step_scores == pytest.approx((0.9, 1.0))
    assert state.mean_score == pytest.approx(0.95)


def test_all_strategies(take5_history):
    result = generate_all_strategies(take5_history, Game.TAKE5, set_count=2)
    assert set(result) == {"balanced", "trending", "contrarian"}
    for sets in result.values():
        _assert_valid(sets, Game.TAKE5.schema, 2)

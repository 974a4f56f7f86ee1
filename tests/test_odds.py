import pytest

from lottostats.games import Game
from lottostats.odds import jackpot_odds, match_probability, odds_table


@pytest.mark.parametrize("game,expected", [
    (Game.POWERBALL, 292_201_338),
    (Game.MEGA_MILLIONS, 290_472_336),
    (Game.TAKE5, 575_757),
    (Game.CASH4LIFE, 21_846_048),
])
def test_jackpot_odds(game, expected):
    assert jackpot_odds(game) == expected


@pytest.mark.parametrize("game", list(Game))
def test_probabilities_sum_to_one(game):
    assert odds_table(game)["probability"].sum() == pytest.approx(1.0)


def test_jackpot_tier_matches_odds():
    p = match_probability(Game.POWERBALL, 5, bonus_match=True)
    assert p == pytest.approx(1 / 292_201_338)


def test_impossible_tiers():
    assert match_probability(Game.POWERBALL, 6) == 0.0
    assert match_probability(Game.TAKE5, 3, bonus_match=True) == 0.0


def test_table_shape():
    assert len(odds_table(Game.POWERBALL)) == 12
    assert len(odds_table(Game.TAKE5)) == 6
    table = odds_table(Game.POWERBALL)
    assert table.iloc[0]["tier"] == "5 + Powerball"


def test_ny_lotto_bonus_comes_from_main_pool():
    assert jackpot_odds(Game.NY_LOTTO) == 45_057_474
    # All six matched leaves no ticket number for the bonus to land on.
    assert match_probability(Game.NY_LOTTO, 6, bonus_match=True) == 0.0
    assert match_probability(Game.NY_LOTTO, 5, bonus_match=True) == pytest.approx(
        6 * 53 / 45_057_474 / 53
    )
    assert "6 + Bonus" not in set(odds_table(Game.NY_LOTTO)["tier"])

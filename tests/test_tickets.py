from datetime import date

import pytest

from lottostats.draws import DrawResult, DrawTime
from lottostats.games import Game
from lottostats.tickets import check_ticket, count_matches, find_draw, validate_ticket

DRAW = DrawResult(date=date(2024, 1, 1), numbers=(5, 11, 22, 23, 69), bonus_number=7)


def test_count_matches():
    assert count_matches([1, 5, 11], DRAW.numbers) == 2


def test_check_ticket():
    result = check_ticket([69, 5, 1, 2, 3], 7, DRAW, Game.POWERBALL)
    assert result.main_matches == (5, 69)
    assert result.match_count == 2
    assert result.bonus_match
    assert result.draw_label == "2024-01-01"


def test_check_ticket_bonus_miss():
    assert not check_ticket([1, 2, 3, 4, 6], 8, DRAW, Game.POWERBALL).bonus_match


def test_check_ticket_without_bonus_pool():
    draw = DrawResult(date=date(2024, 1, 1), numbers=(1, 2, 3, 4, 5), draw_time=DrawTime.EVENING)
    result = check_ticket([1, 2, 3, 4, 5], None, draw, Game.TAKE5)
    assert result.match_count == 5
    assert not result.bonus_match
    assert result.draw_label == "2024-01-01 (evening)"


@pytest.mark.parametrize("numbers,bonus", [
    ([1, 2, 3, 4], 1),
    ([1, 1, 2, 3, 4], 1),
    ([1, 2, 3, 4, 70], 1),
    ([1, 2, 3, 4, 5], 27),
])
def test_invalid_tickets(numbers, bonus):
    with pytest.raises(ValueError):
        validate_ticket(numbers, bonus, Game.POWERBALL)


def test_find_draw():
    midday = DrawResult(date=date(2024, 1, 2), numbers=(1, 2, 3, 4, 5), draw_time=DrawTime.MIDDAY)
    evening = DrawResult(date=date(2024, 1, 2), numbers=(6, 7, 8, 9, 10), draw_time=DrawTime.EVENING)
    draws = [evening, midday]
    assert find_draw(draws, "2024-01-02", "midday") is midday
    assert find_draw(draws, date(2024, 1, 2)) is evening
    assert find_draw(draws, "2024-01-03") is None


def test_ny_lotto_bonus_matches_ticket_numbers():
    draw = DrawResult(date=date(2024, 1, 3), numbers=(1, 2, 3, 4, 5, 6), bonus_number=40)
    result = check_ticket([1, 2, 3, 4, 5, 40], None, draw, Game.NY_LOTTO)
    assert result.match_count == 5
    assert result.bonus_match

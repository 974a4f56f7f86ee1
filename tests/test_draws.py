from datetime import date

import pytest

from lottostats.draws import (
    DrawResult,
    DrawTime,
    as_pool,
    draws_to_frame,
    frame_to_draws,
    ordered_draws,
    pool_values,
)
from lottostats.exceptions import ConfigurationError


def test_iso_string_and_list_are_normalised():
    d = DrawResult(date="2024-03-05T00:00:00.000", numbers=[3, 1, 2], draw_time="evening")
    assert d.date == date(2024, 3, 5)
    assert d.numbers == (3, 1, 2)
    assert d.draw_time is DrawTime.EVENING
    assert d.label == "2024-03-05 (evening)"


def test_ordered_draws_most_recent_first():
    old = DrawResult(date="2024-01-01", numbers=(1, 2, 3, 4, 5))
    new = DrawResult(date="2024-01-05", numbers=(6, 7, 8, 9, 10))
    assert ordered_draws([old, new]) == [new, old]
    assert ordered_draws([new, old]) == [new, old]


def test_evening_is_newer_than_midday():
    midday = DrawResult(date="2024-01-01", numbers=(1, 2, 3, 4, 5), draw_time=DrawTime.MIDDAY)
    evening = DrawResult(date="2024-01-01", numbers=(6, 7, 8, 9, 10), draw_time=DrawTime.EVENING)
    assert ordered_draws([midday, evening]) == [evening, midday]


def test_pool_values():
    d = DrawResult(date="2024-01-01", numbers=(1, 2, 3, 4, 5), bonus_number=9)
    assert pool_values(d, "main") == (1, 2, 3, 4, 5)
    assert pool_values(d, "bonus") == (9,)
    no_bonus = DrawResult(date="2024-01-01", numbers=(1, 2, 3, 4, 5))
    assert pool_values(no_bonus, "bonus") == ()


def test_unknown_pool():
    with pytest.raises(ConfigurationError):
        as_pool("powerball")


def test_frame_conversion_keeps_optional_fields():
    draws = [
        DrawResult(date="2024-01-02", numbers=(5, 11, 22, 23, 69), bonus_number=7, multiplier=2),
        DrawResult(date="2024-01-01", numbers=(1, 2, 3, 4, 5), draw_time=DrawTime.MIDDAY),
    ]
    df = draws_to_frame(draws)
    assert list(df.columns) == ["date", "draw_time", "num1", "num2", "num3", "num4", "num5",
                                "bonus_number", "multiplier"]
    assert frame_to_draws(df) == draws


def test_dict_conversion():
    d = DrawResult(date="2024-01-02", numbers=(1, 2, 3, 4, 5), bonus_number=3)
    assert DrawResult.from_dict(d.to_dict()) == d

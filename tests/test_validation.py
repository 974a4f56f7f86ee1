from datetime import date

from lottostats.draws import DrawResult, DrawTime
from lottostats.games import Game
from lottostats.validation import (
    check_distinct,
    check_duplicates,
    check_ranges,
    check_schedule,
    run_all_checks,
)

PB = Game.POWERBALL.schema

# 2024-01-01 is a Monday, a Powerball draw day.
GOOD = DrawResult(date=date(2024, 1, 1), numbers=(1, 2, 3, 4, 69), bonus_number=26)


def test_good_draw_passes_every_rule():
    for rule in (check_ranges, check_distinct, check_schedule):
        assert rule(GOOD, PB)["passed"]


def test_range_rule():
    bad = DrawResult(date=date(2024, 1, 1), numbers=(0, 2, 3, 4, 70), bonus_number=27)
    result = check_ranges(bad, PB)
    assert not result["passed"]
    assert "main 0" in result["detail"]
    assert "main 70" in result["detail"]
    assert "bonus 27" in result["detail"]


def test_distinct_rule():
    assert not check_distinct(DrawResult(date=date(2024, 1, 1), numbers=(1, 1, 3, 4, 5)), PB)["passed"]
    assert not check_distinct(DrawResult(date=date(2024, 1, 1), numbers=(1, 2, 3, 4)), PB)["passed"]


def test_schedule_rule():
    tuesday = DrawResult(date=date(2024, 1, 2), numbers=(1, 2, 3, 4, 5), bonus_number=1)
    result = check_schedule(tuesday, PB)
    assert not result["passed"]
    assert "Tue" in result["detail"]
    assert check_schedule(tuesday, Game.TAKE5.schema)["passed"]


def test_duplicates_respect_draw_time():
    midday = DrawResult(date=date(2024, 1, 2), numbers=(1, 2, 3, 4, 5), draw_time=DrawTime.MIDDAY)
    evening = DrawResult(date=date(2024, 1, 2), numbers=(1, 2, 3, 4, 5), draw_time=DrawTime.EVENING)
    assert check_duplicates([midday, evening])["passed"]
    result = check_duplicates([midday, evening, midday])
    assert not result["passed"]
    assert "2024-01-02-midday" in result["detail"]


def test_run_all_checks():
    report = run_all_checks([GOOD], Game.POWERBALL)
    assert report["all_passed"]
    assert report["warnings"] == []

    report = run_all_checks([GOOD, GOOD], "powerball")
    assert not report["all_passed"]
    assert len(report["warnings"]) == 1

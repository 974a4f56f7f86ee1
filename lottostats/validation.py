"""
Draw Validation Rules

Integrity checks run on freshly fetched history before it is stored.
Each rule returns {"name", "passed", "detail"}; failures become warnings
rather than errors so one bad row never blocks an update.
"""
from collections import Counter

from lottostats.games import resolve_schema

_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def check_ranges(draw, schema):
    """Main numbers within [1, main_max]; bonus within [1, bonus_max] when present."""
    bad = [n for n in draw.numbers if not 1 <= n <= schema.main_max]
    problems = [f"main {n} outside [1-{schema.main_max}]" for n in bad]
    if schema.has_bonus and draw.bonus_number is not None:
        if not 1 <= draw.bonus_number <= schema.bonus_max:
            problems.append(f"bonus {draw.bonus_number} outside [1-{schema.bonus_max}]")
    return {
        "name": "Range Rule",
        "passed": not problems,
        "detail": "; ".join(problems) if problems else "All numbers in range",
    }


def check_distinct(draw, schema):
    """No number repeats within a draw, and the draw has the game's size."""
    distinct = len(set(draw.numbers))
    passed = distinct == len(draw.numbers) == schema.main_count
    return {
        "name": "Distinct Numbers Rule",
        "passed": passed,
        "detail": f"{distinct} distinct of {len(draw.numbers)}, expected {schema.main_count}",
    }


def check_schedule(draw, schema):
    """Draw falls on one of the game's scheduled weekdays."""
    weekday = draw.date.weekday()
    passed = weekday in schema.draw_days
    return {
        "name": "Schedule Rule",
        "passed": passed,
        "detail": f"{draw.date.isoformat()} is a {_DAY_NAMES[weekday]}",
    }


def check_duplicates(draws):
    """No two draws share a (date, draw_time) key."""
    counts = Counter(d.key for d in draws)
    dupes = sorted(
        (f"{date.isoformat()}-{draw_time.value}" if draw_time else date.isoformat())
        for (date, draw_time), c in counts.items() if c > 1
    )
    return {
        "name": "Duplicate Rule",
        "passed": not dupes,
        "detail": f"Duplicate keys: {', '.join(dupes)}" if dupes else "No duplicates",
    }


def run_all_checks(draws, game):
    """
    Run every rule over a draw list.

    Returns
    -------
    dict with:
        results    : list of failing per-draw rule results plus the duplicate rule
        warnings   : list of human-readable warning strings
        all_passed : bool
    """
    schema = resolve_schema(game)
    results = []
    messages = []

    for draw in draws:
        for rule in (check_ranges, check_distinct, check_schedule):
            result = rule(draw, schema)
            if not result["passed"]:
                results.append(result)
                messages.append(f"{schema.name} {draw.label}: {result['name']}: {result['detail']}")

    dup = check_duplicates(draws)
    results.append(dup)
    if not dup["passed"]:
        messages.append(f"{schema.name}: {dup['detail']}")

    return {
        "results": results,
        "warnings": messages,
        "all_passed": not messages,
    }

"""
Ticket Checker

Compares a player's numbers against a past draw.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from lottostats.draws import DrawTime
from lottostats.games import resolve_schema


@dataclass(frozen=True)
class TicketResult:
    draw_label: str
    main_matches: Tuple[int, ...]
    bonus_match: bool

    @property
    def match_count(self) -> int:
        return len(self.main_matches)


def count_matches(predicted, actual):
    """Count how many numbers match between a ticket and an actual draw."""
    return len(set(predicted) & set(actual))


def find_draw(draws, date, draw_time=None):
    """The draw with the given date (and draw time, for twice-daily games), or None."""
    iso = date if isinstance(date, str) else date.isoformat()
    if draw_time is not None:
        draw_time = DrawTime(draw_time)
    for d in draws:
        if d.date.isoformat() == iso and (draw_time is None or d.draw_time == draw_time):
            return d
    return None


def validate_ticket(numbers, bonus, game):
    """Raise ValueError describing the first problem with a ticket."""
    schema = resolve_schema(game)
    numbers = list(numbers)
    if len(numbers) != schema.main_count:
        raise ValueError(f"{schema.name} tickets need {schema.main_count} numbers, got {len(numbers)}")
    if len(set(numbers)) != len(numbers):
        raise ValueError("Ticket numbers must not repeat")
    out_of_range = [n for n in numbers if not 1 <= n <= schema.main_max]
    if out_of_range:
        raise ValueError(f"Numbers {out_of_range} outside 1-{schema.main_max}")
    if schema.has_bonus and not schema.bonus_from_main and bonus is not None \
            and not 1 <= bonus <= schema.bonus_max:
        raise ValueError(f"{schema.bonus_label} {bonus} outside 1-{schema.bonus_max}")


def check_ticket(numbers, bonus: Optional[int], draw, game) -> TicketResult:
    """Main-number matches (sorted) and whether the bonus matched.

    For games whose bonus comes from the main pool ``bonus`` is ignored and
    the drawn bonus is looked up among the ticket numbers.
    """
    schema = resolve_schema(game)
    validate_ticket(numbers, bonus, schema)
    matches = tuple(sorted(set(numbers) & set(draw.numbers)))
    if schema.bonus_from_main:
        bonus_match = draw.bonus_number in numbers
    else:
        bonus_match = bool(schema.has_bonus and bonus is not None and bonus == draw.bonus_number)
    return TicketResult(draw_label=draw.label, main_matches=matches, bonus_match=bonus_match)

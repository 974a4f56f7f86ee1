"""
Draw records and the ordering/conversion helpers shared by every engine.

All engines consume draws most-recent-first. ``ordered_draws`` enforces that
order at the boundary so callers may pass history in either direction.
"""
from dataclasses import dataclass
from datetime import date as date_type
from enum import Enum
from typing import Iterable, List, Optional, Tuple

import pandas as pd

from lottostats.exceptions import ConfigurationError
from lottostats.games import Pool


class DrawTime(str, Enum):
    MIDDAY = "midday"
    EVENING = "evening"


_DRAW_TIME_ORDER = {None: 0, DrawTime.MIDDAY: 0, DrawTime.EVENING: 1}


@dataclass(frozen=True)
class DrawResult:
    """One drawing. ``(date, draw_time)`` identifies it within a game."""

    date: date_type
    numbers: Tuple[int, ...]
    bonus_number: Optional[int] = None
    multiplier: Optional[int] = None
    draw_time: Optional[DrawTime] = None

    def __post_init__(self):
        # Accept lists and ISO strings for convenience; store canonical types.
        object.__setattr__(self, "numbers", tuple(int(n) for n in self.numbers))
        if isinstance(self.date, str):
            object.__setattr__(self, "date", date_type.fromisoformat(self.date[:10]))
        if self.draw_time is not None and not isinstance(self.draw_time, DrawTime):
            object.__setattr__(self, "draw_time", DrawTime(self.draw_time))

    @property
    def key(self):
        return self.date, self.draw_time

    @property
    def label(self) -> str:
        iso = self.date.isoformat()
        return f"{iso} ({self.draw_time.value})" if self.draw_time else iso

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "numbers": list(self.numbers),
            "bonus_number": self.bonus_number,
            "multiplier": self.multiplier,
            "draw_time": self.draw_time.value if self.draw_time else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DrawResult":
        return cls(
            date=data["date"],
            numbers=tuple(data["numbers"]),
            bonus_number=data.get("bonus_number"),
            multiplier=data.get("multiplier"),
            draw_time=data.get("draw_time"),
        )


def as_pool(target) -> Pool:
    try:
        return Pool(target)
    except ValueError:
        raise ConfigurationError(f"Unknown number pool {target!r}; expected 'main' or 'bonus'") from None


def _sort_key(draw: DrawResult):
    return draw.date, _DRAW_TIME_ORDER[draw.draw_time]


def ordered_draws(draws: Iterable[DrawResult]) -> List[DrawResult]:
    """Return draws sorted most-recent-first (evening before midday on one date).

    The sort is stable, so draws sharing a key keep their relative order.
    """
    return sorted(draws, key=_sort_key, reverse=True)


def pool_values(draw: DrawResult, target) -> Tuple[int, ...]:
    """Main numbers of a draw, or its bonus number as a one-element tuple."""
    if as_pool(target) is Pool.MAIN:
        return draw.numbers
    return () if draw.bonus_number is None else (draw.bonus_number,)


# ── DataFrame conversion ────────────────────────────────────────────────

def draws_to_frame(draws: Iterable[DrawResult]) -> pd.DataFrame:
    """One row per draw with ``num1..numN`` columns, in the order given."""
    draws = list(draws)
    width = max((len(d.numbers) for d in draws), default=0)
    records = []
    for d in draws:
        row = {
            "date": d.date.isoformat(),
            "draw_time": d.draw_time.value if d.draw_time else None,
        }
        for i in range(width):
            row[f"num{i + 1}"] = d.numbers[i] if i < len(d.numbers) else None
        row["bonus_number"] = d.bonus_number
        row["multiplier"] = d.multiplier
        records.append(row)
    columns = ["date", "draw_time"] + [f"num{i + 1}" for i in range(width)] + ["bonus_number", "multiplier"]
    return pd.DataFrame(records, columns=columns)


def _optional_int(value):
    if value is None or pd.isna(value):
        return None
    return int(value)


def frame_to_draws(df: pd.DataFrame) -> List[DrawResult]:
    num_cols = sorted(
        (c for c in df.columns if c.startswith("num") and c[3:].isdigit()),
        key=lambda c: int(c[3:]),
    )
    draws = []
    for row in df.to_dict("records"):
        numbers = tuple(int(row[c]) for c in num_cols if not pd.isna(row[c]))
        draw_time = row.get("draw_time")
        draws.append(DrawResult(
            date=str(row["date"]),
            numbers=numbers,
            bonus_number=_optional_int(row.get("bonus_number")),
            multiplier=_optional_int(row.get("multiplier")),
            draw_time=None if draw_time is None or pd.isna(draw_time) else draw_time,
        ))
    return draws

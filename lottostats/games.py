"""
Game definitions for the five supported US lottery games.

Each game is a member of the ``Game`` enum carrying an immutable
``GameSchema``: pool sizes, draw schedule and open-data source fields.
"""
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Tuple

from lottostats.exceptions import ConfigurationError

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)
DAILY = (MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY)


class Pool(str, Enum):
    """Which pool of a draw a statistic is measured over."""

    MAIN = "main"
    BONUS = "bonus"


@dataclass(frozen=True)
class DataSource:
    """Where a game's history lives on data.ny.gov and how its rows are laid out.

    ``bonus_field`` is ``None`` when the bonus is the trailing value of
    ``winning_numbers`` and ``""`` when the game has no bonus at all.
    """

    url: str
    bonus_field: Optional[str] = None
    multiplier_field: Optional[str] = None
    midday_field: Optional[str] = None
    evening_field: Optional[str] = None

    @property
    def split_daily(self) -> bool:
        return bool(self.midday_field and self.evening_field)


@dataclass(frozen=True)
class GameSchema:
    slug: str
    name: str
    main_count: int
    main_max: int
    bonus_max: int
    bonus_label: str
    draw_days: Tuple[int, ...]
    draw_times: Tuple[Tuple[int, int], ...]
    ticket_price: int
    data_source: DataSource
    # NY Lotto style: the bonus is an extra ball from the main pool, matched
    # against the ticket's own numbers rather than picked separately.
    bonus_from_main: bool = False
    # Last draw date of a discontinued game; None while the game runs.
    retired_date: Optional[date] = None

    def __post_init__(self):
        if self.main_max <= 0:
            raise ConfigurationError(f"{self.name}: main_max must be positive, got {self.main_max}")
        if self.main_count <= 0:
            raise ConfigurationError(f"{self.name}: main_count must be positive, got {self.main_count}")
        if self.main_count > self.main_max:
            raise ConfigurationError(
                f"{self.name}: cannot draw {self.main_count} numbers from a pool of {self.main_max}"
            )
        if self.bonus_max < 0:
            raise ConfigurationError(f"{self.name}: bonus_max must not be negative")

    @property
    def has_bonus(self) -> bool:
        return self.bonus_max > 0

    @property
    def expected_interval(self) -> float:
        """Expected draws between appearances of one main number."""
        return self.main_max / self.main_count

    @property
    def bonus_expected_interval(self) -> float:
        return float(self.bonus_max)

    def pool_max(self, target) -> int:
        return self.main_max if Pool(target) is Pool.MAIN else self.bonus_max

    def numbers_per_draw(self, target) -> int:
        if Pool(target) is Pool.MAIN:
            return self.main_count
        return 1 if self.has_bonus else 0


class Game(Enum):
    POWERBALL = GameSchema(
        slug="powerball",
        name="Powerball",
        main_count=5,
        main_max=69,
        bonus_max=26,
        bonus_label="Powerball",
        draw_days=(MONDAY, WEDNESDAY, SATURDAY),
        draw_times=((22, 59),),
        ticket_price=2,
        data_source=DataSource(
            url="https://data.ny.gov/resource/d6yy-54nr.json",
            multiplier_field="multiplier",
        ),
    )
    MEGA_MILLIONS = GameSchema(
        slug="mega-millions",
        name="Mega Millions",
        main_count=5,
        main_max=70,
        bonus_max=24,
        bonus_label="Mega Ball",
        draw_days=(TUESDAY, FRIDAY),
        draw_times=((23, 0),),
        ticket_price=5,
        data_source=DataSource(
            url="https://data.ny.gov/resource/5xaw-6ayf.json",
            bonus_field="mega_ball",
            multiplier_field="multiplier",
        ),
    )
    CASH4LIFE = GameSchema(
        slug="cash4life",
        name="Cash4Life",
        main_count=5,
        main_max=60,
        bonus_max=4,
        bonus_label="Cash Ball",
        draw_days=DAILY,
        draw_times=((21, 0),),
        ticket_price=2,
        data_source=DataSource(
            url="https://data.ny.gov/resource/kwxv-fwze.json",
            bonus_field="cash_ball",
        ),
    )
    NY_LOTTO = GameSchema(
        slug="ny-lotto",
        name="NY Lotto",
        main_count=6,
        main_max=59,
        bonus_max=59,
        bonus_label="Bonus",
        draw_days=(WEDNESDAY, SATURDAY),
        draw_times=((20, 15),),
        ticket_price=1,
        data_source=DataSource(
            url="https://data.ny.gov/resource/6nbc-h7bj.json",
            bonus_field="bonus",
        ),
        bonus_from_main=True,
    )
    TAKE5 = GameSchema(
        slug="take5",
        name="Take 5",
        main_count=5,
        main_max=39,
        bonus_max=0,
        bonus_label="",
        draw_days=DAILY,
        draw_times=((14, 30), (22, 30)),
        ticket_price=1,
        data_source=DataSource(
            url="https://data.ny.gov/resource/dg63-4siq.json",
            bonus_field="",
            midday_field="midday_winning_numbers",
            evening_field="evening_winning_numbers",
        ),
    )

    @property
    def schema(self) -> GameSchema:
        return self.value

    @property
    def slug(self) -> str:
        return self.value.slug

    @classmethod
    def from_slug(cls, slug: str) -> "Game":
        for game in cls:
            if game.value.slug == slug:
                return game
        known = ", ".join(g.value.slug for g in cls)
        raise ConfigurationError(f"Unknown game '{slug}' (known: {known})")


def resolve_schema(game) -> GameSchema:
    """Accept a ``Game``, a ``GameSchema`` or a slug and return the schema."""
    if isinstance(game, Game):
        return game.schema
    if isinstance(game, GameSchema):
        return game
    if isinstance(game, str):
        return Game.from_slug(game).schema
    raise ConfigurationError(f"Not a game: {game!r}")

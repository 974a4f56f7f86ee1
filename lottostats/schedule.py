"""
Draw schedule helpers. All times are America/New_York.
"""
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from zoneinfo import ZoneInfo

from lottostats.exceptions import ConfigurationError
from lottostats.games import resolve_schema

ET = ZoneInfo("America/New_York")
TONIGHT_HOURS = 3


@dataclass(frozen=True)
class NextDraw:
    when: datetime
    is_tonight: bool
    is_retired: bool = False


def next_draw(game, now=None) -> NextDraw:
    """The first scheduled draw strictly after ``now`` (naive datetimes are read as ET).

    Once a retired game's last day has ended, its retirement moment is
    returned with ``is_retired`` set instead.
    """
    schema = resolve_schema(game)
    if now is None:
        now = datetime.now(ET)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=ET)
    else:
        now = now.astimezone(ET)

    if schema.retired_date is not None:
        retired = datetime.combine(schema.retired_date, time(23, 59, 59), tzinfo=ET)
        if now > retired:
            return NextDraw(when=retired, is_tonight=False, is_retired=True)

    # A week plus one day always contains the next scheduled draw.
    for offset in range(8):
        day = (now + timedelta(days=offset)).date()
        if day.weekday() not in schema.draw_days:
            continue
        for hour, minute in sorted(schema.draw_times):
            when = datetime(day.year, day.month, day.day, hour, minute, tzinfo=ET)
            if when > now:
                hours_until = (when - now).total_seconds() / 3600
                return NextDraw(when=when, is_tonight=hours_until <= TONIGHT_HOURS)
    raise ConfigurationError(f"{schema.name} has no draw days configured")

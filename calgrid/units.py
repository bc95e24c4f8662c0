# calgrid/units.py
from __future__ import annotations

import datetime as dt
from typing import Any

from dateutil.relativedelta import relativedelta

from .errors import ConfigError, UnsupportedGranularity
from .util.tz import local_midnight, require_aware, settle, to_utc

HOUR = "hour"
DAY = "day"
WEEK = "week"
MONTH = "month"
YEAR = "year"

GRANULARITIES = (HOUR, DAY, WEEK, MONTH, YEAR)

# Weekday numbers follow datetime.weekday(): Monday=0 ... Sunday=6.
MONDAY = 0
SATURDAY = 5
SUNDAY = 6

_ALIASES = {g + "s": g for g in GRANULARITIES}


def normalize_granularity(value: Any) -> str:
    """Return the canonical granularity name.

    Accepts the singular names, their plurals ("days", "months") and any case.
    Anything else raises UnsupportedGranularity; there is no fallback unit.
    """
    if not isinstance(value, str):
        raise UnsupportedGranularity(f"granularity must be a string, got {type(value).__name__}")
    key = value.strip().lower()
    key = _ALIASES.get(key, key)
    if key not in GRANULARITIES:
        raise UnsupportedGranularity(
            f"Unsupported granularity: {value!r} (expected one of {', '.join(GRANULARITIES)})"
        )
    return key


def check_week_start(week_start: Any) -> int:
    if isinstance(week_start, bool) or not isinstance(week_start, int) or not (0 <= week_start <= 6):
        raise ConfigError(f"week_start must be a weekday number 0..6 (Monday=0), got {week_start!r}")
    return week_start


def start_of(x: dt.datetime, unit: str, week_start: int = MONDAY) -> dt.datetime:
    """Local start of the `unit` enclosing `x`, in x's own zone."""
    x = require_aware(x)
    unit = normalize_granularity(unit)
    week_start = check_week_start(week_start)
    tz = x.tzinfo
    d = x.date()

    if unit == HOUR:
        return settle(x.replace(minute=0, second=0, microsecond=0))
    if unit == DAY:
        return local_midnight(d, tz)
    if unit == WEEK:
        back = (d.weekday() - week_start) % 7
        return local_midnight(d - dt.timedelta(days=back), tz)
    if unit == MONTH:
        return local_midnight(d.replace(day=1), tz)
    return local_midnight(dt.date(d.year, 1, 1), tz)


def add_units(x: dt.datetime, unit: str, n: int = 1) -> dt.datetime:
    """Move `x` by `n` whole units.

    Hours are absolute time. Days and weeks keep the local time of day, so one
    day across a DST change is 23 or 25 real hours. Months and years keep the
    day of month, clamped to the target month's length (Jan 31 + 1 month is
    the last day of February). A point at the start of its local day stays at
    the start of the target day, even where that day's midnight is skipped.
    """
    x = require_aware(x)
    unit = normalize_granularity(unit)

    if unit == HOUR:
        return (to_utc(x) + dt.timedelta(hours=n)).astimezone(x.tzinfo)

    d = x.date()
    if unit == DAY:
        nd = d + dt.timedelta(days=n)
    elif unit == WEEK:
        nd = d + dt.timedelta(weeks=n)
    elif unit == MONTH:
        nd = d + relativedelta(months=n)
    else:
        nd = d + relativedelta(years=n)

    if x == start_of(x, DAY):
        return local_midnight(nd, x.tzinfo)
    return settle(dt.datetime.combine(nd, x.timetz()).replace(fold=0))

# calgrid/view.py
"""Canonical calendar windows for an anchor instant.

Every window is aligned in the anchor's own zone: days on local midnights,
weeks on the configured week-start weekday, months on the 1st and years on
January 1st. Feeding a window's start back in returns the same window.
"""

from __future__ import annotations

import datetime as dt
from typing import List, Optional

from .config import PaddingConfig
from .errors import UnsupportedGranularity
from .interval import Interval
from .padding import padded_month_of
from .split import split_by_unit
from .units import DAY, MONDAY, MONTH, WEEK, YEAR, add_units, normalize_granularity, start_of
from .util.tz import TzLike, now as _now, require_aware, resolve_tz


def view_of_interval(anchor: dt.datetime, granularity: str, *, week_start: int = MONDAY) -> Interval:
    anchor = require_aware(anchor)
    unit = normalize_granularity(granularity)
    start = start_of(anchor, unit, week_start)
    return Interval(start, add_units(start, unit, 1))


def today(*, tz: TzLike = None, now: Optional[dt.datetime] = None) -> Interval:
    """Day window of the current local date.

    `now` and `tz` are injectable; without them the system clock is read in
    the machine's local zone. When both are given, `now` is converted to `tz`.
    """
    if now is None:
        current = _now(tz)
    else:
        current = require_aware(now)
        if tz is not None:
            current = current.astimezone(resolve_tz(tz))
    return view_of_interval(current, DAY)


def day_of(x: dt.datetime) -> Interval:
    return view_of_interval(x, DAY)


def week_of(x: dt.datetime, *, week_start: int = MONDAY) -> Interval:
    return view_of_interval(x, WEEK, week_start=week_start)


def month_of(x: dt.datetime) -> Interval:
    return view_of_interval(x, MONTH)


def year_of(x: dt.datetime) -> Interval:
    return view_of_interval(x, YEAR)


def view_of_days(
    anchor: dt.datetime,
    granularity: str,
    *,
    week_start: int = MONDAY,
    padding: Optional[PaddingConfig] = None,
) -> List[Interval]:
    """Day windows that make up a day, week or month view.

    The month view is the padded grid (42 days by default) including the
    leading and trailing days of the neighbouring months. Year views are
    built from `months_of_year` instead; hour has no day list.
    """
    unit = normalize_granularity(granularity)
    if unit == DAY:
        return [day_of(anchor)]
    if unit == WEEK:
        return split_by_unit(week_of(anchor, week_start=week_start), DAY)
    if unit == MONTH:
        return split_by_unit(padded_month_of(anchor, padding, week_start=week_start), DAY)
    raise UnsupportedGranularity(
        f"view_of_days does not expand {unit!r} views (use months_of_year for a year)"
        if unit == YEAR
        else f"view_of_days does not expand {unit!r} views"
    )


def months_of_year(anchor: dt.datetime) -> List[Interval]:
    return split_by_unit(year_of(anchor), MONTH)


def shift(anchor: dt.datetime, granularity: str, steps: int = 1) -> dt.datetime:
    """Move `anchor` by whole calendar units (previous/next navigation).

    Month and year steps clamp the day of month (Mar 31 - 1 month = Feb 28/29).
    """
    if isinstance(steps, bool) or not isinstance(steps, int):
        raise TypeError(f"steps must be an int, got {type(steps).__name__}")
    return add_units(anchor, normalize_granularity(granularity), steps)

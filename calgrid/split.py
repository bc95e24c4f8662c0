# calgrid/split.py
from __future__ import annotations

import datetime as dt
import math
from typing import List

from .errors import InvalidDuration, MisalignedInterval
from .interval import Interval
from .units import MONDAY, add_units, normalize_granularity, start_of
from .util.tz import to_utc


def split_by_unit(interval: Interval, unit: str, *, week_start: int = MONDAY) -> List[Interval]:
    """Partition `interval` into consecutive whole calendar units.

    Boundary k is `interval.start + k units` in the interval's zone. One day
    across a DST change stays one day (23 or 25 hours); one hour is always 60
    minutes, so a DST day splits into 23 or 25 hours.

    Raises MisalignedInterval when `interval.start` is not the start of a
    unit (weeks begin on `week_start`) or when the walk steps over
    `interval.end` instead of landing on it. The last piece is never clipped.
    """
    unit = normalize_granularity(unit)
    end_utc = to_utc(interval.end)
    aligned = start_of(interval.start, unit, week_start)
    if to_utc(aligned) != to_utc(interval.start):
        raise MisalignedInterval(
            f"{interval} does not start on a {unit} boundary (expected {aligned.isoformat()})"
        )

    out: List[Interval] = []
    cur = interval.start
    k = 1
    while to_utc(cur) < end_utc:
        nxt = add_units(interval.start, unit, k)
        if to_utc(nxt) <= to_utc(cur):
            raise MisalignedInterval(f"{unit} step from {cur.isoformat()} does not advance")
        if to_utc(nxt) > end_utc:
            raise MisalignedInterval(
                f"{interval} is not a whole number of {unit}s: "
                f"step {k} reaches {nxt.isoformat()} past the end"
            )
        out.append(Interval(cur, nxt))
        cur = nxt
        k += 1
    return out


def _check_duration(duration: dt.timedelta) -> dt.timedelta:
    if not isinstance(duration, dt.timedelta):
        raise InvalidDuration(f"duration must be a timedelta, got {type(duration).__name__}")
    if duration <= dt.timedelta(0):
        raise InvalidDuration(f"duration must be positive, got {duration}")
    return duration


def split_by(interval: Interval, duration: dt.timedelta) -> List[Interval]:
    """Partition `interval` into fixed absolute steps of `duration`.

    Steps are taken in UTC and converted back to the interval's zone, so the
    count follows the real elapsed time: a 23-hour DST day yields 46 half
    hours and a 25-hour one yields 50. The final piece is clipped to the end
    when `duration` does not divide the interval.
    """
    duration = _check_duration(duration)
    tz = interval.start.tzinfo
    start_utc = to_utc(interval.start)
    end_utc = to_utc(interval.end)

    out: List[Interval] = []
    cur = interval.start
    k = 1
    while to_utc(cur) < end_utc:
        nxt_utc = start_utc + duration * k
        nxt = interval.end if nxt_utc >= end_utc else nxt_utc.astimezone(tz)
        out.append(Interval(cur, nxt))
        cur = nxt
        k += 1
    return out


def nominal_segment_count(interval: Interval, duration: dt.timedelta) -> int:
    """Segment count expected if every local day of `interval` lasted 24 hours.

    Comparing against `len(split_by(interval, duration))` flags DST days.
    """
    duration = _check_duration(duration)
    start_wall = interval.start.astimezone(interval.end.tzinfo).replace(tzinfo=None)
    wall = interval.end.replace(tzinfo=None) - start_wall
    return max(0, math.ceil(wall / duration))

# calgrid/predicates.py
from __future__ import annotations

import datetime as dt
from typing import AbstractSet, Optional

from .config import DEFAULT_WEEKEND
from .util.tz import require_aware


def is_today(x: dt.datetime, *, now: Optional[dt.datetime] = None) -> bool:
    """True when x falls on the current calendar date of x's own zone.

    Compares local dates, not instants: `now` is first converted into x's
    zone. `now` defaults to the system clock.
    """
    x = require_aware(x)
    current = dt.datetime.now(tz=x.tzinfo) if now is None else require_aware(now).astimezone(x.tzinfo)
    return x.date() == current.date()


def is_weekend(x: dt.datetime, *, weekend: AbstractSet[int] = DEFAULT_WEEKEND) -> bool:
    return require_aware(x).weekday() in weekend


def is_same_day(a: dt.datetime, b: dt.datetime) -> bool:
    """Calendar date equality, with `b` read in a's zone."""
    a = require_aware(a)
    return a.date() == require_aware(b).astimezone(a.tzinfo).date()

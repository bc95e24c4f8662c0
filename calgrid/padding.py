# calgrid/padding.py
from __future__ import annotations

import datetime as dt
from typing import Optional

from .config import PaddingConfig
from .errors import ConfigError
from .interval import Interval
from .units import DAY, MONDAY, MONTH, WEEK, add_units, check_week_start, start_of
from .util.tz import require_aware, to_utc


def padded_month_of(
    anchor: dt.datetime,
    config: Optional[PaddingConfig] = None,
    *,
    week_start: int = MONDAY,
) -> Interval:
    """Month of `anchor` widened to a fixed grid of whole weeks.

    The grid starts on the `week_start` weekday on or before the 1st and runs
    exactly `weeks_per_month * days_per_week` calendar days, so every month
    renders with the same row count (4 to 6 real weeks plus padding days from
    the neighbouring months).

    Raises ConfigError when the grid is too small to hold the whole month.
    """
    cfg = config or PaddingConfig()
    if not isinstance(cfg, PaddingConfig):
        raise ConfigError(f"config must be a PaddingConfig, got {type(cfg).__name__}")
    anchor = require_aware(anchor)

    month_start = start_of(anchor, MONTH)
    month_end = add_units(month_start, MONTH, 1)
    start = start_of(month_start, WEEK, week_start)
    end = add_units(start, DAY, cfg.total_days)

    if to_utc(end) < to_utc(month_end):
        raise ConfigError(
            f"padding {cfg.weeks_per_month}x{cfg.days_per_week} ({cfg.total_days} days) "
            f"cannot hold {month_start:%Y-%m} starting {start.date().isoformat()}"
        )
    return Interval(start, end)


def grid_column(x: dt.datetime, *, week_start: int = MONDAY) -> int:
    """1-based grid column of x's local weekday when weeks start on `week_start`."""
    x = require_aware(x)
    return (x.weekday() - check_week_start(week_start)) % 7 + 1


def is_padding(day: Interval, month: Interval) -> bool:
    """True for a grid day that belongs to a neighbouring month of `month`."""
    d = day.start.astimezone(month.start.tzinfo)
    return (d.year, d.month) != (month.start.year, month.start.month)

"""calgrid.api

Stable *library* entrypoint for calgrid.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.

TimePoints are zone-aware `datetime.datetime` values. Windows are `Interval`
objects: half-open `[start, end)` spans aligned in the anchor's zone.
"""

from __future__ import annotations

from calgrid.config import (
    DEFAULT_WEEKEND,
    CalendarConfig,
    PaddingConfig,
    config_from_env,
    load_config,
)
from calgrid.errors import (
    CalendarError,
    ConfigError,
    InvalidDuration,
    InvalidInterval,
    MisalignedInterval,
    NaiveTimePoint,
    UnsupportedGranularity,
)
from calgrid.interval import Interval
from calgrid.padding import grid_column, is_padding, padded_month_of
from calgrid.predicates import is_same_day, is_today, is_weekend
from calgrid.split import nominal_segment_count, split_by, split_by_unit
from calgrid.units import DAY, HOUR, MONDAY, MONTH, SUNDAY, WEEK, YEAR, normalize_granularity
from calgrid.util.duration import parse_duration
from calgrid.util.tz import as_timepoint, resolve_tz
from calgrid.view import (
    day_of,
    month_of,
    months_of_year,
    shift,
    today,
    view_of_days,
    view_of_interval,
    week_of,
    year_of,
)


# --- Public API exports (locked by contract tests) ------------------------
# Keep changes intentional and reviewable.
# Prefer append-only unless you are intentionally reshaping the public surface.
_PUBLIC_EXPORTS = (
    "CalendarConfig",
    "CalendarError",
    "ConfigError",
    "DAY",
    "DEFAULT_WEEKEND",
    "HOUR",
    "Interval",
    "InvalidDuration",
    "InvalidInterval",
    "MONDAY",
    "MONTH",
    "MisalignedInterval",
    "NaiveTimePoint",
    "PaddingConfig",
    "SUNDAY",
    "UnsupportedGranularity",
    "WEEK",
    "YEAR",
    "as_timepoint",
    "config_from_env",
    "day_of",
    "grid_column",
    "is_padding",
    "is_same_day",
    "is_today",
    "is_weekend",
    "load_config",
    "month_of",
    "months_of_year",
    "nominal_segment_count",
    "normalize_granularity",
    "padded_month_of",
    "parse_duration",
    "resolve_tz",
    "shift",
    "split_by",
    "split_by_unit",
    "today",
    "view_of_days",
    "view_of_interval",
    "week_of",
    "year_of",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------

# calgrid/errors.py
from __future__ import annotations


class CalendarError(ValueError):
    """Base class for caller-contract violations raised by calgrid."""


class InvalidInterval(CalendarError):
    """Raised when an interval's start lies after its end (or is not zone-aware)."""


class UnsupportedGranularity(CalendarError):
    """Raised for a granularity name that is not hour/day/week/month/year."""


class MisalignedInterval(CalendarError):
    """Raised when an interval is not a whole number of the requested unit."""


class InvalidDuration(CalendarError):
    """Raised for a non-positive or unparsable segment duration."""


class NaiveTimePoint(CalendarError):
    """Raised when a naive datetime is passed where a zone-aware one is required."""


class ConfigError(CalendarError):
    """Raised for invalid calendar configuration values."""

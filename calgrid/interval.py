# calgrid/interval.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Dict

from .errors import InvalidInterval
from .util.tz import is_aware, require_aware, to_utc


@dataclass(frozen=True)
class Interval:
    """Half-open span `[start, end)` between two zone-aware datetimes.

    Ordering is checked on instants, so a start and end in different zones
    are compared by the moment they denote, not by wall-clock fields.
    """

    start: dt.datetime
    end: dt.datetime

    def __post_init__(self) -> None:
        for name in ("start", "end"):
            v = getattr(self, name)
            if not isinstance(v, dt.datetime):
                raise InvalidInterval(f"interval {name} must be a datetime, got {type(v).__name__}")
            if not is_aware(v):
                raise InvalidInterval(f"interval {name} must be zone-aware: {v.isoformat()}")
        if to_utc(self.start) > to_utc(self.end):
            raise InvalidInterval(
                f"interval start {self.start.isoformat()} is after end {self.end.isoformat()}"
            )

    def contains(self, x: dt.datetime) -> bool:
        t = to_utc(require_aware(x))
        return to_utc(self.start) <= t < to_utc(self.end)

    def length(self) -> dt.timedelta:
        # Same-zone datetime subtraction ignores offsets; go through UTC.
        return to_utc(self.end) - to_utc(self.start)

    def is_empty(self) -> bool:
        return self.length() == dt.timedelta(0)

    def overlaps(self, other: "Interval") -> bool:
        return to_utc(self.start) < to_utc(other.end) and to_utc(other.start) < to_utc(self.end)

    def to_dict(self) -> Dict[str, Any]:
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}

    def __str__(self) -> str:
        return f"[{self.start.isoformat()}, {self.end.isoformat()})"

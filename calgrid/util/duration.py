# calgrid/util/duration.py
from __future__ import annotations

import datetime as dt
import re
from typing import Optional

from ..errors import InvalidDuration

# ISO-8601 time durations: PT30M, PT1H30M, PT90S. Days are rejected on purpose:
# "P1D" is a calendar unit, use split_by_unit(..., "day") for that.
_ISO_RE = re.compile(r"^PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?$", re.IGNORECASE)
_SHORT_RE = re.compile(r"^(\d+)\s*(h|m|min|s)?$", re.IGNORECASE)


def parse_duration(s: Optional[str]) -> dt.timedelta:
    """Parse a fixed absolute duration.

    Accepted forms:
      - ISO-8601 time durations: "PT30M", "PT1H", "PT1H30M", "PT45S"
      - Short forms: "30m", "30min", "1h", "90s", bare "30" (minutes)
    """
    ss = str(s or "").strip()
    if not ss:
        raise InvalidDuration("empty duration")

    m = _ISO_RE.match(ss)
    if m and any(m.groups()):
        h = int(m.group(1) or 0)
        mn = int(m.group(2) or 0)
        sec = int(m.group(3) or 0)
        return _positive(dt.timedelta(hours=h, minutes=mn, seconds=sec), ss)

    m = _SHORT_RE.match(ss)
    if m:
        n = int(m.group(1))
        unit = (m.group(2) or "m").lower()
        if unit == "h":
            return _positive(dt.timedelta(hours=n), ss)
        if unit == "s":
            return _positive(dt.timedelta(seconds=n), ss)
        return _positive(dt.timedelta(minutes=n), ss)

    raise InvalidDuration(f"Invalid duration: {ss!r}")


def _positive(d: dt.timedelta, raw: str) -> dt.timedelta:
    if d <= dt.timedelta(0):
        raise InvalidDuration(f"duration must be positive: {raw!r}")
    return d


def format_duration(d: dt.timedelta) -> str:
    total = int(d.total_seconds())
    h, rem = divmod(total, 3600)
    mn, sec = divmod(rem, 60)
    out = "PT"
    if h:
        out += f"{h}H"
    if mn:
        out += f"{mn}M"
    if sec or out == "PT":
        out += f"{sec}S"
    return out

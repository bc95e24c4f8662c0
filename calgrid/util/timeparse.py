# calgrid/util/timeparse.py
from __future__ import annotations

import datetime as dt
import re

from .tz import TzLike, as_timepoint, local_midnight, now, resolve_tz

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date_yyyy_mm_dd(s: str) -> dt.date:
    return dt.datetime.strptime(s, "%Y-%m-%d").date()


def parse_anchor(s: str | None, tz: TzLike = "local") -> dt.datetime:
    """Parse a CLI anchor into a zone-aware datetime.

    `s` accepts:
      - None/"" / "now" -> current time in `tz`
      - "YYYY-MM-DD" -> local midnight of that date in `tz`
      - ISO-8601 datetime; a naive one is read as wall time in `tz`,
        an explicit offset is converted into `tz`
    """
    tzinfo = resolve_tz(tz)
    ss = (s or "").strip()
    if not ss or ss.lower() == "now":
        return now(tzinfo)
    if _DATE_RE.match(ss):
        return local_midnight(parse_date_yyyy_mm_dd(ss), tzinfo)
    try:
        parsed = dt.datetime.fromisoformat(ss)
    except ValueError as e:
        raise ValueError(f"Invalid anchor {ss!r}: expected YYYY-MM-DD or ISO-8601 datetime") from e
    if parsed.tzinfo is not None:
        return parsed.astimezone(tzinfo)
    return as_timepoint(parsed, tzinfo)

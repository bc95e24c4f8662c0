# calgrid/util/tz.py
from __future__ import annotations

import datetime as dt
import re
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import tz as dateutil_tz

from ..errors import NaiveTimePoint

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")

TzLike = Union[str, dt.tzinfo, None]


def normalize_tz_name(name: Optional[str]) -> str:
    """Normalize a timezone identifier.

    Supported forms:
      - None/"" -> "local"
      - "local" / "system" -> "local" (resolve to the machine's local timezone)
      - "UTC" / "Z" / "GMT" -> "UTC"
      - IANA names, e.g. "America/New_York"
      - Fixed offsets: "+02:00", "+0200", "-05:00"
    """
    if name is None:
        return "local"
    s = str(name).strip()
    if not s:
        return "local"

    low = s.lower()
    if low in {"local", "system", "native"}:
        return "local"
    if low in {"utc", "z", "gmt", "utc0", "utc+0"}:
        return "UTC"

    return s


def resolve_tz(name: TzLike) -> dt.tzinfo:
    """Resolve a timezone name (or pass through a tzinfo).

    For "local", resolves to the machine's local zone with its DST rules
    (dateutil.tz.tzlocal), so dates on either side of a DST change get their
    own offset.
    For "UTC", resolves to dt.timezone.utc.
    For IANA zone names, resolves via zoneinfo.ZoneInfo.
    For fixed offsets, resolves to dt.timezone(offset).

    Raises ValueError for invalid timezone identifiers.
    """
    if isinstance(name, dt.tzinfo):
        return name

    tz_name = normalize_tz_name(name)

    if tz_name == "UTC":
        return dt.timezone.utc

    if tz_name == "local":
        return dateutil_tz.tzlocal()

    m = _OFFSET_RE.match(tz_name)
    if m:
        sign_s, hh_s, mm_s = m.groups()
        hh = int(hh_s)
        mm = int(mm_s)
        if hh > 23 or mm > 59:
            raise ValueError(f"Invalid timezone offset: {tz_name!r}")
        sign = 1 if sign_s == "+" else -1
        off_min = sign * (hh * 60 + mm)
        return dt.timezone(dt.timedelta(minutes=off_min))

    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as ex:
        raise ValueError(f"Invalid timezone identifier: {tz_name!r}") from ex


def is_aware(x: dt.datetime) -> bool:
    return x.tzinfo is not None and x.tzinfo.utcoffset(x) is not None


def as_timepoint(x: dt.datetime, tz: TzLike = None) -> dt.datetime:
    """Return `x` as a zone-aware TimePoint.

    Aware datetimes pass through untouched. A naive datetime is only accepted
    when a zone is given explicitly; it is then read as wall-clock time in
    that zone.
    """
    if not isinstance(x, dt.datetime):
        raise TypeError(f"expected datetime, got {type(x).__name__}")
    if is_aware(x):
        return x
    if tz is None:
        raise NaiveTimePoint(f"naive datetime {x.isoformat()} has no time zone")
    return settle(x.replace(tzinfo=resolve_tz(tz)))


def require_aware(x: dt.datetime) -> dt.datetime:
    return as_timepoint(x, None)


def to_utc(x: dt.datetime) -> dt.datetime:
    return x.astimezone(dt.timezone.utc)


def settle(x: dt.datetime) -> dt.datetime:
    """Round-trip through UTC so wall times in a DST gap land on a real instant.

    `x.astimezone(x.tzinfo)` is a no-op for an identical tzinfo, hence the
    explicit detour.
    """
    return to_utc(x).astimezone(x.tzinfo)


def local_midnight(d: dt.date, tz: dt.tzinfo) -> dt.datetime:
    return settle(dt.datetime(d.year, d.month, d.day, tzinfo=tz))


def now(tz: TzLike = None) -> dt.datetime:
    return dt.datetime.now(tz=resolve_tz(tz))

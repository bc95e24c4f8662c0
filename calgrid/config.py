# calgrid/config.py
from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional

from .errors import ConfigError
from .units import MONDAY, SATURDAY, SUNDAY, check_week_start
from .util.console import log
from .util.tz import normalize_tz_name, resolve_tz

DEFAULT_WEEKEND: FrozenSet[int] = frozenset({SATURDAY, SUNDAY})

WEEKDAY_NAMES = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

ENV_TZ = "CALGRID_TZ"
ENV_WEEK_START = "CALGRID_WEEK_START"
ENV_WEEKEND = "CALGRID_WEEKEND"


def _positive_int(name: str, v: Any) -> int:
    if isinstance(v, bool) or not isinstance(v, int) or v < 1:
        raise ConfigError(f"{name} must be a positive integer, got {v!r}")
    return v


@dataclass(frozen=True)
class PaddingConfig:
    """Shape of a padded month grid: `weeks_per_month` rows of `days_per_week` days."""

    days_per_week: int = 7
    weeks_per_month: int = 6

    def __post_init__(self) -> None:
        _positive_int("days_per_week", self.days_per_week)
        _positive_int("weeks_per_month", self.weeks_per_month)

    @property
    def total_days(self) -> int:
        return self.days_per_week * self.weeks_per_month


def parse_weekday(v: Any) -> int:
    """Weekday number (Monday=0) from an int or an English name/prefix ("sun", "Monday")."""
    if isinstance(v, bool):
        raise ConfigError(f"Invalid weekday: {v!r}")
    if isinstance(v, int):
        return check_week_start(v)
    s = str(v or "").strip().lower()
    if s.isdigit():
        return check_week_start(int(s))
    if len(s) >= 2:
        for i, name in enumerate(WEEKDAY_NAMES):
            if name.startswith(s):
                return i
    raise ConfigError(f"Invalid weekday: {v!r}")


def parse_weekend(v: Any) -> FrozenSet[int]:
    if isinstance(v, str):
        items: Iterable[Any] = [p for p in (x.strip() for x in v.split(",")) if p]
    elif isinstance(v, (list, tuple, set, frozenset)):
        items = v
    else:
        raise ConfigError(f"weekend must be a list of weekdays, got {v!r}")
    return frozenset(parse_weekday(x) for x in items)


@dataclass(frozen=True)
class CalendarConfig:
    """Calendar conventions shared by the view, padding and predicate helpers."""

    week_start: int = MONDAY
    weekend: FrozenSet[int] = DEFAULT_WEEKEND
    padding: PaddingConfig = field(default_factory=PaddingConfig)
    tz: str = "local"

    def __post_init__(self) -> None:
        check_week_start(self.week_start)
        if not isinstance(self.weekend, frozenset):
            raise ConfigError(f"weekend must be a frozenset, got {type(self.weekend).__name__}")
        for d in self.weekend:
            check_week_start(d)
        if not isinstance(self.padding, PaddingConfig):
            raise ConfigError(f"padding must be a PaddingConfig, got {type(self.padding).__name__}")
        try:
            resolve_tz(self.tz)
        except ValueError as e:
            raise ConfigError(str(e)) from e


_KNOWN_KEYS = ("week_start", "weekend", "days_per_week", "weeks_per_month", "tz")


def config_from_mapping(raw: Mapping[str, Any], base: Optional[CalendarConfig] = None) -> CalendarConfig:
    """Apply a JSON-style mapping on top of `base` (defaults when omitted).

    Accepted keys: week_start, weekend, tz, days_per_week, weeks_per_month, and
    an optional nested "padding" object with the two padding keys. Unknown keys
    are reported and ignored; invalid values raise ConfigError.
    """
    cfg = base or CalendarConfig()
    if not isinstance(raw, Mapping):
        raise ConfigError(f"config must be an object, got {type(raw).__name__}")

    flat: Dict[str, Any] = {}
    for k, v in raw.items():
        if k == "padding" and isinstance(v, Mapping):
            for pk, pv in v.items():
                flat[pk] = pv
        else:
            flat[k] = v

    for k in sorted(flat):
        if k not in _KNOWN_KEYS:
            log("config", "WARN", f"ignoring unknown config key {k!r}")

    changes: Dict[str, Any] = {}
    if "week_start" in flat:
        changes["week_start"] = parse_weekday(flat["week_start"])
    if "weekend" in flat:
        changes["weekend"] = parse_weekend(flat["weekend"])
    if "tz" in flat:
        changes["tz"] = normalize_tz_name(flat["tz"])
    if "days_per_week" in flat or "weeks_per_month" in flat:
        changes["padding"] = PaddingConfig(
            days_per_week=flat.get("days_per_week", cfg.padding.days_per_week),
            weeks_per_month=flat.get("weeks_per_month", cfg.padding.weeks_per_month),
        )
    return replace(cfg, **changes)


def load_config(path: Optional[str], base: Optional[CalendarConfig] = None) -> CalendarConfig:
    """Load a calendar config JSON file.

    A missing path or file yields `base` (or the defaults). A file that exists
    but cannot be parsed is an error.
    """
    cfg = base or CalendarConfig()
    if not path or not os.path.exists(path):
        return cfg
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e
    return config_from_mapping(raw, cfg)


def config_from_env(environ: Optional[Mapping[str, str]] = None, base: Optional[CalendarConfig] = None) -> CalendarConfig:
    """Overlay CALGRID_TZ, CALGRID_WEEK_START and CALGRID_WEEKEND on `base`."""
    env = os.environ if environ is None else environ
    raw: Dict[str, Any] = {}
    if env.get(ENV_TZ):
        raw["tz"] = env[ENV_TZ]
    if env.get(ENV_WEEK_START):
        raw["week_start"] = env[ENV_WEEK_START]
    if env.get(ENV_WEEKEND):
        raw["weekend"] = env[ENV_WEEKEND]
    return config_from_mapping(raw, base)

from __future__ import annotations

import argparse
import datetime as dt
import json
from typing import Any, Dict, List

from .config import ENV_TZ, ENV_WEEK_START, CalendarConfig, config_from_env, config_from_mapping, load_config
from .errors import CalendarError
from .interval import Interval
from .padding import grid_column, is_padding
from .predicates import is_today, is_weekend
from .split import nominal_segment_count, split_by, split_by_unit
from .units import normalize_granularity
from .util.console import log
from .util.duration import format_duration, parse_duration
from .util.timeparse import parse_anchor
from .view import month_of, months_of_year, view_of_days, view_of_interval


def _die(msg: str, rc: int = 2) -> int:
    log("cli", "ERROR", msg)
    return rc


def _build_config(ns: argparse.Namespace) -> CalendarConfig:
    cfg = load_config(ns.config)
    cfg = config_from_env(base=cfg)
    flags: Dict[str, Any] = {}
    if ns.tz:
        flags["tz"] = ns.tz
    if ns.week_start:
        flags["week_start"] = ns.week_start
    if ns.weekend:
        flags["weekend"] = ns.weekend
    return config_from_mapping(flags, cfg)


def _day_cell(day: Interval, cfg: CalendarConfig, month: Interval, now: dt.datetime) -> Dict[str, Any]:
    return {
        **day.to_dict(),
        "date": day.start.date().isoformat(),
        "column": grid_column(day.start, week_start=cfg.week_start),
        "today": is_today(day.start, now=now),
        "weekend": is_weekend(day.start, weekend=cfg.weekend),
        "padding": is_padding(day, month),
    }


def _cmd_window(ns: argparse.Namespace, cfg: CalendarConfig, anchor: dt.datetime) -> Any:
    w = view_of_interval(anchor, ns.view, week_start=cfg.week_start)
    return {"view": normalize_granularity(ns.view), "anchor": anchor.isoformat(), **w.to_dict()}


def _cmd_days(ns: argparse.Namespace, cfg: CalendarConfig, anchor: dt.datetime) -> Any:
    days = view_of_days(anchor, ns.view, week_start=cfg.week_start, padding=cfg.padding)
    month = month_of(anchor)
    now = dt.datetime.now(tz=anchor.tzinfo)
    return {
        "view": normalize_granularity(ns.view),
        "anchor": anchor.isoformat(),
        "days": [_day_cell(d, cfg, month, now) for d in days],
    }


def _cmd_split(ns: argparse.Namespace, cfg: CalendarConfig, anchor: dt.datetime) -> Any:
    window = view_of_interval(anchor, ns.view, week_start=cfg.week_start)
    out: Dict[str, Any] = {"view": normalize_granularity(ns.view), **window.to_dict()}
    segments: List[Interval]
    if ns.step:
        step = parse_duration(ns.step)
        segments = split_by(window, step)
        nominal = nominal_segment_count(window, step)
        out["step"] = format_duration(step)
        out["nominal"] = nominal
        if len(segments) != nominal:
            log(
                "split",
                "INFO",
                f"{window.start.date().isoformat()}..{window.end.date().isoformat()} spans "
                f"{window.length()} of real time: {len(segments)} segments (nominal {nominal})",
            )
    else:
        unit = normalize_granularity(ns.unit)
        segments = split_by_unit(window, unit, week_start=cfg.week_start)
        out["unit"] = unit
    out["count"] = len(segments)
    out["segments"] = [s.to_dict() for s in segments]
    return out


def _cmd_months(ns: argparse.Namespace, cfg: CalendarConfig, anchor: dt.datetime) -> Any:
    return {"year": anchor.year, "months": [m.to_dict() for m in months_of_year(anchor)]}


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--anchor", default=None, help="Anchor date YYYY-MM-DD or ISO-8601 datetime (default: now)")
    p.add_argument(
        "--tz",
        default=None,
        help=f"Timezone for the anchor and windows (default: env {ENV_TZ}, config, or 'local')",
    )
    p.add_argument(
        "--week-start",
        default=None,
        help=f"First weekday of a week, name or 0-6 with Monday=0 (default: env {ENV_WEEK_START} or monday)",
    )
    p.add_argument("--weekend", default=None, help="Comma-separated weekend days (default: saturday,sunday)")
    p.add_argument("--config", default=None, help="Calendar config JSON (optional)")
    p.add_argument("--pretty", action="store_true", help="Pretty JSON output")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="calgrid",
        description="Compute calendar-aligned view windows, day grids and segments as JSON.",
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("window", help="Canonical window of a view around the anchor")
    p.add_argument("--view", default="week", help="hour|day|week|month|year (default: week)")
    _add_common(p)
    p.set_defaults(func=_cmd_window)

    p = sub.add_parser("days", help="Day cells of a day/week/month view (month is padded)")
    p.add_argument("--view", default="month", help="day|week|month (default: month)")
    _add_common(p)
    p.set_defaults(func=_cmd_days)

    p = sub.add_parser("split", help="Split a view window by calendar unit or fixed step")
    p.add_argument("--view", default="day", help="hour|day|week|month|year (default: day)")
    g = p.add_mutually_exclusive_group()
    g.add_argument("--unit", default="hour", help="Calendar unit to split by (default: hour)")
    g.add_argument("--step", default=None, help="Fixed absolute step, e.g. PT30M or 30m")
    _add_common(p)
    p.set_defaults(func=_cmd_split)

    p = sub.add_parser("months", help="The 12 month windows of the anchor's year")
    _add_common(p)
    p.set_defaults(func=_cmd_months)

    ns = ap.parse_args(argv)

    try:
        cfg = _build_config(ns)
        anchor = parse_anchor(ns.anchor, cfg.tz)
        result = ns.func(ns, cfg, anchor)
    except CalendarError as e:
        return _die(str(e))
    except ValueError as e:
        return _die(f"Invalid input: {e}")

    print(json.dumps(result, ensure_ascii=False, indent=2 if ns.pretty else None))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

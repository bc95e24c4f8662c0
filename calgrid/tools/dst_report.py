#!/usr/bin/env python3
"""List the local dates of a year whose fixed-step segment count is not nominal.

These are the DST transition days of the zone: with a 30 minute step a
spring-forward day yields 46 segments and a fall-back day 50.
"""
from __future__ import annotations

import argparse
import datetime as dt
import json
from typing import Any, Dict, List

from calgrid.errors import CalendarError
from calgrid.split import nominal_segment_count, split_by, split_by_unit
from calgrid.units import DAY
from calgrid.util.console import log
from calgrid.util.duration import format_duration, parse_duration
from calgrid.util.tz import local_midnight, resolve_tz
from calgrid.view import year_of


def dst_days(year: int, tz: dt.tzinfo, step: dt.timedelta) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for day in split_by_unit(year_of(local_midnight(dt.date(year, 1, 1), tz)), DAY):
        count = len(split_by(day, step))
        nominal = nominal_segment_count(day, step)
        if count != nominal:
            out.append(
                {
                    "date": day.start.date().isoformat(),
                    "hours": day.length().total_seconds() / 3600,
                    "segments": count,
                    "nominal": nominal,
                }
            )
    return out


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="calgrid-dst-report", description=__doc__.splitlines()[0])
    ap.add_argument("--year", type=int, required=True, help="Calendar year, e.g. 2021")
    ap.add_argument("--tz", default="local", help="Timezone (default: local)")
    ap.add_argument("--step", default="PT30M", help="Segment step (default: PT30M)")
    ap.add_argument("--pretty", action="store_true", help="Pretty JSON output")
    ns = ap.parse_args(argv)

    try:
        tz = resolve_tz(ns.tz)
        step = parse_duration(ns.step)
        days = dst_days(ns.year, tz, step)
    except (CalendarError, ValueError) as e:
        log("dst_report", "ERROR", str(e))
        return 2

    if not days:
        log("dst_report", "INFO", f"no DST transitions in {ns.year} for {ns.tz}")
    print(
        json.dumps(
            {"year": ns.year, "tz": ns.tz, "step": format_duration(step), "days": days},
            indent=2 if ns.pretty else None,
        )
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

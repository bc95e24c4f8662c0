from __future__ import annotations

import io
import json
import os
import unittest
from contextlib import redirect_stderr
from tempfile import TemporaryDirectory

from calgrid import CalendarConfig, ConfigError, PaddingConfig, config_from_env, load_config
from calgrid.config import config_from_mapping, parse_weekday, parse_weekend


class TestCalendarConfigContract(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = CalendarConfig()
        self.assertEqual(cfg.week_start, 0)
        self.assertEqual(cfg.weekend, frozenset({5, 6}))
        self.assertEqual(cfg.padding, PaddingConfig(7, 6))
        self.assertEqual(cfg.tz, "local")

    def test_weekday_names_and_numbers(self) -> None:
        self.assertEqual(parse_weekday("sunday"), 6)
        self.assertEqual(parse_weekday("Sun"), 6)
        self.assertEqual(parse_weekday("mo"), 0)
        self.assertEqual(parse_weekday("3"), 3)
        self.assertEqual(parse_weekday(4), 4)
        for bad in ("s", "t", "funday", 7, -1, True, None):
            with self.subTest(value=bad):
                with self.assertRaises(ConfigError):
                    parse_weekday(bad)

    def test_weekend_parsing(self) -> None:
        self.assertEqual(parse_weekend("fri,sat"), frozenset({4, 5}))
        self.assertEqual(parse_weekend(["sunday"]), frozenset({6}))
        self.assertEqual(parse_weekend(""), frozenset())
        with self.assertRaises(ConfigError):
            parse_weekend(5)

    def test_mapping_overrides_and_nested_padding(self) -> None:
        cfg = config_from_mapping(
            {"week_start": "sunday", "tz": "utc", "padding": {"weeks_per_month": 5}}
        )
        self.assertEqual(cfg.week_start, 6)
        self.assertEqual(cfg.tz, "UTC")
        self.assertEqual(cfg.padding, PaddingConfig(days_per_week=7, weeks_per_month=5))

    def test_invalid_values_raise(self) -> None:
        with self.assertRaises(ConfigError):
            config_from_mapping({"tz": "No/Such_Zone"})
        with self.assertRaises(ConfigError):
            config_from_mapping({"days_per_week": 0})
        with self.assertRaises(ConfigError):
            config_from_mapping(["week_start"])  # type: ignore[arg-type]

    def test_unknown_keys_warn_and_are_ignored(self) -> None:
        buf = io.StringIO()
        with redirect_stderr(buf):
            cfg = config_from_mapping({"theme": "dark"})
        self.assertEqual(cfg, CalendarConfig())
        self.assertIn("[calgrid.config] WARN:", buf.getvalue())
        self.assertIn("'theme'", buf.getvalue())

    def test_env_overlay(self) -> None:
        cfg = config_from_env(
            {"CALGRID_TZ": "America/New_York", "CALGRID_WEEK_START": "sun", "CALGRID_WEEKEND": "fri,sat"}
        )
        self.assertEqual(cfg.tz, "America/New_York")
        self.assertEqual(cfg.week_start, 6)
        self.assertEqual(cfg.weekend, frozenset({4, 5}))
        self.assertEqual(config_from_env({}), CalendarConfig())

    def test_load_config_file(self) -> None:
        with TemporaryDirectory() as td:
            p = os.path.join(td, "calgrid.json")
            with open(p, "w", encoding="utf-8") as f:
                json.dump({"week_start": 6, "weekend": ["fri", "sat"], "tz": "UTC"}, f)
            cfg = load_config(p)
            self.assertEqual(cfg.week_start, 6)
            self.assertEqual(cfg.weekend, frozenset({4, 5}))
            self.assertEqual(cfg.tz, "UTC")

            self.assertEqual(load_config(os.path.join(td, "missing.json")), CalendarConfig())
            self.assertEqual(load_config(None), CalendarConfig())

            bad = os.path.join(td, "bad.json")
            with open(bad, "w", encoding="utf-8") as f:
                f.write("{not json")
            with self.assertRaises(ConfigError):
                load_config(bad)

    def test_config_is_immutable(self) -> None:
        cfg = CalendarConfig()
        with self.assertRaises(AttributeError):
            cfg.week_start = 6  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main(verbosity=2)

from __future__ import annotations

import datetime as dt
import unittest
from zoneinfo import ZoneInfo

from calgrid import DEFAULT_WEEKEND, NaiveTimePoint, is_same_day, is_today, is_weekend

NY = ZoneInfo("America/New_York")
UTC = dt.timezone.utc


class TestWeekendContract(unittest.TestCase):
    def test_saturday_and_sunday_are_weekend(self) -> None:
        mon = dt.datetime(2021, 2, 1, 12, tzinfo=NY)
        flags = [is_weekend(mon + dt.timedelta(days=i)) for i in range(7)]
        self.assertEqual(flags, [False, False, False, False, False, True, True])
        self.assertEqual(DEFAULT_WEEKEND, frozenset({5, 6}))

    def test_weekend_uses_local_weekday(self) -> None:
        # Saturday 02:00 UTC is still Friday evening in New York.
        x = dt.datetime(2021, 2, 6, 2, 0, tzinfo=UTC)
        self.assertTrue(is_weekend(x))
        self.assertFalse(is_weekend(x.astimezone(NY)))

    def test_custom_weekend(self) -> None:
        fri = dt.datetime(2021, 2, 5, tzinfo=UTC)
        self.assertTrue(is_weekend(fri, weekend={4, 5}))
        self.assertFalse(is_weekend(fri + dt.timedelta(days=2), weekend={4, 5}))


class TestTodayPredicateContract(unittest.TestCase):
    def test_same_local_date_in_x_zone(self) -> None:
        x = dt.datetime(2021, 3, 14, 23, 30, tzinfo=NY)
        now = dt.datetime(2021, 3, 15, 3, 30, tzinfo=UTC)
        self.assertTrue(is_today(x, now=now))

    def test_now_is_read_in_x_zone(self) -> None:
        x = dt.datetime(2021, 3, 15, 3, 30, tzinfo=UTC)
        now = dt.datetime(2021, 3, 14, 23, 30, tzinfo=NY)
        self.assertTrue(is_today(x, now=now))

    def test_next_local_day_is_not_today(self) -> None:
        x = dt.datetime(2021, 3, 14, 23, 30, tzinfo=NY)
        now = dt.datetime(2021, 3, 15, 5, 0, tzinfo=UTC)
        self.assertFalse(is_today(x, now=now))

    def test_system_clock_default(self) -> None:
        self.assertTrue(is_today(dt.datetime.now(UTC)))
        self.assertFalse(is_today(dt.datetime.now(UTC) - dt.timedelta(days=2)))

    def test_naive_input_is_rejected(self) -> None:
        with self.assertRaises(NaiveTimePoint):
            is_today(dt.datetime(2021, 3, 14))
        with self.assertRaises(NaiveTimePoint):
            is_weekend(dt.datetime(2021, 3, 14))


class TestSameDayContract(unittest.TestCase):
    def test_same_day_compares_in_first_zone(self) -> None:
        a = dt.datetime(2021, 6, 1, 19, 0, tzinfo=NY)
        b = dt.datetime(2021, 6, 2, 1, 0, tzinfo=UTC)
        self.assertTrue(is_same_day(a, b))
        self.assertFalse(is_same_day(b, a))


if __name__ == "__main__":
    unittest.main(verbosity=2)

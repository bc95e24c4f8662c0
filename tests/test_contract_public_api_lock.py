from __future__ import annotations

import unittest


class TestPublicApiLockContract(unittest.TestCase):
    def test_api_module_exports_are_present(self) -> None:
        import calgrid.api as api

        self.assertTrue(hasattr(api, "__all__"))
        self.assertIsInstance(api.__all__, (list, tuple))
        self.assertGreaterEqual(len(api.__all__), 3)

        for name in api.__all__:
            self.assertIsInstance(name, str)
            self.assertTrue(hasattr(api, name), f"calgrid.api missing public name: {name}")
            obj = getattr(api, name)
            self.assertIsNotNone(obj, f"calgrid.api {name} is None")

    def test_package_reexports_match_api_all(self) -> None:
        import calgrid
        import calgrid.api as api

        for name in api.__all__:
            self.assertTrue(hasattr(calgrid, name), f"calgrid package does not re-export: {name}")
            self.assertIs(getattr(calgrid, name), getattr(api, name), f"calgrid.{name} must be same object as calgrid.api.{name}")

    def test_core_operations_are_public(self) -> None:
        import calgrid.api as api

        for name in (
            "today",
            "day_of",
            "week_of",
            "view_of_interval",
            "view_of_days",
            "split_by_unit",
            "split_by",
            "padded_month_of",
            "is_today",
            "is_weekend",
            "Interval",
            "PaddingConfig",
        ):
            self.assertIn(name, api.__all__)

    def test_public_exports_are_sorted_and_consistent(self) -> None:
        import calgrid.api as api

        self.assertIsInstance(api._PUBLIC_EXPORTS, tuple)
        self.assertEqual(len(set(api._PUBLIC_EXPORTS)), len(api._PUBLIC_EXPORTS))
        self.assertEqual(list(api._PUBLIC_EXPORTS), sorted(api._PUBLIC_EXPORTS))
        expected_all = [n for n in api._PUBLIC_EXPORTS if n in api.__dict__]
        self.assertEqual(api.__all__, expected_all)
        self.assertEqual(api.__all__, list(api._PUBLIC_EXPORTS))


if __name__ == "__main__":
    unittest.main(verbosity=2)

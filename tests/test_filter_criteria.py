# tests/test_filter_criteria.py

"""Tests for the FilterCriteria value object."""

import unittest

from src.config.settings import Settings
from src.models.filter_criteria import FilterCriteria


class TestFilterCriteria(unittest.TestCase):
    """Construction, validation and copy helpers."""

    def test_default_restricts_nothing(self) -> None:
        criteria = FilterCriteria.default(250)
        self.assertEqual(criteria.category, frozenset())
        self.assertEqual(criteria.price_range, (0.0, 250.0))
        self.assertEqual(criteria.min_rating, 0)
        self.assertFalse(criteria.is_favorite_only)

    def test_bare_construction_uses_configured_ceiling(self) -> None:
        criteria = FilterCriteria()
        self.assertEqual(
            criteria.price_range, (0.0, float(Settings.DEFAULT_MAX_PRICE))
        )
        self.assertEqual(criteria, FilterCriteria.default(Settings.DEFAULT_MAX_PRICE))

    def test_category_list_becomes_frozenset(self) -> None:
        criteria = FilterCriteria(category=["a", "b", "a"])  # type: ignore[arg-type]
        self.assertEqual(criteria.category, frozenset({"a", "b"}))

    def test_min_above_max_rejected(self) -> None:
        with self.assertRaises(ValueError):
            FilterCriteria(price_range=(50, 10))

    def test_negative_bound_rejected(self) -> None:
        with self.assertRaises(ValueError):
            FilterCriteria(price_range=(-1, 10))

    def test_rating_out_of_range_rejected(self) -> None:
        with self.assertRaises(ValueError):
            FilterCriteria(min_rating=6)

    def test_equal_bounds_allowed(self) -> None:
        criteria = FilterCriteria(price_range=(10, 10))
        self.assertEqual(criteria.price_range, (10.0, 10.0))

    def test_with_changes_returns_new_object(self) -> None:
        base = FilterCriteria.default(100)
        changed = base.with_changes(min_rating=3)
        self.assertEqual(changed.min_rating, 3)
        self.assertEqual(base.min_rating, 0)
        self.assertEqual(changed.price_range, base.price_range)

    def test_with_changes_validates(self) -> None:
        with self.assertRaises(ValueError):
            FilterCriteria.default(100).with_changes(price_range=(5, 1))

    def test_toggle_category_round_trip(self) -> None:
        base = FilterCriteria.default(100)
        added = base.toggle_category("jewelery")
        self.assertEqual(added.category, frozenset({"jewelery"}))
        self.assertEqual(added.toggle_category("jewelery"), base)

    def test_hashable_and_equal_by_value(self) -> None:
        a = FilterCriteria(category={"x"}, price_range=(0, 5))  # type: ignore[arg-type]
        b = FilterCriteria(category=frozenset({"x"}), price_range=(0.0, 5.0))
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))


if __name__ == "__main__":
    unittest.main()

# tests/test_settings.py

"""Tests for the Settings configuration class."""

import unittest
from pathlib import Path

from src.config.settings import Settings


class TestSettings(unittest.TestCase):
    """Verify Settings constants."""

    def test_products_url_has_no_trailing_slash(self) -> None:
        self.assertTrue(Settings.PRODUCTS_URL.startswith("http"))
        self.assertFalse(Settings.PRODUCTS_URL.endswith("/"))

    def test_request_timeout_is_positive_int(self) -> None:
        self.assertIsInstance(Settings.REQUEST_TIMEOUT, int)
        self.assertGreater(Settings.REQUEST_TIMEOUT, 0)

    def test_default_max_price(self) -> None:
        self.assertEqual(Settings.DEFAULT_MAX_PRICE, 1000)

    def test_rating_steps_within_bounds(self) -> None:
        self.assertEqual(Settings.RATING_STEPS[0], 0)
        self.assertTrue(all(0 <= step <= 5 for step in Settings.RATING_STEPS))

    def test_headers_accept_json(self) -> None:
        self.assertIn("json", Settings.DEFAULT_HEADERS["Accept"])

    def test_base_dir_is_path(self) -> None:
        self.assertIsInstance(Settings.BASE_DIR, Path)


if __name__ == "__main__":
    unittest.main()

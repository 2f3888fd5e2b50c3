# tests/test_runner.py

"""Tests for the headless CLI listing."""

import io
import json
import unittest
from unittest.mock import patch

from src.cli.runner import (
    build_criteria,
    cli_list,
    cli_show_product,
    parse_categories,
)
from src.services.storefront import StorefrontSession
from tests.fakes import BrokenCatalog, FakeCatalog


def _run_list(**overrides: object) -> tuple[int, str]:
    """Run cli_list against the fake catalog, capturing stdout."""
    kwargs: dict[str, object] = {
        "search": "",
        "category_args": None,
        "min_price": None,
        "max_price": None,
        "min_rating": 0.0,
        "output_format": "json",
        "source": FakeCatalog(),
    }
    kwargs.update(overrides)
    with patch("sys.stdout", new_callable=io.StringIO) as out:
        code = cli_list(**kwargs)  # type: ignore[arg-type]
    return code, out.getvalue()


class TestParseCategories(unittest.TestCase):
    """parse_categories flattening."""

    def test_none(self) -> None:
        self.assertEqual(parse_categories(None), frozenset())

    def test_repeated_and_csv(self) -> None:
        self.assertEqual(
            parse_categories(["jewelery, electronics", "men's clothing", " "]),
            frozenset({"jewelery", "electronics", "men's clothing"}),
        )


class TestBuildCriteria(unittest.TestCase):
    """build_criteria merges options into defaults."""

    def test_defaults_fill_missing_bounds(self) -> None:
        session = StorefrontSession(FakeCatalog())
        session.load_catalog()
        criteria = build_criteria(session, frozenset(), None, 50.0, 0)
        self.assertEqual(criteria.price_range, (0.0, 50.0))
        criteria = build_criteria(session, frozenset(), 10.0, None, 0)
        self.assertEqual(criteria.price_range, (10.0, 168.0))


class TestCliList(unittest.TestCase):
    """cli_list exit codes and output."""

    def test_json_output_all(self) -> None:
        code, out = _run_list()
        self.assertEqual(code, 0)
        self.assertEqual([p["id"] for p in json.loads(out)], [1, 2, 3, 4, 5])

    def test_search_and_category(self) -> None:
        code, out = _run_list(search="cotton", category_args=["men's clothing"])
        self.assertEqual(code, 0)
        self.assertEqual([p["id"] for p in json.loads(out)], [1, 5])

    def test_price_and_rating(self) -> None:
        code, out = _run_list(max_price=50.0, min_rating=4.0)
        self.assertEqual(code, 0)
        self.assertEqual([p["id"] for p in json.loads(out)], [1])

    def test_inverted_price_range_fails(self) -> None:
        code, _ = _run_list(min_price=100.0, max_price=10.0)
        self.assertEqual(code, 1)

    def test_fetch_error_exit_code(self) -> None:
        code, out = _run_list(source=BrokenCatalog())
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_table_output(self) -> None:
        code, out = _run_list(output_format="table")
        self.assertEqual(code, 0)
        self.assertIn("Gold Ring", out)


class TestCliShowProduct(unittest.TestCase):
    """cli_show_product exit codes."""

    def test_found(self) -> None:
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            code = cli_show_product(2, "json", source=FakeCatalog())
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out.getvalue())[0]["title"], "Gold Ring")

    def test_not_found(self) -> None:
        code = cli_show_product(404, "json", source=FakeCatalog())
        self.assertEqual(code, 1)

    def test_fetch_error(self) -> None:
        code = cli_show_product(1, "json", source=BrokenCatalog())
        self.assertEqual(code, 1)


if __name__ == "__main__":
    unittest.main()

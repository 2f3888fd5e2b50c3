# src/cli/runner.py

"""Headless catalog listing, reusing the storefront session."""

import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from src.models.filter_criteria import FilterCriteria
from src.models.product import Product
from src.services.catalog_client import (
    CatalogClient,
    CatalogError,
    CatalogSource,
    ProductNotFoundError,
)
from src.services.storefront import StorefrontSession

logger = logging.getLogger("storefront.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def parse_categories(category_args: list[str] | None) -> frozenset[str]:
    """Flatten repeated/comma-separated ``--category`` values."""
    if not category_args:
        return frozenset()
    names = (
        name.strip()
        for arg in category_args
        for name in arg.split(",")
    )
    return frozenset(name for name in names if name)


def build_criteria(
    session: StorefrontSession,
    categories: frozenset[str],
    min_price: float | None,
    max_price: float | None,
    min_rating: float,
) -> FilterCriteria:
    """Merge CLI options into the session's default criteria."""
    default = session.filters.default_criteria()
    low = default.price_range[0] if min_price is None else min_price
    high = default.price_range[1] if max_price is None else max_price
    return default.with_changes(
        category=categories,
        price_range=(low, high),
        min_rating=min_rating,
    )


def _print_table(products: list[Product], title: str) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(title=title, show_lines=True, title_style="bold cyan")
    table.add_column("ID", style="dim", width=4)
    table.add_column("Title", max_width=60)
    table.add_column("Category", style="magenta")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Rating", justify="center")

    for p in products:
        table.add_row(
            str(p.id),
            p.title[:60],
            p.category,
            f"${p.price:,.2f}",
            f"{p.rating.rate:.1f} ({p.rating.count})",
        )

    Console().print(table)


def _emit(products: list[Product], output_format: str, title: str) -> None:
    if output_format == "table":
        _print_table(products, title)
        return
    json.dump(
        [p.to_dict() for p in products],
        sys.stdout,
        ensure_ascii=False,
        indent=2,
    )
    sys.stdout.write("\n")


def cli_list(
    search: str,
    category_args: list[str] | None,
    min_price: float | None,
    max_price: float | None,
    min_rating: float,
    output_format: str,
    source: CatalogSource | None = None,
) -> int:
    """List the filtered catalog and return an exit code (0=ok, 1=fail)."""
    session = StorefrontSession(source or CatalogClient())
    if not session.load_catalog():
        _err.print(f"[red]Error: {session.error}[/red]")
        return 1

    try:
        criteria = build_criteria(
            session,
            parse_categories(category_args),
            min_price,
            max_price,
            min_rating,
        )
    except ValueError as exc:
        _err.print(f"[red]Invalid filter: {exc}[/red]")
        return 1

    session.update_filters(criteria)
    session.update_search(search)
    products = session.visible_products

    unknown = criteria.category - set(session.filters.categories)
    if unknown:
        _err.print(
            f"[yellow]Unknown categories: {', '.join(sorted(unknown))}[/yellow]"
        )
        _err.print(
            f"[dim]Available: {', '.join(session.filters.categories)}[/dim]"
        )

    _err.print(
        f"[green]✓ {len(products)} of {len(session.catalog)} products[/green]"
    )
    _emit(products, output_format, "Catalog")
    return 0


def cli_show_product(
    product_id: int,
    output_format: str,
    source: CatalogSource | None = None,
) -> int:
    """Print a single product; 1 when it is missing or the fetch fails."""
    session = StorefrontSession(source or CatalogClient())
    try:
        product = session.fetch_product(product_id)
    except ProductNotFoundError:
        _err.print(f"[yellow]Product {product_id} not found.[/yellow]")
        return 1
    except CatalogError as exc:
        logger.error("Product lookup failed: %s", exc, exc_info=True)
        _err.print(f"[red]Error: {exc}[/red]")
        return 1

    _emit([product], output_format, f"Product {product_id}")
    return 0

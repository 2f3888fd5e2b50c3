# main.py

"""Entry point for the storefront application (TUI or headless CLI)."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("storefront.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="storefront",
        description="Browse a product catalog, filter it and fill a cart.",
        epilog=f"Catalog endpoint: {Settings.PRODUCTS_URL}",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        default=False,
        dest="list_products",
        help="Print the filtered catalog instead of launching the TUI.",
    )
    parser.add_argument(
        "--product",
        type=int,
        default=None,
        dest="product_id",
        help="Print a single product by id.",
    )
    parser.add_argument(
        "-q",
        "--search",
        default="",
        help="Free-text search over title, description and category.",
    )
    parser.add_argument(
        "-c",
        "--category",
        action="append",
        default=None,
        help="Category to include (repeatable or comma-separated).",
    )
    parser.add_argument(
        "--min-price",
        type=float,
        default=None,
        dest="min_price",
        help="Lower price bound (default: 0).",
    )
    parser.add_argument(
        "--max-price",
        type=float,
        default=None,
        dest="max_price",
        help="Upper price bound (default: highest catalog price).",
    )
    parser.add_argument(
        "-r",
        "--min-rating",
        type=float,
        default=0.0,
        dest="min_rating",
        help="Minimum average rating, 0-5 (default: 0).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    return parser


def _run_tui() -> None:
    """Launch the interactive Textual TUI."""
    from src.ui.app import StorefrontApp

    try:
        app = StorefrontApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("storefront TUI shutting down")


def _run_list(args: argparse.Namespace) -> None:
    """Print the filtered catalog and exit."""
    from src.cli.runner import cli_list

    exit_code = cli_list(
        search=args.search,
        category_args=args.category,
        min_price=args.min_price,
        max_price=args.max_price,
        min_rating=args.min_rating,
        output_format=args.output_format,
    )
    sys.exit(exit_code)


def _run_show_product(args: argparse.Namespace) -> None:
    """Print one product and exit."""
    from src.cli.runner import cli_show_product

    exit_code = cli_show_product(args.product_id, args.output_format)
    sys.exit(exit_code)


def main() -> None:
    """Route to TUI (no args), listing or single-product output."""
    log_file = setup_logging()
    logger.info("storefront starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    if args.product_id is not None:
        _run_show_product(args)
    elif args.list_products:
        _run_list(args)
    else:
        _run_tui()


if __name__ == "__main__":
    main()

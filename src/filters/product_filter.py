# src/filters/product_filter.py

"""Catalog filtering by search text, category, price, rating and favorites."""

import logging
import math
from collections.abc import Collection, Sequence

from src.config.settings import Settings
from src.models.filter_criteria import FilterCriteria
from src.models.product import Product

logger = logging.getLogger("storefront.filters")


def normalize_query(query: str) -> str:
    """Trim and case-fold a raw search string."""
    return query.strip().casefold()


def matches_query(product: Product, needle: str) -> bool:
    """True when *needle* occurs in the title, description or category.

    *needle* must already be normalised.
    """
    return (
        needle in product.title.casefold()
        or needle in product.description.casefold()
        or needle in product.category.casefold()
    )


def filter_products(
    catalog: Sequence[Product],
    search_query: str,
    criteria: FilterCriteria,
    favorites: Collection[int],
) -> list[Product]:
    """Narrow *catalog* to the products visible under the current filters.

    Stages run in a fixed order, each narrowing the previous result:
    search text, category, price range (inclusive), minimum rating,
    favorites-only.  The result keeps the catalog's relative order and
    the function has no hidden state.
    """
    result = list(catalog)

    needle = normalize_query(search_query)
    if needle:
        result = [p for p in result if matches_query(p, needle)]

    if criteria.category:
        result = [p for p in result if p.category in criteria.category]

    low, high = criteria.price_range
    result = [p for p in result if low <= p.price <= high]

    result = [p for p in result if p.rating.rate >= criteria.min_rating]

    if criteria.is_favorite_only:
        result = [p for p in result if p.id in favorites]

    logger.debug(
        "Filter kept %d of %d products (query=%r)",
        len(result),
        len(catalog),
        needle,
    )
    return result


def available_categories(catalog: Sequence[Product]) -> list[str]:
    """Sorted unique categories present in *catalog*."""
    return sorted({p.category for p in catalog})


def max_catalog_price(catalog: Sequence[Product]) -> int:
    """Upper price bound for the slider: ``ceil(max(price))``.

    Falls back to ``Settings.DEFAULT_MAX_PRICE`` for an empty catalog.
    """
    if not catalog:
        return Settings.DEFAULT_MAX_PRICE
    return math.ceil(max(p.price for p in catalog))

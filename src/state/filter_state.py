# src/state/filter_state.py

"""Current filter criteria and search query for the catalog view."""

import logging
from collections.abc import Sequence

from src.config.settings import Settings
from src.filters.product_filter import (
    available_categories,
    max_catalog_price,
    normalize_query,
)
from src.models.filter_criteria import FilterCriteria
from src.models.product import Product

logger = logging.getLogger("storefront.filters")


class FilterState:
    """Owns the active ``FilterCriteria`` and the raw search query.

    Criteria are replaced wholesale by ``update_filters``; merging a
    single changed field is the caller's job (see
    ``FilterCriteria.with_changes``).
    """

    def __init__(self) -> None:
        self._max_price: int = Settings.DEFAULT_MAX_PRICE
        self._categories: list[str] = []
        self._criteria = FilterCriteria.default(self._max_price)
        self._search_query = ""

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def search_query(self) -> str:
        return self._search_query

    @property
    def normalized_query(self) -> str:
        return normalize_query(self._search_query)

    @property
    def max_price(self) -> int:
        return self._max_price

    @property
    def categories(self) -> list[str]:
        return list(self._categories)

    def default_criteria(self) -> FilterCriteria:
        return FilterCriteria.default(self._max_price)

    def update_filters(self, new_criteria: FilterCriteria) -> None:
        """Replace the whole criteria object."""
        self._criteria = new_criteria
        logger.debug("Filters updated: %s", new_criteria)

    def update_search(self, query: str) -> None:
        self._search_query = query

    def clear_all_filters(self) -> None:
        """Reset criteria to the defaults for the current catalog."""
        self._criteria = self.default_criteria()
        logger.info("Filters cleared (max price %d)", self._max_price)

    def has_active_filters(self) -> bool:
        """True when any criteria field differs from the default."""
        return self._criteria != self.default_criteria()

    def rebase_catalog(self, catalog: Sequence[Product]) -> None:
        """Derive bounds from a freshly loaded catalog and reset criteria.

        Selections made against the previous catalog are dropped rather
        than revalidated.  The search query is kept.
        """
        self._max_price = max_catalog_price(catalog)
        self._categories = available_categories(catalog)
        self._criteria = self.default_criteria()
        logger.info(
            "Filters rebased on %d products (%d categories, max price %d)",
            len(catalog),
            len(self._categories),
            self._max_price,
        )

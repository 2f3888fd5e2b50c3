# src/services/storefront.py

"""Storefront session: owns the state objects and exposes derived views."""

import asyncio
import logging
from enum import Enum

from src.filters.cart_sorter import (
    SortDirection,
    SortKey,
    search_cart,
    sort_cart,
)
from src.filters.product_filter import filter_products
from src.models.filter_criteria import FilterCriteria
from src.models.product import CartLineItem, Product
from src.services.catalog_client import (
    CatalogError,
    CatalogSource,
    ProductNotFoundError,
)
from src.state.cart_store import CartStore
from src.state.favorites import FavoritesSet
from src.state.filter_state import FilterState
from src.storage.view_cache import ViewMemo

logger = logging.getLogger("storefront.session")


class LoadStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class StorefrontSession:
    """Composition root for one storefront session.

    Holds a single ``CartStore``, ``FilterState`` and ``FavoritesSet``
    plus the loaded catalog.  Rendering code reads the derived views
    (``visible_products``, ``cart_view``, totals) and sends intents
    back through the methods below; the state objects themselves are
    also exposed for components that only need one capability.

    Catalog loads are token-guarded: only the most recent
    ``begin_load`` may complete or fail, so a slow earlier response
    cannot overwrite a newer catalog.
    """

    def __init__(self, source: CatalogSource) -> None:
        self.source = source
        self.cart = CartStore()
        self.filters = FilterState()
        self.favorites = FavoritesSet()

        self._catalog: tuple[Product, ...] = ()
        self._catalog_generation = 0
        self._status = LoadStatus.IDLE
        self._error: str | None = None
        self._latest_token = 0

        self._products_memo: ViewMemo[list[Product]] = ViewMemo("products")
        self._cart_memo: ViewMemo[list[CartLineItem]] = ViewMemo("cart")

    # ── Catalog lifecycle ────────────────────────────────

    @property
    def catalog(self) -> tuple[Product, ...]:
        return self._catalog

    @property
    def status(self) -> LoadStatus:
        return self._status

    @property
    def error(self) -> str | None:
        return self._error

    def begin_load(self) -> int:
        """Mark a catalog request as in flight and return its token."""
        self._latest_token += 1
        self._status = LoadStatus.LOADING
        logger.debug("Catalog load #%d started", self._latest_token)
        return self._latest_token

    def is_current(self, token: int) -> bool:
        return token == self._latest_token

    def complete_load(self, token: int, products: list[Product]) -> bool:
        """Install *products* as the catalog if *token* is still current.

        Returns False (and changes nothing) for a stale token.
        """
        if not self.is_current(token):
            logger.info(
                "Discarding stale catalog load #%d (latest #%d)",
                token,
                self._latest_token,
            )
            return False
        catalog = tuple(products)
        # Bounds first: if they cannot be derived, nothing is committed
        self.filters.rebase_catalog(catalog)
        self._catalog = catalog
        self._catalog_generation += 1
        self._status = LoadStatus.READY
        self._error = None
        logger.info("Catalog load #%d installed %d products", token, len(products))
        return True

    def fail_load(self, token: int, message: str) -> bool:
        """Record a failed load; no partial catalog is kept."""
        if not self.is_current(token):
            logger.info("Ignoring failure of stale catalog load #%d", token)
            return False
        self._catalog = ()
        self._catalog_generation += 1
        self._status = LoadStatus.ERROR
        self._error = message
        logger.error("Catalog load #%d failed: %s", token, message)
        return True

    def load_catalog(self) -> bool:
        """Fetch the catalog synchronously; True on success."""
        token = self.begin_load()
        try:
            products = self.source.fetch_products()
        except CatalogError as exc:
            self.fail_load(token, str(exc))
            return False
        return self.complete_load(token, products)

    async def load_catalog_async(self) -> bool:
        """Fetch the catalog in a worker thread; True on success."""
        token = self.begin_load()
        try:
            products = await asyncio.to_thread(self.source.fetch_products)
        except CatalogError as exc:
            self.fail_load(token, str(exc))
            return False
        return self.complete_load(token, products)

    def fetch_product(self, product_id: int) -> Product:
        """Single-product lookup for the product page.

        Raises ``ProductNotFoundError`` or ``CatalogFetchError``; neither
        touches cart, filter or favorites state.
        """
        try:
            return self.source.fetch_product(product_id)
        except ProductNotFoundError:
            logger.info("Product %d not found", product_id)
            raise

    # ── Derived views ────────────────────────────────────

    @property
    def visible_products(self) -> list[Product]:
        """Catalog narrowed by search, criteria and favorites (memoized)."""
        criteria = self.filters.criteria
        query = self.filters.normalized_query
        # favorites only matter to the result when favorites-only is on
        favorites = (
            self.favorites.snapshot() if criteria.is_favorite_only else None
        )
        key = (self._catalog_generation, query, criteria, favorites)
        return self._products_memo.get(
            key,
            lambda: filter_products(
                self._catalog, query, criteria, favorites or frozenset()
            ),
        )

    def cart_view(
        self,
        key: SortKey | str = SortKey.NAME,
        direction: SortDirection | str = SortDirection.ASC,
        query: str = "",
    ) -> list[CartLineItem]:
        """Cart line items filtered by title and sorted (memoized)."""
        sort_key = SortKey(key)
        sort_direction = SortDirection(direction)
        memo_key = (self.cart.version, sort_key, sort_direction, query)
        return self._cart_memo.get(
            memo_key,
            lambda: sort_cart(
                search_cart(self.cart.items, query), sort_key, sort_direction
            ),
        )

    @property
    def cart_total(self) -> float:
        return self.cart.get_cart_total()

    @property
    def cart_count(self) -> int:
        return self.cart.get_cart_item_count()

    def is_favorite(self, product_id: int) -> bool:
        return self.favorites.is_favorite(product_id)

    # ── Intents ──────────────────────────────────────────

    def add_to_cart(self, product: Product) -> None:
        self.cart.add_to_cart(product)

    def remove_from_cart(self, product_id: int) -> None:
        self.cart.remove_from_cart(product_id)

    def update_quantity(self, product_id: int, quantity: int) -> None:
        self.cart.update_quantity(product_id, quantity)

    def increment(self, product: Product) -> None:
        """Product-page "+": adds the product when it is not in the cart yet."""
        if self.cart.contains(product.id):
            self.cart.increment(product.id)
        else:
            self.cart.add_to_cart(product)

    def decrement(self, product_id: int) -> None:
        self.cart.decrement(product_id)

    def toggle_favorite(self, product_id: int) -> bool:
        return self.favorites.toggle_favorite(product_id)

    def update_filters(self, criteria: FilterCriteria) -> None:
        self.filters.update_filters(criteria)

    def update_search(self, query: str) -> None:
        self.filters.update_search(query)

    def clear_filters(self) -> None:
        self.filters.clear_all_filters()

# src/ui/app.py

"""Terminal UI for the storefront."""

import asyncio
import logging
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import (
    Button,
    Checkbox,
    DataTable,
    Footer,
    Header,
    Input,
    Select,
    Static,
)

from src.config.settings import Settings
from src.filters.cart_sorter import SortDirection, SortKey
from src.models.product import CartLineItem, Product
from src.services.catalog_client import (
    CatalogClient,
    CatalogError,
    CatalogSource,
    ProductNotFoundError,
)
from src.services.storefront import LoadStatus, StorefrontSession

logger = logging.getLogger("storefront.ui")

# Order cycled through by the "o" binding
CART_SORT_CYCLE: list[tuple[SortKey, SortDirection]] = [
    (SortKey.NAME, SortDirection.ASC),
    (SortKey.NAME, SortDirection.DESC),
    (SortKey.QUANTITY, SortDirection.ASC),
    (SortKey.QUANTITY, SortDirection.DESC),
    (SortKey.PRICE, SortDirection.ASC),
    (SortKey.PRICE, SortDirection.DESC),
]


def _rating_label(step: int) -> str:
    return "All Ratings" if step == 0 else f"{step}+ Stars"


class StorefrontApp(App[object]):
    """Terminal UI for the storefront."""

    CSS = """
    #search_bar, #filter_bar, #category_toggles { height: auto; }
    #search_input { width: 1fr; }
    .price_input { width: 16; }
    #products_table { height: 1fr; }
    #cart_table { height: 12; }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("a", "add_to_cart", "Add"),
        Binding("plus", "increment", "+1"),
        Binding("minus", "decrement", "-1"),
        Binding("x", "remove", "Remove"),
        Binding("f", "toggle_favorite", "Favorite"),
        Binding("c", "clear_filters", "Clear Filters"),
        Binding("o", "cycle_cart_sort", "Cart Sort"),
        Binding("r", "reload", "Reload"),
    ]

    def __init__(self, source: CatalogSource | None = None) -> None:
        super().__init__()
        self.settings = Settings()
        self.session = StorefrontSession(source or CatalogClient())
        self.product_rows: list[Product] = []
        self.cart_rows: list[CartLineItem] = []
        self.cart_sort_index = 0
        self._category_by_id: dict[str, str] = {}

    # ── Layout ───────────────────────────────────────────

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        rating_options = [
            (_rating_label(step), step) for step in self.settings.RATING_STEPS
        ]

        yield Header()
        yield Container(
            Static("🛍️ Storefront", id="title"),
            Horizontal(
                Input(placeholder="Search products...", id="search_input"),
                Button("Clear All", variant="warning", id="clear_btn"),
                id="search_bar",
            ),
            Horizontal(
                Input(
                    placeholder="Min price",
                    id="min_price_input",
                    classes="price_input",
                ),
                Input(
                    placeholder="Max price",
                    id="max_price_input",
                    classes="price_input",
                ),
                Select(
                    rating_options,
                    value=0,
                    allow_blank=False,
                    id="rating_select",
                ),
                Checkbox("Show Favorites Only", id="favorites_only"),
                id="filter_bar",
            ),
            Horizontal(id="category_toggles"),
            Static("Ready", id="status"),
            DataTable(
                id="products_table",
                zebra_stripes=True,
                cursor_type="row",
            ),
            Static("", id="product_detail"),
            Static("Cart is empty", id="cart_summary"),
            DataTable(
                id="cart_table",
                zebra_stripes=True,
                cursor_type="row",
            ),
            id="main_container",
        )
        yield Footer()

    def _products_table(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#products_table", DataTable),
        )

    def _cart_table(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#cart_table", DataTable),
        )

    async def on_mount(self) -> None:
        """Configure table columns and load the catalog."""
        self._products_table().add_columns(
            "♥", "Title", "Category", "Price", "Rating", "In Cart"
        )
        self._cart_table().add_columns("Title", "Price", "Qty", "Total")
        await self.reload_catalog()

    # ── Catalog ──────────────────────────────────────────

    async def reload_catalog(self) -> None:
        """Fetch the catalog and rebuild the filter controls."""
        status = self.query_one("#status", Static)
        status.update("Loading products…")
        await self.session.load_catalog_async()

        if self.session.status is LoadStatus.ERROR:
            status.update(f"❌ {self.session.error}")
            self.notify(str(self.session.error), severity="error")
        await self._rebuild_category_toggles()
        self._reset_filter_widgets()
        self.refresh_products()
        self.refresh_cart()

    async def _rebuild_category_toggles(self) -> None:
        container = self.query_one("#category_toggles", Horizontal)
        await container.remove_children()
        # Category names carry spaces and quotes, so ids are positional
        self._category_by_id = {
            f"cat_{index}": name
            for index, name in enumerate(self.session.filters.categories)
        }
        await container.mount(
            *[
                Checkbox(name, value=False, id=cat_id)
                for cat_id, name in self._category_by_id.items()
            ]
        )

    def _reset_filter_widgets(self) -> None:
        """Bring the filter controls back in line with default criteria."""
        for checkbox in self.query(Checkbox):
            with checkbox.prevent(Checkbox.Changed):
                checkbox.value = False
        for input_id in ("#min_price_input", "#max_price_input"):
            price_input = self.query_one(input_id, Input)
            with price_input.prevent(Input.Changed):
                price_input.value = ""
        rating = cast(Select[int], self.query_one("#rating_select", Select))
        with rating.prevent(Select.Changed):
            rating.value = 0

    # ── Rendering ────────────────────────────────────────

    def refresh_products(self) -> None:
        """Fill the product table from the session's filtered view."""
        table = self._products_table()
        table.clear()
        self.product_rows = self.session.visible_products
        for p in self.product_rows:
            in_cart = self.session.cart.get_item(p.id)
            table.add_row(
                Text("♥", style="bold red")
                if self.session.is_favorite(p.id)
                else "",
                p.title[:60],
                p.category,
                f"${p.price:,.2f}",
                f"⭐ {p.rating.rate:.1f} ({p.rating.count})",
                str(in_cart.quantity) if in_cart else "",
            )

        if self.session.status is not LoadStatus.READY:
            return
        status = self.query_one("#status", Static)
        query = self.session.filters.search_query.strip()
        if self.product_rows:
            status.update(
                f"{len(self.product_rows)} of {len(self.session.catalog)} products"
            )
        elif query:
            status.update(f'No products found matching "{query}"')
        else:
            status.update("No products match the selected filters")

    def refresh_cart(self) -> None:
        """Fill the cart table and summary line."""
        key, direction = CART_SORT_CYCLE[self.cart_sort_index]
        self.cart_rows = self.session.cart_view(
            key, direction, self.session.filters.search_query
        )
        table = self._cart_table()
        table.clear()
        for item in self.cart_rows:
            table.add_row(
                item.title[:50],
                f"${item.price:,.2f}",
                str(item.quantity),
                f"${item.line_total:,.2f}",
            )

        summary = self.query_one("#cart_summary", Static)
        distinct = self.session.cart.distinct_count
        if not distinct:
            summary.update("Cart is empty")
            return
        noun = "item" if distinct == 1 else "items"
        summary.update(
            f"🛒 {distinct} {noun} ({self.session.cart_count} units) | "
            f"Total ${self.session.cart_total:,.2f} | "
            f"sort: {key.value} {direction.value}"
        )

    # ── Filter events ────────────────────────────────────

    def on_input_changed(self, event: Input.Changed) -> None:
        """Apply search text and price bounds as they are typed."""
        if event.input.id == "search_input":
            self.session.update_search(event.value)
            self.refresh_products()
            self.refresh_cart()
        elif event.input.id in ("min_price_input", "max_price_input"):
            self._apply_price_inputs()

    def _apply_price_inputs(self) -> None:
        default_low, default_high = self.session.filters.default_criteria().price_range
        raw_low = self.query_one("#min_price_input", Input).value.strip()
        raw_high = self.query_one("#max_price_input", Input).value.strip()
        try:
            low = float(raw_low) if raw_low else default_low
            high = float(raw_high) if raw_high else default_high
            criteria = self.session.filters.criteria.with_changes(
                price_range=(low, high)
            )
        except ValueError:
            # Half-typed or inverted bounds leave the current filter alone
            return
        self.session.update_filters(criteria)
        self.refresh_products()

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "rating_select" and isinstance(event.value, int):
            self.session.update_filters(
                self.session.filters.criteria.with_changes(
                    min_rating=event.value
                )
            )
            self.refresh_products()

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        """Toggle favorites-only or a category."""
        checkbox_id = event.checkbox.id or ""
        criteria = self.session.filters.criteria
        if checkbox_id == "favorites_only":
            criteria = criteria.with_changes(is_favorite_only=event.value)
        elif checkbox_id in self._category_by_id:
            name = self._category_by_id[checkbox_id]
            if event.value != (name in criteria.category):
                criteria = criteria.toggle_category(name)
        else:
            return
        self.session.update_filters(criteria)
        self.refresh_products()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "clear_btn":
            self.action_clear_filters()

    # ── Product detail ───────────────────────────────────

    async def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        """Fetch and show the selected product's full record."""
        if event.data_table.id != "products_table":
            return
        if not 0 <= event.cursor_row < len(self.product_rows):
            return
        product_id = self.product_rows[event.cursor_row].id
        detail = self.query_one("#product_detail", Static)
        try:
            product = await asyncio.to_thread(
                self.session.fetch_product, product_id
            )
        except ProductNotFoundError:
            detail.update("")
            self.notify("Product not found", severity="warning")
            return
        except CatalogError as exc:
            logger.error("Product lookup failed: %s", exc, exc_info=True)
            self.notify(f"Error: {exc}", severity="error")
            return
        # Text.assemble keeps brackets in titles from parsing as markup
        detail.update(
            Text.assemble(
                (product.title, "bold"),
                f" ({product.category})  ${product.price:,.2f}  "
                f"⭐ {product.rating.rate} ({product.rating.count} reviews)\n",
                product.description,
            )
        )

    # ── Actions ──────────────────────────────────────────

    def _selected_product(self) -> Product | None:
        row = self._products_table().cursor_row
        if 0 <= row < len(self.product_rows):
            return self.product_rows[row]
        return None

    def _selected_cart_id(self) -> int | None:
        """Cart row under the cursor when the cart has focus, else the product."""
        if self.focused is self._cart_table():
            row = self._cart_table().cursor_row
            if 0 <= row < len(self.cart_rows):
                return self.cart_rows[row].id
            return None
        product = self._selected_product()
        return product.id if product else None

    def _after_cart_change(self) -> None:
        self.refresh_cart()
        self.refresh_products()

    def action_add_to_cart(self) -> None:
        product = self._selected_product()
        if product is None:
            return
        self.session.add_to_cart(product)
        self._after_cart_change()

    def action_increment(self) -> None:
        if self.focused is self._cart_table():
            product_id = self._selected_cart_id()
            if product_id is not None:
                self.session.cart.increment(product_id)
        else:
            product = self._selected_product()
            if product is not None:
                self.session.increment(product)
        self._after_cart_change()

    def action_decrement(self) -> None:
        product_id = self._selected_cart_id()
        if product_id is not None:
            self.session.decrement(product_id)
        self._after_cart_change()

    def action_remove(self) -> None:
        product_id = self._selected_cart_id()
        if product_id is not None:
            self.session.remove_from_cart(product_id)
        self._after_cart_change()

    def action_toggle_favorite(self) -> None:
        product = self._selected_product()
        if product is None:
            return
        now_favorite = self.session.toggle_favorite(product.id)
        self.notify(
            "Added to favorites" if now_favorite else "Removed from favorites"
        )
        self.refresh_products()

    def action_clear_filters(self) -> None:
        if not self.session.filters.has_active_filters():
            return
        self.session.clear_filters()
        self._reset_filter_widgets()
        self.refresh_products()

    def action_cycle_cart_sort(self) -> None:
        self.cart_sort_index = (self.cart_sort_index + 1) % len(CART_SORT_CYCLE)
        self.refresh_cart()

    async def action_reload(self) -> None:
        await self.reload_catalog()

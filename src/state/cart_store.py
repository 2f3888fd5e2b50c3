# src/state/cart_store.py

"""Session shopping cart with quantity semantics."""

import logging

from src.models.product import CartLineItem, Product

logger = logging.getLogger("storefront.cart")


class CartStore:
    """Owns the ordered list of cart line items.

    Every operation is total: an id that is not in the cart turns
    ``update_quantity``, ``increment``, ``decrement`` and
    ``remove_from_cart`` into no-ops that leave the cart (and its
    ``version``) untouched.  Nothing here raises.

    Invariants after any sequence of calls:

    * at most one line item per product id;
    * every quantity is >= 1 (driving a quantity to 0 or below removes
      the line item);
    * line items keep the order in which they were first added.
    """

    def __init__(self) -> None:
        self._items: list[CartLineItem] = []
        self._version = 0

    # ── Queries ──────────────────────────────────────────

    @property
    def items(self) -> tuple[CartLineItem, ...]:
        """Snapshot of the line items in insertion order."""
        return tuple(self._items)

    @property
    def version(self) -> int:
        """Counter bumped on every mutation that changed the cart."""
        return self._version

    @property
    def distinct_count(self) -> int:
        """Number of line items (not units)."""
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def contains(self, product_id: int) -> bool:
        return self._index_of(product_id) is not None

    def get_item(self, product_id: int) -> CartLineItem | None:
        index = self._index_of(product_id)
        return None if index is None else self._items[index]

    def get_cart_item_count(self) -> int:
        """Total units across all line items."""
        return sum(item.quantity for item in self._items)

    def get_cart_total(self) -> float:
        """Unrounded sum of ``price * quantity``; display code rounds."""
        return sum((item.line_total for item in self._items), 0.0)

    # ── Mutations ────────────────────────────────────────

    def add_to_cart(self, product: Product) -> None:
        """Append *product* with quantity 1, unless it is already present.

        Adding never increments; use ``increment`` for that.
        """
        if self._index_of(product.id) is not None:
            logger.debug("Product %d already in cart, add ignored", product.id)
            return
        self._items.append(CartLineItem(product=product, quantity=1))
        self._touch()
        logger.info("Added product %d to cart", product.id)

    def update_quantity(self, product_id: int, new_quantity: int) -> None:
        """Set the quantity of *product_id* to exactly *new_quantity*.

        A quantity of 0 or less removes the line item.  Absent ids are
        ignored.
        """
        index = self._index_of(product_id)
        if index is None:
            logger.debug(
                "update_quantity ignored, product %d not in cart",
                product_id,
            )
            return
        if new_quantity <= 0:
            del self._items[index]
            self._touch()
            logger.info(
                "Removed product %d (quantity set to %d)",
                product_id,
                new_quantity,
            )
            return

        current = self._items[index]
        if current.quantity == new_quantity:
            return
        self._items[index] = CartLineItem(
            product=current.product, quantity=new_quantity
        )
        self._touch()
        logger.debug(
            "Product %d quantity %d -> %d",
            product_id,
            current.quantity,
            new_quantity,
        )

    def increment(self, product_id: int) -> None:
        """Raise the quantity of an existing line item by one."""
        item = self.get_item(product_id)
        if item is not None:
            self.update_quantity(product_id, item.quantity + 1)

    def decrement(self, product_id: int) -> None:
        """Lower the quantity by one; the item goes away at zero."""
        item = self.get_item(product_id)
        if item is not None:
            self.update_quantity(product_id, item.quantity - 1)

    def remove_from_cart(self, product_id: int) -> None:
        """Drop the line item for *product_id* if there is one."""
        index = self._index_of(product_id)
        if index is None:
            return
        del self._items[index]
        self._touch()
        logger.info("Removed product %d from cart", product_id)

    # ── Internals ────────────────────────────────────────

    def _index_of(self, product_id: int) -> int | None:
        for index, item in enumerate(self._items):
            if item.id == product_id:
                return index
        return None

    def _touch(self) -> None:
        self._version += 1

# src/filters/cart_sorter.py

"""Ordering and title search for the cart view."""

from collections.abc import Sequence
from enum import Enum

from src.filters.product_filter import normalize_query
from src.models.product import CartLineItem


class SortKey(str, Enum):
    NAME = "name"
    QUANTITY = "quantity"
    PRICE = "price"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


def _key_func(key: SortKey):
    if key is SortKey.NAME:
        return lambda item: item.title.casefold()
    if key is SortKey.QUANTITY:
        return lambda item: item.quantity
    return lambda item: item.price


def sort_cart(
    items: Sequence[CartLineItem],
    key: SortKey | str = SortKey.NAME,
    direction: SortDirection | str = SortDirection.ASC,
) -> list[CartLineItem]:
    """Return a new list of *items* ordered by *key* and *direction*.

    Equal keys keep their input order in both directions.  String
    values are parsed with ``SortKey`` / ``SortDirection`` and raise
    ``ValueError`` when unknown.
    """
    sort_key = SortKey(key)
    sort_direction = SortDirection(direction)
    # sorted(reverse=True) keeps ties in input order
    return sorted(
        items,
        key=_key_func(sort_key),
        reverse=sort_direction is SortDirection.DESC,
    )


def search_cart(
    items: Sequence[CartLineItem], query: str
) -> list[CartLineItem]:
    """Keep line items whose title contains *query*, case-insensitively."""
    needle = normalize_query(query)
    if not needle:
        return list(items)
    return [item for item in items if needle in item.title.casefold()]

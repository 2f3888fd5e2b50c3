# src/models/product.py

"""Catalog product records and their JSON decoding."""

import math
from dataclasses import dataclass, field
from typing import Any


class InvalidProductError(ValueError):
    """Raised when a catalog record cannot be turned into a Product."""


@dataclass(frozen=True)
class Rating:
    """Aggregate review score attached to a product."""

    rate: float = 0.0
    count: int = 0


@dataclass(frozen=True)
class Product:
    """A single immutable catalog entry."""

    id: int
    title: str
    price: float
    description: str = ""
    category: str = ""
    image: str = ""
    rating: Rating = field(default_factory=Rating)

    @classmethod
    def from_dict(cls, payload: Any) -> "Product":
        """Build a Product from one decoded JSON record.

        ``id``, ``title`` and ``price`` are required; the rest default
        to empty values.  A missing or partial ``rating`` counts as 0.
        """
        if not isinstance(payload, dict):
            raise InvalidProductError(
                f"Expected an object, got {type(payload).__name__}"
            )
        missing = [k for k in ("id", "title", "price") if k not in payload]
        if missing:
            raise InvalidProductError(
                f"Product record missing {', '.join(missing)}"
            )

        try:
            product_id = int(payload["id"])
            price = float(payload["price"])
        except (OverflowError, TypeError, ValueError) as exc:
            raise InvalidProductError(
                f"Malformed id/price in record {payload.get('id')!r}"
            ) from exc
        if not math.isfinite(price) or price < 0:
            raise InvalidProductError(
                f"Price for product {product_id} must be finite and "
                f"non-negative, got {price}"
            )

        raw_rating = payload.get("rating") or {}
        try:
            rating = Rating(
                rate=float(raw_rating.get("rate") or 0.0),
                count=int(raw_rating.get("count") or 0),
            )
        except (AttributeError, OverflowError, TypeError, ValueError) as exc:
            raise InvalidProductError(
                f"Malformed rating for product {product_id}"
            ) from exc
        if not math.isfinite(rating.rate):
            raise InvalidProductError(
                f"Non-finite rating for product {product_id}"
            )

        return cls(
            id=product_id,
            title=str(payload["title"]),
            price=price,
            description=str(payload.get("description") or ""),
            category=str(payload.get("category") or ""),
            image=str(payload.get("image") or ""),
            rating=rating,
        )

    def to_dict(self) -> dict[str, object]:
        """Serialise back to the catalog's JSON shape."""
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "description": self.description,
            "category": self.category,
            "image": self.image,
            "rating": {
                "rate": self.rating.rate,
                "count": self.rating.count,
            },
        }


@dataclass(frozen=True)
class CartLineItem:
    """One product's entry in the cart."""

    product: Product
    quantity: int = 1

    @property
    def id(self) -> int:
        return self.product.id

    @property
    def title(self) -> str:
        return self.product.title

    @property
    def price(self) -> float:
        return self.product.price

    @property
    def line_total(self) -> float:
        """Unrounded ``price * quantity``."""
        return self.product.price * self.quantity

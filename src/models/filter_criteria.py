# src/models/filter_criteria.py

"""Filter criteria value object for the catalog view."""

from dataclasses import dataclass, field, replace
from typing import Any

from src.config.settings import Settings


@dataclass(frozen=True)
class FilterCriteria:
    """Category, price, rating and favorites settings for the catalog.

    Instances are immutable and hashable so they can key the derived
    view memo directly.  An empty ``category`` set means no category
    restriction.
    """

    category: frozenset[str] = field(default_factory=frozenset)
    price_range: tuple[float, float] = (0.0, float(Settings.DEFAULT_MAX_PRICE))
    min_rating: float = 0.0
    is_favorite_only: bool = False

    def __post_init__(self) -> None:
        # Accept any iterable of names / any 2-sequence from callers
        object.__setattr__(self, "category", frozenset(self.category))
        low, high = self.price_range
        object.__setattr__(self, "price_range", (float(low), float(high)))

        if low < 0 or high < 0:
            raise ValueError(f"Price bounds must be non-negative: {self.price_range}")
        if low > high:
            raise ValueError(f"Price range min exceeds max: {self.price_range}")
        if not 0 <= self.min_rating <= 5:
            raise ValueError(f"min_rating must be within 0-5: {self.min_rating}")

    @classmethod
    def default(cls, max_price: float) -> "FilterCriteria":
        """Criteria that restrict nothing for a catalog capped at *max_price*."""
        return cls(price_range=(0.0, max_price))

    def with_changes(self, **changes: Any) -> "FilterCriteria":
        """Return a merged copy; callers pass the result to ``update_filters``."""
        return replace(self, **changes)

    def toggle_category(self, name: str) -> "FilterCriteria":
        """Return a copy with *name* added to or removed from the category set."""
        if name in self.category:
            return replace(self, category=self.category - {name})
        return replace(self, category=self.category | {name})

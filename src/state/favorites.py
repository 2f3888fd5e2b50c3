# src/state/favorites.py

"""User-marked favorite products."""

import logging

logger = logging.getLogger("storefront.favorites")


class FavoritesSet:
    """Set of favorite product ids; toggling is the only mutation.

    Two toggles of the same id in a row restore the original set.
    """

    def __init__(self) -> None:
        self._ids: set[int] = set()
        self._version = 0

    @property
    def version(self) -> int:
        return self._version

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._ids

    def is_favorite(self, product_id: int) -> bool:
        return product_id in self._ids

    def snapshot(self) -> frozenset[int]:
        """Immutable copy, safe to hand to the filter pipeline."""
        return frozenset(self._ids)

    def toggle_favorite(self, product_id: int) -> bool:
        """Flip membership of *product_id*; returns the new membership."""
        if product_id in self._ids:
            self._ids.discard(product_id)
            now_favorite = False
        else:
            self._ids.add(product_id)
            now_favorite = True
        self._version += 1
        logger.debug(
            "Product %d favorite=%s (%d favorites)",
            product_id,
            now_favorite,
            len(self._ids),
        )
        return now_favorite

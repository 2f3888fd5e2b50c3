# src/storage/view_cache.py

"""Single-slot memo for derived views keyed on their inputs."""

import logging
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Generic, TypeVar

logger = logging.getLogger("storefront.cache")

T = TypeVar("T")


@dataclass
class _Slot(Generic[T]):
    """The last computed value and the key it was computed for."""

    key: Hashable
    value: T


class ViewMemo(Generic[T]):
    """Remember the last result of a pure view function.

    The caller supplies a hashable key built from every input of the
    view (catalog identity, criteria, favorites snapshot, state version
    counters ...).  While the key is unchanged, ``get`` returns the
    previously computed object without calling *compute*; any change of
    key replaces the slot.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._slot: _Slot[T] | None = None
        self.hits = 0
        self.misses = 0

    def get(self, key: Hashable, compute: Callable[[], T]) -> T:
        if self._slot is not None and self._slot.key == key:
            self.hits += 1
            return self._slot.value

        self.misses += 1
        value = compute()
        self._slot = _Slot(key=key, value=value)
        logger.debug("Recomputed view '%s' (miss #%d)", self.name, self.misses)
        return value

    def clear(self) -> None:
        """Forget the cached value."""
        self._slot = None

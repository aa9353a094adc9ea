"""Process-wide item store.

``get_item_store()`` is the only way to reach the shared instance; it is
created on first access and reused afterwards.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any


class ItemStore:
    def __init__(self) -> None:
        self._items: list[Any] = []

    def add_item(self, item: Any) -> None:
        self._items.append(item)

    def get_items(self) -> list[Any]:
        """Return a snapshot of stored items in insertion order."""
        return list(self._items)


@lru_cache(maxsize=1)
def get_item_store() -> ItemStore:
    """Return the shared store, creating it on first use."""
    return ItemStore()


def reset_item_store() -> None:
    """Drop the shared instance so the next access starts empty."""
    get_item_store.cache_clear()


__all__ = ["ItemStore", "get_item_store", "reset_item_store"]

"""Key → constructor registry.

Every pluggable piece of patternkit (UI families, computer builders, payment
processors, shapes, renderers, character factories) is looked up through a
``Registry``. Modules register their concrete types at import time; callers
resolve a runtime key into a fresh instance. Adding a new entry never
requires touching the lookup code.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar

from patternkit.errors import UnknownKey
from patternkit.logging_utils import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class Registry(Generic[T]):
    """Named table mapping string keys to constructors of ``T``."""

    def __init__(self, name: str, missing: type[UnknownKey] = UnknownKey) -> None:
        self.name = name
        self._missing = missing
        self._entries: dict[str, Callable[..., T]] = {}

    def register(self, key: str, ctor: Callable[..., T]) -> None:
        """Register ``ctor`` under ``key``, replacing any previous entry."""
        if key in self._entries:
            logger.warning("Overriding existing %s registration: %s", self.name, key)
        self._entries[key] = ctor
        logger.debug("Registered %s: %s -> %s", self.name, key, getattr(ctor, "__name__", ctor))

    def unregister(self, key: str) -> None:
        if key not in self._entries:
            raise self._missing(self.name, key, self._entries)
        del self._entries[key]

    def get(self, key: str) -> Callable[..., T] | None:
        return self._entries.get(key)

    def resolve(self, key: str, *args: Any, **kwargs: Any) -> T:
        """Instantiate the constructor registered under ``key``.

        Raises:
            UnknownKey: (or the registry's ``missing`` subclass) if nothing
                is registered for ``key``.
        """
        ctor = self._entries.get(key)
        if ctor is None:
            logger.debug("No %s registered for %r", self.name, key)
            raise self._missing(self.name, key, self._entries)
        return ctor(*args, **kwargs)

    def keys(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["Registry"]

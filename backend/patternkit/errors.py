"""Exceptions raised by registries, contracts and builders."""

from __future__ import annotations

from typing import Iterable


class PatternKitError(Exception):
    """Base class for every error raised by patternkit."""


class UnknownKey(PatternKitError, LookupError):
    """Raised when a registry has no entry for the requested key.

    Attributes:
        kind: Name of the registry that was queried (e.g. ``builder``).
        key: The key that was not found.
        available: Keys that were registered at lookup time.
    """

    def __init__(self, kind: str, key: str, available: Iterable[str] = ()) -> None:
        self.kind = kind
        self.key = key
        self.available = sorted(available)
        super().__init__(
            f"No {kind} registered for key '{key}'. Available: {self.available}"
        )


class UnknownFamily(UnknownKey):
    """Raised when a family key has no registered factory."""


class UnsupportedOperation(PatternKitError):
    """Raised when an operation is not declared by a contract or not implemented by a variant."""

    def __init__(self, contract: str, operation: str, reason: str | None = None) -> None:
        self.contract = contract
        self.operation = operation
        msg = f"{contract}.{operation}: operation not supported"
        if reason:
            msg = f"{contract}.{operation}: {reason}"
        super().__init__(msg)


__all__ = [
    "PatternKitError",
    "UnknownKey",
    "UnknownFamily",
    "UnsupportedOperation",
]

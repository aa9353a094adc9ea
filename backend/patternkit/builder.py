"""Step-wise builders and the director that drives them.

Contracts:
- A builder exposes ``steps`` (ordered step method names) and a mutable
  ``product`` that its step methods populate.
- Base-class steps are no-ops, so a builder that skips a step leaves the
  matching product field at its default.
- ``Director.construct`` runs its fixed sequence on any builder and returns
  the builder's product. Only a directed session reaches ``COMPLETE``;
  steps run by hand leave it ``PARTIAL``.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Generic, Sequence, TypeVar

from patternkit.errors import UnsupportedOperation
from patternkit.logging_utils import get_logger

P = TypeVar("P")

logger = get_logger(__name__)


class BuildState(str, Enum):
    """Progress of a single construction session."""

    EMPTY = "empty"
    PARTIAL = "partial"
    COMPLETE = "complete"


class StepBuilder(ABC, Generic[P]):
    steps: tuple[str, ...] = ()

    def __init__(self) -> None:
        self.product: P = self.new_product()
        self.completed: list[str] = []
        self.directed = False

    @abstractmethod
    def new_product(self) -> P: ...

    def run_step(self, step: str) -> None:
        """Invoke ``step`` and record it. Running a step again overwrites its field."""
        method = getattr(self, step, None)
        if not callable(method):
            raise UnsupportedOperation(type(self).__name__, step, "builder has no such step")
        method()
        self.completed.append(step)

    @property
    def state(self) -> BuildState:
        if not self.completed:
            return BuildState.EMPTY
        if self.directed and set(self.steps) <= set(self.completed):
            return BuildState.COMPLETE
        return BuildState.PARTIAL

    def mark_directed(self) -> None:
        """Called by a Director once it has run its whole sequence."""
        self.directed = True

    def get_product(self) -> P:
        # No completeness guard: a partially built product is returned as-is.
        return self.product


class Director:
    """Runs a fixed step sequence on whatever builder it is given."""

    def __init__(self, sequence: Sequence[str]) -> None:
        self.sequence: tuple[str, ...] = tuple(sequence)

    def construct(self, builder: StepBuilder[Any]) -> Any:
        for step in self.sequence:
            builder.run_step(step)
        builder.mark_directed()
        logger.debug("%s completed %d steps", type(builder).__name__, len(self.sequence))
        return builder.get_product()


__all__ = ["BuildState", "StepBuilder", "Director"]

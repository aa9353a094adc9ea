from __future__ import annotations

from typing import Any

from patternkit.builder import StepBuilder
from patternkit.registry import Registry

BUILDERS: Registry[StepBuilder[Any]] = Registry("builder")


def register(builder_cls: type[StepBuilder[Any]]) -> None:
    BUILDERS.register(builder_cls.kind, builder_cls)  # type: ignore[attr-defined]


def get(kind: str) -> type[StepBuilder[Any]] | None:
    return BUILDERS.get(kind)  # type: ignore[return-value]

from __future__ import annotations

from typing import Any

from patternkit.builders import BUILDERS, get as get_builder  # noqa: F401
# Import known builders and families to populate registries
from patternkit.builders import computer  # noqa: F401
from patternkit.builders.computer import COMPUTER_DIRECTOR, Computer
from patternkit.contracts import get_contract
from patternkit.families import FAMILIES, Product, assemble
from patternkit.families import ui  # noqa: F401


def resolve(key: str) -> Any:
    """Resolve ``key`` to a fresh family factory or builder.

    Family keys are checked first; a key registered in neither table fails
    with the builder registry's ``UnknownKey``.
    """
    if key in FAMILIES:
        return FAMILIES.resolve(key)
    return BUILDERS.resolve(key)


def create_family(key: str) -> Product:
    factory = FAMILIES.resolve(key)
    return assemble(factory)


def invoke(product: Product, contract_id: str, operation: str, *args: Any, **kwargs: Any) -> Any:
    variant = product.variant(contract_id)
    return get_contract(contract_id).invoke(variant, operation, *args, **kwargs)


def build_computer(kind: str) -> Computer:
    builder = BUILDERS.resolve(kind)
    return COMPUTER_DIRECTOR.construct(builder)


__all__ = ["resolve", "create_family", "invoke", "build_computer"]

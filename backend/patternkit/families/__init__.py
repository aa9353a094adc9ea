"""Family factories.

A family factory produces one variant per contract, all tagged with the same
family key. Factories register themselves in ``FAMILIES`` at import time;
``patternkit.catalog`` imports the known family modules to populate it.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Mapping, Protocol

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from patternkit.contracts import Contract
from patternkit.errors import UnknownFamily, UnknownKey, UnsupportedOperation
from patternkit.registry import Registry


class FamilyFactory(Protocol):
    family: str
    contracts: tuple[Contract, ...]
    def creators(self) -> dict[str, Callable[[], Any]]: ...  # ContractId -> creation method


class Product(BaseModel):
    """One coherent set of variants drawn from a single family."""

    model_config = ConfigDict(frozen=True)

    family: str
    variants: Mapping[str, Any]

    @field_validator("variants", mode="after")
    @classmethod
    def _read_only(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(v))

    @model_validator(mode="after")
    def _single_family(self) -> "Product":
        mixed = {
            cid: getattr(v, "family", None)
            for cid, v in self.variants.items()
            if getattr(v, "family", None) != self.family
        }
        if mixed:
            raise ValueError(f"Product for family '{self.family}' contains foreign variants: {mixed}")
        return self

    def variant(self, contract_id: str) -> Any:
        try:
            return self.variants[contract_id]
        except KeyError:
            raise UnknownKey("contract", contract_id, self.variants) from None

    def __getitem__(self, contract_id: str) -> Any:
        return self.variant(contract_id)

    def contract_ids(self) -> list[str]:
        return list(self.variants)


FAMILIES: Registry[FamilyFactory] = Registry("family", missing=UnknownFamily)


def register(factory_cls: Callable[[], FamilyFactory]) -> Callable[[], FamilyFactory]:
    """Register a factory class under its ``family`` key. Usable as a decorator."""
    FAMILIES.register(factory_cls.family, factory_cls)  # type: ignore[attr-defined]
    return factory_cls


def assemble(factory: FamilyFactory) -> Product:
    """Create one variant per declared contract, in declaration order."""
    creators = factory.creators()
    variants: dict[str, Any] = {}
    for contract in factory.contracts:
        create = creators.get(contract.id)
        if create is None:
            raise UnsupportedOperation(contract.id, "create", f"{type(factory).__name__} has no creator")
        variant = create()
        missing = contract.missing_operations(variant)
        if missing:
            raise UnsupportedOperation(
                contract.id, missing[0], f"not implemented by {type(variant).__name__}"
            )
        variants[contract.id] = variant
    return Product(family=factory.family, variants=variants)


__all__ = ["FamilyFactory", "Product", "FAMILIES", "register", "assemble"]

"""patternkit: keyed registries of interchangeable component families.

This package provides:
- Contracts and structural conformance checks (contracts.py)
- Registries mapping runtime keys to constructors (registry.py)
- Family factories producing single-family products (families/)
- Step-wise builders and a fixed-sequence director (builder.py, builders/)
- Supporting examples: characters, shapes, payments, a shared item store
"""

from patternkit.builder import BuildState, Director, StepBuilder
from patternkit.catalog import build_computer, create_family, invoke, resolve
from patternkit.contracts import Contract, declare, get_contract
from patternkit.errors import PatternKitError, UnknownFamily, UnknownKey, UnsupportedOperation
from patternkit.families import FAMILIES, Product
from patternkit.registry import Registry

__all__ = [
    # Core
    "Contract",
    "declare",
    "get_contract",
    "Registry",
    "Product",
    "FAMILIES",
    # Construction
    "BuildState",
    "StepBuilder",
    "Director",
    # Call surface
    "create_family",
    "invoke",
    "resolve",
    "build_computer",
    # Errors
    "PatternKitError",
    "UnknownKey",
    "UnknownFamily",
    "UnsupportedOperation",
]

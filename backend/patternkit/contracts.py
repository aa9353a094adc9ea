"""Component contracts.

A contract names a capability and the operations every implementation of it
must expose. Conformance is structural: a variant satisfies a contract when
each declared operation is a callable attribute, whatever its base class.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from patternkit.errors import UnknownKey, UnsupportedOperation
from patternkit.logging_utils import get_logger

logger = get_logger(__name__)


class Contract(BaseModel):
  """Immutable declaration of a capability and its operation set."""

  model_config = ConfigDict(frozen=True)

  id: str = Field(..., min_length=1, description="ContractId, e.g. 'Button'.")
  operations: frozenset[str] = Field(..., description="Operation names every variant must implement.")

  @field_validator("operations")
  @classmethod
  def _validate_operations(cls, v: frozenset[str]) -> frozenset[str]:
    if not v:
      raise ValueError("a contract must declare at least one operation")
    return v

  def supports(self, operation: str) -> bool:
    return operation in self.operations

  def missing_operations(self, variant: Any) -> list[str]:
    return sorted(op for op in self.operations if not callable(getattr(variant, op, None)))

  def conforms(self, variant: Any) -> bool:
    return not self.missing_operations(variant)

  def invoke(self, variant: Any, operation: str, *args: Any, **kwargs: Any) -> Any:
    """Call ``operation`` on ``variant`` after checking it against this contract."""
    if operation not in self.operations:
      raise UnsupportedOperation(self.id, operation, "not declared by contract")
    method = getattr(variant, operation, None)
    if not callable(method):
      raise UnsupportedOperation(self.id, operation, f"not implemented by {type(variant).__name__}")
    return method(*args, **kwargs)


CONTRACTS: dict[str, Contract] = {}


def declare(contract_id: str, *operations: str) -> Contract:
  """Create a contract and record it in the process-wide table."""
  contract = Contract(id=contract_id, operations=frozenset(operations))
  if contract.id in CONTRACTS:
    logger.warning("Overriding existing contract declaration: %s", contract.id)
  CONTRACTS[contract.id] = contract
  logger.debug("Declared contract %s: %s", contract.id, sorted(contract.operations))
  return contract


def get_contract(contract_id: str) -> Contract:
  contract = CONTRACTS.get(contract_id)
  if contract is None:
    raise UnknownKey("contract", contract_id, CONTRACTS)
  return contract


__all__ = ["Contract", "CONTRACTS", "declare", "get_contract"]

"""Orders paid through an interchangeable payment service."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from patternkit.contracts import declare
from patternkit.registry import Registry

PAYMENT = declare("PaymentService", "process_payment")


def format_amount(amount: float) -> str:
    # Whole amounts print without a trailing ".0"; everything else keeps full precision.
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


class PaymentProcessorA:
    def process_payment(self, amount: float) -> str:
        return f"Processing payment using Processor A: ${format_amount(amount)}"


class PaymentProcessorB:
    def process_payment(self, amount: float) -> str:
        return f"Processing payment using Processor B: ${format_amount(amount)}"


PAYMENT_PROCESSORS: Registry[Any] = Registry("payment processor")
PAYMENT_PROCESSORS.register("ProcessorA", PaymentProcessorA)
PAYMENT_PROCESSORS.register("ProcessorB", PaymentProcessorB)


class Receipt(BaseModel):
    amount: float = Field(..., gt=0.0)
    payment: str = Field(..., description="Message returned by the payment service.")
    status: str = "Order has been checked out."


class Order:
    """Knows its amount; leaves the charging to whichever service it was given."""

    def __init__(self, amount: float, payment_service: Any) -> None:
        if amount <= 0:
            raise ValueError(f"Order amount must be positive, got {amount}")
        self.amount = amount
        self.payment_service = payment_service

    def checkout(self) -> Receipt:
        message = PAYMENT.invoke(self.payment_service, "process_payment", self.amount)
        return Receipt(amount=self.amount, payment=message)


__all__ = [
    "PAYMENT",
    "format_amount",
    "PaymentProcessorA",
    "PaymentProcessorB",
    "PAYMENT_PROCESSORS",
    "Receipt",
    "Order",
]

"""Shopping cart whose total is computed from the items' own prices."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from patternkit.payments import Order, Receipt


class CartItem(BaseModel):
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0.0)

    def get_price(self) -> float:
        return self.price


class ShoppingCart:
    def __init__(self) -> None:
        self.items: list[CartItem] = []

    def add_item(self, item: CartItem) -> None:
        self.items.append(item)

    def calculate_total(self) -> float:
        return sum(item.get_price() for item in self.items)

    def checkout(self, payment_service: Any) -> Receipt:
        """Charge the cart total through ``payment_service``.

        Raises:
            ValueError: if the cart total is not positive (e.g. an empty cart).
        """
        return Order(self.calculate_total(), payment_service).checkout()


__all__ = ["CartItem", "ShoppingCart"]

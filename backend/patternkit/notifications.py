"""Order processing that talks to whichever notifier it is handed."""

from __future__ import annotations

from typing import Any

from patternkit.contracts import declare
from patternkit.registry import Registry

NOTIFIER = declare("Notifier", "send")


class EmailService:
    def send(self, to: str, message: str) -> str:
        return f"Email sent to {to}: {message}"


class SmsService:
    def send(self, to: str, message: str) -> str:
        return f"SMS sent to {to}: {message}"


NOTIFIERS: Registry[Any] = Registry("notifier")
NOTIFIERS.register("Email", EmailService)
NOTIFIERS.register("Sms", SmsService)


class OrderProcessor:
    def __init__(self, notifier: Any) -> None:
        self.notifier = notifier

    def process_order(self, customer: str) -> str:
        return NOTIFIER.invoke(self.notifier, "send", customer, "Your order has been processed.")


__all__ = ["NOTIFIER", "EmailService", "SmsService", "NOTIFIERS", "OrderProcessor"]

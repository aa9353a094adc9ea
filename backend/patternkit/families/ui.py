from __future__ import annotations

from typing import Any, Callable

from patternkit.contracts import declare

from . import register

BUTTON = declare("Button", "render")
CHECKBOX = declare("Checkbox", "render")


class LightButton:
    family = "Light"

    def render(self) -> str:
        return "Rendering a light button."


class DarkButton:
    family = "Dark"

    def render(self) -> str:
        return "Rendering a dark button."


class LightCheckbox:
    family = "Light"

    def render(self) -> str:
        return "Rendering a light checkbox."


class DarkCheckbox:
    family = "Dark"

    def render(self) -> str:
        return "Rendering a dark checkbox."


class UIComponentFactory:
    """Shared shape of the themed UI factories: one button, one checkbox."""

    family: str
    contracts = (BUTTON, CHECKBOX)
    creator_names = {BUTTON.id: "create_button", CHECKBOX.id: "create_checkbox"}

    def creators(self) -> dict[str, Callable[[], Any]]:
        # Subclasses define the create_* methods; absent ones are left out of the mapping.
        found: dict[str, Callable[[], Any]] = {}
        for contract_id, name in self.creator_names.items():
            method = getattr(self, name, None)
            if callable(method):
                found[contract_id] = method
        return found


@register
class LightUI(UIComponentFactory):
    family = "Light"

    def create_button(self) -> LightButton:
        return LightButton()

    def create_checkbox(self) -> LightCheckbox:
        return LightCheckbox()


@register
class DarkUI(UIComponentFactory):
    family = "Dark"

    def create_button(self) -> DarkButton:
        return DarkButton()

    def create_checkbox(self) -> DarkCheckbox:
        return DarkCheckbox()


__all__ = [
    "BUTTON",
    "CHECKBOX",
    "LightButton",
    "DarkButton",
    "LightCheckbox",
    "DarkCheckbox",
    "UIComponentFactory",
    "LightUI",
    "DarkUI",
]

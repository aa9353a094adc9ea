"""Game characters created through per-class factory methods."""

from __future__ import annotations

from patternkit.contracts import declare
from patternkit.errors import UnsupportedOperation
from patternkit.registry import Registry

CHARACTER = declare("Character", "attack")


class Warrior:
    def __init__(self, name: str) -> None:
        self.name = name

    def attack(self) -> str:
        return f"{self.name} slashes with a sword!"


class Mage:
    def __init__(self, name: str) -> None:
        self.name = name

    def attack(self) -> str:
        return f"{self.name} casts a fireball spell!"


class WarriorFactory:
    def create_character(self, name: str) -> Warrior:
        return Warrior(name)


class MageFactory:
    def create_character(self, name: str) -> Mage:
        return Mage(name)


CHARACTER_FACTORIES: Registry[WarriorFactory | MageFactory] = Registry("character factory")
CHARACTER_FACTORIES.register("Warrior", WarriorFactory)
CHARACTER_FACTORIES.register("Mage", MageFactory)


def create_character(kind: str, name: str) -> Warrior | Mage:
    """Resolve the factory for ``kind`` and let it create a character named ``name``.

    Raises:
        UnknownKey: if no factory is registered for ``kind``.
        UnsupportedOperation: if the created object does not satisfy ``CHARACTER``.
    """
    character = CHARACTER_FACTORIES.resolve(kind).create_character(name)
    missing = CHARACTER.missing_operations(character)
    if missing:
        raise UnsupportedOperation(CHARACTER.id, missing[0], f"not implemented by {type(character).__name__}")
    return character


__all__ = [
    "CHARACTER",
    "Warrior",
    "Mage",
    "WarriorFactory",
    "MageFactory",
    "CHARACTER_FACTORIES",
    "create_character",
]

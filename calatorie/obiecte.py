"""Items that can be carried: the common base, loot, food and materials."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Obiect:
    """Anything with a name and a weight in kilograms."""

    nume: str
    greutate: float

    def __post_init__(self) -> None:
        if type(self) is Obiect:
            raise TypeError("Obiect is abstract and cannot be instantiated")


@dataclass
class Loot(Obiect):
    """An object found on the road, with a rarity and a selling price."""

    raritate: int
    pret: int


@dataclass
class Mancare(Loot):
    """Food that restores energy when eaten."""

    energie_recuperata: int
    procesata: bool


@dataclass
class Material(Loot):
    """A crafting or upgrade material."""
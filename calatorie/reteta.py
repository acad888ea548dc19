"""Crafting recipes and loading them from JSON."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO

from calatorie.fisiere import incarca_json


@dataclass
class Reteta:
    """What a recipe produces and the ingredients it needs, by name."""

    rezultat: str
    tip: str
    ingrediente: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.ingrediente = dict(sorted(self.ingrediente.items()))


def incarca_retete(fisier_retete: str, iesire: TextIO | None = None) -> list[Reteta]:
    """Read every recipe from the JSON file ``fisier_retete``."""
    retete = []
    for reteta in incarca_json(fisier_retete, iesire):
        ingrediente: dict[str, int] = {}
        for ingredient in reteta["ingrediente"]:
            ingrediente[str(ingredient["nume"])] = int(ingredient["cantitate"])
        retete.append(Reteta(str(reteta["rezultat"]), str(reteta["tip"]), ingrediente))
    return retete
"""The catalogue of every food and material that can be found."""

from __future__ import annotations

import dataclasses
import random
from typing import TYPE_CHECKING, TextIO

from calatorie.fisiere import incarca_json
from calatorie.obiecte import Loot, Mancare, Material

if TYPE_CHECKING:
    from calatorie.jucator import Jucator


class MemorieLoot:
    """Known loot, loaded from JSON, and the weighted random draw over it."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.mancare: list[Mancare] = []
        self.materiale: list[Material] = []
        self.rng = rng if rng is not None else random.Random()

    def incarca_din_json(
        self, fisier_mancare: str, fisier_materiale: str, iesire: TextIO | None = None
    ) -> None:
        """Add the foods and materials described in the two JSON files."""
        for m in incarca_json(fisier_mancare, iesire):
            self.mancare.append(
                Mancare(
                    str(m["nume"]),
                    float(m["greutate"]),
                    int(m["raritate"]),
                    int(m["pret"]),
                    int(m["energie"]),
                    bool(m["procesata"]),
                )
            )
        for m in incarca_json(fisier_materiale, iesire):
            self.materiale.append(
                Material(str(m["nume"]), float(m["greutate"]), int(m["raritate"]), int(m["pret"]))
            )

    def genereaza_loot_aleator(self, jucator: Jucator) -> Loot | None:
        """Draw unprocessed food or a material, rarer items less likely.

        Each item weighs 1 / (1 + rarity), scaled by the player's luck.
        Returns None when there is nothing to draw.
        """
        candidati: list[Loot] = [m for m in self.mancare if not m.procesata]
        candidati.extend(self.materiale)
        if not candidati:
            return None

        sanse = [(1.0 / (1.0 + item.raritate)) * (1.0 + jucator.noroc) for item in candidati]
        nr = self.rng.uniform(0.0, sum(sanse))
        cumulata = 0.0
        for item, sansa in zip(candidati, sanse):
            cumulata += sansa
            if nr <= cumulata:
                return item
        return None

    def get_mancare(self, nume: str) -> Mancare | None:
        """A fresh copy of the food called ``nume``, or None if unknown."""
        for m in self.mancare:
            if m.nume == nume:
                return dataclasses.replace(m)
        return None
"""The backpack that holds the player's loot."""

from __future__ import annotations

from dataclasses import dataclass, field

from calatorie.obiecte import Loot, Obiect


@dataclass
class Rucsac(Obiect):
    """A backpack with a weight capacity and a list of loot."""

    nume: str = "Rucsac simplu"
    greutate: float = 1.5
    nivel: int = 1
    capacitate: float = 10.0
    loot: list[Loot] = field(init=False, default_factory=list)

    def numara_loot(self, tip: str) -> int:
        """Count the items named ``tip``."""
        return sum(1 for item in self.loot if item.nume == tip)

    def consuma_loot(self, tip: str, cantitate: int) -> bool:
        """Remove up to ``cantitate`` items named ``tip``.

        Returns whether exactly that many were removed; whatever was found
        is removed either way.
        """
        pastrate: list[Loot] = []
        scoase = 0
        for item in self.loot:
            if scoase < cantitate and item.nume == tip:
                scoase += 1
            else:
                pastrate.append(item)
        self.loot[:] = pastrate
        return scoase == cantitate

    def adauga_loot(self, obiect: Loot) -> None:
        self.loot.append(obiect)

    def incape(self, obiect: Loot) -> bool:
        """Whether ``obiect`` fits within the remaining capacity."""
        return self.greutate_totala() + obiect.greutate <= self.capacitate

    def continut(self, index: bool = False) -> list[str]:
        """Describe the contents, one line per item, numbered from 1 if asked."""
        if not self.loot:
            return ["Rucsacul este gol."]
        return [
            f"{f'{pozitie}. ' if index else ''}{item.nume} (greutate: {item.greutate:g})"
            for pozitie, item in enumerate(self.loot, start=1)
        ]

    def arunca_loot(self, index: int) -> Loot:
        """Remove and return the item at 1-based ``index``."""
        if not 1 <= index <= len(self.loot):
            raise IndexError("Index invalid.")
        return self.loot.pop(index - 1)

    def greutate_totala(self) -> float:
        """Total weight of the loot carried, not counting the backpack."""
        return sum(item.greutate for item in self.loot if item is not None)
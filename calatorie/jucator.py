"""The player: energy, money, luck, backpack and worn clothing."""

from __future__ import annotations

import math
import sys
from typing import TextIO

from calatorie.haine import Bluza, Haina, Palarie, Pantaloni, Pantofi, UpgradeError
from calatorie.obiecte import Mancare
from calatorie.rucsac import Rucsac

ENERGIE_DE_BAZA = 100
BONUS_NOROC_UPGRADE = 0.00125


class Jucator:
    """The traveller and everything they carry."""

    def __init__(
        self,
        energie: int = 100,
        bani: int = 0,
        reducere: int = 0,
        iesire: TextIO | None = None,
    ) -> None:
        self.energie = energie
        self.bani = bani
        self.rata_reducere_scadere_energie = reducere
        self.noroc = 0.0
        self.rucsac = Rucsac()
        self.echipament: list[Haina] = [Palarie(), Bluza(), Pantaloni(), Pantofi()]
        self.iesire = iesire

    def _scrie(self, text: str) -> None:
        print(text, file=self.iesire if self.iesire is not None else sys.stdout)

    @property
    def _palarie(self) -> Haina:
        return self.echipament[0]

    @property
    def _bluza(self) -> Haina:
        return self.echipament[1]

    @property
    def _pantaloni(self) -> Haina:
        return self.echipament[2]

    def fa_upgrade(self, nume_echipament: str) -> bool:
        """Upgrade the named piece of clothing; report whether it worked."""
        haina = next((h for h in self.echipament if h.nume == nume_echipament), None)
        if haina is None:
            return False
        try:
            self.bani = haina.upgrade(self.bani, self.rucsac)
        except UpgradeError as eroare:
            for motiv in eroare.motive:
                self._scrie(motiv)
            return False
        self._scrie(haina.mesaj_succes.format(nivel=haina.nivel))
        self.adauga_noroc(BONUS_NOROC_UPGRADE)
        self._scrie(f"Noroc actual: {self.noroc * 100:g}%")
        return True

    def update_statusuri(self) -> None:
        """Apply the clothing bonuses to energy, energy drain and capacity."""
        self.energie = ENERGIE_DE_BAZA + self._bluza.bonus_stamina
        self.rata_reducere_scadere_energie = self._palarie.bonus_reducere_scadere_stamina
        self.rucsac.capacitate = self.rucsac.capacitate + self._pantaloni.bonus_buzunar

    def adauga_noroc(self, bonus: float) -> None:
        self.noroc += bonus

    def adauga_bani(self, suma: int) -> None:
        self.bani += suma

    def scade_bani(self, suma: int) -> None:
        self.bani = max(0, self.bani - suma)

    def consuma_energie(self) -> None:
        """Spend energy for one step, in proportion to the weight carried."""
        greutate_totala = (
            self.rucsac.greutate_totala()
            + self.rucsac.greutate
            + sum(h.greutate for h in self.echipament)
        )
        scadere = greutate_totala * 2.0 * (1.0 - self.rata_reducere_scadere_energie / 100.0)
        self.scade_energie(max(1, math.floor(scadere + 0.5)))

    def scade_energie(self, valoare: int) -> None:
        self.energie = max(0, self.energie - valoare)

    def creste_energie(self, valoare: int) -> None:
        self.energie += valoare

    def consuma_mancare(self, mancare: Mancare) -> None:
        self.creste_energie(mancare.energie_recuperata)
        self._scrie(
            f"Ai consumat {mancare.nume} si ai regenerat "
            f"{mancare.energie_recuperata} energie."
        )

    def recupereaza_energie(self) -> None:
        """Restore energy to full, counting the shirt's stamina bonus."""
        self.energie = ENERGIE_DE_BAZA + self._bluza.bonus_stamina
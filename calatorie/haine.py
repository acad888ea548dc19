"""Clothing the player wears, and the rules for upgrading each piece."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from calatorie.obiecte import Obiect
from calatorie.rucsac import Rucsac

NIVEL_MAXIM = 3


class UpgradeError(Exception):
    """An upgrade could not be made; ``motive`` lists every reason."""

    def __init__(self, motive: list[str]) -> None:
        self.motive = list(motive)
        super().__init__("\n".join(self.motive))


@dataclass
class Haina(Obiect):
    """A piece of clothing with a level and the bonuses it grants."""

    nume: str = ""
    greutate: float = 0.0
    nivel: int = 1
    bonus_stamina: int = 0
    bonus_reducere_scadere_stamina: int = 0
    bonus_buzunar_exact: float = 0.0

    # level -> (money cost, materials needed)
    _CERINTE: ClassVar[dict[int, tuple[int, dict[str, int]]]] = {}
    _CRESTERE_GREUTATE: ClassVar[float] = 0.0
    _MESAJ_LIPSA: ClassVar[str] = "Nu ai destule materiale de tip {tip}."
    mesaj_maxim: ClassVar[str] = ""
    mesaj_succes: ClassVar[str] = ""

    def __post_init__(self) -> None:
        if type(self) is Haina:
            raise TypeError("Haina is abstract and cannot be instantiated")

    @property
    def bonus_buzunar(self) -> int:
        """The pocket bonus, truncated to whole units."""
        return int(self.bonus_buzunar_exact)

    def _aplica_bonus(self) -> None:
        raise NotImplementedError

    def upgrade(self, bani: int, rucsac: Rucsac) -> int:
        """Raise the level, paying from ``bani`` and ``rucsac``.

        Returns the money left over. Raises UpgradeError, changing nothing,
        when the level is already maximal or resources are lacking.
        """
        if self.nivel >= NIVEL_MAXIM:
            raise UpgradeError([self.mesaj_maxim])

        cost, materiale = self._CERINTE[self.nivel]
        motive: list[str] = []
        if bani < cost:
            motive.append("Nu ai destui bani.")
        motive.extend(
            self._MESAJ_LIPSA.format(tip=tip)
            for tip, cantitate in sorted(materiale.items())
            if rucsac.numara_loot(tip) < cantitate
        )
        if motive:
            raise UpgradeError(motive)

        for tip, cantitate in materiale.items():
            rucsac.consuma_loot(tip, cantitate)
        self.nivel += 1
        self.greutate += self._CRESTERE_GREUTATE
        self._aplica_bonus()
        return bani - cost


class Palarie(Haina):
    _CERINTE = {1: (10, {"piele": 1}), 2: (15, {"lana": 2})}
    _CRESTERE_GREUTATE = 0.1
    mesaj_maxim = "Palaria este deja la nivel maxim."
    mesaj_succes = "Palaria a fost upgradata cu succes! Nivel curent: {nivel}"

    def __init__(self) -> None:
        super().__init__("Palarie", 0.6)

    def _aplica_bonus(self) -> None:
        self.bonus_reducere_scadere_stamina = 1


class Bluza(Haina):
    _CERINTE = {1: (15, {"piele": 2}), 2: (20, {"piele": 2, "lana": 2})}
    _CRESTERE_GREUTATE = 0.2
    mesaj_maxim = "Bluza este deja la nivel maxim."
    mesaj_succes = "Bluza upgradata cu succes! Nivel curent: {nivel}"

    def __init__(self) -> None:
        super().__init__("Bluza", 1.0)

    def _aplica_bonus(self) -> None:
        self.bonus_stamina = 20


class Pantaloni(Haina):
    _CERINTE = {1: (15, {"piele": 2}), 2: (20, {"piele": 3, "lana": 1})}
    _CRESTERE_GREUTATE = 0.2
    mesaj_maxim = "Pantalonii sunt deja la nivel maxim."
    mesaj_succes = "Pantalonii au fost upgradati cu succes! Nivel curent: {nivel}"

    def __init__(self) -> None:
        super().__init__("Pantaloni", 1.2)

    def _aplica_bonus(self) -> None:
        self.bonus_buzunar_exact = 2.5


class Pantofi(Haina):
    _CERINTE = {1: (10, {"piele": 1}), 2: (20, {"piele": 4})}
    _CRESTERE_GREUTATE = 0.1
    _MESAJ_LIPSA = "Nu ai suficienta piele."
    mesaj_maxim = "Pantofii sunt deja la nivel maxim."
    mesaj_succes = "Pantofii au fost upgradati cu succes! Nivel curent: {nivel}"

    def __init__(self) -> None:
        super().__init__("Pantofi", 0.8)

    def _aplica_bonus(self) -> None:
        self.bonus_stamina = 5
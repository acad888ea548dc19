"""What happens on the road, at rivers and in camps."""

from __future__ import annotations

import random
import sys
from typing import TYPE_CHECKING, Sequence, TextIO

from calatorie.obiecte import Loot, Mancare

if TYPE_CHECKING:
    from calatorie.jucator import Jucator
    from calatorie.memorie import MemorieLoot
    from calatorie.reteta import Reteta
    from calatorie.rucsac import Rucsac

COST_RAU = {1: 70, 2: 140, 3: 230}


class JocPierdut(Exception):
    """The journey is over: the player has lost."""


class Eveniment:
    """Base of all events: reads choices and writes messages."""

    def __init__(
        self,
        intrare: TextIO | None = None,
        iesire: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if type(self) is Eveniment:
            raise TypeError("Eveniment is abstract and cannot be instantiated")
        self.intrare = intrare if intrare is not None else sys.stdin
        self.iesire = iesire if iesire is not None else sys.stdout
        self.rng = rng if rng is not None else random.Random()

    def _scrie(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.iesire)

    def _alege_da_nu(self, intrebare: str) -> int:
        self._scrie(intrebare)
        self._scrie("1. Da")
        self._scrie("2. Nu")
        return self.citeste_optiune()

    def citeste_optiune(self) -> int:
        """Read the next whole number, skipping blank lines.

        Raises EOFError when the input is exhausted and ValueError when the
        line is not a number.
        """
        while True:
            linie = self.intrare.readline()
            if not linie:
                raise EOFError("no more input")
            if linie.strip():
                return int(linie.strip())

    def _arunca(self, rucsac: Rucsac, index: int) -> bool:
        try:
            rucsac.arunca_loot(index)
        except IndexError:
            self._scrie("Index invalid.")
            return False
        return True

    def _arata_rucsac(self, rucsac: Rucsac) -> None:
        for linie in rucsac.continut(True):
            self._scrie(linie)


class EvenimentDrum(Eveniment):
    """A step along the road: finding loot, maybe meeting a rabbit."""

    def interact_loot(self, jucator: Jucator, loot: Loot) -> None:
        """Offer ``loot`` to the player and handle making room for it."""
        rucsac = jucator.rucsac
        self._scrie(
            f"Ai gasit: {loot.nume} (greutate: {loot.greutate:g} kg), raritate: {loot.raritate}"
        )
        rasp = self._alege_da_nu("Vrei sa il iei?")

        if rasp == 2:
            rasp = self._alege_da_nu("Vrei sa arunci ceva din rucsac?")
            if rasp == 1:
                self._arata_rucsac(rucsac)
                self._scrie("Indexul obiectului de aruncat: ", end="")
                if self._arunca(rucsac, self.citeste_optiune()):
                    self._scrie("Obiectul a fost aruncat.")
            self._scrie("Ai lasat loot-ul.")
            return

        if rucsac.incape(loot):
            rucsac.adauga_loot(loot)
            self._scrie("Loot adaugat in rucsac.")
            return

        if isinstance(loot, Mancare):
            opt = self._alege_da_nu(f"{loot.nume} nu incape in rucsac. Vrei sa o mananci acum?")
            if opt == 1:
                jucator.consuma_mancare(loot)
                return

        rasp = self._alege_da_nu("Vrei sa arunci ceva?")
        if rasp != 1:
            self._scrie("Ai lasat lootul.")
            return

        while True:
            self._arata_rucsac(rucsac)
            self._scrie("Introdu indexul obiectului de aruncat sau 0 daca te-ai razgandit: ")
            index = self.citeste_optiune()
            if index == 0:
                break
            if self._arunca(rucsac, index):
                self._scrie("Obiectul a fost aruncat.")
                if rucsac.incape(loot):
                    rucsac.adauga_loot(loot)
                    self._scrie("Loot adaugat in rucsac.")
                    return
                rasp = self._alege_da_nu("Inca nu este suficient spatiu. Mai vrei sa arunci ceva?")
                if rasp == 2:
                    break
        self._scrie("Nu ai putut adauga lootul. L-ai lasat in urma.")

    def executa(self, jucator: Jucator, memorie: MemorieLoot) -> None:
        """Find a piece of loot, then with a 10% chance meet a rabbit."""
        gasit = memorie.genereaza_loot_aleator(jucator)
        if gasit is not None:
            self.interact_loot(jucator, gasit)

        if self.rng.randint(1, 100) > 10:
            return
        self._scrie("Un iepure ti-a aparut in cale!")
        if self._alege_da_nu("Incerci sa il vanezi?") != 1:
            return
        jucator.scade_energie(3)
        if self.rng.randint(1, 100) <= 50:
            self._scrie("Vanatoarea a avut succes! Ai primit x1 carne de iepure.")
            self.interact_loot(jucator, Mancare("carne de iepure", 0.4, 3, 12, 25, False))
        else:
            self._scrie("Iepurele a scapat.")


class EvenimentRau(Eveniment):
    """A river that can only be crossed for a fee."""

    def trecere_rau(self, jucator: Jucator, numar_rau: int) -> None:
        """Pay for crossing river ``numar_rau``; raise JocPierdut if unable."""
        cost = COST_RAU.get(numar_rau, 0)
        self._scrie(f"Pentru a-l traversa, ai nevoie de {cost} bani.")
        self._scrie(f"Ai strans {jucator.bani}")
        if jucator.bani >= cost:
            jucator.scade_bani(cost)
            self._scrie("Ai trecut raul cu succes.")
        else:
            self._scrie("Insuficienti bani. Ai pierdut.")
            raise JocPierdut("Insuficienti bani. Ai pierdut.")


class EvenimentTabara(Eveniment):
    """A camp: rest, craft, sell and upgrade."""

    def regenereaza_energie(self, jucator: Jucator) -> None:
        jucator.recupereaza_energie()
        self._scrie("Ai campat in tabara si ti-ai regenerat energia.")

    def proceseaza_crafting(
        self, jucator: Jucator, retete: Sequence[Reteta], memorie: MemorieLoot
    ) -> None:
        """Let the player craft recipes whose ingredients they carry."""
        rucsac = jucator.rucsac
        while True:
            craftabile = [
                reteta
                for reteta in retete
                if all(
                    rucsac.numara_loot(nume) >= cantitate
                    for nume, cantitate in reteta.ingrediente.items()
                )
            ]
            if not craftabile:
                self._scrie("Nu poti crafta nimmic")
                break

            self._scrie("Ce doresti sa craftezi?")
            for pozitie, reteta in enumerate(craftabile, start=1):
                self._scrie(f"{pozitie}. {reteta.rezultat}")
            self._scrie("0. Inapoi")

            opt = self.citeste_optiune()
            if opt == 0:
                break
            if not 1 <= opt <= len(craftabile):
                continue

            aleasa = craftabile[opt - 1]
            for nume, cantitate in aleasa.ingrediente.items():
                rucsac.consuma_loot(nume, cantitate)

            produs = memorie.get_mancare(aleasa.rezultat)
            if produs is not None:
                rucsac.adauga_loot(produs)
                self._scrie(f"Ai craftat: {produs.nume}")
            else:
                self._scrie("Obiectul de craftat nu a fost gasit")

    def vinde_loot(self, jucator: Jucator) -> None:
        """Sell one item from the backpack, or go back with 0."""
        rucsac = jucator.rucsac
        while True:
            self._scrie("Continutul rucsacului: ")
            self._arata_rucsac(rucsac)
            self._scrie("Alege itemul pe care vrei sa il vinzi sau '0' pentru inapoi: ")
            opt = self.citeste_optiune()
            if opt == 0:
                break
            if not 1 <= opt <= len(rucsac.loot):
                continue
            vandut = rucsac.arunca_loot(opt)
            jucator.adauga_bani(vandut.pret)
            self._scrie(f"Loot vandut pentru {vandut.pret} bani.")
            break

    def upgrade_echipament(self, jucator: Jucator) -> None:
        """List the clothing and upgrade the chosen piece."""
        echipamente = jucator.echipament
        self._scrie("Echipamente disponibile pentru upgrade: ")
        for pozitie, haina in enumerate(echipamente, start=1):
            self._scrie(f"{pozitie}. {haina.nume} (nivel {haina.nivel})")
        self._scrie("Alege echipamentul de upgradat sau 0 pentru a anula: ", end="")
        alegere = self.citeste_optiune()
        if not 1 <= alegere <= len(echipamente):
            return
        jucator.fa_upgrade(echipamente[alegere - 1].nume)
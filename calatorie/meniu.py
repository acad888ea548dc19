"""The main menu and the loop that plays one journey."""

from __future__ import annotations

import argparse
import random
import sys
from typing import TextIO

from calatorie.evenimente import EvenimentDrum, EvenimentRau, EvenimentTabara, JocPierdut
from calatorie.jucator import Jucator
from calatorie.memorie import MemorieLoot
from calatorie.reteta import Reteta, incarca_retete
from calatorie.traseu import TipLocatie, Traseu

FISIER_MANCARE = "mancare.json"
FISIER_MATERIALE = "materiale.json"
FISIER_RETETE = "retete.json"


class Meniu:
    """Loads the game data, shows the main menu and runs journeys."""

    def __init__(
        self,
        intrare: TextIO | None = None,
        iesire: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.intrare = intrare if intrare is not None else sys.stdin
        self.iesire = iesire if iesire is not None else sys.stdout
        self.rng = rng if rng is not None else random.Random()
        self.memorie = MemorieLoot(self.rng)
        self.retete: list[Reteta] = []
        self.drum = EvenimentDrum(self.intrare, self.iesire, self.rng)
        self.tabara = EvenimentTabara(self.intrare, self.iesire, self.rng)
        self.rau = EvenimentRau(self.intrare, self.iesire, self.rng)
        self.jucator = Jucator(iesire=self.iesire)
        self.traseu: Traseu | None = None

    def _scrie(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.iesire)

    def _citeste(self) -> int:
        return self.drum.citeste_optiune()

    def _in_tabara(self) -> None:
        self.tabara.regenereaza_energie(self.jucator)
        optiune = -1
        while optiune != 0:
            self._scrie("Esti in tabara. Ce vrei sa faci?")
            self._scrie("1. Crafting")
            self._scrie("2. Vinde loot")
            self._scrie("3. Upgrade")
            self._scrie("0. Continua calatoria")
            self._scrie("Alege: ", end="")
            try:
                optiune = self._citeste()
            except ValueError:
                optiune = -1
            if optiune == 1:
                self.tabara.proceseaza_crafting(self.jucator, self.retete, self.memorie)
            elif optiune == 2:
                self.tabara.vinde_loot(self.jucator)
            elif optiune == 3:
                self.tabara.upgrade_echipament(self.jucator)
            elif optiune != 0:
                self._scrie("Optiune invalida. Incearca din nou.")

    def _start_run(self) -> None:
        self.jucator = Jucator(iesire=self.iesire)
        self.traseu = Traseu(self.rng, self.iesire)
        while True:
            schimbat = self.traseu.pas(self.jucator)
            locatie = self.traseu.locatie_curenta()
            if schimbat:
                if locatie is TipLocatie.TABARA:
                    self._in_tabara()
                elif locatie is TipLocatie.RAU:
                    self.rau.trecere_rau(self.jucator, self.traseu.numar_rau())
                elif locatie is TipLocatie.ORAS_FINAL:
                    return
            elif locatie is TipLocatie.DRUM:
                self.drum.executa(self.jucator, self.memorie)

    def ruleaza(self) -> None:
        """Load the data files and serve the main menu until the player leaves.

        Also ends when the player loses or the input runs out. Raises
        FileNotFoundError when a data file cannot be found.
        """
        self.memorie.incarca_din_json(FISIER_MANCARE, FISIER_MATERIALE, self.iesire)
        self.retete = incarca_retete(FISIER_RETETE, self.iesire)

        try:
            while True:
                self._scrie("MENIU PRINCIPAL")
                self._scrie("1. Start joc nou")
                self._scrie("2. Iesire")
                self._scrie("Alege o optiune: ", end="")
                try:
                    optiune = self._citeste()
                except ValueError:
                    continue
                if optiune == 1:
                    self._start_run()
                elif optiune == 2:
                    self._scrie("La revedere!")
                    return
        except (EOFError, JocPierdut):
            return


def main(argv: list[str] | None = None) -> int:
    """Start the game on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="calatorie", description="A journey to the final town."
    )
    parser.parse_args(argv)
    try:
        Meniu().ruleaza()
    except FileNotFoundError as eroare:
        print(eroare, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""The route to the final town: road segments, camps and rivers."""

from __future__ import annotations

import enum
import random
import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from calatorie.jucator import Jucator

NUMAR_SEGMENTE = 21
TABERE_CU_RAU = (6, 13, 21)


class TipLocatie(enum.Enum):
    DRUM = enum.auto()
    TABARA = enum.auto()
    RAU = enum.auto()
    ORAS_FINAL = enum.auto()


class Traseu:
    """The sequence of locations and the traveller's progress along it."""

    def __init__(self, rng: random.Random | None = None, iesire: TextIO | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.iesire = iesire
        self.distante_segmente: list[int] = []
        self.locatii: list[TipLocatie] = []
        self.segment_curent = 0
        self.distanta_ramasa = 0
        self.pozitie_curenta = 0
        self.locatie_vizitata = False
        self.genereaza_distante()
        self.genereaza_traseu()
        self.distanta_ramasa = self.distante_segmente[0]

    def _scrie(self, text: str, end: str = "\n") -> None:
        print(text, end=end, file=self.iesire if self.iesire is not None else sys.stdout)

    def genereaza_distante(self) -> None:
        """Draw the length, 2 to 4 steps, of every road segment."""
        self.distante_segmente = [self.rng.randint(2, 4) for _ in range(NUMAR_SEGMENTE)]
        self._scrie(" ".join(str(d) for d in self.distante_segmente), end=" ")

    def genereaza_traseu(self) -> None:
        """Lay out road and camp pairs, rivers after some camps, then the town."""
        self.locatii = []
        for numar_tabere in range(1, NUMAR_SEGMENTE + 1):
            self.locatii.extend((TipLocatie.DRUM, TipLocatie.TABARA))
            if numar_tabere in TABERE_CU_RAU:
                self.locatii.append(TipLocatie.RAU)
        self.locatii.append(TipLocatie.ORAS_FINAL)

    def pas(self, jucator: Jucator) -> bool:
        """Take one step; return whether a new location was reached."""
        if self.distanta_ramasa > 0:
            self.distanta_ramasa -= 1
            jucator.consuma_energie()
            self.locatie_vizitata = False
            self._scrie(
                f"[DEBUG] PAS -> , distantaRamasa: {self.distanta_ramasa}"
                f", locatieVizitata: {int(self.locatie_vizitata)}"
                f", pozitieCurenta: {self.pozitie_curenta}"
            )
            return False

        self.pozitie_curenta += 1
        self.locatie_vizitata = True

        if self.pozitie_curenta >= len(self.locatii):
            self._scrie("Ai ajuns in oras!")
            return True

        locatie = self.locatii[self.pozitie_curenta]
        if locatie is TipLocatie.RAU:
            self._scrie("Ai ajuns la un rau!")
        elif locatie is TipLocatie.TABARA:
            self._scrie("Ai ajuns intr-o tabara!")
        elif locatie is TipLocatie.DRUM:
            self._scrie("Ai ajuns pe un drum!")
            self.segment_curent += 1
            if self.segment_curent < len(self.distante_segmente):
                self.distanta_ramasa = self.distante_segmente[self.segment_curent]
                self.locatie_vizitata = False
            else:
                self.distanta_ramasa = 0
        return True

    def locatie_curenta(self) -> TipLocatie:
        """Where the traveller is; the town once past the end of the route."""
        if 0 <= self.pozitie_curenta < len(self.locatii):
            return self.locatii[self.pozitie_curenta]
        return TipLocatie.ORAS_FINAL

    def numar_rau(self) -> int:
        """How many rivers lie at or before the current position."""
        return self.locatii[: self.pozitie_curenta + 1].count(TipLocatie.RAU)
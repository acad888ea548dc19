import io
import random

from calatorie.jucator import Jucator
from calatorie.traseu import TipLocatie, Traseu


class _RngFix:
    def __init__(self, valoare):
        self.valoare = valoare

    def randint(self, a, b):
        return self.valoare


def _traseu(rng=None):
    out = io.StringIO()
    return Traseu(rng or random.Random(3), out), out


def test_distances_in_range():
    traseu, _ = _traseu()
    assert len(traseu.distante_segmente) == 21
    assert all(2 <= d <= 4 for d in traseu.distante_segmente)
    assert traseu.distanta_ramasa == traseu.distante_segmente[0]


def test_distances_come_from_rng():
    traseu, out = _traseu(_RngFix(3))
    assert traseu.distante_segmente == [3] * 21
    assert out.getvalue().startswith("3 3 3")


def test_route_layout():
    traseu, _ = _traseu()
    locatii = traseu.locatii
    assert locatii[-1] is TipLocatie.ORAS_FINAL
    assert locatii.count(TipLocatie.DRUM) == 21
    assert locatii.count(TipLocatie.TABARA) == 21
    assert locatii.count(TipLocatie.RAU) == 3
    tabere_inainte = [
        locatii[:i].count(TipLocatie.TABARA)
        for i, loc in enumerate(locatii)
        if loc is TipLocatie.RAU
    ]
    assert tabere_inainte == [6, 13, 21]
    assert all(locatii[i - 1] is TipLocatie.TABARA for i, loc in enumerate(locatii) if loc is TipLocatie.RAU)


def test_starts_on_road():
    traseu, _ = _traseu()
    assert traseu.locatie_curenta() is TipLocatie.DRUM
    assert traseu.numar_rau() == 0


def test_walking_a_segment_spends_energy_then_reaches_camp():
    traseu, out = _traseu()
    jucator = Jucator(iesire=io.StringIO())
    for _ in range(traseu.distante_segmente[0]):
        assert traseu.pas(jucator) is False
    assert jucator.energie < 100
    assert traseu.pas(jucator) is True
    assert traseu.locatie_curenta() is TipLocatie.TABARA
    assert traseu.locatie_vizitata is True
    assert "Ai ajuns intr-o tabara!" in out.getvalue()


def test_leaving_camp_starts_next_segment():
    traseu, out = _traseu()
    jucator = Jucator(iesire=io.StringIO())
    for _ in range(traseu.distante_segmente[0] + 1):
        traseu.pas(jucator)
    assert traseu.pas(jucator) is True
    assert traseu.locatie_curenta() is TipLocatie.DRUM
    assert traseu.segment_curent == 1
    assert traseu.distanta_ramasa == traseu.distante_segmente[1]
    assert traseu.locatie_vizitata is False
    assert "Ai ajuns pe un drum!" in out.getvalue()


def test_first_river_counts_one():
    traseu, out = _traseu()
    jucator = Jucator(iesire=io.StringIO())
    while traseu.locatie_curenta() is not TipLocatie.RAU:
        traseu.pas(jucator)
    assert traseu.numar_rau() == 1
    assert "Ai ajuns la un rau!" in out.getvalue()


def test_whole_route_ends_in_town():
    traseu, out = _traseu()
    jucator = Jucator(iesire=io.StringIO())
    for _ in range(1000):
        if traseu.pozitie_curenta >= len(traseu.locatii):
            break
        traseu.pas(jucator)
    assert traseu.locatie_curenta() is TipLocatie.ORAS_FINAL
    assert "Ai ajuns in oras!" in out.getvalue()
    assert traseu.numar_rau() == 3
    assert jucator.energie >= 0
import io

import pytest

from calatorie.jucator import Jucator
from calatorie.obiecte import Mancare, Material


def _jucator(**kwargs):
    iesire = io.StringIO()
    return Jucator(iesire=iesire, **kwargs), iesire


def _adauga(jucator, nume, n):
    for _ in range(n):
        jucator.rucsac.adauga_loot(Material(nume, 0.1, 1, 1))


def test_constructor_values_round_trip():
    jucator, _ = _jucator(energie=57, bani=33, reducere=4)
    assert (jucator.energie, jucator.bani, jucator.rata_reducere_scadere_energie) == (57, 33, 4)
    assert [h.nume for h in jucator.echipament] == ["Palarie", "Bluza", "Pantaloni", "Pantofi"]


def test_bani_add_and_clamp():
    jucator, _ = _jucator(bani=5)
    jucator.adauga_bani(7)
    assert jucator.bani == 12
    jucator.scade_bani(50)
    assert jucator.bani == 0


def test_energy_clamps_at_zero_and_grows():
    jucator, _ = _jucator(energie=5)
    jucator.scade_energie(10)
    assert jucator.energie == 0
    jucator.creste_energie(8)
    assert jucator.energie == 8


def test_consuma_energie_default_load():
    jucator, _ = _jucator()
    jucator.consuma_energie()
    assert jucator.energie == 90


def test_heavier_load_costs_more_energy():
    usor, _ = _jucator()
    greu, _ = _jucator()
    greu.rucsac.adauga_loot(Material("piatra", 5.0, 1, 1))
    usor.consuma_energie()
    greu.consuma_energie()
    assert greu.energie < usor.energie


def test_reduction_lowers_energy_cost_but_at_least_one():
    fara, _ = _jucator()
    cu, _ = _jucator(reducere=50)
    total, _ = _jucator(reducere=100)
    for j in (fara, cu, total):
        j.consuma_energie()
    assert cu.energie > fara.energie
    assert total.energie == Jucator().energie - 1


def test_consuma_mancare_restores_energy_and_reports():
    jucator, iesire = _jucator(energie=40)
    mancare = Mancare("supa", 0.3, 1, 5, 15, True)
    jucator.consuma_mancare(mancare)
    assert jucator.energie == 40 + mancare.energie_recuperata
    assert "Ai consumat supa si ai regenerat 15 energie." in iesire.getvalue()


def test_fa_upgrade_success_adds_luck_and_spends_money():
    jucator, iesire = _jucator(bani=100)
    _adauga(jucator, "piele", 1)
    assert jucator.fa_upgrade("Palarie") is True
    assert jucator.noroc == pytest.approx(0.00125)
    assert jucator.bani < 100
    assert jucator.rucsac.numara_loot("piele") == 0
    assert "Noroc actual:" in iesire.getvalue()


def test_fa_upgrade_failure_reports_reasons():
    jucator, iesire = _jucator(bani=0)
    assert jucator.fa_upgrade("Bluza") is False
    assert jucator.noroc == 0.0
    assert "Nu ai destui bani." in iesire.getvalue()


def test_fa_upgrade_unknown_name():
    jucator, iesire = _jucator(bani=100)
    assert jucator.fa_upgrade("Manusi") is False
    assert iesire.getvalue() == ""


def test_recupereaza_energie_counts_shirt_bonus():
    jucator, _ = _jucator(bani=100)
    jucator.recupereaza_energie()
    fara_bonus = jucator.energie
    _adauga(jucator, "piele", 2)
    assert jucator.fa_upgrade("Bluza") is True
    jucator.recupereaza_energie()
    assert jucator.energie == fara_bonus + jucator.echipament[1].bonus_stamina
    assert jucator.energie > fara_bonus


def test_update_statusuri_applies_pocket_bonus():
    jucator, _ = _jucator(bani=100)
    _adauga(jucator, "piele", 2)
    assert jucator.fa_upgrade("Pantaloni") is True
    capacitate = jucator.rucsac.capacitate
    jucator.update_statusuri()
    assert jucator.rucsac.capacitate == capacitate + jucator.echipament[2].bonus_buzunar
    assert jucator.rucsac.capacitate > capacitate
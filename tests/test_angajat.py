import pytest

from parcdistractii.angajat import AgentPaza, Angajat, Casier, OperatorAtractie


def test_base_is_abstract():
    with pytest.raises(TypeError):
        Angajat("x", 30, 1, 2000.0)


def test_tip_names():
    assert OperatorAtractie("a", 30, 1, 2000.0, "Titan").tip == "Operator Atractie"
    assert AgentPaza("b", 30, 1, 2000.0, "Nord").tip == "Agent Paza"
    assert Casier("c", 30, 1, 2000.0, "08:00-16:00").tip == "Casier"


def test_no_experience_total_is_base_salary():
    assert Casier("Ana", 25, 0, 3000.0, "08:00-16:00").salariu_total() == 3000.0


def test_each_year_of_experience_adds_hundred():
    mai_nou = Casier("Ana", 25, 4, 3000.0, "x").salariu_total()
    mai_vechi = Casier("Ana", 25, 5, 3000.0, "x").salariu_total()
    assert mai_vechi - mai_nou == 100


def test_operator_bonus_is_five_hundred():
    op = OperatorAtractie("Ion", 40, 3, 4000.0, "Titan")
    casier = Casier("Ion", 40, 3, 4000.0, "x")
    assert op.salariu_total() - casier.salariu_total() == 500


def test_guard_bonus_is_three_hundred():
    agent = AgentPaza("Ion", 40, 3, 4000.0, "Nord")
    casier = Casier("Ion", 40, 3, 4000.0, "x")
    assert agent.salariu_total() - casier.salariu_total() == 300


def test_average_unchanged_when_salary_equals_average():
    media = Angajat.salariu_mediu()
    Casier("Ana", 25, 0, media, "x")
    assert Angajat.salariu_mediu() == media


def test_average_moves_toward_new_salary():
    media = Angajat.salariu_mediu()
    salariu = media + 10000.0
    AgentPaza("Dan", 33, 2, salariu, "Sud")
    assert media < Angajat.salariu_mediu() < salariu
    assert AgentPaza.salariu_mediu() == Angajat.salariu_mediu()


def test_clone_equal_independent_and_keeps_average():
    original = OperatorAtractie("Ion", 40, 3, 4000.0, "Titan")
    media = Angajat.salariu_mediu()
    copie = original.clone()
    assert copie == original
    assert type(copie) is OperatorAtractie
    assert Angajat.salariu_mediu() == media
    copie.atractie_deservita = "Carusel"
    assert original.atractie_deservita == "Titan"


def test_str_cashier():
    assert str(Casier("Ana", 25, 2, 3000.0, "08:00-16:00")) == (
        "👤 Casier: Ana (Varsta: 25, Experienta: 2 ani, Salariu: 3000 RON)"
        " - Program: 08:00-16:00"
    )


def test_str_suffixes():
    assert str(OperatorAtractie("Ion", 40, 3, 4000.0, "Titan")).endswith(" - Opereaza: Titan")
    assert str(AgentPaza("Dan", 33, 2, 2750.5, "Sud")).endswith("Salariu: 2750.5 RON) - Zona: Sud")
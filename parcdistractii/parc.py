"""The amusement park: attractions, staff and visitors."""

from __future__ import annotations

import sys
from typing import ClassVar, TextIO

from parcdistractii.angajat import AgentPaza, Angajat, Casier, OperatorAtractie
from parcdistractii.atractie import Atractie, Carusel, CasaGroazei, MontagneRusse
from parcdistractii.vizitator import Vizitator


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


class ParcDistractii:
    """Holds the park's attractions, employees and visitors."""

    _numar_parcuri: ClassVar[int] = 0

    def __init__(self, nume: str) -> None:
        self.nume = nume
        self.atractii: list[Atractie] = []
        self.angajati: list[Angajat] = []
        self.vizitatori: list[Vizitator] = []
        ParcDistractii._numar_parcuri += 1

    @classmethod
    def numar_parcuri(cls) -> int:
        """Number of parks created so far, copies included."""
        return ParcDistractii._numar_parcuri

    def copy(self) -> ParcDistractii:
        """Deep copy of the park; every member is cloned."""
        copie = ParcDistractii(self.nume)
        copie.atractii.extend(a.clone() for a in self.atractii)
        copie.angajati.extend(a.clone() for a in self.angajati)
        copie.vizitatori.extend(v.clone() for v in self.vizitatori)
        return copie

    __copy__ = copy

    def adauga_atractie(self, atractie: Atractie, out: TextIO | None = None) -> None:
        self.atractii.append(atractie)
        print("✅ Atractie adaugata cu succes!", file=_stream(out))

    def adauga_angajat(self, angajat: Angajat, out: TextIO | None = None) -> None:
        self.angajati.append(angajat)
        print("✅ Angajat adaugat cu succes!", file=_stream(out))

    def adauga_vizitator(self, vizitator: Vizitator, out: TextIO | None = None) -> None:
        self.vizitatori.append(vizitator)
        print("✅ Vizitator adaugat cu succes!", file=_stream(out))

    def demonstratie_tipuri(self, out: TextIO | None = None) -> None:
        """Describe every attraction and employee by its concrete kind."""
        out = _stream(out)
        print("\n🔬 ========== DEMONSTRATIE DYNAMIC_CAST ========== 🔬\n", file=out)
        for atractie in self.atractii:
            print(f"Atractie: {atractie.nume} - ", end="", file=out)
            if isinstance(atractie, MontagneRusse):
                print(f"Este Montagne Russe cu viteza {atractie.viteza_maxima} km/h", file=out)
            elif isinstance(atractie, Carusel):
                print(f"Este Carusel cu {atractie.numar_cai} cai", file=out)
            elif isinstance(atractie, CasaGroazei):
                print(f"Este Casa Groazei cu nivel frica {atractie.nivel_frica}", file=out)
        for angajat in self.angajati:
            print(f"Angajat: {angajat.nume} - ", end="", file=out)
            if isinstance(angajat, OperatorAtractie):
                print(f"Operator pentru {angajat.atractie_deservita}", file=out)
            elif isinstance(angajat, AgentPaza):
                print(f"Agent paza in zona {angajat.zona_asignata}", file=out)
            elif isinstance(angajat, Casier):
                print(f"Casier cu intervalul {angajat.interval}", file=out)
        print("==================================================\n", file=out)

    def _afiseaza_lista(self, titlu: str, gol: str, subsol: str, elemente: list, out: TextIO | None) -> None:
        out = _stream(out)
        print(titlu, file=out)
        if not elemente:
            print(gol, file=out)
            return
        for element in elemente:
            print(element, file=out)
        print(subsol, file=out)

    def afiseaza_atractii(self, out: TextIO | None = None) -> None:
        self._afiseaza_lista(
            "\n🎢 ========== ATRACTII DISPONIBILE ========== 🎢\n",
            "Nu exista atractii disponibile.",
            "============================================\n",
            self.atractii,
            out,
        )

    def afiseaza_angajati(self, out: TextIO | None = None) -> None:
        self._afiseaza_lista(
            "\n👥 ========== ANGAJATI ========== 👥\n",
            "Nu exista angajati inregistrati.",
            "=================================\n",
            self.angajati,
            out,
        )

    def afiseaza_vizitatori(self, out: TextIO | None = None) -> None:
        self._afiseaza_lista(
            "\n🎫 ========== VIZITATORI ========== 🎫\n",
            "Nu exista vizitatori inregistrati.",
            "===================================\n",
            self.vizitatori,
            out,
        )

    def afiseaza_statistici(self, out: TextIO | None = None) -> None:
        out = _stream(out)
        venit = self.venit_total()
        costuri = self.costuri_salariale()
        lines = [
            "\n📊 ========== STATISTICI PARC ========== 📊\n",
            f"Nume parc: {self.nume}",
            f"Numar total atractii: {len(self.atractii)}",
            f"Numar total angajati: {len(self.angajati)}",
            f"Numar total vizitatori: {len(self.vizitatori)}",
            f"Venit total din bilete: {venit:g} RON",
            f"Costuri salariale totale: {costuri:g} RON",
            f"Numar total atractii create: {Atractie.numar_total_atractii()}",
            f"Salariu mediu angajati: {Angajat.salariu_mediu():g} RON",
            f"Numar parcuri create: {self.numar_parcuri()}",
            f"Profit estimat: {venit - costuri:g} RON",
            "========================================\n",
        ]
        for line in lines:
            print(line, file=out)

    def verifica_acces_atractie(
        self, nume_vizitator: str, nume_atractie: str, out: TextIO | None = None
    ) -> None:
        """Report whether the named visitor may ride the named attraction."""
        out = _stream(out)
        vizitator = next((v for v in self.vizitatori if v.nume == nume_vizitator), None)
        if vizitator is None:
            print(f"❌ Vizitatorul '{nume_vizitator}' nu a fost gasit!", file=out)
            return
        atractie = next((a for a in self.atractii if a.nume == nume_atractie), None)
        if atractie is None:
            print(f"❌ Atractia '{nume_atractie}' nu a fost gasita!", file=out)
            return

        print("\n🔍 Verificare acces pentru:", file=out)
        print(f"Vizitator: {vizitator.nume} ({vizitator.tip})", file=out)
        print(f"Atractie: {atractie.nume} ({atractie.tip})", file=out)

        if vizitator.poate_accesa_atractia(atractie.inaltime_minima):
            print("✅ ACCES PERMIS! Vizitatorul poate accesa atractia.", file=out)
        else:
            print("❌ ACCES INTERZIS! Motivele posibile:", file=out)
            if vizitator.inaltime < atractie.inaltime_minima:
                print(
                    f"   - Inaltimea insuficienta ({vizitator.inaltime} cm < "
                    f"{atractie.inaltime_minima} cm)",
                    file=out,
                )
            if vizitator.tip == "Copil" and vizitator.varsta < 8:
                print("   - Copilul trebuie insotit de adult", file=out)
        print(file=out)

    def venit_total(self) -> float:
        """Sum of the final prices of all visitors' tickets."""
        return sum(v.bilet.pret_final() for v in self.vizitatori if v.bilet is not None)

    def costuri_salariale(self) -> float:
        """Sum of all employees' total salaries."""
        return sum(a.salariu_total() for a in self.angajati)
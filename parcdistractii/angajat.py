"""Park employees."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar


@dataclass
class Angajat(ABC):
    """An employee with age, years of experience and base salary."""

    nume: str
    varsta: int
    experienta_ani: int
    salariu: float

    _salariu_mediu: ClassVar[float] = 2500.0

    def __post_init__(self) -> None:
        Angajat.actualizare_salariu_mediu(self.salariu)

    @property
    @abstractmethod
    def tip(self) -> str:
        """Human-readable employee role."""

    def salariu_total(self) -> float:
        """Base salary plus 100 per year of experience."""
        return self.salariu + self.experienta_ani * 100

    def clone(self) -> Angajat:
        """Independent copy; does not affect the running average."""
        return copy.copy(self)

    @classmethod
    def salariu_mediu(cls) -> float:
        """Running average of all salaries seen so far."""
        return Angajat._salariu_mediu

    @classmethod
    def actualizare_salariu_mediu(cls, nou_salariu: float) -> None:
        """Fold a new salary into the running average."""
        Angajat._salariu_mediu = (Angajat._salariu_mediu + nou_salariu) / 2.0

    def _detalii(self) -> str:
        return ""

    def __str__(self) -> str:
        return (
            f"👤 {self.tip}: {self.nume} (Varsta: {self.varsta}, "
            f"Experienta: {self.experienta_ani} ani, Salariu: {self.salariu:g} RON)"
            f"{self._detalii()}"
        )


@dataclass
class OperatorAtractie(Angajat):
    """Operates one attraction; earns a responsibility bonus."""

    atractie_deservita: str

    @property
    def tip(self) -> str:
        return "Operator Atractie"

    def salariu_total(self) -> float:
        return super().salariu_total() + 500

    def _detalii(self) -> str:
        return f" - Opereaza: {self.atractie_deservita}"


@dataclass
class AgentPaza(Angajat):
    """Security agent assigned to a zone; earns a guard bonus."""

    zona_asignata: str

    @property
    def tip(self) -> str:
        return "Agent Paza"

    def salariu_total(self) -> float:
        return super().salariu_total() + 300

    def _detalii(self) -> str:
        return f" - Zona: {self.zona_asignata}"


@dataclass
class Casier(Angajat):
    """Cashier working a time interval."""

    interval: str

    @property
    def tip(self) -> str:
        return "Casier"

    def _detalii(self) -> str:
        return f" - Program: {self.interval}"
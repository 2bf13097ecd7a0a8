"""Park visitors."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from parcdistractii.bilet import Bilet


@dataclass
class Vizitator(ABC):
    """A visitor with an age, a height and an optional ticket."""

    nume: str
    varsta: int
    inaltime: int
    bilet: Bilet | None

    _numar_total: ClassVar[int] = 0

    def __post_init__(self) -> None:
        Vizitator._numar_total += 1

    @property
    @abstractmethod
    def tip(self) -> str:
        """Human-readable visitor kind."""

    def poate_accesa_atractia(self, inaltime_minima: int, varsta_necesara: int = 0) -> bool:
        """Whether the visitor is tall enough and old enough."""
        return self.inaltime >= inaltime_minima and self.varsta >= varsta_necesara

    def clone(self) -> Vizitator:
        """Independent copy, with its own copy of the ticket."""
        copie = copy.copy(self)
        if self.bilet is not None:
            copie.bilet = self.bilet.clone()
        Vizitator._numar_total += 1
        return copie

    def _detalii(self) -> str:
        return ""

    def __str__(self) -> str:
        text = f"👤 {self.tip}: {self.nume} (Varsta: {self.varsta}, Inaltime: {self.inaltime}cm)"
        if self.bilet is not None:
            text += f"\n   {self.bilet}"
        return text + self._detalii()


@dataclass
class Copil(Vizitator):
    """A child; under 8 it needs an accompanying adult."""

    insotit_de_adult: bool

    @property
    def tip(self) -> str:
        return "Copil"

    def poate_accesa_atractia(self, inaltime_minima: int, varsta_necesara: int = 0) -> bool:
        if not super().poate_accesa_atractia(inaltime_minima, varsta_necesara):
            return False
        if self.varsta < 8:
            return self.insotit_de_adult
        return True

    def _detalii(self) -> str:
        return " - " + ("Insotit de adult" if self.insotit_de_adult else "Neinsotit")


@dataclass
class Adolescent(Vizitator):
    """A teenager, possibly holding an identity card."""

    are_buletin: bool

    @property
    def tip(self) -> str:
        return "Adolescent"

    def _detalii(self) -> str:
        return " - " + ("Cu buletin" if self.are_buletin else "Fara buletin")


@dataclass
class Adult(Vizitator):
    """An adult with an occupation."""

    ocupatie: str

    @property
    def tip(self) -> str:
        return "Adult"

    def _detalii(self) -> str:
        return f" - Ocupatie: {self.ocupatie}"
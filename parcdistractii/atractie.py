"""Park attractions."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar


@dataclass
class Atractie(ABC):
    """An attraction with a minimum height and a capacity."""

    nume: str
    inaltime_minima: int
    capacitate: int

    _numar_total: ClassVar[int] = 0

    def __post_init__(self) -> None:
        Atractie._numar_total += 1

    @property
    @abstractmethod
    def tip(self) -> str:
        """Human-readable attraction kind."""

    def clone(self) -> Atractie:
        """Independent copy; counts as a newly created attraction."""
        copie = copy.copy(self)
        Atractie._numar_total += 1
        return copie

    @classmethod
    def numar_total_atractii(cls) -> int:
        """Number of attractions created so far, copies included."""
        return Atractie._numar_total

    def _detalii(self) -> str:
        return ""

    def __str__(self) -> str:
        return (
            f"🎢 {self.tip}: {self.nume} (Inaltime min: {self.inaltime_minima}cm, "
            f"Capacitate: {self.capacitate}){self._detalii()}"
        )


@dataclass
class MontagneRusse(Atractie):
    """Roller coaster."""

    viteza_maxima: int

    @property
    def tip(self) -> str:
        return "Montagne Russe"

    def _detalii(self) -> str:
        return f" - Viteza maxima: {self.viteza_maxima} km/h"


@dataclass
class Carusel(Atractie):
    """Carousel."""

    numar_cai: int

    @property
    def tip(self) -> str:
        return "Carusel"

    def _detalii(self) -> str:
        return f" - Numar cai: {self.numar_cai}"


@dataclass
class CasaGroazei(Atractie):
    """Haunted house."""

    nivel_frica: int

    @property
    def tip(self) -> str:
        return "Casa Groazei"

    def _detalii(self) -> str:
        return f" - Nivel frica: {self.nivel_frica}/10"
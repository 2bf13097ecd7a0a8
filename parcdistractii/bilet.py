"""Tickets sold to park visitors."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar


@dataclass
class Bilet(ABC):
    """A ticket with a base price and a validity in days."""

    pret: float
    valabilitate_zile: int

    pret_mediu: ClassVar[float] = 50.0

    def __post_init__(self) -> None:
        Bilet.actualizare_pret_mediu(self.pret)

    @property
    @abstractmethod
    def tip(self) -> str:
        """Human-readable ticket kind."""

    def pret_final(self) -> float:
        """Price the visitor actually pays."""
        return self.pret

    def clone(self) -> Bilet:
        """Independent copy; does not affect the running average."""
        return copy.copy(self)

    @classmethod
    def actualizare_pret_mediu(cls, nou_pret: float) -> None:
        """Fold a new price into the running average of all tickets."""
        Bilet.pret_mediu = (Bilet.pret_mediu + nou_pret) / 2.0

    def _detalii(self) -> str:
        return ""

    def __str__(self) -> str:
        return (
            f"🎫 {self.tip} - Pret: {self.pret_final():g} RON "
            f"(Valabil {self.valabilitate_zile} zile){self._detalii()}"
        )


@dataclass
class BiletCopil(Bilet):
    """Child ticket at half price."""

    varsta_copil: int

    @property
    def tip(self) -> str:
        return "Bi Let Copil"

    def pret_final(self) -> float:
        return self.pret * 0.5

    def _detalii(self) -> str:
        return f" - Varsta copil: {self.varsta_copil}"


@dataclass
class BiletAdult(Bilet):
    """Adult ticket, optionally with a Fast Pass."""

    include_fast_pass: bool

    @property
    def tip(self) -> str:
        return "Bilet Adult"

    def pret_final(self) -> float:
        pret = self.pret
        if self.include_fast_pass:
            pret += 30
        return pret

    def _detalii(self) -> str:
        return " + Fast Pass" if self.include_fast_pass else ""


@dataclass
class BiletVIP(Bilet):
    """VIP ticket at double price, optionally with lounge access."""

    acces_lounge: bool

    @property
    def tip(self) -> str:
        return "Bilet VIP"

    def pret_final(self) -> float:
        pret = self.pret * 2
        if self.acces_lounge:
            pret += 50
        return pret

    def _detalii(self) -> str:
        return " + Acces Lounge VIP" if self.acces_lounge else ""
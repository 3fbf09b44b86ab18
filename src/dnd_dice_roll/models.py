from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


MIN_SIDES = 2
MAX_DIGITS = 100


class RollMode(str, Enum):
    NORMAL = "normal"
    ADVANTAGE = "advantage"
    DISADVANTAGE = "disadvantage"

    @property
    def suffix(self) -> str:
        if self is RollMode.ADVANTAGE:
            return "a"
        if self is RollMode.DISADVANTAGE:
            return "d"
        return ""

    @classmethod
    def from_suffix(cls, letter: str) -> RollMode:
        return {"": cls.NORMAL, "a": cls.ADVANTAGE, "d": cls.DISADVANTAGE}[letter.lower()]


@dataclass(frozen=True)
class DieSpec:
    count: int
    sides: int
    mode: RollMode = RollMode.NORMAL
    modifier: int | None = None

    @property
    def label(self) -> str:
        return f"d{self.sides}{self.mode.suffix}"


@dataclass(frozen=True)
class RollResult:
    label: str
    kept_value: int
    discarded_value: int | None = None
    modifier_applied: int = 0

    @property
    def display(self) -> str:
        if self.discarded_value is None:
            return str(self.kept_value)
        return f"{self.kept_value} ({self.discarded_value})"


@dataclass(frozen=True)
class RollGroup:
    """Every row produced by a single CLI token."""

    token: str
    spec: DieSpec
    results: tuple[RollResult, ...]

    @property
    def modifier(self) -> int:
        return self.spec.modifier or 0

    @property
    def subtotal(self) -> int:
        # The modifier counts once for the token, not once per die.
        return sum(r.kept_value for r in self.results) + self.modifier


@dataclass(frozen=True)
class RollReport:
    groups: tuple[RollGroup, ...] = ()

    @property
    def results(self) -> list[RollResult]:
        return [r for g in self.groups for r in g.results]

    @property
    def total(self) -> int:
        return sum(g.subtotal for g in self.groups)

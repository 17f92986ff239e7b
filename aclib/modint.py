"""Integers modulo a fixed modulus."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class ModInt:
    """An integer reduced modulo ``modulo``; arithmetic uses the left operand's modulus."""

    value: int
    modulo: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value % self.modulo)

    def __add__(self, other: ModInt) -> ModInt:
        return ModInt((self.value + other.value) % self.modulo, self.modulo)

    def __sub__(self, other: ModInt) -> ModInt:
        return ModInt((self.value + self.modulo - other.value) % self.modulo, self.modulo)

    def __mul__(self, other: ModInt) -> ModInt:
        return ModInt(self.value * other.value % self.modulo, self.modulo)

    def __str__(self) -> str:
        return str(self.value % self.modulo)
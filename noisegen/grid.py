"""Wrapping 2D grids and the interface of 2D noise engines."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Parameters:
    """Seed and value range of a generator."""

    seed: int = 0
    min: float = 0.0
    max: float = 0.0


class Engine2d(ABC):
    """Something that yields a value for every point of the plane."""

    @abstractmethod
    def generate(self, x: float, y: float) -> float:
        """Value at ``(x, y)``."""


@dataclass
class Grid2d:
    """A row-major ``x`` by ``y`` grid whose lookups wrap around its edges."""

    x: int
    y: int
    seed: int
    data: list = field(default_factory=list)

    def init(self, gen: Callable[[int, int, int], Any]) -> None:
        """Append ``gen(xi, yi, seed)`` for every cell, row by row."""
        self.data.extend(
            gen(xi, yi, self.seed) for yi in range(self.y) for xi in range(self.x)
        )

    def _at(self, x: int, y: int):
        index = x + y * self.x
        if not 0 <= index < len(self.data):
            raise IndexError(f"cell ({x}, {y}) is outside the grid data")
        return self.data[index]

    def get(self, x: int, y: int):
        """Cell at non-negative ``(x, y)``, wrapped into the grid."""
        if x < 0 or y < 0:
            raise ValueError("coordinates must be non-negative")
        return self._at(x % self.x, y % self.y)

    def get_unchecked(self, x: int, y: int):
        """Cell at ``(x, y)`` without wrapping."""
        return self._at(x, y)

    def iget(self, x: int, y: int):
        """Cell at any integer ``(x, y)``, wrapped into the grid."""
        return self._at(x % self.x, y % self.y)


def iter_gen(engine: Engine2d, iters: int, x: float, y: float) -> float:
    """Sum ``iters + 1`` octaves of ``engine`` at ``(x, y)``."""
    total = 0.0
    for octave in range(iters + 1):
        scale = 2.0**octave
        total += engine.generate(x * scale, y * scale) / scale
    return total * (2.0 - 1.0 / (1 << iters))
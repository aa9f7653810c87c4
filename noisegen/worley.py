"""Worley (cellular) noise that tiles over its grid."""

from __future__ import annotations

import math

from .grid import Engine2d, Grid2d
from .random import NumberKind, rands

_MASK64 = (1 << 64) - 1

_NEIGHBOURS = tuple((dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1))


class WorleyWrapping(Engine2d):
    """Distance to the nearest feature point, one point per grid cell."""

    def __init__(self, x: int, y: int, seed: int):
        self.grid = Grid2d(x, y, seed)

    def init(self) -> WorleyWrapping:
        """Place a seeded feature point inside every cell."""
        width = self.grid.x

        def feature(xr: int, yr: int, seed: int) -> tuple[float, float]:
            seed_a = ((xr + seed) + yr * width) & _MASK64
            seed_b = ((yr + seed) + xr * width) & _MASK64
            return (rands(NumberKind.F32, seed_a), rands(NumberKind.F32, seed_b))

        self.grid.init(feature)
        return self

    def generate(self, x: float, y: float) -> float:
        x = math.fmod(x, self.grid.x)
        y = math.fmod(y, self.grid.y)
        cx = math.floor(x)
        cy = math.floor(y)

        nearest = math.inf
        for dx, dy in _NEIGHBOURS:
            px, py = self.grid.iget(cx + dx, cy + dy)
            distance = math.sqrt(
                ((px + float(cx + dx)) - x) ** 2 + ((py + float(cy + dy)) - y) ** 2
            )
            nearest = min(nearest, distance)
        return nearest
"""Perlin gradient noise that tiles over its grid."""

from __future__ import annotations

import math

from .grid import Engine2d, Grid2d
from .random import NumberKind, rands_range

_MASK64 = (1 << 64) - 1


def _interpolate(a: float, b: float, w: float) -> float:
    return (b - a) * (3.0 - w * 2.0) * w * w + a


class PerlinWrapping(Engine2d):
    """Perlin noise over an ``x`` by ``y`` grid of unit gradients that wraps."""

    def __init__(self, x: int, y: int, seed: int):
        self.grid = Grid2d(x, y, seed)

    def init(self) -> PerlinWrapping:
        """Fill the grid with seeded unit gradient vectors."""
        width = self.grid.x

        def gradient(xr: int, yr: int, seed: int) -> tuple[float, float]:
            cell_seed = ((xr + yr * width) * (1 + seed)) & _MASK64
            angle = rands_range(NumberKind.F32, 0.0, 2.0 * math.pi, cell_seed)
            return (math.sin(angle), math.cos(angle))

        self.grid.init(gradient)
        return self

    def _dot(self, cx: int, cy: int, x: float, y: float) -> float:
        gx, gy = self.grid.iget(cx, cy)
        return (x - cx) * gx + (y - cy) * gy

    def generate(self, x: float, y: float) -> float:
        cx = math.floor(x)
        cy = math.floor(y)
        dx = x - cx
        dy = y - cy
        bottom = _interpolate(self._dot(cx, cy, x, y), self._dot(cx + 1, cy, x, y), dx)
        top = _interpolate(
            self._dot(cx, cy + 1, x, y), self._dot(cx + 1, cy + 1, x, y), dx
        )
        return _interpolate(bottom, top, dy)
"""Rotations and mirrors of square grids."""

from __future__ import annotations

from collections.abc import Sequence

from .complex import Complex

_QUARTER_TURNS = (
    Complex(1.0, 0.0),
    Complex(0.0, 1.0),
    Complex(-1.0, 0.0),
    Complex(0.0, -1.0),
)


def _square_size(grid: Sequence[Sequence]) -> int:
    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError("grid must be square")
    return size


def rotate_grid(grid: Sequence[Sequence], degree: int) -> list[list]:
    """Rotate a square grid by ``degree`` quarter turns around its centre."""
    size = _square_size(grid)
    turn = _QUARTER_TURNS[degree % 4]
    offset = (size - 1) / 2.0
    centre = Complex(offset, offset)
    result = [[None] * size for _ in range(size)]
    for i in range(size):
        for j in range(size):
            moved = (Complex(float(i), float(j)) - centre) * turn + centre
            result[i][j] = grid[max(int(moved.r), 0)][max(int(moved.i), 0)]
    return result


def xmirror_grid(grid: Sequence[Sequence], default=0) -> list[list]:
    """Grid of the same size filled with ``default``."""
    size = _square_size(grid)
    return [[default] * size for _ in range(size)]


def ymirror_grid(grid: Sequence[Sequence], default=0) -> list[list]:
    """Grid of the same size filled with ``default``."""
    size = _square_size(grid)
    return [[default] * size for _ in range(size)]
"""Fixed-shape numeric matrices, with vectors as single-column matrices."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_VECTOR_NAMES = "xyzw"
_ELEMENT_NAME = re.compile(r"m([1-9])([1-9])")


@dataclass(frozen=True)
class Matrix:
    """An immutable rectangular matrix of numbers."""

    rows: tuple[tuple, ...]

    def __init__(self, rows: Iterable[Iterable]):
        normalized = tuple(tuple(row) for row in rows)
        if len({len(row) for row in normalized}) > 1:
            raise ValueError("all rows must have the same length")
        object.__setattr__(self, "rows", normalized)

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """A ``rows`` x ``cols`` matrix of zeros."""
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must be non-negative")
        return cls([[0] * cols for _ in range(rows)])

    @property
    def shape(self) -> tuple[int, int]:
        return (len(self.rows), len(self.rows[0]) if self.rows else 0)

    def component(self, name: str):
        """Named access: x/y/z/w for vectors of size 1-4, mIJ for square matrices of size 2-4."""
        m, n = self.shape
        if n == 1 and 1 <= m <= 4 and len(name) == 1 and name in _VECTOR_NAMES[:m]:
            return self.rows[_VECTOR_NAMES.index(name)][0]
        match = _ELEMENT_NAME.fullmatch(name)
        if match and m == n and 2 <= m <= 4:
            i, j = int(match.group(1)), int(match.group(2))
            if i <= m and j <= n:
                return self.rows[i - 1][j - 1]
        raise KeyError(name)

    def __getitem__(self, index: tuple[int, int]):
        i, j = index
        return self.rows[i][j]

    def __iter__(self) -> Iterator[tuple]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def _check_same_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise ValueError(f"shape mismatch: {self.shape} and {other.shape}")

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(
            [a + b for a, b in zip(ra, rb)] for ra, rb in zip(self.rows, other.rows)
        )

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(
            [a - b for a, b in zip(ra, rb)] for ra, rb in zip(self.rows, other.rows)
        )

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape[1] != other.shape[0]:
            raise ValueError(f"cannot multiply {self.shape} by {other.shape}")
        columns = list(zip(*other.rows))
        return Matrix(
            [sum((a * b for a, b in zip(row, col)), 0) for col in columns]
            for row in self.rows
        )

    def __str__(self) -> str:
        return "".join("".join(f"{v} " for v in row) + "\n" for row in self.rows)
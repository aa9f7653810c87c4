"""Quaternions with the Hamilton product."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Quaternion:
    """A quaternion ``r + i*I + j*J + k*K``."""

    r: float
    i: float
    j: float
    k: float

    @property
    def t(self) -> tuple[float, float, float, float]:
        """Components as an ``(r, i, j, k)`` tuple."""
        return (self.r, self.i, self.j, self.k)

    def inv(self) -> Quaternion:
        """Multiplicative inverse."""
        norm = self.r * self.r + self.i * self.i + self.j * self.j + self.k * self.k
        return Quaternion(self.r / norm, -self.i / norm, -self.j / norm, -self.k / norm)

    def to_mat4(self) -> tuple[tuple[float, ...], ...]:
        """The 4x4 matrix layout of this quaternion."""
        r, i, j, k = self.t
        return (
            (r, k, -i, -j),
            (-k, r, j, -i),
            (i, -j, r, -k),
            (j, i, k, r),
        )

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(*(a + b for a, b in zip(self.t, other.t)))

    def __sub__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(*(a - b for a, b in zip(self.t, other.t)))

    def __mul__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        a0, a1, a2, a3 = self.t
        b0, b1, b2, b3 = other.t
        return Quaternion(
            a0 * b0 - a1 * b1 - a2 * b2 - a3 * b3,
            a0 * b1 + a1 * b0 + a2 * b3 - a3 * b2,
            a0 * b2 + a2 * b0 + a3 * b1 - a1 * b3,
            a0 * b3 + a3 * b0 + a1 * b2 - a2 * b1,
        )

    def __truediv__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self * other.inv()
"""Complex numbers with explicit real and imaginary parts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Complex:
    """A complex number ``r + i*j``."""

    r: float
    i: float

    @property
    def t(self) -> tuple[float, float]:
        """Components as a ``(r, i)`` tuple."""
        return (self.r, self.i)

    def inv(self) -> Complex:
        """Multiplicative inverse."""
        div = self.r * self.r + self.i * self.i
        return Complex(self.r / div, -self.i / div)

    def __add__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.r + other.r, self.i + other.i)

    def __sub__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.r - other.r, self.i - other.i)

    def __mul__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(
            self.r * other.r - self.i * other.i,
            self.i * other.r + self.r * other.i,
        )

    def __truediv__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return self * other.inv()
"""Deterministic hash-based pseudo-random numbers and their conversion to numeric kinds."""

from __future__ import annotations

from enum import Enum

_MASK64 = (1 << 64) - 1


class NumberKind(Enum):
    """Numeric kinds a raw 64-bit hash can be converted to."""

    U64 = "u64"
    USIZE = "usize"
    U32 = "u32"
    U16 = "u16"
    U8 = "u8"
    F32 = "f32"
    F64 = "f64"


_INT_MAX = {
    NumberKind.USIZE: _MASK64,
    NumberKind.U32: (1 << 32) - 1,
    NumberKind.U16: (1 << 16) - 1,
    NumberKind.U8: (1 << 8) - 1,
}

_FLOAT_POWER = {
    NumberKind.F32: 10,
    NumberKind.F64: 14,
}


def _check_u64(value: int) -> int:
    if not 0 <= value <= _MASK64:
        raise ValueError(f"{value} is not an unsigned 64-bit integer")
    return value


def convert(kind: NumberKind, value: int):
    """Convert a raw 64-bit value to ``kind``; floats land in ``[0, 1]``."""
    _check_u64(value)
    if kind is NumberKind.U64:
        return value
    if kind in _FLOAT_POWER:
        top = 1 << _FLOAT_POWER[kind]
        return (value % (top + 1)) / top
    return value % _INT_MAX[kind]


def convert_range(kind: NumberKind, minimum, maximum, value: int):
    """Convert a raw 64-bit value to ``kind`` within ``[minimum, maximum)``."""
    _check_u64(value)
    if kind in _FLOAT_POWER:
        return minimum + convert(kind, value) * (maximum - minimum)
    if maximum < minimum:
        raise ValueError("maximum must not be below minimum")
    if kind is NumberKind.U64:
        return minimum + value % (maximum - minimum)
    if maximum == minimum:
        return 0
    return minimum + (value % _INT_MAX[kind]) % (maximum - minimum)


def rands_noise(seed: int) -> int:
    """Hash ``seed`` into a pseudo-random 64-bit value."""
    value = _check_u64(seed)
    value ^= 0xB00BAD1C
    value = (value * 0xD1C510BE) & _MASK64
    value ^= value >> 13
    value = (value * 0xD1C510BE) & _MASK64
    value ^= value >> 17
    value = (value * 0x94A0FBB7) & _MASK64
    return value


class _SeedCounter:
    """Process-wide seed that advances on every draw."""

    def __init__(self) -> None:
        self.value = 0

    def take(self) -> int:
        current = self.value
        self.value = (current + 1) & _MASK64
        return current


_GLOBAL_SEED = _SeedCounter()


def set_global_seed(seed: int) -> None:
    """Reset the process-wide seed used by the unseeded functions."""
    _GLOBAL_SEED.value = _check_u64(seed)


def rand_noise() -> int:
    """Hash the process-wide seed, then advance it."""
    return rands_noise(_GLOBAL_SEED.take())


def rands(kind: NumberKind, seed: int):
    """Pseudo-random value of ``kind`` for ``seed``."""
    return convert(kind, rands_noise(seed))


def random(kind: NumberKind):
    """Pseudo-random value of ``kind`` from the process-wide seed."""
    return convert(kind, rand_noise())


def rands_range(kind: NumberKind, minimum, maximum, seed: int):
    """Pseudo-random value of ``kind`` in ``[minimum, maximum)`` for ``seed``."""
    return convert_range(kind, minimum, maximum, rands_noise(seed))


def rand_range(kind: NumberKind, minimum, maximum):
    """Pseudo-random value of ``kind`` in ``[minimum, maximum)`` from the process-wide seed."""
    return convert_range(kind, minimum, maximum, rand_noise())
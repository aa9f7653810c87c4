"""Deterministic randomness, tileable Perlin and Worley noise, wave-function-collapse tiling and small algebra types."""

__version__ = "0.1.0"
"""Noise sampled once onto a wrapping grid."""

from __future__ import annotations

from .grid import Engine2d


class BakedMap:
    """A ``width`` by ``height`` sampling of an engine, ``zoom`` cells per unit."""

    def __init__(self, width: int, height: int, zoom: int):
        if zoom <= 0:
            raise ValueError("zoom must be positive")
        self.width = width
        self.height = height
        self.zoom = zoom
        self.map: list = []

    def bake(self, engine: Engine2d) -> BakedMap:
        """Sample ``engine`` at every cell."""
        self.map = [
            engine.generate(i / self.zoom, j / self.zoom)
            for j in range(self.height)
            for i in range(self.width)
        ]
        return self

    def _at(self, width: int, height: int):
        index = width + height * self.width
        if not 0 <= index < len(self.map):
            raise IndexError(f"cell ({width}, {height}) has not been baked")
        return self.map[index]

    def get(self, width: int, height: int):
        """Value at non-negative cell coordinates, wrapped into the map."""
        if width < 0 or height < 0:
            raise ValueError("coordinates must be non-negative")
        return self._at(width % self.width, height % self.height)

    def get_unchecked(self, width: int, height: int):
        """Value at cell coordinates without wrapping."""
        return self._at(width, height)

    def iget(self, width: int, height: int):
        """Value at any integer cell coordinates, wrapped into the map."""
        return self._at(width % self.width, height % self.height)

    def fget(self, x: float, y: float):
        """Value at plane coordinates, truncated to the cell grid."""
        return self.iget(int(x * self.zoom), int(y * self.zoom))
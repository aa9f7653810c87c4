"""Wave-function-collapse tiling over a finite grid of bordered units."""

from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter
from typing import Any, Protocol, Sequence

from .diamond import x_diamond, y_diamond
from .random import NumberKind, rand_range, rands_range

_MASK64 = (1 << 64) - 1


class _Opposite(Protocol):
    def opposite(self) -> Any: ...


@dataclass(frozen=True)
class Unit:
    """A tile described by the values of its four borders."""

    north: Any
    south: Any
    east: Any
    west: Any

    def rotate(self, degree: int) -> Unit:
        """The tile turned by ``degree`` quarter turns."""
        turn = degree % 4
        if turn == 1:
            return Unit(self.east, self.west, self.south, self.north)
        if turn == 2:
            return Unit(self.south, self.north, self.west, self.east)
        if turn == 3:
            return Unit(self.west, self.east, self.north, self.south)
        return Unit(self.north, self.south, self.east, self.west)

    def ymirror(self) -> Unit:
        """The tile mirrored across its vertical axis."""
        return Unit(self.north.opposite(), self.south.opposite(), self.west, self.east)

    def xmirror(self) -> Unit:
        """The tile mirrored across its horizontal axis."""
        return Unit(self.south, self.north, self.west.opposite(), self.east.opposite())


# Each entry: neighbour position, this tile's border, the neighbour's facing border.
_SIDES = (
    (0, attrgetter("north"), attrgetter("south")),
    (1, attrgetter("south"), attrgetter("north")),
    (2, attrgetter("east"), attrgetter("west")),
    (3, attrgetter("west"), attrgetter("east")),
)


@dataclass
class Cell:
    """A grid cell: either collapsed to one tile index or holding the indices still possible."""

    value: int | None = None
    options: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        self.options = tuple(self.options)
        if self.value is not None and self.options:
            raise ValueError("a collapsed cell holds no options")

    def _become(self, index: int) -> None:
        self.value = index
        self.options = ()

    def entropy(self) -> int:
        """1 when collapsed, otherwise the number of tiles still possible."""
        return 1 if self.is_collapsed() else len(self.options)

    def is_collapsed(self) -> bool:
        """Whether the cell has settled on a single tile."""
        return self.value is not None

    def collapse_val(self) -> int:
        """The tile index of a collapsed cell."""
        if self.value is None:
            raise ValueError("cell is not collapsed")
        return self.value

    def possibilities(self) -> list[int]:
        """Tile indices the cell may still take."""
        return [self.value] if self.value is not None else list(self.options)

    def collapse(
        self,
        north: Cell,
        south: Cell,
        east: Cell,
        west: Cell,
        possible: Sequence[Unit],
    ) -> int:
        """Narrow the cell against its neighbours and return its entropy."""
        if self.is_collapsed():
            return 1
        neighbours = (north, south, east, west)
        if all(cell.is_collapsed() for cell in neighbours):
            expected = Unit(
                possible[north.collapse_val()].south,
                possible[south.collapse_val()].north,
                possible[east.collapse_val()].west,
                possible[west.collapse_val()].east,
            )
            for index, unit in enumerate(possible):
                if unit == expected:
                    self._become(index)
                    break
        else:
            kept = [
                pos
                for pos in self.possibilities()
                if all(
                    any(
                        own(possible[pos]) == facing(possible[v]).opposite()
                        for v in neighbours[slot].possibilities()
                    )
                    for slot, own, facing in _SIDES
                )
            ]
            if len(kept) == 1:
                self._become(kept[0])
            else:
                self.options = tuple(kept)
        return self.entropy()

    def force_collapse(self, seed: int) -> None:
        """Settle on one of the remaining tiles, chosen from ``seed``."""
        if self.is_collapsed():
            return
        if not self.options:
            raise ValueError("cell has no possible tiles left")
        pick = rands_range(NumberKind.USIZE, 0, len(self.options), seed & _MASK64)
        self._become(self.options[pick])


@dataclass
class LeastContainer:
    """Cells sharing the lowest entropy above one, and that entropy."""

    cells: list[tuple[int, int]] = field(default_factory=list)
    grade: int = 0


class FiniteMap:
    """A ``width`` by ``height`` grid of cells indexed ``map[i][j]``."""

    def __init__(self, width: int, height: int, possible: Sequence[Unit], seed: int):
        self.width = width
        self.height = height
        self.possible = list(possible)
        self.default = tuple(range(len(self.possible)))
        self.defcell = Cell(options=self.default)
        self.map = [
            [Cell(options=self.default) for _ in range(height)] for _ in range(width)
        ]
        self.seed = seed

    def collapse_cell(self, i: int, j: int) -> bool:
        """Narrow cell ``(i, j)``; True if it ends below full entropy."""
        east = self.defcell if i >= self.width - 1 else self.map[i + 1][j]
        west = self.defcell if i == 0 else self.map[i - 1][j]
        north = self.defcell if j >= self.height - 1 else self.map[i][j + 1]
        south = self.defcell if j == 0 else self.map[i][j - 1]

        full = len(self.possible)
        if all(cell.entropy() == full for cell in (north, south, east, west)):
            return False
        cell = self.map[i][j]
        cell.collapse(north, south, east, west, self.possible)
        return cell.entropy() != full

    def render(self) -> str:
        """Text picture of the grid, top row first."""
        lines = []
        for row in range(self.height):
            j = self.height - 1 - row
            parts = [f"{j}: "]
            for i in range(self.width):
                cell = self.map[i][j]
                if cell.is_collapsed():
                    parts.append(f"|{cell.value}")
                else:
                    parts.append("[" + "".join(f"{o}," for o in cell.options))
            lines.append("".join(parts) + "\n")
        return "".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()

    def circular_collapse(self, i: int, j: int) -> None:
        """Narrow cells in rings of growing radius around ``(i, j)``."""
        for radius in range(self.width + self.height + 1):
            for step in range(1, 4 * radius + 1):
                ni = i + x_diamond(step, radius)
                nj = j + y_diamond(step, radius)
                if 0 <= ni < self.width and 0 <= nj < self.height:
                    self.collapse_cell(ni, nj)

    def force_collapse(self, i: int, j: int) -> None:
        """Settle cell ``(i, j)`` using a seed derived from the map seed."""
        seed = (self.seed + i + j * self.height) & _MASK64
        self.map[i][j].force_collapse(seed)

    def determine(self) -> None:
        """Collapse the grid, starting from a seeded cell and then the least uncertain ones."""
        ci = rands_range(NumberKind.USIZE, 0, self.width, self.seed)
        cj = rands_range(NumberKind.USIZE, 0, self.height, (self.seed + ci) & _MASK64)
        self.force_collapse(ci, cj)
        self.circular_collapse(ci, cj)

        while True:
            least = self.least()
            if not least.cells:
                break
            ci, cj = least.cells[rand_range(NumberKind.USIZE, 0, len(least.cells))]
            self.force_collapse(ci, cj)
            self.circular_collapse(ci, cj)

    def least(self) -> LeastContainer:
        """Cells with the lowest entropy above one; empty if none is below full."""
        cells: list[tuple[int, int]] = []
        min_grade = len(self.possible)
        for i in range(self.width):
            for j in range(self.height):
                grade = self.map[i][j].entropy()
                if min_grade > grade > 1:
                    min_grade = grade
                    cells.clear()
                if min_grade == grade:
                    cells.append((i, j))
        if min_grade == len(self.possible):
            cells.clear()
        return LeastContainer(cells=cells, grade=min_grade)
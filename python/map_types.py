"""
Shared type definitions for the map graph system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterator, Mapping


class Terrain(IntEnum):
    """Kind of ground occupying a map square, ranked for cell ordering."""

    ENTRANCE = 0
    EXIT = 1
    WALL = 2
    GROUND = 3


class Transition(Enum):
    """Cardinal movement between neighbouring cells."""

    UP = "up"  # y - 1
    DOWN = "down"  # y + 1
    LEFT = "left"  # x - 1
    RIGHT = "right"  # x + 1


class RowOrder(Enum):
    """How text rows map onto y coordinates."""

    BOTTOM_UP = "bottom_up"  # Last text line is y=0
    TOP_DOWN = "top_down"  # First text line is y=0


# =============================================================================
# Errors
# =============================================================================


class MapError(Exception):
    """Base class for map parsing and graph errors."""


class UnrecognizedTerrainChar(MapError, ValueError):
    """A map character that is not one of the terrain symbols."""

    def __init__(self, char: str, row: int | None = None, col: int | None = None) -> None:
        self.char = char
        self.row = row
        self.col = col
        valid = ", ".join(repr(c) for c in TERRAIN_CHARS.values())
        message = f"Unrecognized terrain character {char!r}"
        if row is not None:
            message += f"\n  Row {row}, column {col}"
        message += f"\n  Valid characters: {valid}"
        super().__init__(message)


class MalformedGrid(MapError, ValueError):
    """Input rows that cannot form a rectangular grid."""


class UnknownCell(MapError, KeyError):
    """Lookup of a cell that is not part of the adjacency graph."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return str(self.args[0]) if self.args else ""


# =============================================================================
# Terrain characters
# =============================================================================


TERRAIN_CHARS: Mapping[Terrain, str] = {
    Terrain.ENTRANCE: "S",
    Terrain.EXIT: "E",
    Terrain.WALL: "#",
    Terrain.GROUND: " ",
}

CHAR_TERRAINS: Mapping[str, Terrain] = {c: t for t, c in TERRAIN_CHARS.items()}


def terrain_of(char: str) -> Terrain:
    """
    Look up the terrain for a single map character.

    Raises:
        UnrecognizedTerrainChar: If char is not one of 'S', 'E', '#', ' '
    """
    try:
        return CHAR_TERRAINS[char]
    except KeyError:
        raise UnrecognizedTerrainChar(char) from None


def char_of(terrain: Terrain) -> str:
    """Canonical map character for a terrain."""
    return TERRAIN_CHARS[terrain]


# =============================================================================
# Grid Definition Types
# =============================================================================


@dataclass(frozen=True, order=True)
class Cell:
    """A map square. Ordered by (x, y, terrain rank)."""

    x: int
    y: int
    terrain: Terrain

    @property
    def char(self) -> str:
        return char_of(self.terrain)


@dataclass(frozen=True)
class Edge:
    """A directed, labelled transition between two cells (possibly the same one)."""

    source: Cell
    target: Cell
    transition: Transition

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target


@dataclass(frozen=True)
class Grid:
    """
    A rectangular 2D grid of cells, indexed cells[y][x].

    row_order records which text line became y=0, so the grid can be shown
    the way it was written.

    Raises:
        MalformedGrid: If rows differ in length or a cell's coordinates do not
            match its position
    """

    cells: tuple[tuple[Cell, ...], ...]
    row_order: RowOrder = RowOrder.BOTTOM_UP

    def __post_init__(self) -> None:
        width = len(self.cells[0]) if self.cells else 0
        for y, row in enumerate(self.cells):
            if len(row) != width:
                raise MalformedGrid(
                    f"Inconsistent row lengths in grid\n"
                    f"  Expected: {width} cells (from y=0)\n"
                    f"  Row y={y}: {len(row)} cells"
                )
            for x, cell in enumerate(row):
                if (cell.x, cell.y) != (x, y):
                    raise MalformedGrid(
                        f"Cell at position ({x},{y}) has coordinates ({cell.x},{cell.y})\n"
                        f"  Each position must hold exactly one cell with matching coordinates"
                    )

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Cell | None:
        """Cell at (x, y), or None if the position is off the grid."""
        if not self.in_bounds(x, y):
            return None
        return self.cells[y][x]

    def __iter__(self) -> Iterator[Cell]:
        """Row-major traversal: y ascending, then x ascending."""
        for row in self.cells:
            yield from row


EdgeMap = Mapping[Cell, tuple[Edge, ...]]

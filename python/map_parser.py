"""
Map parsing utilities.

Turns rows of terrain characters into a Grid of Cells. Which text line becomes
y=0 is decided by a RowOrder policy; the default counts y upward
from the last line.
"""

from __future__ import annotations

import logging
from typing import Sequence

from map_types import (
    Cell,
    Grid,
    MalformedGrid,
    RowOrder,
    UnrecognizedTerrainChar,
    char_of,
    terrain_of,
)

__all__ = ["RowOrder", "DEFAULT_ROW_ORDER", "parse_map", "parse_map_text", "grid_to_rows"]

logger = logging.getLogger(__name__)


DEFAULT_ROW_ORDER = RowOrder.BOTTOM_UP


def _ordered(rows: Sequence[str], row_order: RowOrder) -> list[str]:
    if row_order is RowOrder.BOTTOM_UP:
        return list(reversed(rows))
    return list(rows)


def parse_map(rows: Sequence[str], row_order: RowOrder = DEFAULT_ROW_ORDER) -> Grid:
    """
    Parse map rows into a Grid.

    Format:
    - One string per row, one character per cell
    - 'S' entrance, 'E' exit, '#' wall, ' ' ground
    - All rows must have the same length

    Example:
        ["####",
         "# E#",
         "#S #",
         "####"]

        With RowOrder.BOTTOM_UP the last row is y=0, so 'S' is Cell(1, 1, ENTRANCE)
        and 'E' is Cell(2, 2, EXIT).

    Args:
        rows: Map rows in text order (top line first)
        row_order: Coordinate convention for rows

    Returns:
        Grid with cells[y][x]

    Raises:
        MalformedGrid: If rows have different lengths
        UnrecognizedTerrainChar: If a row contains an unknown character
    """
    rows = list(rows)

    # Validate all rows have same length before building anything
    if rows:
        cols = len(rows[0])
        mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
        if mismatched:
            error_msg = (
                f"Inconsistent row lengths in map\n"
                f"  Expected: {cols} columns (from row 0)\n"
                f"  Mismatched rows:\n"
            )
            for row_idx, actual_cols in mismatched:
                error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{rows[row_idx]}\"\n"
            error_msg += "  All rows must have the same number of cells"
            raise MalformedGrid(error_msg)

    ordered = _ordered(rows, row_order)
    cells: list[tuple[Cell, ...]] = []

    for y, row_str in enumerate(ordered):
        row: list[Cell] = []
        for x, char in enumerate(row_str):
            try:
                terrain = terrain_of(char)
            except UnrecognizedTerrainChar:
                # Report position in text order, not grid order
                text_row = y if row_order is RowOrder.TOP_DOWN else len(ordered) - 1 - y
                raise UnrecognizedTerrainChar(char, text_row, x) from None
            row.append(Cell(x, y, terrain))
        cells.append(tuple(row))

    grid = Grid(tuple(cells), row_order)
    logger.info(
        "parse_map: %dx%d grid (row_order=%s)", grid.width, grid.height, row_order.value
    )
    return grid


def parse_map_text(text: str, row_order: RowOrder = DEFAULT_ROW_ORDER) -> Grid:
    """
    Parse a multi-line map string.

    Line terminators are removed and trailing blank lines dropped. Spaces are
    kept since they are ground cells.
    """
    lines = text.splitlines()
    while lines and not lines[-1]:
        lines.pop()
    return parse_map(lines, row_order)


def grid_to_rows(grid: Grid) -> list[str]:
    """Rows of map characters in text order; the inverse of parse_map."""
    rows = ["".join(char_of(cell.terrain) for cell in row) for row in grid.cells]
    return _ordered(rows, grid.row_order)

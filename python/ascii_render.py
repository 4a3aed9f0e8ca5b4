"""
ASCII preview of parsed maps.

Draws a grid as a bordered character display in text row order, with terrain
colored to match the DOT fill colors.
"""

from __future__ import annotations

import logging
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from map_types import Cell, Grid, RowOrder, Terrain, char_of

logger = logging.getLogger(__name__)


TERRAIN_COLORS: dict[Terrain, Callable[[str], str]] = {
    Terrain.WALL: chalk.green,
    Terrain.ENTRANCE: chalk.yellow,
    Terrain.EXIT: chalk.red,
}


def _plain(s: str) -> str:
    return s


def render_cell(cell: Cell, cell_width: int = 1, colorize: bool = True) -> str:
    """Single cell as its terrain character, centered in cell_width columns."""
    char = char_of(cell.terrain)
    content = char if cell_width == 1 else char.center(cell_width)
    if not colorize:
        return content
    return TERRAIN_COLORS.get(cell.terrain, _plain)(content)


def render_map(
    grid: Grid,
    cell_width: int = 1,
    colorize: bool = True,
    title: str | None = None,
) -> str:
    """
    Render a grid as a bordered character display.

    Args:
        grid: The grid to render
        cell_width: Characters per cell (default 1)
        colorize: Color terrain characters with chalk (default True)
        title: Optional title centered in the top border

    Returns:
        Rendered string, top border first, rows in the text order the grid was
        parsed from
    """
    grid_width = grid.width * cell_width
    lines: list[str] = []

    top = "┌" + "─" * grid_width + "┐"
    if title is not None:
        label = f" {title} "
        if len(label) <= grid_width:
            start = (grid_width - len(label)) // 2
            top = "┌" + "─" * start + label + "─" * (grid_width - start - len(label)) + "┐"
    lines.append(top)

    rows = reversed(grid.cells) if grid.row_order is RowOrder.BOTTOM_UP else iter(grid.cells)
    for row in rows:
        lines.append("│" + "".join(render_cell(cell, cell_width, colorize) for cell in row) + "│")

    lines.append("└" + "─" * grid_width + "┘")

    logger.debug("render_map: %d rows, cell_width=%d", grid.height, cell_width)
    return "\n".join(lines)

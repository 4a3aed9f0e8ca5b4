"""
Adjacency graph construction.

Each non-wall cell gets one outgoing edge per direction that stays on the grid.
Moving into a wall bounces back, recorded as a self-loop; walls themselves have
no outgoing edges.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Sequence

from map_parser import DEFAULT_ROW_ORDER, RowOrder, parse_map
from map_types import (
    Cell,
    Edge,
    EdgeMap,
    Grid,
    Terrain,
    Transition,
    UnknownCell,
)

logger = logging.getLogger(__name__)

TRANSITIONS: tuple[Transition, ...] = (
    Transition.UP,
    Transition.DOWN,
    Transition.LEFT,
    Transition.RIGHT,
)

DELTAS: dict[Transition, tuple[int, int]] = {
    Transition.UP: (0, -1),
    Transition.DOWN: (0, 1),
    Transition.LEFT: (-1, 0),
    Transition.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class AdjacencyGraph:
    """Outgoing edges for every cell of a grid."""

    grid: Grid
    outgoing: EdgeMap
    incoming: EdgeMap = field(default_factory=lambda: MappingProxyType({}))

    def __len__(self) -> int:
        return len(self.outgoing)

    def __contains__(self, cell: object) -> bool:
        return cell in self.outgoing

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self.outgoing.values())


# =============================================================================
# Transition Engine
# =============================================================================


def make_edge(source: Cell, target: Cell, transition: Transition) -> Edge | None:
    """
    Apply the wall-collision rule to a single move.

    Returns:
        None if source is a wall, a self-loop on source if target is a wall,
        otherwise an edge from source to target
    """
    if source.terrain == Terrain.WALL:
        return None
    if target.terrain == Terrain.WALL:
        return Edge(source, source, transition)
    return Edge(source, target, transition)


def neighbor_edges(grid: Grid, cell: Cell) -> tuple[Edge, ...]:
    """
    Outgoing edges for a cell, in UP, DOWN, LEFT, RIGHT order.

    Directions leading off the grid are skipped.
    """
    edges: list[Edge] = []
    for transition in TRANSITIONS:
        dx, dy = DELTAS[transition]
        target = grid.cell_at(cell.x + dx, cell.y + dy)
        if target is None:
            continue
        edge = make_edge(cell, target, transition)
        if edge is not None:
            edges.append(edge)
    return tuple(edges)


# =============================================================================
# Graph construction
# =============================================================================


def build(grid: Grid) -> AdjacencyGraph:
    """Build the adjacency graph for a grid."""
    outgoing: dict[Cell, tuple[Edge, ...]] = {}
    for cell in grid:
        outgoing[cell] = neighbor_edges(grid, cell)
        logger.debug("build: (%d,%d) -> %d edges", cell.x, cell.y, len(outgoing[cell]))

    graph = AdjacencyGraph(grid, MappingProxyType(outgoing), incoming_edges(grid))
    logger.info("build: %d nodes, %d edges", len(graph), graph.edge_count)
    return graph


def incoming_edges(grid: Grid) -> EdgeMap:
    """
    Incoming edge index for a grid.

    Not implemented: always returns an empty mapping.
    """
    return MappingProxyType({})


def edges_of(graph: AdjacencyGraph, cell: Cell) -> tuple[Edge, ...]:
    """
    Outgoing edges of a cell.

    Raises:
        UnknownCell: If the cell is not in the graph. Cells compare by terrain
            as well as position, so a cell with the right coordinates but the
            wrong terrain is unknown too.
    """
    try:
        return graph.outgoing[cell]
    except KeyError:
        raise UnknownCell(
            f"Cell ({cell.x},{cell.y}) with terrain {cell.terrain.name} is not in the graph"
        ) from None


def make_map(rows: Sequence[str], row_order: RowOrder = DEFAULT_ROW_ORDER) -> AdjacencyGraph:
    """Parse map rows and build their adjacency graph."""
    return build(parse_map(rows, row_order))

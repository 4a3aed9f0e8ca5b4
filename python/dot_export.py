"""
DOT export for adjacency graphs.

Output shape (default options):

    digraph map {
        "(1,1)" [shape=circle label="S\\n(1,1)" pos="2,2!" style="filled" fillcolor=yellow];
        "(1,1)" -> "(1,1)";
    }
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from adjacency import AdjacencyGraph, edges_of
from map_types import Cell, Edge, Terrain

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportOptions:
    """Settings for DOT output."""

    graph_name: str = "map"
    shape: str = "circle"
    spacing: int = 2  # Layout units between neighbouring cells
    fill_colors: Mapping[Terrain, str] = field(
        default_factory=lambda: {
            Terrain.WALL: "palegreen",
            Terrain.ENTRANCE: "yellow",
            Terrain.EXIT: "red",
        }
    )
    default_fill: str = "white"
    indent: str = "    "

    def __post_init__(self) -> None:
        # Copy so later changes to the caller's dict don't leak into rendering
        object.__setattr__(self, "fill_colors", MappingProxyType(dict(self.fill_colors)))


DEFAULT_EXPORT_OPTIONS = ExportOptions()


def node_id(cell: Cell) -> str:
    return f'"({cell.x},{cell.y})"'


def _fill(cell: Cell, options: ExportOptions) -> str:
    color = options.fill_colors.get(cell.terrain)
    if color is None:
        # Unfilled nodes keep their color but no style
        return f"fillcolor={options.default_fill}"
    return f'style="filled" fillcolor={color}'


def node_to_dot(cell: Cell, options: ExportOptions = DEFAULT_EXPORT_OPTIONS) -> str:
    """Node declaration line for a cell."""
    coords = f"({cell.x},{cell.y})"
    label = f'label="{cell.char}\\n{coords}"'
    pos = f'pos="{options.spacing * cell.x},{options.spacing * cell.y}!"'
    return (
        f"{options.indent}{node_id(cell)} "
        f"[shape={options.shape} {label} {pos} {_fill(cell, options)}];"
    )


def edge_to_dot(edge: Edge, options: ExportOptions = DEFAULT_EXPORT_OPTIONS) -> str:
    """Edge declaration line. Self-loops point a node at itself."""
    return f"{options.indent}{node_id(edge.source)} -> {node_id(edge.target)};"


def render(graph: AdjacencyGraph, options: ExportOptions = DEFAULT_EXPORT_OPTIONS) -> str:
    """
    Render an adjacency graph as a DOT digraph.

    Cells are emitted in row-major grid order, each node line followed by the
    lines for its outgoing edges, so output is identical for equal grids.

    Args:
        graph: Graph to render
        options: Formatting settings

    Returns:
        DOT text, one declaration per line, newline terminated
    """
    lines = [f"digraph {options.graph_name} {{"]
    for cell in graph.grid:
        lines.append(node_to_dot(cell, options))
        lines.extend(edge_to_dot(edge, options) for edge in edges_of(graph, cell))
    lines.append("}")

    logger.info("render: %d lines of DOT", len(lines))
    return "".join(line + "\n" for line in lines)

#!/usr/bin/env python3
"""
Convert an ASCII map file into a DOT graph of legal moves.

Usage:
    mapgraph MAPFILE [DOTFILE] [--top-down] [--preview] [--verbose]

DOTFILE defaults to MAPFILE with a .dot suffix.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from adjacency import AdjacencyGraph, build
from ascii_render import render_map
from dot_export import render
from map_parser import DEFAULT_ROW_ORDER, RowOrder, parse_map_text
from map_types import MapError

logger = logging.getLogger(__name__)

USAGE = "Usage: mapgraph MAPFILE [DOTFILE] [--top-down] [--preview] [--verbose]"

FLAGS = {"--top-down", "--preview", "--verbose"}


def read_map(path: Path, row_order: RowOrder = DEFAULT_ROW_ORDER) -> AdjacencyGraph:
    """Read a map file and build its adjacency graph."""
    logger.info("Reading map from %s", path)
    grid = parse_map_text(path.read_text(encoding="utf-8"), row_order)
    return build(grid)


def write_dot(path: Path, graph: AdjacencyGraph) -> None:
    """Write the DOT rendering of a graph to path."""
    path.write_text(render(graph), encoding="utf-8")
    logger.info("Wrote DOT graph to %s", path)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    console = Console()
    err_console = Console(stderr=True)

    flags = {a for a in args if a.startswith("--")}
    positional = [a for a in args if not a.startswith("--")]
    unknown = flags - FLAGS
    if unknown or not 1 <= len(positional) <= 2:
        if unknown:
            err_console.print(f"Unknown option: {', '.join(sorted(unknown))}")
        err_console.print(USAGE)
        return 2

    logging.basicConfig(
        level=logging.INFO if "--verbose" in flags else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    map_path = Path(positional[0])
    dot_path = Path(positional[1]) if len(positional) > 1 else map_path.with_suffix(".dot")
    row_order = RowOrder.TOP_DOWN if "--top-down" in flags else DEFAULT_ROW_ORDER

    if dot_path.resolve() == map_path.resolve():
        err_console.print(
            f"[bold red]error:[/bold red] output {escape(str(dot_path))} would overwrite the map file",
            highlight=False,
            soft_wrap=True,
        )
        err_console.print(USAGE)
        return 2

    try:
        graph = read_map(map_path, row_order)
        write_dot(dot_path, graph)
    except (MapError, OSError) as e:
        err_console.print(f"[bold red]error:[/bold red] {escape(str(e))}", highlight=False, soft_wrap=True)
        return 1

    if "--preview" in flags:
        # Printed raw: chalk has already added ANSI codes
        print(render_map(graph.grid, title=map_path.name))

    console.print(
        f"{map_path} -> {dot_path}: {len(graph)} nodes, {graph.edge_count} edges",
        highlight=False,
        soft_wrap=True,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())

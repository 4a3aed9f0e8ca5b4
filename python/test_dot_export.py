"""Tests for DOT export."""

import pytest

from adjacency import make_map
from dot_export import (
    DEFAULT_EXPORT_OPTIONS,
    ExportOptions,
    edge_to_dot,
    node_id,
    node_to_dot,
    render,
)
from map_parser import RowOrder
from map_types import Cell, Edge, Terrain, Transition

SMALL_MAP = [
    "####",
    "# E#",
    "#S #",
    "####",
]


class TestNodeLines:
    """Tests for node and edge declaration lines."""

    def test_node_id(self) -> None:
        assert node_id(Cell(3, 12, Terrain.GROUND)) == '"(3,12)"'

    def test_entrance_node(self) -> None:
        line = node_to_dot(Cell(1, 2, Terrain.ENTRANCE))
        assert line == (
            '    "(1,2)" [shape=circle label="S\\n(1,2)" pos="2,4!" '
            'style="filled" fillcolor=yellow];'
        )

    def test_fill_colors(self) -> None:
        assert 'style="filled" fillcolor=palegreen' in node_to_dot(Cell(0, 0, Terrain.WALL))
        assert 'style="filled" fillcolor=red' in node_to_dot(Cell(0, 0, Terrain.EXIT))
        ground = node_to_dot(Cell(0, 0, Terrain.GROUND))
        assert ground.endswith(" fillcolor=white];")
        assert "style" not in ground

    def test_ground_label_is_space(self) -> None:
        assert 'label=" \\n(4,1)"' in node_to_dot(Cell(4, 1, Terrain.GROUND))

    def test_edge_line(self) -> None:
        a = Cell(0, 0, Terrain.GROUND)
        b = Cell(0, 1, Terrain.EXIT)
        assert edge_to_dot(Edge(a, b, Transition.DOWN)) == '    "(0,0)" -> "(0,1)";'

    def test_self_loop_line(self) -> None:
        a = Cell(2, 3, Terrain.GROUND)
        assert edge_to_dot(Edge(a, a, Transition.LEFT)) == '    "(2,3)" -> "(2,3)";'


class TestRender:
    """Tests for whole-graph rendering."""

    def test_snapshot_single_row(self) -> None:
        graph = make_map(["S E"])
        assert render(graph) == (
            "digraph map {\n"
            '    "(0,0)" [shape=circle label="S\\n(0,0)" pos="0,0!" style="filled" fillcolor=yellow];\n'
            '    "(0,0)" -> "(1,0)";\n'
            '    "(1,0)" [shape=circle label=" \\n(1,0)" pos="2,0!" fillcolor=white];\n'
            '    "(1,0)" -> "(0,0)";\n'
            '    "(1,0)" -> "(2,0)";\n'
            '    "(2,0)" [shape=circle label="E\\n(2,0)" pos="4,0!" style="filled" fillcolor=red];\n'
            '    "(2,0)" -> "(1,0)";\n'
            "}\n"
        )

    def test_snapshot_wall(self) -> None:
        graph = make_map(["S#"])
        assert render(graph) == (
            "digraph map {\n"
            '    "(0,0)" [shape=circle label="S\\n(0,0)" pos="0,0!" style="filled" fillcolor=yellow];\n'
            '    "(0,0)" -> "(0,0)";\n'
            '    "(1,0)" [shape=circle label="#\\n(1,0)" pos="2,0!" style="filled" fillcolor=palegreen];\n'
            "}\n"
        )

    def test_empty_map(self) -> None:
        assert render(make_map([])) == "digraph map {\n}\n"

    def test_small_map_top_down(self) -> None:
        """Entrance at (1,2) is yellow and bounces off the walls beside it."""
        output = render(make_map(SMALL_MAP, RowOrder.TOP_DOWN))
        lines = output.splitlines()

        assert lines[0] == "digraph map {"
        assert lines[-1] == "}"
        assert (
            '    "(1,2)" [shape=circle label="S\\n(1,2)" pos="2,4!" '
            'style="filled" fillcolor=yellow];'
        ) in lines
        assert '    "(1,2)" -> "(1,2)";' in lines
        assert '    "(1,2)" -> "(2,2)";' in lines

        # Node line comes first, then its four edges
        start = lines.index(
            '    "(1,2)" [shape=circle label="S\\n(1,2)" pos="2,4!" '
            'style="filled" fillcolor=yellow];'
        )
        assert lines[start + 1 : start + 5] == [
            '    "(1,2)" -> "(1,1)";',
            '    "(1,2)" -> "(1,2)";',
            '    "(1,2)" -> "(1,2)";',
            '    "(1,2)" -> "(2,2)";',
        ]

    def test_small_map_bottom_up(self) -> None:
        output = render(make_map(SMALL_MAP))
        assert 'label="S\\n(1,1)" pos="2,2!" style="filled" fillcolor=yellow' in output
        assert 'label="E\\n(2,2)" pos="4,4!" style="filled" fillcolor=red' in output
        assert '    "(1,1)" -> "(1,1)";\n' in output
        assert '    "(1,1)" -> "(2,1)";\n' in output

    def test_one_node_line_per_cell(self) -> None:
        output = render(make_map(SMALL_MAP))
        node_lines = [line for line in output.splitlines() if "[shape=circle" in line]
        edge_lines = [line for line in output.splitlines() if " -> " in line]
        assert len(node_lines) == 16
        assert len(edge_lines) == 16

    def test_row_major_order(self) -> None:
        output = render(make_map(SMALL_MAP))
        node_ids = [
            line.split()[0] for line in output.splitlines() if "[shape=circle" in line
        ]
        assert node_ids[:5] == ['"(0,0)"', '"(1,0)"', '"(2,0)"', '"(3,0)"', '"(0,1)"']

    def test_deterministic(self) -> None:
        first = render(make_map(SMALL_MAP))
        second = render(make_map(list(SMALL_MAP)))
        assert first == second


class TestExportOptions:
    """Tests for configurable output."""

    def test_graph_name_and_spacing(self) -> None:
        options = ExportOptions(graph_name="maze", spacing=3)
        output = render(make_map(["S E"]), options)
        assert output.startswith("digraph maze {\n")
        assert 'pos="6,0!"' in output

    def test_custom_colors(self) -> None:
        options = ExportOptions(fill_colors={Terrain.GROUND: "gray"}, shape="box")
        line = node_to_dot(Cell(0, 0, Terrain.GROUND), options)
        assert line == '    "(0,0)" [shape=box label=" \\n(0,0)" pos="0,0!" style="filled" fillcolor=gray];'
        # Terrain missing from the table falls back to the default fill
        assert node_to_dot(Cell(0, 0, Terrain.WALL), options).endswith(" fillcolor=white];")

    def test_default_colors_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_EXPORT_OPTIONS.fill_colors[Terrain.GROUND] = "blue"  # type: ignore[index]

    def test_caller_dict_copied(self) -> None:
        colors = {Terrain.EXIT: "orange"}
        options = ExportOptions(fill_colors=colors)
        colors[Terrain.EXIT] = "blue"
        assert node_to_dot(Cell(0, 0, Terrain.EXIT), options).endswith(" fillcolor=orange];")

"""Tests for rasterizing node layouts onto terminal cells."""

from __future__ import annotations

import pytest

from kuberviz.constants.enums import NamespaceGroup
from kuberviz.constants.limits import MAX_CHART_CELLS
from kuberviz.constants.values import (
    GRID_CELL_COLOR,
    GRID_CELL_SHADED_COLOR,
    GROUP_CELL_COLORS,
    STROKE_CELL_CHAR,
)
from kuberviz.controllers.layout.params import RenderParams
from kuberviz.controllers.layout.staircase import layout_node
from kuberviz.models.core.node_info import NodeInfo
from kuberviz.widgets import RasterCell, rasterize
from kuberviz.widgets.node_chart import cells_to_text, surface_size


@pytest.fixture
def staircase(node, make_pod):
    pods = [
        make_pod("prod", "web-1", cpu="1", memory="2Gi"),
        make_pod("prod", "web-2", cpu="2", memory="1Gi"),
    ]
    return layout_node(node, pods)


class TestSurfaceSize:
    """Tests for surface_size()."""

    def test_capacity_at_scale_one(self, staircase) -> None:
        assert surface_size(staircase) == (4, 8)

    def test_scale_and_orientation(self, node) -> None:
        layout = layout_node(node, [], RenderParams(cpu_x=False, scale_unit=2))
        assert surface_size(layout) == (16, 8)

    def test_grows_for_overflow(self, node, make_pod) -> None:
        layout = layout_node(node, [make_pod("prod", "big", cpu="6", memory="2Gi")])
        assert surface_size(layout) == (6, 8)

    def test_capped(self) -> None:
        huge = NodeInfo(name="huge", cpu_capacity="100000", memory_capacity="1Gi")
        assert surface_size(layout_node(huge, []))[0] == MAX_CHART_CELLS


class TestRasterize:
    """Tests for rasterize()."""

    def test_checkerboard_inside_capacity(self, node) -> None:
        cells = rasterize(layout_node(node, []))
        assert cells[0][0] == RasterCell(bgcolor=GRID_CELL_COLOR)
        assert cells[0][1] == RasterCell(bgcolor=GRID_CELL_SHADED_COLOR)
        assert cells[1][1] == RasterCell(bgcolor=GRID_CELL_COLOR)

    def test_pod_fill_and_stroke(self, staircase) -> None:
        cells = rasterize(staircase)
        prod = GROUP_CELL_COLORS[NamespaceGroup.PROD]
        assert cells[0][0].bgcolor == prod
        assert cells[1][0].bgcolor == prod
        assert cells[2][1].bgcolor == prod
        assert cells[2][2].bgcolor == prod
        assert cells[0][0].char == STROKE_CELL_CHAR

    def test_untouched_cell(self, staircase) -> None:
        cells = rasterize(staircase)
        assert cells[7][3] == RasterCell(bgcolor=GRID_CELL_COLOR)

    def test_namespace_boundary_stroked(self, staircase) -> None:
        cells = rasterize(staircase)
        # boundary spans cells 0..2 in both directions
        assert cells[0][2].char == STROKE_CELL_CHAR
        assert cells[0][2].bgcolor != GROUP_CELL_COLORS[NamespaceGroup.PROD]
        assert cells[1][1].char == " "

    def test_overflow_outside_grid(self, node, make_pod) -> None:
        cells = rasterize(layout_node(node, [make_pod("prod", "big", cpu="6", memory="2Gi")]))
        assert cells[0][5].bgcolor == GROUP_CELL_COLORS[NamespaceGroup.PROD]
        assert cells[4][5] == RasterCell()

    def test_memory_on_x(self, node, make_pod) -> None:
        layout = layout_node(node, [make_pod("kube-system", "dns", cpu="1", memory="3Gi")], RenderParams(cpu_x=False))
        cells = rasterize(layout)
        system = GROUP_CELL_COLORS[NamespaceGroup.SYSTEM]
        assert [cells[0][column].bgcolor == system for column in range(4)] == [True, True, True, False]
        assert cells[1][0].bgcolor != system

    def test_cells_to_text(self, staircase) -> None:
        text = cells_to_text(rasterize(staircase))
        lines = text.plain.split("\n")
        assert len(lines) == 8
        assert all(len(line) == 4 for line in lines)

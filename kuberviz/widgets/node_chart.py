"""NodeChart widget for the TUI application.

Rasterizes a ``NodeLayout`` onto terminal cells and resolves mouse
positions through the layout's tooltip index.

Cell mapping:
- ``scale_unit`` cells per capacity unit along both axes
- the orientation flag is applied here, at draw time: when memory runs
  horizontally every rectangle has its position and size swapped
- rectangles use the same half-open convention as tooltip regions, a cell
  is covered when its centre lies inside ``(x1, x2] x (y1, y2]``

CSS Classes: widget-node-chart
"""

from __future__ import annotations

import math
from typing import NamedTuple

from rich.style import Style
from rich.text import Text
from textual import events
from textual.geometry import Size
from textual.message import Message
from textual.widget import Widget

from kuberviz.constants.enums import DrawKind
from kuberviz.constants.limits import MAX_CHART_CELLS
from kuberviz.constants.values import (
    GRID_CELL_COLOR,
    GRID_CELL_SHADED_COLOR,
    GROUP_CELL_COLORS,
    STROKE_CELL_CHAR,
    STROKE_CELL_COLOR,
)
from kuberviz.models.layout.node_layout import NodeLayout
from kuberviz.models.layout.placement import PlacedRectangle


class RasterCell(NamedTuple):
    """One terminal cell of a rasterized chart."""

    char: str = " "
    color: str | None = None
    bgcolor: str | None = None


def surface_size(layout: NodeLayout) -> tuple[int, int]:
    """Return ``(columns, rows)`` large enough for capacity and any overflow."""
    extent = PlacedRectangle(0.0, 0.0, layout.cpu_offset, layout.memory_offset).oriented(layout.cpu_x)
    columns = math.ceil(max(layout.width_units, extent.width) * layout.scale_unit)
    rows = math.ceil(max(layout.height_units, extent.height) * layout.scale_unit)
    return min(columns, MAX_CHART_CELLS), min(rows, MAX_CHART_CELLS)


def _cell_span(start: float, end: float, scale: float, limit: int) -> range:
    first = max(math.floor(start * scale), 0)
    last = min(math.ceil(end * scale) - 1, limit - 1)
    return range(first, last + 1)


def rasterize(layout: NodeLayout) -> list[list[RasterCell]]:
    """Paint the checkerboard grid, then every draw command in order."""
    scale = layout.scale_unit
    columns, rows = surface_size(layout)
    cells: list[list[RasterCell]] = []
    for row in range(rows):
        line: list[RasterCell] = []
        for column in range(columns):
            i = math.floor(column / scale)
            j = math.floor(row / scale)
            if i >= layout.width_units or j >= layout.height_units:
                line.append(RasterCell())
            elif (i + j) % 2 == 1:
                line.append(RasterCell(bgcolor=GRID_CELL_SHADED_COLOR))
            else:
                line.append(RasterCell(bgcolor=GRID_CELL_COLOR))
        cells.append(line)

    for command in layout.draw_commands:
        rect = command.rect.oriented(layout.cpu_x)
        if rect.width <= 0 or rect.height <= 0:
            continue
        column_span = _cell_span(rect.x, rect.x2, scale, columns)
        row_span = _cell_span(rect.y, rect.y2, scale, rows)
        if command.kind is DrawKind.FILL:
            bgcolor = GROUP_CELL_COLORS[command.group] if command.group is not None else None
            for row in row_span:
                center_y = (row + 0.5) / scale
                if not rect.y < center_y <= rect.y2:
                    continue
                for column in column_span:
                    center_x = (column + 0.5) / scale
                    if rect.x < center_x <= rect.x2:
                        cells[row][column] = cells[row][column]._replace(bgcolor=bgcolor)
            continue

        if not column_span or not row_span:
            continue
        edge_columns = {column_span[0], column_span[-1]}
        edge_rows = {row_span[0], row_span[-1]}
        for row in row_span:
            for column in column_span:
                if row in edge_rows or column in edge_columns:
                    cells[row][column] = cells[row][column]._replace(
                        char=STROKE_CELL_CHAR, color=STROKE_CELL_COLOR
                    )
    return cells


def cells_to_text(cells: list[list[RasterCell]]) -> Text:
    """Convert rasterized cells to rich Text, one line per row."""
    text = Text(no_wrap=True, overflow="crop")
    for row_idx, line in enumerate(cells):
        if row_idx:
            text.append("\n")
        for cell in line:
            text.append(cell.char, style=Style(color=cell.color, bgcolor=cell.bgcolor))
    return text


class NodeChart(Widget):
    """Draws one node's capacity rectangle and reports the text under the mouse.

    The layout and its raster are computed once in ``__init__``; a new
    render pass mounts a new chart instead of mutating this one.

    Example:
        >>> chart = NodeChart(layout, id="chart-node-a")
        >>> yield chart
    """

    DEFAULT_CSS = """
    NodeChart {
        width: auto;
        height: auto;
    }
    """
    _default_classes = "widget-node-chart"

    class TooltipChanged(Message):
        """Posted when the text under the mouse changes."""

        def __init__(self, chart: NodeChart, text: str) -> None:
            super().__init__()
            self.chart = chart
            self.text = text

        @property
        def control(self) -> NodeChart:
            return self.chart

    def __init__(
        self,
        layout: NodeLayout,
        *,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        """Initialize the chart.

        Args:
            layout: Node layout to draw.
            id: Widget ID.
            classes: CSS classes.
        """
        super().__init__(id=id, classes=classes)
        self.add_class(self._default_classes)
        self._node_layout = layout
        self._cells = rasterize(layout)
        self._last_text: str | None = None

    @property
    def node_layout(self) -> NodeLayout:
        return self._node_layout

    @property
    def cells(self) -> list[list[RasterCell]]:
        return self._cells

    def tooltip_text_at_cell(self, column: int, row: int) -> str:
        """Return the tooltip text for the cell at ``(column, row)``."""
        return self.node_layout.tooltip_text_at(column + 0.5, row + 0.5)

    def get_content_width(self, container: Size, viewport: Size) -> int:
        return surface_size(self.node_layout)[0]

    def get_content_height(self, container: Size, viewport: Size, width: int) -> int:
        return surface_size(self.node_layout)[1]

    def render(self) -> Text:
        return cells_to_text(self.cells)

    def _post_tooltip(self, text: str) -> None:
        if text == self._last_text:
            return
        self._last_text = text
        self.post_message(self.TooltipChanged(self, text))

    def on_mouse_move(self, event: events.MouseMove) -> None:
        self._post_tooltip(self.tooltip_text_at_cell(event.x, event.y))

    def on_leave(self, _: events.Leave) -> None:
        self._post_tooltip(self.node_layout.default_tooltip_text)

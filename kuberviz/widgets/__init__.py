"""Widgets for kuberviz."""

from kuberviz.widgets.node_chart import NodeChart, RasterCell, rasterize

__all__ = ["NodeChart", "RasterCell", "rasterize"]

"""Layout geometry models."""

from kuberviz.models.layout.node_layout import NodeLayout, RenderResult
from kuberviz.models.layout.placement import (
    DrawCommand,
    LayoutIssue,
    NamespaceBoundary,
    PlacedRectangle,
    TooltipRegion,
    WorkloadPlacement,
)

__all__ = [
    "DrawCommand",
    "LayoutIssue",
    "NamespaceBoundary",
    "NodeLayout",
    "PlacedRectangle",
    "RenderResult",
    "TooltipRegion",
    "WorkloadPlacement",
]

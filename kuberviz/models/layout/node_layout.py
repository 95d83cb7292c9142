"""Result of one node's layout pass and of a whole render pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from kuberviz.constants.values import NO_DATA_TEXT
from kuberviz.models.layout.placement import (
    DrawCommand,
    LayoutIssue,
    NamespaceBoundary,
    TooltipRegion,
    WorkloadPlacement,
)

if TYPE_CHECKING:
    from kuberviz.controllers.layout.tooltip_index import TooltipIndex


@dataclass(frozen=True)
class NodeLayout:
    """Everything a surface needs to draw one node and answer pointer queries.

    Offsets are not clamped to the capacity rectangle: an over-subscribed
    node draws past its nominal bounds.
    """

    node_name: str
    cpu_capacity: float
    memory_capacity: float
    width_units: int
    height_units: int
    cpu_x: bool
    scale_unit: float
    placements: tuple[WorkloadPlacement, ...]
    boundaries: tuple[NamespaceBoundary, ...]
    draw_commands: tuple[DrawCommand, ...]
    tooltip_index: TooltipIndex
    cpu_offset: float = 0.0
    memory_offset: float = 0.0
    default_tooltip_text: str = ""
    issues: tuple[LayoutIssue, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # a published layout never gains regions
        self.tooltip_index.freeze()

    @property
    def tooltip_regions(self) -> tuple[TooltipRegion, ...]:
        return self.tooltip_index.regions

    @property
    def is_oversubscribed(self) -> bool:
        """True when the staircase runs past the capacity rectangle."""
        return (
            self.cpu_offset > self.cpu_capacity
            or self.memory_offset > self.memory_capacity
        )

    def query(self, x: float, y: float) -> TooltipRegion | None:
        """Resolve a point already in orientation-independent capacity units."""
        return self.tooltip_index.query(x, y)

    def query_pointer(self, pointer_x: float, pointer_y: float) -> TooltipRegion | None:
        """Resolve a physical pointer position measured in surface units.

        The position is divided by the render scale and, when memory runs
        along the horizontal axis, swapped back into cpu/memory order.
        """
        x = pointer_x / self.scale_unit
        y = pointer_y / self.scale_unit
        if not self.cpu_x:
            x, y = y, x
        return self.query(x, y)

    def tooltip_text_at(self, pointer_x: float, pointer_y: float) -> str:
        """Return the text under the pointer, or the explicit no-data marker."""
        region = self.query_pointer(pointer_x, pointer_y)
        if region is None:
            return NO_DATA_TEXT
        return region.text

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for serialization."""
        return {
            "node": self.node_name,
            "cpu": self.cpu_capacity,
            "memory": self.memory_capacity,
            "width": self.width_units,
            "height": self.height_units,
            "cpu_x": self.cpu_x,
            "default_tooltip": self.default_tooltip_text,
            "rectangles": [command.to_dict() for command in self.draw_commands],
            "tooltips": [region.to_dict() for region in self.tooltip_regions],
            "issues": [issue.to_dict() for issue in self.issues],
        }


@dataclass(frozen=True)
class RenderResult:
    """Layouts for every visible node plus the aggregate error list."""

    layouts: tuple[NodeLayout, ...] = ()
    errors: tuple[LayoutIssue, ...] = ()
    hidden_nodes: tuple[str, ...] = ()

    def layout_for(self, node_name: str) -> NodeLayout | None:
        for layout in self.layouts:
            if layout.node_name == node_name:
                return layout
        return None

    @property
    def error_messages(self) -> list[str]:
        return [issue.message for issue in self.errors]

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for serialization."""
        return {
            "nodes": [layout.to_dict() for layout in self.layouts],
            "hidden_nodes": list(self.hidden_nodes),
            "errors": self.error_messages,
        }

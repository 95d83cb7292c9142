"""Geometry records produced by a node layout pass.

All coordinates are in capacity units (cores along one axis, Gi along the
other), never pixels or terminal cells. ``x`` always carries the CPU
offset and ``y`` the memory offset; the orientation flag is applied only
when a rectangle is mapped onto physical axes.
"""

from __future__ import annotations

from dataclasses import dataclass

from kuberviz.constants.enums import DrawKind, IssueKind, NamespaceGroup, TooltipPriority
from kuberviz.constants.values import GROUP_FILL_STYLES, STROKE_STYLE


@dataclass(frozen=True)
class PlacedRectangle:
    """Axis-aligned rectangle in capacity units."""

    x: float
    y: float
    width: float
    height: float

    @property
    def x2(self) -> float:
        return self.x + self.width

    @property
    def y2(self) -> float:
        return self.y + self.height

    def oriented(self, cpu_x: bool) -> PlacedRectangle:
        """Map onto physical axes, swapping both position and size when memory is horizontal."""
        if cpu_x:
            return self
        return PlacedRectangle(x=self.y, y=self.x, width=self.height, height=self.width)

    def to_dict(self) -> dict[str, float]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class TooltipRegion:
    """Point-queryable region with descriptive text.

    Containment is half-open: ``x1 < x <= x2`` and ``y1 < y <= y2``.
    """

    x1: float
    y1: float
    x2: float
    y2: float
    text: str
    priority: int = TooltipPriority.WORKLOAD

    @classmethod
    def over(cls, rect: PlacedRectangle, text: str, priority: int) -> TooltipRegion:
        """Create a region covering ``rect``."""
        return cls(
            x1=rect.x,
            y1=rect.y,
            x2=rect.x2,
            y2=rect.y2,
            text=text,
            priority=int(priority),
        )

    def contains(self, x: float, y: float) -> bool:
        return self.x1 < x <= self.x2 and self.y1 < y <= self.y2

    def to_dict(self) -> dict[str, float | str | int]:
        """Convert to dictionary for serialization."""
        return {
            "x1": self.x1,
            "y1": self.y1,
            "x2": self.x2,
            "y2": self.y2,
            "text": self.text,
            "priority": self.priority,
        }


@dataclass(frozen=True)
class DrawCommand:
    """One paint operation, in the order the surface must apply them."""

    kind: DrawKind
    rect: PlacedRectangle
    group: NamespaceGroup | None = None

    @property
    def style(self) -> str:
        """Canvas style string: the group fill or the stroke color."""
        if self.kind is DrawKind.FILL and self.group is not None:
            return GROUP_FILL_STYLES[self.group]
        return STROKE_STYLE

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind.value,
            "style": self.style,
            "group": self.group.name.lower() if self.group is not None else None,
            **self.rect.to_dict(),
        }


@dataclass(frozen=True)
class WorkloadPlacement:
    """A pod placed on its node's capacity rectangle."""

    namespace: str
    name: str
    group: NamespaceGroup
    cpu: float
    memory: float
    rect: PlacedRectangle

    @property
    def key(self) -> str:
        return f"{self.namespace}/{self.name}"


@dataclass(frozen=True)
class NamespaceBoundary:
    """Rectangle enclosing a run of consecutive pods of one namespace."""

    namespace: str
    rect: PlacedRectangle

    @property
    def cpu(self) -> float:
        return self.rect.width

    @property
    def memory(self) -> float:
        return self.rect.height


@dataclass(frozen=True)
class LayoutIssue:
    """A recoverable problem recorded while assigning or laying out pods."""

    kind: IssueKind
    subject: str
    message: str

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for serialization."""
        return {"kind": self.kind.value, "subject": self.subject, "message": self.message}

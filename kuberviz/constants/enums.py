"""All enum definitions for the visualizer.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum, IntEnum

# =============================================================================
# Layout Enums
# =============================================================================


class NamespaceGroup(IntEnum):
    """Classification ordinal of a namespace, lower sorts first."""

    SYSTEM = 0
    INFRA = 1
    PROD = 2
    OTHER = 3


class TooltipPriority(IntEnum):
    """Tooltip region priority, lower wins on overlap."""

    WORKLOAD = 0
    NAMESPACE = 1


class DrawKind(Enum):
    """Primitive used to paint a placed rectangle."""

    FILL = "fill"
    STROKE = "stroke"


class IssueKind(Enum):
    """Kinds of problems collected during assignment and layout."""

    PARSE = "parse"
    REFERENCE = "reference"

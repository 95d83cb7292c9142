"""Scalar constants used across the application."""

from typing import Final

from kuberviz.constants.enums import NamespaceGroup

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "kuberviz - node resource visualizer"

# ============================================================================
# Layout
# ============================================================================

# Pods in this namespace are capacity placeholders and never drawn.
BUFFER_NAMESPACE: Final = "buffer"
NO_DATA_TEXT: Final = "no data"

# ============================================================================
# Colors
# ============================================================================

# Canvas fill styles, kept for exports that target a raster surface.
GROUP_FILL_STYLES: Final[dict[NamespaceGroup, str]] = {
    NamespaceGroup.SYSTEM: "rgba(255, 0, 0, 0.1)",
    NamespaceGroup.INFRA: "rgba(0, 0, 255, 0.1)",
    NamespaceGroup.PROD: "rgba(0, 255, 0, 0.1)",
    NamespaceGroup.OTHER: "rgba(0, 0, 0, 0.4)",
}
STROKE_STYLE: Final = "rgba(0, 0, 0, 1)"

# Terminal colors for the same groups.
GROUP_CELL_COLORS: Final[dict[NamespaceGroup, str]] = {
    NamespaceGroup.SYSTEM: "red3",
    NamespaceGroup.INFRA: "blue3",
    NamespaceGroup.PROD: "green4",
    NamespaceGroup.OTHER: "grey23",
}
GRID_CELL_COLOR: Final = "grey11"
GRID_CELL_SHADED_COLOR: Final = "grey15"
STROKE_CELL_COLOR: Final = "grey89"
STROKE_CELL_CHAR: Final = "·"

__all__ = [
    "APP_TITLE",
    "BUFFER_NAMESPACE",
    "GRID_CELL_COLOR",
    "GRID_CELL_SHADED_COLOR",
    "GROUP_CELL_COLORS",
    "GROUP_FILL_STYLES",
    "NO_DATA_TEXT",
    "STROKE_CELL_CHAR",
    "STROKE_CELL_COLOR",
    "STROKE_STYLE",
]

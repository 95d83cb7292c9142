"""Immutable render parameters shared by every node pass."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from kuberviz.constants.defaults import CPU_X_DEFAULT, SCALE_UNIT_DEFAULT
from kuberviz.controllers.layout.classifier import NamespacePatterns


@dataclass(frozen=True)
class RenderParams:
    """Snapshot of everything a layout pass reads besides nodes and pods.

    A settings change produces a new snapshot and a full rebuild; passes
    never observe a half-applied update.
    """

    patterns: NamespacePatterns = field(default_factory=NamespacePatterns.default)
    cpu_x: bool = CPU_X_DEFAULT
    scale_unit: float = SCALE_UNIT_DEFAULT
    node_filter: re.Pattern[str] | None = None

    def shows_node(self, node_name: str) -> bool:
        """Return True when the node filter is unset or matches the name."""
        return self.node_filter is None or bool(self.node_filter.search(node_name))

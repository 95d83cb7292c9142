"""Tooltip spatial index for one node's render pass."""

from __future__ import annotations

import logging

from kuberviz.models.layout.placement import TooltipRegion

logger = logging.getLogger(__name__)


class TooltipIndex:
    """Accumulates tooltip regions and resolves point queries.

    A query returns the containing region with the lowest priority value;
    among equal priorities the first registered wins. The index belongs to
    a single layout pass and is frozen once the pass publishes its layout.
    """

    def __init__(self, regions: list[TooltipRegion] | None = None) -> None:
        self._regions: list[TooltipRegion] = list(regions or [])
        self._frozen = False

    def __len__(self) -> int:
        return len(self._regions)

    @property
    def regions(self) -> tuple[TooltipRegion, ...]:
        return tuple(self._regions)

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Reject any further registration."""
        self._frozen = True

    def register(self, region: TooltipRegion) -> None:
        """Add a region; registration order is the tie-break.

        Raises:
            RuntimeError: If the index has been frozen.
        """
        if self._frozen:
            raise RuntimeError("tooltip index is frozen")
        logger.debug(f"adding tooltip {region}")
        self._regions.append(region)

    def query(self, x: float, y: float) -> TooltipRegion | None:
        """Return the best region containing ``(x, y)``, or None."""
        best: TooltipRegion | None = None
        for region in self._regions:
            if not region.contains(x, y):
                continue
            if best is None or region.priority < best.priority:
                best = region
        return best

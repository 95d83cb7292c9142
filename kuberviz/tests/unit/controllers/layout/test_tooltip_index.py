"""Tests for the tooltip spatial index."""

from __future__ import annotations

import pytest

from kuberviz.controllers.layout.tooltip_index import TooltipIndex
from kuberviz.models.layout.placement import PlacedRectangle, TooltipRegion


def _region(x1: float, y1: float, x2: float, y2: float, text: str, priority: int = 0) -> TooltipRegion:
    return TooltipRegion(x1=x1, y1=y1, x2=x2, y2=y2, text=text, priority=priority)


class TestTooltipIndexQuery:
    """Tests for TooltipIndex.query."""

    def test_empty_index_returns_none(self) -> None:
        assert TooltipIndex().query(1, 1) is None

    def test_point_inside_single_region(self) -> None:
        index = TooltipIndex()
        index.register(_region(0, 0, 2, 2, "pod"))
        region = index.query(1, 1)
        assert region is not None
        assert region.text == "pod"

    def test_lower_bound_is_exclusive(self) -> None:
        index = TooltipIndex()
        index.register(_region(0, 0, 2, 2, "pod"))
        assert index.query(0, 1) is None
        assert index.query(1, 0) is None

    def test_upper_bound_is_inclusive(self) -> None:
        index = TooltipIndex()
        index.register(_region(0, 0, 2, 2, "pod"))
        assert index.query(2, 2) is not None
        assert index.query(2.001, 2) is None

    def test_lower_priority_value_wins(self) -> None:
        index = TooltipIndex()
        index.register(_region(0, 0, 4, 4, "namespace", priority=1))
        index.register(_region(0, 0, 2, 2, "pod", priority=0))
        assert index.query(1, 1).text == "pod"
        assert index.query(3, 3).text == "namespace"

    def test_registration_order_breaks_ties(self) -> None:
        index = TooltipIndex()
        index.register(_region(0, 0, 2, 2, "first"))
        index.register(_region(0, 0, 2, 2, "second"))
        assert index.query(1, 1).text == "first"

    def test_point_outside_all_regions(self) -> None:
        index = TooltipIndex()
        index.register(_region(0, 0, 2, 2, "pod"))
        assert index.query(3.5, 3.5) is None


class TestTooltipRegion:
    """Tests for TooltipRegion helpers."""

    def test_over_rectangle(self) -> None:
        region = TooltipRegion.over(PlacedRectangle(1, 2, 2, 1), "pod", 0)
        assert (region.x1, region.y1, region.x2, region.y2) == (1, 2, 3, 3)
        assert region.priority == 0

    def test_index_len_and_regions(self) -> None:
        index = TooltipIndex()
        index.register(_region(0, 0, 1, 1, "a"))
        assert len(index) == 1
        assert index.regions[0].text == "a"


class TestTooltipIndexFreeze:
    """A frozen index rejects new regions."""

    def test_register_after_freeze_raises(self) -> None:
        index = TooltipIndex()
        index.register(_region(0, 0, 1, 1, "a"))
        index.freeze()
        assert index.is_frozen
        with pytest.raises(RuntimeError):
            index.register(_region(0, 0, 1, 1, "b"))
        assert len(index) == 1

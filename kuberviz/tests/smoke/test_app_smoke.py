"""Smoke tests running the app against the sample cluster."""

from __future__ import annotations

import pytest
from textual.widgets import Input

from kuberviz.app import KubervizApp
from kuberviz.screens import NodesScreen
from kuberviz.widgets import NodeChart

pytestmark = pytest.mark.smoke


class TestNodesScreenSmoke:
    """Drive the nodes screen through a Pilot."""

    @pytest.mark.asyncio
    async def test_sample_nodes_rendered(self, app: KubervizApp) -> None:
        async with app.run_test(size=(160, 50)) as pilot:
            await pilot.pause()
            assert isinstance(app.screen, NodesScreen)
            charts = list(app.screen.query(NodeChart))
            assert [chart.node_layout.node_name for chart in charts] == ["node-a", "node-b"]

    @pytest.mark.asyncio
    async def test_node_filter_input(self, app: KubervizApp) -> None:
        async with app.run_test(size=(160, 50)) as pilot:
            await pilot.pause()
            node_filter = app.screen.query_one("#node-filter-input", Input)
            node_filter.focus()
            node_filter.value = "node-b"
            await pilot.press("enter")
            await pilot.pause()
            charts = list(app.screen.query(NodeChart))
            assert [chart.node_layout.node_name for chart in charts] == ["node-b"]
            assert app.state.settings.node_filter == "node-b"

    @pytest.mark.asyncio
    async def test_invalid_pattern_rejected(self, app: KubervizApp) -> None:
        async with app.run_test(size=(160, 50)) as pilot:
            await pilot.pause()
            before = app.state.settings
            system = app.screen.query_one("#ns-group-system-input", Input)
            system.focus()
            system.value = "(kube"
            await pilot.press("enter")
            await pilot.pause()
            assert app.state.settings == before
            assert len(app.screen.query(NodeChart)) == 2

    @pytest.mark.asyncio
    async def test_orientation_and_zoom_bindings(self, app: KubervizApp) -> None:
        async with app.run_test(size=(160, 50)) as pilot:
            await pilot.pause()
            app.screen.set_focus(None)
            await pilot.press("o")
            await pilot.pause()
            assert app.state.settings.cpu_x is False
            chart = app.screen.query(NodeChart).first()
            assert chart.node_layout.cpu_x is False

            await pilot.press("minus")
            await pilot.pause()
            assert app.state.settings.scale_unit == 0.5

    @pytest.mark.asyncio
    async def test_tooltip_lookup(self, app: KubervizApp) -> None:
        async with app.run_test(size=(160, 50)) as pilot:
            await pilot.pause()
            chart = app.screen.query(NodeChart).first()
            assert chart.tooltip_text_at_cell(0, 0).startswith("kube-system/coredns-")
            assert chart.tooltip_text_at_cell(63, 0) == "no data"

    @pytest.mark.asyncio
    async def test_reload_without_sources_warns(self, app: KubervizApp) -> None:
        async with app.run_test(size=(160, 50)) as pilot:
            await pilot.pause()
            app.screen.set_focus(None)
            await pilot.press("r")
            await pilot.pause()
            assert app.state.nodes

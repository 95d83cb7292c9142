"""Nodes screen - one staircase chart per node with live tooltips."""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Input, Static

from kuberviz.keyboard.navigation import NODES_SCREEN_BINDINGS
from kuberviz.models.layout.node_layout import NodeLayout
from kuberviz.screens.nodes.presenter import (
    PATTERN_INPUTS,
    NodesPresenter,
    SourcesLoaded,
)
from kuberviz.widgets import NodeChart

logger = logging.getLogger(__name__)

_INPUT_PLACEHOLDERS: dict[str, str] = {
    "ns-group-system-input": "system namespaces",
    "ns-group-infra-input": "infra namespaces",
    "ns-group-prod-input": "prod namespaces",
    "node-filter-input": "node filter",
}


class NodesScreen(Screen[None]):
    """Main screen: pattern inputs, error list and the node charts."""

    BINDINGS: list[Binding] = NODES_SCREEN_BINDINGS

    def __init__(self) -> None:
        super().__init__()
        self.presenter = NodesPresenter(self)

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="pattern-bar"):
            for input_id in PATTERN_INPUTS:
                yield Input(
                    value=self.presenter.get_value(input_id),
                    placeholder=_INPUT_PLACEHOLDERS[input_id],
                    id=input_id,
                )
        yield Static("", id="status-line")
        yield Static("", id="errors-panel", classes="empty")
        yield VerticalScroll(id="node-charts")
        yield Footer()

    async def on_mount(self) -> None:
        await self.rebuild_charts()
        if self.presenter.has_sources():
            self.start_loading()

    # =========================================================================
    # Rendering
    # =========================================================================

    @staticmethod
    def _node_card(idx: int, layout: NodeLayout) -> Vertical:
        label = layout.node_name
        if layout.is_oversubscribed:
            label += " (over-subscribed)"
        return Vertical(
            Static(label, classes="node-label"),
            NodeChart(layout, id=f"node-chart-{idx}"),
            Static(layout.default_tooltip_text, classes="node-tooltip"),
            classes="node-card",
        )

    async def rebuild_charts(self) -> None:
        """Recompute every layout and replace all charts at once."""
        result = self.presenter.rebuild()
        cards = [self._node_card(idx, layout) for idx, layout in enumerate(result.layouts)]

        container = self.query_one("#node-charts", VerticalScroll)
        await container.remove_children()
        if cards:
            await container.mount_all(cards)

        self.query_one("#status-line", Static).update(self.presenter.status_text())
        errors_panel = self.query_one("#errors-panel", Static)
        errors = self.presenter.error_lines()
        errors_panel.update("\n".join(errors))
        errors_panel.set_class(not errors, "empty")

    def on_node_chart_tooltip_changed(self, event: NodeChart.TooltipChanged) -> None:
        card = event.chart.parent
        if card is None:
            return
        card.query_one(".node-tooltip", Static).update(event.text)

    # =========================================================================
    # Loading
    # =========================================================================

    def start_loading(self) -> None:
        self.run_worker(self._load_sources_worker, name="nodes-load", exclusive=True)

    async def _load_sources_worker(self) -> None:
        result = await self.presenter.load_sources()
        self.post_message(SourcesLoaded(result))

    async def on_sources_loaded(self, event: SourcesLoaded) -> None:
        success, message = self.presenter.apply_sources(event.result)
        self.notify(message, severity="information" if success else "error")
        if success:
            await self.rebuild_charts()

    # =========================================================================
    # Input handling
    # =========================================================================

    async def on_input_submitted(self, _: Input.Submitted) -> None:
        values = {
            input_id: self.query_one(f"#{input_id}", Input).value
            for input_id in PATTERN_INPUTS
        }
        success, message = self.presenter.apply_patterns(values)
        if not success:
            self.notify(message, title="Pattern rejected", severity="error")
            return
        self.notify(message)
        await self.rebuild_charts()

    async def action_toggle_orientation(self) -> None:
        self.presenter.toggle_orientation()
        await self.rebuild_charts()

    async def action_zoom_in(self) -> None:
        self.presenter.change_scale(1)
        await self.rebuild_charts()

    async def action_zoom_out(self) -> None:
        self.presenter.change_scale(-1)
        await self.rebuild_charts()

    def action_blur_input(self) -> None:
        self.set_focus(None)

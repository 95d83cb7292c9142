"""Nodes screen presenter - state updates, loading and render passes."""

from __future__ import annotations

import logging
from typing import Any

from textual.message import Message

from kuberviz.constants.defaults import SCALE_UNIT_STEP
from kuberviz.controllers import ClusterController, WorkerResult
from kuberviz.models.errors import PatternError
from kuberviz.models.layout.node_layout import RenderResult
from kuberviz.models.state import AppState, ConfigError, ConfigManager

logger = logging.getLogger(__name__)

# Input widget id -> settings field
PATTERN_INPUTS: dict[str, str] = {
    "ns-group-system-input": "ns_group_system",
    "ns-group-infra-input": "ns_group_infra",
    "ns-group-prod-input": "ns_group_prod",
    "node-filter-input": "node_filter",
}


# =============================================================================
# Worker Messages
# =============================================================================


class SourcesLoaded(Message):
    """Message carrying the result of loading the node and pod lists."""

    def __init__(self, result: WorkerResult) -> None:
        super().__init__()
        self.result = result


class NodesPresenter:
    """Presenter for NodesScreen - owns every transition of the app state."""

    def __init__(self, screen: Any) -> None:
        """Initialize the presenter.

        Args:
            screen: The parent NodesScreen instance.
        """
        self._screen = screen
        self._result = RenderResult()

    @property
    def state(self) -> AppState:
        return self._screen.app.state

    @property
    def result(self) -> RenderResult:
        """Most recently published render pass."""
        return self._result

    def _publish_state(self, state: AppState) -> None:
        self._screen.app.state = state

    def _persist(self) -> str | None:
        """Save settings, returning a warning message on failure."""
        if not getattr(self._screen.app, "persist_settings", False):
            return None
        try:
            ConfigManager.save(self.state.settings)
        except ConfigError as exc:
            logger.warning(f"settings not saved: {exc}")
            return f"Settings not saved: {exc}"
        return None

    def get_value(self, input_id: str) -> str:
        """Get the current pattern for an input ID."""
        field = PATTERN_INPUTS.get(input_id)
        if field is None:
            return ""
        return str(getattr(self.state.settings, field))

    def rebuild(self) -> RenderResult:
        """Run a full render pass over the current state."""
        self._result = self.state.render()
        return self._result

    def apply_patterns(self, input_values: dict[str, str]) -> tuple[bool, str]:
        """Validate and apply pattern inputs.

        Every pattern is compiled before the state changes, so one invalid
        pattern rejects the whole update and the previous patterns stay active.

        Returns:
            Tuple of (success, message).
        """
        updates = {
            PATTERN_INPUTS[input_id]: value.strip()
            for input_id, value in input_values.items()
            if input_id in PATTERN_INPUTS
        }
        try:
            state = self.state.update_patterns(**updates)
        except PatternError as exc:
            logger.warning(f"rejected pattern update: {exc}")
            return False, str(exc)
        self._publish_state(state)
        warning = self._persist()
        return True, warning or "Patterns updated"

    def toggle_orientation(self) -> bool:
        """Flip which resource runs along the horizontal axis; returns the new ``cpu_x``."""
        cpu_x = not self.state.settings.cpu_x
        self._publish_state(self.state.with_orientation(cpu_x))
        self._persist()
        return cpu_x

    def change_scale(self, steps: int) -> float:
        """Change the scale unit by ``steps`` increments; returns the clamped value."""
        scale_unit = self.state.settings.scale_unit + steps * SCALE_UNIT_STEP
        self._publish_state(self.state.with_scale_unit(scale_unit))
        self._persist()
        return self.state.settings.scale_unit

    def has_sources(self) -> bool:
        settings = self.state.settings
        return bool(settings.nodes_path or settings.pods_path)

    async def load_sources(self) -> WorkerResult:
        """Load the configured node and pod list files."""
        settings = self.state.settings
        controller = ClusterController(settings.nodes_path or None, settings.pods_path or None)
        if not await controller.check_sources():
            logger.warning("node or pod list file not found")
            return WorkerResult(success=False, error="node or pod list file not found")
        return await controller.fetch_all()

    def apply_sources(self, result: WorkerResult) -> tuple[bool, str]:
        """Swap loaded lists into the state.

        Returns:
            Tuple of (success, message).
        """
        if not result.success or result.data is None:
            return False, f"Loading failed: {result.error}"
        data = result.data
        self._publish_state(self.state.with_cluster(data.nodes, data.pods))
        return True, f"{len(data.nodes)} nodes, {len(data.pods)} pods loaded"

    def error_lines(self) -> list[str]:
        """Errors of the last render pass, ready for display."""
        return self._result.error_messages

    def status_text(self) -> str:
        settings = self.state.settings
        axis = "cpu" if settings.cpu_x else "memory"
        hidden = len(self._result.hidden_nodes)
        text = f"x axis: {axis}, scale: {settings.scale_unit:g}, nodes: {len(self._result.layouts)}"
        if hidden:
            text += f" ({hidden} filtered)"
        return text

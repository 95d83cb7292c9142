"""Main application class for kuberviz."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from kuberviz.constants import APP_TITLE
from kuberviz.keyboard.app import APP_BINDINGS
from kuberviz.models.state import (
    AppSettings,
    AppState,
    ConfigLoadError,
    ConfigManager,
)
from kuberviz.screens import NodesScreen
from kuberviz.utils.sample_data import sample_nodes, sample_pods

logger = logging.getLogger(__name__)


class KubervizApp(App[None]):
    """TUI showing how scheduled pods consume each node's capacity."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    # Type hint for state attribute
    state: AppState

    def __init__(
        self,
        nodes_path: Path | None = None,
        pods_path: Path | None = None,
        sample: bool = False,
        settings: AppSettings | None = None,
        persist_settings: bool = True,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.persist_settings = persist_settings
        self.state = AppState(settings=settings or self._load_settings())

        # Apply CLI overrides if provided
        updates: dict[str, str] = {}
        if nodes_path is not None:
            updates["nodes_path"] = str(Path(nodes_path).expanduser().absolute())
        if pods_path is not None:
            updates["pods_path"] = str(Path(pods_path).expanduser().absolute())
        if updates:
            self.state = self.state.with_settings(self.state.settings.model_copy(update=updates))

        if sample:
            self.state = self.state.with_settings(
                self.state.settings.model_copy(update={"nodes_path": "", "pods_path": ""})
            ).with_cluster(sample_nodes(), sample_pods())

    def _load_settings(self) -> AppSettings:
        """Load application settings from persistent storage."""
        if not self.persist_settings:
            return AppSettings()
        try:
            return ConfigManager.load()
        except ConfigLoadError as exc:
            # Use defaults if loading fails
            logger.warning(f"using default settings: {exc}")
            return AppSettings()

    def on_mount(self) -> None:
        self.push_screen(NodesScreen())

    def action_reload(self) -> None:
        """Reload the node and pod list files."""
        screen = self.screen
        if isinstance(screen, NodesScreen) and screen.presenter.has_sources():
            screen.start_loading()
        else:
            self.notify("No node or pod files configured", severity="warning")

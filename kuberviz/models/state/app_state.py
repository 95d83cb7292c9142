"""Immutable application state snapshot.

Every change (settings, orientation, node or pod lists) produces a new
``AppState``; consumers rebuild all layouts from the new snapshot and swap
them in wholesale.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from kuberviz.models.core.node_info import NodeInfo
from kuberviz.models.core.pod_info import PodInfo
from kuberviz.models.state.app_settings import AppSettings
from kuberviz.utils.patterns import compile_optional_pattern, compile_pattern

if TYPE_CHECKING:
    from kuberviz.controllers.layout.params import RenderParams
    from kuberviz.models.layout.node_layout import RenderResult

logger = logging.getLogger(__name__)

_PATTERN_FIELDS = ("ns_group_system", "ns_group_infra", "ns_group_prod")


@dataclass(frozen=True)
class AppState:
    """Nodes, pods and settings read by one render pass."""

    settings: AppSettings = field(default_factory=AppSettings)
    nodes: tuple[NodeInfo, ...] = ()
    pods: tuple[PodInfo, ...] = ()

    @property
    def params(self) -> RenderParams:
        return self.settings.to_render_params()

    def with_cluster(self, nodes: list[NodeInfo], pods: list[PodInfo]) -> AppState:
        return replace(self, nodes=tuple(nodes), pods=tuple(pods))

    def with_settings(self, settings: AppSettings) -> AppState:
        """Return a state using ``settings``.

        Raises:
            PatternError: If any pattern in ``settings`` does not compile.
        """
        settings.to_render_params()
        return replace(self, settings=settings)

    def update_patterns(self, **patterns: str) -> AppState:
        """Return a state with new namespace group patterns and/or node filter.

        Every pattern is compiled before anything changes, so an invalid one
        leaves this state and its patterns untouched.

        Args:
            **patterns: Any of ``ns_group_system``, ``ns_group_infra``,
                ``ns_group_prod`` and ``node_filter``.

        Raises:
            PatternError: If a pattern does not compile.
            KeyError: If an unknown pattern field is given.
        """
        for name, value in patterns.items():
            if name in _PATTERN_FIELDS:
                compile_pattern(value, name)
            elif name == "node_filter":
                compile_optional_pattern(value, name)
            else:
                raise KeyError(name)
        logger.info(f"updating patterns {sorted(patterns)}")
        return replace(self, settings=self.settings.model_copy(update=patterns))

    def with_orientation(self, cpu_x: bool) -> AppState:
        return replace(self, settings=self.settings.model_copy(update={"cpu_x": cpu_x}))

    def with_scale_unit(self, scale_unit: float) -> AppState:
        # model_validate re-applies the scale clamp that model_copy would skip
        settings = AppSettings.model_validate(
            {**self.settings.model_dump(), "scale_unit": scale_unit}
        )
        return replace(self, settings=settings)

    def render(self, parallel: bool = False) -> RenderResult:
        """Run a full render pass over this snapshot."""
        from kuberviz.controllers.layout.controller import LayoutController

        return LayoutController(self.params, parallel=parallel).build_all(self.nodes, self.pods)

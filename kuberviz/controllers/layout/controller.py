"""Layout controller: runs a full render pass over every node.

A render pass assigns pods to nodes, applies the node filter and lays out
each visible node independently. Passes share no mutable state, so they may
run on a thread pool; results are always returned in node order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from kuberviz.controllers.layout.assignment import NodeBox, assign
from kuberviz.controllers.layout.params import RenderParams
from kuberviz.controllers.layout.staircase import StaircaseLayout
from kuberviz.models.core.node_info import NodeInfo
from kuberviz.models.core.pod_info import PodInfo
from kuberviz.models.layout.node_layout import NodeLayout, RenderResult
from kuberviz.models.layout.placement import LayoutIssue

logger = logging.getLogger(__name__)


class LayoutController:
    """Builds the layouts of every node from one immutable snapshot."""

    _MAX_WORKERS = 4

    def __init__(self, params: RenderParams | None = None, parallel: bool = False) -> None:
        self._params = params or RenderParams()
        self._parallel = parallel
        self._layout = StaircaseLayout(self._params)

    @property
    def params(self) -> RenderParams:
        return self._params

    def _layout_box(self, box: NodeBox) -> NodeLayout:
        return self._layout.layout_node(box.node, box.pods)

    def build_all(self, nodes: Iterable[NodeInfo], pods: Iterable[PodInfo]) -> RenderResult:
        """Run a full render pass.

        Args:
            nodes: Node descriptors, in display order.
            pods: Flat pod list, in input order.

        Returns:
            RenderResult with one layout per visible node and every
            assignment and parse error collected along the way.
        """
        assignment = assign(nodes, pods)
        errors: list[LayoutIssue] = list(assignment.errors)

        visible: list[NodeBox] = []
        hidden: list[str] = []
        for name, box in assignment.boxes.items():
            if self._params.shows_node(name):
                visible.append(box)
            else:
                hidden.append(name)

        if self._parallel and len(visible) > 1:
            with ThreadPoolExecutor(max_workers=self._MAX_WORKERS) as executor:
                layouts = list(executor.map(self._layout_box, visible))
        else:
            layouts = [self._layout_box(box) for box in visible]

        for layout in layouts:
            errors.extend(layout.issues)

        logger.info(
            f"render pass complete: {len(layouts)} nodes, {len(hidden)} hidden, "
            f"{len(errors)} errors"
        )
        return RenderResult(
            layouts=tuple(layouts),
            errors=tuple(errors),
            hidden_nodes=tuple(hidden),
        )

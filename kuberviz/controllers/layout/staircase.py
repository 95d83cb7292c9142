"""Staircase packing layout for a single node.

Each pod is placed at the running (cpu, memory) offset and then both
offsets advance by the pod's requests, so consecutive pods form a diagonal
staircase across the node's capacity rectangle. Pods are ordered by their
namespace group first; pods of one namespace keep their input order.
Runs of consecutive pods sharing a namespace are enclosed by a boundary
rectangle.

Offsets are never clamped to the node capacity. An over-subscribed node
draws past its nominal rectangle and is reported by
``NodeLayout.is_oversubscribed`` instead of being corrected.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

from kuberviz.constants.enums import DrawKind, IssueKind, TooltipPriority
from kuberviz.constants.values import BUFFER_NAMESPACE
from kuberviz.controllers.layout.classifier import classify
from kuberviz.controllers.layout.params import RenderParams
from kuberviz.controllers.layout.tooltip_index import TooltipIndex
from kuberviz.models.core.node_info import NodeInfo
from kuberviz.models.core.pod_info import ContainerInfo, PodInfo
from kuberviz.models.errors import ResourceParseError
from kuberviz.models.layout.node_layout import NodeLayout
from kuberviz.models.layout.placement import (
    DrawCommand,
    LayoutIssue,
    NamespaceBoundary,
    PlacedRectangle,
    TooltipRegion,
    WorkloadPlacement,
)
from kuberviz.utils.formatting import resource_text
from kuberviz.utils.resource_parser import parse_cpu, parse_memory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceTotals:
    """Summed requests of a pod plus any quantities that failed to parse."""

    cpu: float = 0.0
    memory: float = 0.0
    issues: tuple[LayoutIssue, ...] = ()


def _parse_issue(subject: str, error: ResourceParseError) -> LayoutIssue:
    return LayoutIssue(
        kind=IssueKind.PARSE,
        subject=subject,
        message=f"{subject}: invalid {error.kind} quantity {error.value!r}",
    )


def container_requests(pod: PodInfo, container: ContainerInfo) -> ResourceTotals:
    """Parse one container's requests.

    A container must request both cpu and memory to count; otherwise it
    contributes nothing and is only logged. A quantity that fails to parse
    contributes 0 for its own dimension and is returned as an issue.
    """
    if not container.cpu_request or not container.memory_request:
        logger.error(f"no resource requests found for {pod.key}/{container.name}")
        return ResourceTotals()

    subject = f"{pod.key}/{container.name}"
    issues: list[LayoutIssue] = []
    cpu = 0.0
    memory = 0.0
    try:
        cpu = parse_cpu(container.cpu_request)
    except ResourceParseError as exc:
        logger.error(f"failed to parse cpu request for {subject}: {exc}")
        issues.append(_parse_issue(subject, exc))
    try:
        memory = parse_memory(container.memory_request)
    except ResourceParseError as exc:
        logger.error(f"failed to parse memory request for {subject}: {exc}")
        issues.append(_parse_issue(subject, exc))
    return ResourceTotals(cpu=cpu, memory=memory, issues=tuple(issues))


def pod_requests(pod: PodInfo) -> ResourceTotals:
    """Sum the requests of every container of ``pod``."""
    cpu = 0.0
    memory = 0.0
    issues: list[LayoutIssue] = []
    for container in pod.containers:
        totals = container_requests(pod, container)
        cpu += totals.cpu
        memory += totals.memory
        issues.extend(totals.issues)
    logger.info(f"got resource requests, cpu={cpu}, mem={memory} for {pod.key}")
    return ResourceTotals(cpu=cpu, memory=memory, issues=tuple(issues))


def sort_pods(pods: Iterable[PodInfo], params: RenderParams) -> list[PodInfo]:
    """Order pods by namespace group, dropping buffer pods.

    ``sorted`` is stable, so pods within one group keep their input order.
    """
    kept = [pod for pod in pods if pod.namespace != BUFFER_NAMESPACE]
    return sorted(kept, key=lambda pod: classify(pod.namespace, params.patterns))


def node_capacity(node: NodeInfo) -> ResourceTotals:
    """Parse a node's capacity, using 0 for a dimension that fails to parse."""
    issues: list[LayoutIssue] = []
    cpu = 0.0
    memory = 0.0
    try:
        cpu = parse_cpu(node.cpu_capacity)
    except ResourceParseError as exc:
        logger.error(f"failed to parse cpu capacity for node {node.name}: {exc}")
        issues.append(_parse_issue(node.name, exc))
    try:
        memory = parse_memory(node.memory_capacity)
    except ResourceParseError as exc:
        logger.error(f"failed to parse memory capacity for node {node.name}: {exc}")
        issues.append(_parse_issue(node.name, exc))
    return ResourceTotals(cpu=cpu, memory=memory, issues=tuple(issues))


class _BoundaryTracker:
    """Opens and closes namespace boundaries as the staircase is walked."""

    def __init__(self, index: TooltipIndex) -> None:
        self._index = index
        self._namespace: str | None = None
        self._start_cpu = 0.0
        self._start_memory = 0.0
        self.boundaries: list[NamespaceBoundary] = []

    @property
    def is_open(self) -> bool:
        return self._namespace is not None

    def advance(self, namespace: str, cpu_offset: float, memory_offset: float) -> NamespaceBoundary | None:
        """Track ``namespace`` starting at the given offsets.

        Returns the boundary closed by a namespace change, if any.
        """
        closed = None
        if self._namespace is not None and namespace != self._namespace:
            closed = self.close(cpu_offset, memory_offset)
        if self._namespace is None:
            self._namespace = namespace
            self._start_cpu = cpu_offset
            self._start_memory = memory_offset
        return closed

    def close(self, cpu_offset: float, memory_offset: float) -> NamespaceBoundary:
        """Close the open boundary at the given offsets and register its tooltip."""
        if self._namespace is None:
            raise RuntimeError("no namespace boundary is open")
        rect = PlacedRectangle(
            x=self._start_cpu,
            y=self._start_memory,
            width=cpu_offset - self._start_cpu,
            height=memory_offset - self._start_memory,
        )
        boundary = NamespaceBoundary(namespace=self._namespace, rect=rect)
        logger.debug(f"closing namespace {self._namespace} at {rect}")
        self._index.register(
            TooltipRegion.over(
                rect,
                f"ns={boundary.namespace}, {resource_text(boundary.cpu, boundary.memory)}",
                TooltipPriority.NAMESPACE,
            )
        )
        self.boundaries.append(boundary)
        self._namespace = None
        return boundary


class StaircaseLayout:
    """Computes the staircase layout of one node at a time.

    Holds only the immutable render parameters, so one instance may lay out
    many nodes, in any order or concurrently.
    """

    def __init__(self, params: RenderParams | None = None) -> None:
        self._params = params or RenderParams()

    @property
    def params(self) -> RenderParams:
        return self._params

    def layout_node(self, node: NodeInfo, pods: Iterable[PodInfo]) -> NodeLayout:
        """Lay out ``pods`` on ``node`` and build the node's tooltip index.

        Args:
            node: Node whose capacity sizes the rectangle.
            pods: Pods assigned to the node, in assignment order.

        Returns:
            A fully populated NodeLayout; nothing in it is mutated afterwards.
        """
        params = self._params
        capacity = node_capacity(node)
        issues: list[LayoutIssue] = list(capacity.issues)
        logger.debug(
            f"identified, node={node.name}, cpu={capacity.cpu}, memory={capacity.memory}"
        )

        if params.cpu_x:
            width_units = math.ceil(capacity.cpu)
            height_units = math.ceil(capacity.memory)
        else:
            width_units = math.ceil(capacity.memory)
            height_units = math.ceil(capacity.cpu)

        index = TooltipIndex()
        tracker = _BoundaryTracker(index)
        placements: list[WorkloadPlacement] = []
        commands: list[DrawCommand] = []
        cpu_offset = 0.0
        memory_offset = 0.0

        for pod in sort_pods(pods, params):
            totals = pod_requests(pod)
            issues.extend(totals.issues)
            group = classify(pod.namespace, params.patterns)
            rect = PlacedRectangle(
                x=cpu_offset,
                y=memory_offset,
                width=totals.cpu,
                height=totals.memory,
            )
            placements.append(
                WorkloadPlacement(
                    namespace=pod.namespace,
                    name=pod.name,
                    group=group,
                    cpu=totals.cpu,
                    memory=totals.memory,
                    rect=rect,
                )
            )
            commands.append(DrawCommand(kind=DrawKind.FILL, rect=rect, group=group))
            index.register(
                TooltipRegion.over(
                    rect,
                    f"{pod.key}, {resource_text(totals.cpu, totals.memory)}",
                    TooltipPriority.WORKLOAD,
                )
            )
            commands.append(DrawCommand(kind=DrawKind.STROKE, rect=rect))

            closed = tracker.advance(pod.namespace, cpu_offset, memory_offset)
            if closed is not None:
                commands.append(DrawCommand(kind=DrawKind.STROKE, rect=closed.rect))

            cpu_offset += totals.cpu
            memory_offset += totals.memory

        if tracker.is_open:
            closed = tracker.close(cpu_offset, memory_offset)
            commands.append(DrawCommand(kind=DrawKind.STROKE, rect=closed.rect))

        layout = NodeLayout(
            node_name=node.name,
            cpu_capacity=capacity.cpu,
            memory_capacity=capacity.memory,
            width_units=width_units,
            height_units=height_units,
            cpu_x=params.cpu_x,
            scale_unit=params.scale_unit,
            placements=tuple(placements),
            boundaries=tuple(tracker.boundaries),
            draw_commands=tuple(commands),
            tooltip_index=index,
            cpu_offset=cpu_offset,
            memory_offset=memory_offset,
            default_tooltip_text=resource_text(capacity.cpu, capacity.memory),
            issues=tuple(issues),
        )
        if layout.is_oversubscribed:
            logger.warning(
                f"node {node.name} is over-subscribed: requests cpu={cpu_offset}, "
                f"mem={memory_offset} exceed capacity cpu={capacity.cpu}, mem={capacity.memory}"
            )
        logger.info(
            f"laid out node {node.name}: {len(placements)} pods, "
            f"{len(tracker.boundaries)} namespace boundaries"
        )
        return layout


def layout_node(
    node: NodeInfo, pods: Iterable[PodInfo], params: RenderParams | None = None
) -> NodeLayout:
    """Convenience wrapper around ``StaircaseLayout.layout_node``."""
    return StaircaseLayout(params).layout_node(node, pods)


__all__ = [
    "ResourceTotals",
    "StaircaseLayout",
    "container_requests",
    "layout_node",
    "node_capacity",
    "pod_requests",
    "sort_pods",
]

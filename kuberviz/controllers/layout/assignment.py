"""Node/pod assignment: group the flat pod list by owning node."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from kuberviz.constants.enums import IssueKind
from kuberviz.models.core.node_info import NodeInfo
from kuberviz.models.core.pod_info import PodInfo
from kuberviz.models.errors import NodeReferenceError
from kuberviz.models.layout.placement import LayoutIssue

logger = logging.getLogger(__name__)


@dataclass
class NodeBox:
    """A node together with the pods bound to it, in input order."""

    node: NodeInfo
    pods: list[PodInfo] = field(default_factory=list)


@dataclass
class AssignmentResult:
    """Per-node layout input plus the pods that could not be assigned."""

    boxes: dict[str, NodeBox] = field(default_factory=dict)
    errors: list[LayoutIssue] = field(default_factory=list)

    def pods_for(self, node_name: str) -> list[PodInfo]:
        box = self.boxes.get(node_name)
        return list(box.pods) if box else []


def resolve_node(pod: PodInfo, boxes: dict[str, NodeBox]) -> NodeBox:
    """Return the box of the node ``pod`` is bound to.

    Raises:
        NodeReferenceError: If the pod has no node name or names an unknown node.
    """
    if not pod.node_name:
        raise NodeReferenceError(f"{pod.key}: missing node reference")
    box = boxes.get(pod.node_name)
    if box is None:
        raise NodeReferenceError(f"{pod.key}: unknown node reference '{pod.node_name}'")
    return box


def assign(nodes: Iterable[NodeInfo], pods: Iterable[PodInfo]) -> AssignmentResult:
    """Group ``pods`` by node, collecting reference errors instead of failing.

    Nodes keep their input order. A node name that appears twice keeps its
    first position and the later descriptor.
    """
    result = AssignmentResult()
    for node in nodes:
        if node.name in result.boxes:
            logger.warning(f"duplicate node name {node.name}, keeping the later descriptor")
        result.boxes[node.name] = NodeBox(node=node)

    for pod in pods:
        try:
            box = resolve_node(pod, result.boxes)
        except NodeReferenceError as exc:
            logger.error(str(exc))
            result.errors.append(
                LayoutIssue(kind=IssueKind.REFERENCE, subject=pod.key, message=str(exc))
            )
            continue
        box.pods.append(pod)

    logger.info(
        f"assigned pods to {len(result.boxes)} nodes, {len(result.errors)} unassigned"
    )
    return result

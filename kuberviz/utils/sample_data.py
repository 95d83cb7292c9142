"""Sample cluster used by ``kuberviz --sample`` and in demos."""

from __future__ import annotations

import uuid

from kuberviz.models.core.node_info import NodeInfo
from kuberviz.models.core.pod_info import ContainerInfo, PodInfo


def random_id() -> str:
    """Return a short random suffix like the ones ReplicaSets append."""
    return uuid.uuid4().hex[:8]


def make_node(name: str, cpu: str, memory: str) -> NodeInfo:
    return NodeInfo(name=name, cpu_capacity=cpu, memory_capacity=memory)


def make_pod(node_name: str, namespace: str, name: str, cpu: str, memory: str, suffix: str | None = None) -> PodInfo:
    return PodInfo(
        namespace=namespace,
        name=f"{name}-{suffix or random_id()}",
        node_name=node_name,
        containers=(ContainerInfo(name=name, cpu_request=cpu, memory_request=memory),),
    )


def sample_nodes() -> list[NodeInfo]:
    return [
        make_node("node-a", "64", "128Gi"),
        make_node("node-b", "32", "64Gi"),
    ]


_SAMPLE_PODS: tuple[tuple[str, str, str, str, str], ...] = (
    ("node-a", "kube-system", "coredns", "1", "512Mi"),
    ("node-a", "monitoring", "fluent-bit", "2", "1Gi"),
    ("node-a", "monitoring", "prometheus", "12", "36Gi"),
    ("node-a", "prod", "pet-store", "4", "16Gi"),
    ("node-a", "prod", "pet-store", "4", "16Gi"),
    ("node-a", "prod", "pet-clinic", "2", "4Gi"),
    ("node-a", "prod", "pet-clinic", "2", "4Gi"),
    ("node-a", "prod", "pet-clinic", "2", "4Gi"),
    ("node-a", "prod", "pet-clinic", "2", "4Gi"),
    ("node-b", "kube-system", "coredns", "1", "512Mi"),
    ("node-b", "monitoring", "fluent-bit", "2", "1Gi"),
    ("node-b", "prod", "pet-store", "4", "16Gi"),
    ("node-b", "prod", "pet-clinic", "2", "4Gi"),
    ("node-b", "prod", "pet-clinic", "2", "4Gi"),
    ("node-b", "prod", "pet-clinic", "2", "4Gi"),
    ("node-b", "prod", "pet-clinic", "2", "4Gi"),
)


def sample_pods(deterministic: bool = False) -> list[PodInfo]:
    """Return the sample pods.

    Args:
        deterministic: Use index-based name suffixes instead of random ones.
    """
    return [
        make_pod(*row, suffix=f"{idx:08x}" if deterministic else None)
        for idx, row in enumerate(_SAMPLE_PODS)
    ]

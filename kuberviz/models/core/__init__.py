"""Core descriptor models."""

from kuberviz.models.core.node_info import NodeInfo
from kuberviz.models.core.pod_info import ContainerInfo, PodInfo

__all__ = ["ContainerInfo", "NodeInfo", "PodInfo"]

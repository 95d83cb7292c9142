"""Init file for cluster module."""

from kuberviz.controllers.cluster.controller import ClusterController, ClusterData
from kuberviz.controllers.cluster.parsers import ListParser

__all__ = ["ClusterController", "ClusterData", "ListParser"]

"""Controllers module for kuberviz.

This module provides domain-driven controllers for loading cluster lists
and computing node layouts.
"""

from __future__ import annotations

# Base classes
from kuberviz.controllers.base import BaseController, WorkerResult

# Cluster domain
from kuberviz.controllers.cluster import ClusterController, ClusterData

# Layout domain
from kuberviz.controllers.layout import LayoutController, RenderParams

__all__ = [
    # Base
    "BaseController",
    # Domain Controllers
    "ClusterController",
    "ClusterData",
    "LayoutController",
    "RenderParams",
    "WorkerResult",
]

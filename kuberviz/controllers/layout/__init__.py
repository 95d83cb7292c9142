"""Layout domain: classification, staircase packing, tooltips, assignment."""

from kuberviz.controllers.layout.assignment import AssignmentResult, NodeBox, assign
from kuberviz.controllers.layout.classifier import NamespacePatterns, classify
from kuberviz.controllers.layout.controller import LayoutController
from kuberviz.controllers.layout.params import RenderParams
from kuberviz.controllers.layout.staircase import StaircaseLayout, layout_node
from kuberviz.controllers.layout.tooltip_index import TooltipIndex

__all__ = [
    "AssignmentResult",
    "LayoutController",
    "NamespacePatterns",
    "NodeBox",
    "RenderParams",
    "StaircaseLayout",
    "TooltipIndex",
    "assign",
    "classify",
    "layout_node",
]

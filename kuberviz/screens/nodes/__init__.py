"""Nodes screen."""

from kuberviz.screens.nodes.nodes_screen import NodesScreen
from kuberviz.screens.nodes.presenter import NodesPresenter

__all__ = ["NodesPresenter", "NodesScreen"]

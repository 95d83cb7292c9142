"""Screens for kuberviz."""

from kuberviz.screens.nodes import NodesScreen

__all__ = ["NodesScreen"]

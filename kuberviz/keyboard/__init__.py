"""Keyboard bindings for kuberviz."""

from kuberviz.keyboard.app import APP_BINDINGS
from kuberviz.keyboard.navigation import NODES_SCREEN_BINDINGS

__all__ = ["APP_BINDINGS", "NODES_SCREEN_BINDINGS"]

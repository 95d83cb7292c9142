"""Screen-specific keyboard bindings."""

from textual.binding import Binding

NODES_SCREEN_BINDINGS: list[Binding] = [
    Binding("o", "toggle_orientation", "Flip axes"),
    Binding("plus,equals_sign", "zoom_in", "Zoom in"),
    Binding("minus", "zoom_out", "Zoom out"),
    Binding("escape", "blur_input", "Charts", show=False),
]

__all__ = [
    "NODES_SCREEN_BINDINGS",
]

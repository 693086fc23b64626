"""
ui/
---
Presentation layer.

    from ui import render_canvas, render_legend, node_status
    from ui import graph_builder, playback_controls, state_panel, …
"""

from ui.canvas import render_canvas, render_legend, node_status, escape_html, CanvasConfig

from ui.controls import (
    graph_builder,
    selection_panel,
    algorithm_selector,
    playback_controls,
    state_panel,
    pseudocode_viewer,
)

__all__ = [
    "render_canvas",
    "render_legend",
    "node_status",
    "escape_html",
    "CanvasConfig",
    "graph_builder",
    "selection_panel",
    "algorithm_selector",
    "playback_controls",
    "state_panel",
    "pseudocode_viewer",
]

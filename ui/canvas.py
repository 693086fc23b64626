"""
canvas.py — SVG Graph Renderer
================================
Pure rendering function: Graph + Snapshot → SVG string.

The renderer consumes:
  • graph      – the Graph (adjacency only; positions come from tree_layout)
  • step       – the current Snapshot (current node, visited, frontier, found)
  • start/goals– the user's selection, for the start / goal colours
  • config     – visual config (canvas size, colours, fonts, …)

Design decisions:
  - NO mutation.  Stateless — the caller passes in everything it needs and
    gets back a string.
  - A node's colour comes from exactly one NodeStatus, chosen by walking
    STATUS_PRECEDENCE top to bottom and taking the first predicate that
    holds.  The order IS the colouring rule:
        found > current > visited > frontier > start > goal > default
  - Edges are drawn first so nodes sit on top; an edge whose endpoint was
    not positioned by the layout is skipped.
"""

import math
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from graph import Graph, LayoutNode, NodeStatus, tree_layout
from search.snapshot import Snapshot


# ---------------------------------------------------------------------------
# Visual Config — colour palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 600
    height: int = 350
    bg:     str = "#ffffff"

    # node fill per status
    node_colors: Dict[NodeStatus, str] = {
        NodeStatus.FOUND:    "#10b981",
        NodeStatus.CURRENT:  "#3b82f6",
        NodeStatus.VISITED:  "#313131",
        NodeStatus.FRONTIER: "#f59e0b",
        NodeStatus.START:    "#059669",
        NodeStatus.GOAL:     "#dc2626",
        NodeStatus.DEFAULT:  "#a8a8a8",
    }

    # node outline
    stroke_goal:    str = "#b91c1c"
    stroke_current: str = "#1d4ed8"
    stroke_start:   str = "#047857"
    stroke_default: str = "#9ca3af"

    # node
    node_radius:        int = 20
    node_stroke_width:  int = 3
    node_label_color:   str = "#ffffff"
    node_label_size:    int = 14
    node_label_weight:  str = "700"

    # edge
    edge_color:       str = "#9ca3af"
    edge_width:       int = 2
    edge_arrow_size:  int = 10

    empty_text:       str = "No nodes to display"


CONFIG = CanvasConfig()

LEGEND: List[Tuple[NodeStatus, str]] = [
    (NodeStatus.START,    "Start"),
    (NodeStatus.GOAL,     "Goal"),
    (NodeStatus.CURRENT,  "Current"),
    (NodeStatus.VISITED,  "Visited"),
    (NodeStatus.FRONTIER, "In queue / stack"),
    (NodeStatus.FOUND,    "Found"),
]


# ---------------------------------------------------------------------------
# Node status precedence
# ---------------------------------------------------------------------------
_Predicate = Callable[[str, Optional[Snapshot], Optional[str], Tuple[str, ...]], bool]

STATUS_PRECEDENCE: List[Tuple[NodeStatus, _Predicate]] = [
    (NodeStatus.FOUND,    lambda n, s, start, goals: s is not None and n in s.found),
    (NodeStatus.CURRENT,  lambda n, s, start, goals: s is not None and n == s.current_node),
    (NodeStatus.VISITED,  lambda n, s, start, goals: s is not None and n in s.visited),
    (NodeStatus.FRONTIER, lambda n, s, start, goals: s is not None and (n in s.queue or n in s.stack)),
    (NodeStatus.START,    lambda n, s, start, goals: n == start),
    (NodeStatus.GOAL,     lambda n, s, start, goals: n in goals),
]


def node_status(
    node_id: str,
    step: Optional[Snapshot] = None,
    start: Optional[str] = None,
    goals: Iterable[str] = (),
) -> NodeStatus:
    goals = tuple(goals)
    for status, holds in STATUS_PRECEDENCE:
        if holds(node_id, step, start, goals):
            return status
    return NodeStatus.DEFAULT


def _stroke(node_id: str, step: Optional[Snapshot], start: Optional[str], goals: Tuple[str, ...], config: CanvasConfig) -> str:
    if node_id in goals:
        return config.stroke_goal
    if step is not None and step.current_node == node_id:
        return config.stroke_current
    if node_id == start:
        return config.stroke_start
    return config.stroke_default


def escape_html(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    graph: Graph,
    step: Optional[Snapshot] = None,
    start: Optional[str] = None,
    goals: Iterable[str] = (),
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        graph  : The graph to render.
        step   : Current snapshot (or None for the static graph).
        start  : Start node; also the preferred layout root.
        goals  : Goal nodes.
        config : Visual config.
    """
    goals = tuple(goals)
    nodes, edges = tree_layout(graph, start, config.width, config.height)

    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">'
    ]

    if not nodes:
        svg_parts.append(
            f'<text x="{config.width / 2}" y="{config.height / 2}" text-anchor="middle" '
            f'fill="{config.stroke_default}">{config.empty_text}</text>'
        )
        svg_parts.append("</svg>")
        return "\n".join(svg_parts)

    by_id = {n.id: n for n in nodes}

    # -- edges (draw first so nodes sit on top) --
    for edge in edges:
        src, tgt = by_id.get(edge.source), by_id.get(edge.target)
        if src and tgt:
            svg_parts.append(_render_edge(src, tgt, config))

    # -- nodes --
    for node in nodes:
        svg_parts.append(_render_node(node, step, start, goals, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Node Rendering
# ---------------------------------------------------------------------------
def _render_node(
    node: LayoutNode,
    step: Optional[Snapshot],
    start: Optional[str],
    goals: Tuple[str, ...],
    config: CanvasConfig,
) -> str:
    status = node_status(node.id, step, start, goals)
    fill   = config.node_colors[status]
    stroke = _stroke(node.id, step, start, goals, config)
    label  = escape_html(node.id)
    cx, cy = node.x, node.y

    parts = [
        f'<g class="node node-{status.value}" data-id="{label}">',
        f'  <circle cx="{cx}" cy="{cy}" r="{config.node_radius}" '
        f'fill="{fill}" stroke="{stroke}" stroke-width="{config.node_stroke_width}"/>',
        f'  <text x="{cx}" y="{cy}" text-anchor="middle" dominant-baseline="middle" '
        f'font-size="{config.node_label_size}" font-weight="{config.node_label_weight}" '
        f'fill="{config.node_label_color}">{label}</text>',
        '</g>',
    ]
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Edge Rendering
# ---------------------------------------------------------------------------
def _render_edge(src: LayoutNode, tgt: LayoutNode, config: CanvasConfig) -> str:
    x1, y1 = src.x, src.y
    x2, y2 = tgt.x, tgt.y

    # shorten the line by node_radius on both ends
    dx, dy = x2 - x1, y2 - y1
    dist = math.sqrt(dx * dx + dy * dy)
    if dist < 0.001:
        return ""

    ux, uy = dx / dist, dy / dist
    r = config.node_radius
    x1_adj, y1_adj = x1 + ux * r, y1 + uy * r
    x2_adj, y2_adj = x2 - ux * r, y2 - uy * r

    return "\n".join([
        f'<g class="edge" data-from="{escape_html(src.id)}" data-to="{escape_html(tgt.id)}">',
        f'  <line x1="{x1_adj}" y1="{y1_adj}" x2="{x2_adj}" y2="{y2_adj}" '
        f'stroke="{config.edge_color}" stroke-width="{config.edge_width}"/>',
        _render_arrow(x2_adj, y2_adj, ux, uy, config.edge_color, config),
        '</g>',
    ])


def _render_arrow(x: float, y: float, ux: float, uy: float, color: str, config: CanvasConfig) -> str:
    """Draw an arrowhead at (x, y) pointing in direction (ux, uy)."""
    size = config.edge_arrow_size
    px, py = -uy, ux
    p1_x = x - ux * size + px * (size * 0.5)
    p1_y = y - uy * size + py * (size * 0.5)
    p2_x = x - ux * size - px * (size * 0.5)
    p2_y = y - uy * size - py * (size * 0.5)
    return f'  <polygon points="{x},{y} {p1_x},{p1_y} {p2_x},{p2_y}" fill="{color}"/>'


# ---------------------------------------------------------------------------
# Legend
# ---------------------------------------------------------------------------
def render_legend(config: CanvasConfig = CONFIG) -> str:
    items = [
        f'<span class="legend-item"><span class="legend-dot" '
        f'style="background: {config.node_colors[status]};"></span>{text}</span>'
        for status, text in LEGEND
    ]
    return f'<div class="legend">{"".join(items)}</div>'

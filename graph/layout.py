"""
layout.py — Tree Layout
========================
Assigns canvas coordinates to every node so the graph can be drawn as a
top-down forest:

    1. pick a root          (preferred root → a node nobody points to → first key)
    2. level every node     (BFS depth from the root → y coordinate)
    3. post-order the nodes (children before parents)
    4. place them           (leaves left-to-right, parents over the mean of their children)
    5. centre horizontally  (shift the whole span into the middle of the canvas)

The edge list is returned untouched: literal (from, to) pairs.

Design decisions:
  - Pure function of (graph, root, width, height).  No state survives the call.
  - Post-order and levelling use explicit stacks / queues (no Python recursion
    limit issues on long chains).
  - Successors that are not graph keys are never positioned; the renderer
    skips any edge whose endpoint is missing.
  - Nodes the root cannot reach are levelled from the node where the
    post-order fallback picks them up, clamped to the main tree's depth.
"""

import logging
from collections import deque
from typing import Dict, List, Optional, Tuple

from graph.graph import Graph
from graph.node import LayoutNode
from graph.edge import LayoutEdge

logger = logging.getLogger(__name__)


# Horizontal distance between two consecutive leaves, in pixels.
LEAF_SPACING: float = 70.0


def choose_root(graph: Graph, preferred_root: Optional[str] = None) -> Optional[str]:
    """`preferred_root` if it is a node, else the first node with no parent, else the first node."""
    node_ids = graph.node_ids()
    if not node_ids:
        return None
    if preferred_root and preferred_root in graph:
        return preferred_root
    children = {tgt for _, tgt in graph.edges()}
    for node_id in node_ids:
        if node_id not in children:
            return node_id
    return node_ids[0]


def tree_layout(
    graph: Graph,
    preferred_root: Optional[str],
    width: float,
    height: float,
) -> Tuple[List[LayoutNode], List[LayoutEdge]]:
    """
    Position every node of `graph` on a `width` × `height` canvas.

    Returns:
        (nodes, edges) – nodes in post-order, edges in adjacency order.
        Both lists are empty for an empty graph.
    """
    root = choose_root(graph, preferred_root)
    if root is None:
        return [], []

    # --- 1. levels from the main root ---
    levels: Dict[str, int] = {}
    max_level = _assign_levels(graph, root, levels)

    # --- 2. post-order: main root first, then whatever it could not reach ---
    post_order: List[str] = []
    seen: set = set()
    for start in [root] + graph.node_ids():
        if start in seen:
            continue
        if start not in levels:
            _assign_levels(graph, start, levels, cap=max_level)
        _post_order(graph, start, seen, post_order)

    # --- 3. coordinates, children before parents ---
    v_spacing = height / (max_level + 2)
    next_leaf_x = 0.0
    xs: Dict[str, float] = {}
    for node_id in post_order:
        child_xs = [xs[c] for c in graph.successors(node_id) if c in xs]
        if child_xs:
            xs[node_id] = sum(child_xs) / len(child_xs)
        else:
            xs[node_id] = next_leaf_x
            next_leaf_x += LEAF_SPACING

    # --- 4. centre the horizontal span ---
    min_x = min(xs.values())
    span = max(xs.values()) - min_x
    if span > 0:
        offset = (width - span) / 2 - min_x
    else:
        offset = width / 2 - min_x

    nodes = [
        LayoutNode(
            id=node_id,
            x=xs[node_id] + offset,
            y=(levels[node_id] + 1) * v_spacing,
            level=levels[node_id],
        )
        for node_id in post_order
    ]
    edges = [LayoutEdge(src, tgt) for src, tgt in graph.edges()]

    logger.debug(
        "Tree layout: root=%s, %d nodes, %d edges, max_level=%d",
        root, len(nodes), len(edges), max_level,
    )
    return nodes, edges


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _assign_levels(
    graph: Graph,
    start: str,
    levels: Dict[str, int],
    cap: Optional[int] = None,
) -> int:
    """BFS from `start`, levelling nodes not levelled yet.  Returns the deepest level seen."""
    levels[start] = 0
    queue = deque([start])
    deepest = 0
    while queue:
        node_id = queue.popleft()
        level = levels[node_id]
        deepest = max(deepest, level)
        for child in graph.successors(node_id):
            if child in graph and child not in levels:
                levels[child] = level + 1 if cap is None else min(level + 1, cap)
                queue.append(child)
    return deepest


def _post_order(graph: Graph, start: str, seen: set, out: List[str]) -> None:
    """Append every unseen node reachable from `start` to `out`, children first."""
    seen.add(start)
    stack = [(start, iter(graph.successors(start)))]
    while stack:
        node_id, children = stack[-1]
        for child in children:
            if child in graph and child not in seen:
                seen.add(child)
                stack.append((child, iter(graph.successors(child))))
                break
        else:
            stack.pop()
            out.append(node_id)

"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, GraphError, normalize_id
    from graph import LayoutNode, LayoutEdge, NodeStatus
    from graph import tree_layout
"""

from graph.graph  import Graph, GraphError, normalize_id, EXAMPLE_START, EXAMPLE_GOALS
from graph.node   import LayoutNode, NodeStatus
from graph.edge   import LayoutEdge
from graph.layout import tree_layout, choose_root, LEAF_SPACING

__all__ = [
    "Graph",       "GraphError",   "normalize_id",
    "EXAMPLE_START", "EXAMPLE_GOALS",
    "LayoutNode",  "NodeStatus",
    "LayoutEdge",
    "tree_layout", "choose_root",  "LEAF_SPACING",
]

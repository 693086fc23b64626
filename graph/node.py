from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Node Status Enum — maps 1-to-1 with the colour legend
# ---------------------------------------------------------------------------
class NodeStatus(Enum):
    FOUND    = "found"      # green — goal already discovered
    CURRENT  = "current"    # blue — the node under consideration RIGHT NOW
    VISITED  = "visited"    # charcoal — already expanded
    FRONTIER = "frontier"   # amber — waiting in the queue / stack
    START    = "start"      # dark green — start node
    GOAL     = "goal"       # red — goal not found yet
    DEFAULT  = "default"    # grey


# ---------------------------------------------------------------------------
# LayoutNode
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class LayoutNode:
    """
    A node with the coordinates the tree layout assigned to it.

    Attributes:
        id    : Node identifier.
        x, y  : Canvas coordinates in pixels.
        level : Depth below the layout root (0 for the root).
    """

    id:    str
    x:     float
    y:     float
    level: int = 0

    def to_dict(self) -> dict:
        return {"id": self.id, "x": self.x, "y": self.y, "level": self.level}

"""
edge.py — Layout Edge
=====================
A literal `(source, target)` pair taken from the graph's adjacency.

Edges carry no geometry: the renderer looks both endpoints up in the
layout and skips the edge if either one was not positioned.
"""

from typing import NamedTuple


class LayoutEdge(NamedTuple):
    source: str
    target: str

    def to_dict(self) -> dict:
        return {"source": self.source, "target": self.target}

    def __repr__(self) -> str:
        return f"LayoutEdge({self.source} → {self.target})"

"""
graph.py — Directed Graph Container & Builder
==============================================
Single source of truth for the graph.  The search engine, the tree
layout and the renderer all read from this object; only the builder
operations below write to it.

Responsibilities:
  1. Node CRUD                               (add / remove / has)
  2. Edge CRUD                               (add / remove, no self-loops, no duplicates)
  3. Adjacency queries                       (successors, edges, node_ids)
  4. Example graph factory                   (Graph.example)
  5. Import from adjacency-list text         (text → graph)
  6. Serialisation round-trip                (to_dict / from_dict)

Design decisions:
  - The whole structure is one ordered dict  `_adj[node_id] → [successor_id, …]`.
    Insertion order of keys and of successor lists is preserved; algorithms
    depend on it for their left-to-right exploration order.
  - Node ids are normalised (stripped, upper-cased) at every entry point.
  - A successor that is not itself a key is tolerated everywhere: it
    simply has no successors of its own.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


EXAMPLE_START: str = "A"
EXAMPLE_GOALS: Tuple[str, ...] = ("B", "L")

_EXAMPLE_ADJACENCY: Dict[str, List[str]] = {
    "A": ["D", "F", "G"],
    "D": ["H", "J"],
    "F": ["C", "E"],
    "G": [],
    "H": ["B"],
    "J": ["K"],
    "C": ["Z", "W"],
    "E": [],
    "B": [],
    "K": ["L"],
    "Z": [],
    "W": [],
    "L": [],
}


class GraphError(ValueError):
    """Raised by builder operations that receive an unusable node name."""


def normalize_id(name: Optional[str]) -> str:
    """Canonical form of a node name: surrounding whitespace removed, upper-case."""
    return (name or "").strip().upper()


class Graph:
    """
    Attributes:
        _adj : {node_id: [successor_id, …]}  – ordered, directed, unweighted
    """

    def __init__(self):
        self._adj: Dict[str, List[str]] = {}

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, name: str) -> str:
        """Add a node and return its normalised id."""
        node_id = normalize_id(name)
        if not node_id:
            raise GraphError("Node name must not be empty")
        if node_id in self._adj:
            raise GraphError(f"Node '{node_id}' already exists")
        self._adj[node_id] = []
        return node_id

    def remove_node(self, name: str) -> bool:
        """Delete a node and every edge pointing at it.  False if it was absent."""
        node_id = normalize_id(name)
        if node_id not in self._adj:
            return False
        del self._adj[node_id]
        for succs in self._adj.values():
            succs[:] = [s for s in succs if s != node_id]
        return True

    def has_node(self, name: str) -> bool:
        return normalize_id(name) in self._adj

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, source: str, target: str) -> bool:
        """
        Append `target` to `source`'s successors.

        Both endpoints must already be nodes.  A self-loop or an edge that
        already exists is ignored; the return value says whether the
        graph changed.
        """
        src, tgt = normalize_id(source), normalize_id(target)
        for node_id in (src, tgt):
            if node_id not in self._adj:
                raise GraphError(f"Unknown node '{node_id}'")
        if src == tgt or tgt in self._adj[src]:
            return False
        self._adj[src].append(tgt)
        return True

    def remove_edge(self, source: str, target: str) -> bool:
        src, tgt = normalize_id(source), normalize_id(target)
        succs = self._adj.get(src)
        if not succs or tgt not in succs:
            return False
        succs.remove(tgt)
        return True

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def successors(self, node_id: str) -> List[str]:
        """Successors in insertion order; [] for an unknown id."""
        return list(self._adj.get(node_id, []))

    def edges(self) -> List[Tuple[str, str]]:
        return [(src, tgt) for src, succs in self._adj.items() for tgt in succs]

    def node_ids(self) -> List[str]:
        return list(self._adj.keys())

    def clear(self) -> None:
        self._adj.clear()

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> Dict[str, List[str]]:
        return {node_id: list(succs) for node_id, succs in self._adj.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Iterable[str]]) -> "Graph":
        """
        Load a raw adjacency mapping.  Ids are normalised, self-loops and
        repeated successors dropped; successors that are not keys are kept.
        """
        g = cls()
        for raw_id in data:
            node_id = normalize_id(raw_id)
            if node_id:
                g._adj.setdefault(node_id, [])
        for raw_id, raw_succs in data.items():
            node_id = normalize_id(raw_id)
            if not node_id:
                continue
            succs = g._adj[node_id]
            for raw_succ in raw_succs or []:
                succ = normalize_id(raw_succ)
                if succ and succ != node_id and succ not in succs:
                    succs.append(succ)
        return g

    # ==================================================================
    # FACTORIES
    # ==================================================================
    @classmethod
    def example(cls) -> "Graph":
        """The bundled demo tree (start A, goals B and L)."""
        return cls.from_dict(_EXAMPLE_ADJACENCY)

    @classmethod
    def from_adjacency_list(cls, text: str) -> "Graph":
        """
        Parse a simple text adjacency list.

        Supported formats (one node per line):
            A: B C D            → A points to B, C, D
            A -> B, C           → alternate arrow syntax
            A → B               → unicode arrow
            # comment           → ignored

        Successors mentioned only on the right-hand side become nodes too.
        """
        g = cls()
        pending: List[Tuple[str, List[str]]] = []

        for line in text.strip().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if ":" in line:
                parts = line.split(":", 1)
            elif "→" in line:
                parts = line.split("→", 1)
            elif "->" in line:
                parts = line.split("->", 1)
            else:
                parts = [line]

            src = normalize_id(parts[0])
            if not src:
                raise GraphError(f"Missing node name in line: {line!r}")
            targets = parts[1].replace(",", " ").split() if len(parts) > 1 else []
            pending.append((src, targets))

        for src, targets in pending:
            if not g.has_node(src):
                g.add_node(src)
            for tgt in targets:
                if not g.has_node(tgt):
                    g.add_node(tgt)

        for src, targets in pending:
            for tgt in targets:
                g.add_edge(src, tgt)

        logger.debug("Imported graph with %d nodes and %d edges", g.node_count(), g.edge_count())
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        return sum(len(succs) for succs in self._adj.values())

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"

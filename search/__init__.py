"""
search/__init__.py — Algorithm Registry
=========================================
Single source of truth for every search strategy the stepper knows about.

    from search import REGISTRY, get_algorithm, run

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, pseudocode, frontier_kind, description),
        …
    }

Every `fn` is a generator  fn(graph, start, goals) → Iterator[Snapshot].
`run` drains one into a list: the eager, indexable run the stepper plays.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Dict, Optional

from graph import Graph
from search.snapshot import Action, Snapshot, SnapshotBuilder
from search.bfs       import bfs       as _bfs,       PSEUDOCODE as _bfs_pc
from search.dfs       import dfs       as _dfs,       PSEUDOCODE as _dfs_pc
from search.backtrack import backtrack as _backtrack, PSEUDOCODE as _bt_pc, MAX_DEPTH


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    key:           str          # registry key, e.g. "bfs"
    label:         str          # human label, e.g. "Breadth-First Search (BFS)"
    fn:            Callable     # the generator function
    pseudocode:    List[str]    # lines for the side-panel
    frontier_kind: str = ""     # "queue", "stack" or "" (implicit call stack)
    description:   str = ""     # one-liner for the UI card


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search (BFS)", fn=_bfs, pseudocode=_bfs_pc,
        frontier_kind="queue",
        description="Explores layer by layer using a FIFO queue.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search (DFS)", fn=_dfs, pseudocode=_dfs_pc,
        frontier_kind="stack",
        description="Dives deep first using a LIFO stack.",
    ),

    "backtrack": AlgoInfo(
        key="backtrack", label="Backtracking Search", fn=_backtrack, pseudocode=_bt_pc,
        description=f"Recursive search that undoes failed branches (depth limit {MAX_DEPTH}).",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def run(key: str, graph: Graph, start: Optional[str], goals: Iterable[str]) -> List[Snapshot]:
    """Compute the complete snapshot sequence for one algorithm invocation."""
    info = get_algorithm(key)
    if info is None:
        raise ValueError(f"Unknown algorithm: {key}")
    return list(info.fn(graph, start, goals))


__all__ = [
    "Action",
    "AlgoInfo",
    "MAX_DEPTH",
    "REGISTRY",
    "Snapshot",
    "SnapshotBuilder",
    "get_algorithm",
    "list_algorithms",
    "run",
]

"""
backtrack.py — Backtracking Search
====================================
Recursive depth-first search with undo-on-failure, able to collect
several goals across different branches.

State carried through the recursion:
  • path / visited  – owned by each call.  Children receive copies, so a
                      node visited in an abandoned branch can be visited
                      again from a sibling branch.
  • permanent       – shared by the whole run.  The moment a goal is
                      found, every node on the path to it joins this set
                      and is excluded from all later branches.

Yields a Snapshot at:
  1. Depth beyond MAX_DEPTH   →  DEPTH_LIMIT, branch fails
  2. Enter a node             →  VISIT
  3. Node is an unfound goal  →  GOAL_FOUND (whole run stops once every goal is found)
  4. No child succeeded       →  BACKTRACK, path shown without the current node

The visited set in each snapshot is branch visited ∪ permanent.

Each recursive call is itself a generator; `yield from` forwards its
snapshots and hands back its success flag as the generator's return value.
"""

import logging
from typing import Dict, Generator, Iterable, Iterator, List, Optional, Tuple

from graph import Graph
from search.snapshot import Action, Snapshot, SnapshotBuilder, goal_message, unique_goals

logger = logging.getLogger(__name__)


# Deepest recursion level that is still expanded (the start node is depth 0).
MAX_DEPTH: int = 8


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BACKTRACK(node, path, visited, depth):",
    "    if depth > MAX_DEPTH: return FAIL",
    "    visited.add(node); path.add(node)",
    "    if node in goals and node not in found:",
    "        found.add(node); permanent ∪= path",
    "        if found = goals: return SUCCESS",
    "    for neighbour in adj(node):",
    "        if neighbour not in visited ∪ permanent:",
    "            if BACKTRACK(neighbour, copy(path), copy(visited), depth + 1):",
    "                return SUCCESS",
    "    return FAIL",
]


class _Run:
    """Per-run shared state: the snapshot builder, goals, found list and permanent set."""

    def __init__(self, graph: Graph, goals: Tuple[str, ...]):
        self.graph = graph
        self.goals = goals
        self.sb = SnapshotBuilder("Backtrack")
        self.found: List[str] = []
        # dict as an insertion-ordered set
        self.permanent: Dict[str, None] = {}

    def combined(self, visited: List[str]) -> List[str]:
        return list(dict.fromkeys(visited + list(self.permanent)))

    def snap(self, action: Action, node: str, visited: List[str], path: List[str], description: str) -> Snapshot:
        return self.sb.build(
            action, node,
            visited=self.combined(visited), path=path, found=self.found,
            description=description,
        )

    def descend(
        self,
        current: str,
        path: List[str],
        visited: List[str],
        depth: int,
    ) -> Generator[Snapshot, None, bool]:
        if depth > MAX_DEPTH:
            yield self.snap(
                Action.DEPTH_LIMIT, current, visited, path,
                f"Depth limit reached at {current} (depth {depth})",
            )
            return False

        visited.append(current)
        path.append(current)
        yield self.snap(Action.VISIT, current, visited, path, f"Visiting node: {current} (depth {depth})")

        if current in self.goals and current not in self.found:
            self.found.append(current)
            self.permanent.update(dict.fromkeys(path))
            yield self.snap(
                Action.GOAL_FOUND, current, visited, path,
                goal_message(current, self.found, self.goals),
            )
            if len(self.found) == len(self.goals):
                return True

        for nbr in self.graph.successors(current):
            if nbr in visited or nbr in self.permanent:
                continue
            succeeded = yield from self.descend(nbr, list(path), list(visited), depth + 1)
            if succeeded:
                return True

        yield self.snap(
            Action.BACKTRACK, current, visited, path[:-1],
            f"Backtracking from {current}, no more options",
        )
        return False


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def backtrack(
    graph: Graph,
    start: Optional[str],
    goals: Iterable[str],
) -> Iterator[Snapshot]:
    """
    Yields Snapshot objects for a backtracking search from `start`.

    Terminates on any graph, cycles included: recursion stops at MAX_DEPTH.
    """
    if not start or start not in graph:
        return

    run = _Run(graph, unique_goals(goals))
    succeeded = yield from run.descend(start, [], [], 0)
    logger.debug(
        "Backtrack from %s: %d steps, found %d/%d goals, success=%s",
        start, run.sb.count, len(run.found), len(run.goals), succeeded,
    )

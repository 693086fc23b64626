"""
dfs.py — Depth-First Search
=============================
Generator-based DFS over several goals using an explicit stack
(no Python recursion limit issues).

Yields a Snapshot at:
  1. Push the start node onto the stack
  2. Pop an unvisited node   →  VISIT
  3. Popped node is a goal   →  GOAL_FOUND (stop once every goal is found)
  4. Push unvisited neighbour →  PUSH, path = [current, neighbour]

Neighbours are pushed in reversed adjacency order so they come off the
stack left-to-right.  The stack is not de-duplicated: a node reachable
from several parents can sit on it more than once.  When such a stale
copy is popped it is skipped without a snapshot.
"""

import logging
from typing import Iterable, Iterator, List, Optional

from graph import Graph
from search.snapshot import Action, Snapshot, SnapshotBuilder, goal_message, unique_goals

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def DFS(graph, start, goals):",
    "    stack ← [start]; visited ← []; found ← []",
    "    while stack and found ≠ goals:",
    "        node ← stack.pop()",
    "        if node in visited: continue",
    "        visited.add(node)",
    "        if node in goals and node not in found:",
    "            found.add(node)",
    "            if found = goals: stop",
    "        for neighbour in reversed(adj(node)):",
    "            if neighbour not in visited:",
    "                stack.push(neighbour)",
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs(
    graph: Graph,
    start: Optional[str],
    goals: Iterable[str],
) -> Iterator[Snapshot]:
    """Iterative DFS, "mark on pop"."""
    if not start or start not in graph:
        return

    goals = unique_goals(goals)
    sb      = SnapshotBuilder("DFS")
    stack   = [start]
    visited: List[str] = []
    found:   List[str] = []

    yield sb.build(
        Action.INITIALIZE, start,
        stack=stack, visited=visited, path=[start], found=found,
        description=f"Initialise stack with start node: {start}",
    )

    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.append(current)

        yield sb.build(
            Action.VISIT, current,
            stack=stack, visited=visited, path=[current], found=found,
            description=f"Visiting node: {current}",
        )

        if current in goals and current not in found:
            found.append(current)
            yield sb.build(
                Action.GOAL_FOUND, current,
                stack=stack, visited=visited, path=[current], found=found,
                description=goal_message(current, found, goals),
            )
            if len(found) == len(goals):
                break

        for nbr in reversed(graph.successors(current)):
            if nbr not in visited:
                stack.append(nbr)
                yield sb.build(
                    Action.PUSH, current,
                    stack=stack, visited=visited, path=[current, nbr], found=found,
                    description=f"Pushing {nbr} onto the stack from {current}",
                )

    logger.debug("DFS from %s: %d steps, found %d/%d goals", start, sb.count, len(found), len(goals))

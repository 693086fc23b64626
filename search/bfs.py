"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS over several goals.  Yields a Snapshot at every
meaningful event:
  1. Initialise the queue with the start node
  2. Dequeue a node          →  VISIT
  3. Dequeued node is a goal →  GOAL_FOUND (stop once every goal is found)
  4. Enqueue unseen neighbour →  ENQUEUE, path = [current, neighbour]

A neighbour is enqueued only if it is neither visited nor already
waiting in the queue, so every node is dequeued at most once.
"""

import logging
from collections import deque
from typing import Iterable, Iterator, List, Optional

from graph import Graph
from search.snapshot import Action, Snapshot, SnapshotBuilder, goal_message, unique_goals

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, start, goals):",
    "    queue ← [start]; visited ← []; found ← []",
    "    while queue and found ≠ goals:",
    "        node ← queue.dequeue(); visited.add(node)",
    "        if node in goals and node not in found:",
    "            found.add(node)",
    "            if found = goals: stop",
    "        for neighbour in adj(node):",
    "            if neighbour not in visited and not in queue:",
    "                queue.enqueue(neighbour)",
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(
    graph: Graph,
    start: Optional[str],
    goals: Iterable[str],
) -> Iterator[Snapshot]:
    """
    Yields Snapshot objects for every event during BFS execution.

    Args:
        graph : The graph to search.
        start : Starting node id.  Nothing is yielded unless it is a node of `graph`.
        goals : Goal node ids.  With no goals the queue is simply exhausted.
    """
    if not start or start not in graph:
        return

    goals = unique_goals(goals)
    sb      = SnapshotBuilder("BFS")
    queue   = deque([start])
    visited: List[str] = []
    found:   List[str] = []

    yield sb.build(
        Action.INITIALIZE, start,
        queue=queue, visited=visited, path=[start], found=found,
        description=f"Initialise queue with start node: {start}",
    )

    while queue:
        current = queue.popleft()
        visited.append(current)

        yield sb.build(
            Action.VISIT, current,
            queue=queue, visited=visited, path=[current], found=found,
            description=f"Visiting node: {current}",
        )

        if current in goals and current not in found:
            found.append(current)
            yield sb.build(
                Action.GOAL_FOUND, current,
                queue=queue, visited=visited, path=[current], found=found,
                description=goal_message(current, found, goals),
            )
            if len(found) == len(goals):
                break

        for nbr in graph.successors(current):
            if nbr not in visited and nbr not in queue:
                queue.append(nbr)
                yield sb.build(
                    Action.ENQUEUE, current,
                    queue=queue, visited=visited, path=[current, nbr], found=found,
                    description=f"Adding {nbr} to the queue from {current}",
                )

    logger.debug("BFS from %s: %d steps, found %d/%d goals", start, sb.count, len(found), len(goals))

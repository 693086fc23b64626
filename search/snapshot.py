"""
snapshot.py — Search Snapshot
==============================
Every search algorithm is a generator that yields Snapshot objects.
A Snapshot is a frozen-in-time picture of the algorithm's complete
internal state at one decision point:

    • What just happened            (action tag + human description)
    • Which node is being considered
    • The frontier                  (queue for BFS, stack for DFS; both always present)
    • The visited nodes             (order of first visit)
    • The path tied to this event   (meaning differs per algorithm)
    • The goals found so far        (order of discovery)

Design decisions:
  - Snapshot is a frozen dataclass whose sequences are tuples, so a run
    handed to the stepper / renderer can never be mutated afterwards.
  - Step numbers are assigned by SnapshotBuilder, which is the only
    writer; algorithms never count steps themselves.
  - to_dict / from_dict keep the session round-trip in one place.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Tuple


class Action(Enum):
    INITIALIZE  = "initialize"
    VISIT       = "visit"
    GOAL_FOUND  = "goal_found"
    ENQUEUE     = "enqueue"
    PUSH        = "push"
    DEPTH_LIMIT = "depth_limit"
    BACKTRACK   = "backtrack"

    @property
    def label(self) -> str:
        return _ACTION_LABELS[self]


_ACTION_LABELS: Dict[Action, str] = {
    Action.INITIALIZE:  "Initialize",
    Action.VISIT:       "Visit",
    Action.GOAL_FOUND:  "Goal found",
    Action.ENQUEUE:     "Add to queue",
    Action.PUSH:        "Push onto stack",
    Action.DEPTH_LIMIT: "Depth limit reached",
    Action.BACKTRACK:   "Backtrack",
}


@dataclass(frozen=True)
class Snapshot:
    """
    Attributes:
        step         : 0-based index of this snapshot in its run.
        algorithm    : Short algorithm name ("BFS", "DFS", "Backtrack").
        action       : What happened at this step.
        current_node : Node under consideration.
        queue        : FIFO frontier, head first (BFS only, else empty).
        stack        : LIFO frontier, top last (DFS only, else empty).
        visited      : Visited nodes in order of first visit.
        path         : Path associated with this event.
        found        : Goals found so far, in discovery order.
        description  : Plain-English account of the step.
    """

    step:         int
    algorithm:    str
    action:       Action
    current_node: str
    queue:        Tuple[str, ...] = ()
    stack:        Tuple[str, ...] = ()
    visited:      Tuple[str, ...] = ()
    path:         Tuple[str, ...] = ()
    found:        Tuple[str, ...] = ()
    description:  str             = ""

    @property
    def frontier(self) -> Tuple[str, ...]:
        return self.queue or self.stack

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step":         self.step,
            "algorithm":    self.algorithm,
            "action":       self.action.value,
            "action_label": self.action.label,
            "current_node": self.current_node,
            "queue":        list(self.queue),
            "stack":        list(self.stack),
            "visited":      list(self.visited),
            "path":         list(self.path),
            "found":        list(self.found),
            "description":  self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Snapshot":
        return cls(
            step=data["step"],
            algorithm=data["algorithm"],
            action=Action(data["action"]),
            current_node=data["current_node"],
            queue=tuple(data.get("queue", ())),
            stack=tuple(data.get("stack", ())),
            visited=tuple(data.get("visited", ())),
            path=tuple(data.get("path", ())),
            found=tuple(data.get("found", ())),
            description=data.get("description", ""),
        )


# ---------------------------------------------------------------------------
# Builder so algorithms don't have to count steps or copy lists themselves
# ---------------------------------------------------------------------------
class SnapshotBuilder:
    """
    Stamps out Snapshots for one run, numbering them consecutively.

    Usage inside an algorithm generator:
        sb = SnapshotBuilder("BFS")
        yield sb.build(Action.VISIT, "A", queue=queue, visited=visited,
                       path=["A"], found=found, description="Visiting node: A")
    """

    def __init__(self, algorithm: str):
        self.algorithm = algorithm
        self.count = 0

    def build(
        self,
        action: Action,
        current_node: str,
        *,
        queue: Iterable[str] = (),
        stack: Iterable[str] = (),
        visited: Iterable[str] = (),
        path: Iterable[str] = (),
        found: Iterable[str] = (),
        description: str = "",
    ) -> Snapshot:
        snap = Snapshot(
            step=self.count,
            algorithm=self.algorithm,
            action=action,
            current_node=current_node,
            queue=tuple(queue),
            stack=tuple(stack),
            visited=tuple(visited),
            path=tuple(path),
            found=tuple(found),
            description=description,
        )
        self.count += 1
        return snap


def unique_goals(goals: Iterable[str]) -> Tuple[str, ...]:
    """De-duplicate goals, keeping the order they were given in."""
    return tuple(dict.fromkeys(goals or ()))


def goal_message(node: str, found: Iterable[str], goals: Tuple[str, ...]) -> str:
    done = len(tuple(found)) == len(goals)
    tail = "Search complete." if done else "Continuing search..."
    return f"Goal node found: {node}! {tail}"

from graph import Graph
from search import Action
from search.backtrack import backtrack, MAX_DEPTH

from helpers import actions, visits


def test_single_goal_stops_at_first_path(diamond_graph):
    steps = list(backtrack(diamond_graph, "A", {"D"}))

    assert actions(steps) == [Action.VISIT, Action.VISIT, Action.VISIT, Action.GOAL_FOUND]
    assert visits(steps) == ["A", "B", "D"]
    last = steps[-1]
    assert last.path == ("A", "B", "D")
    assert last.visited == ("A", "B", "D")
    assert last.found == ("D",)
    assert all(s.queue == () and s.stack == () for s in steps)


def test_second_goal_found_off_the_first_path(diamond_graph):
    steps = list(backtrack(diamond_graph, "A", ["D", "C"]))

    assert actions(steps) == [
        Action.VISIT,       # A
        Action.VISIT,       # B
        Action.VISIT,       # D
        Action.GOAL_FOUND,  # D
        Action.BACKTRACK,   # D
        Action.BACKTRACK,   # B
        Action.VISIT,       # C
        Action.GOAL_FOUND,  # C
    ]
    assert steps[4].path == ("A", "B")
    assert steps[5].path == ("A",)
    # permanent nodes stay in the visited view after the branch unwinds
    assert steps[5].visited == ("A", "B", "D")
    assert steps[6].visited == ("A", "C", "B", "D")
    assert steps[-1].found == ("D", "C")


def test_nodes_on_a_goal_path_are_never_revisited():
    g = Graph.from_dict({"A": ["B", "C"], "B": ["D"], "C": ["B", "E"], "D": [], "E": []})
    steps = list(backtrack(g, "A", ["D", "E"]))

    first_goal = next(i for i, s in enumerate(steps) if s.action == Action.GOAL_FOUND)
    later = visits(steps[first_goal:])
    assert later == ["C", "E"]
    assert steps[-1].found == ("D", "E")


def test_abandoned_branch_nodes_can_be_revisited():
    g = Graph.from_dict({"A": ["B", "C"], "B": ["X"], "C": ["X", "Y"], "X": [], "Y": []})
    steps = list(backtrack(g, "A", ["Y"]))

    assert visits(steps) == ["A", "B", "X", "C", "X", "Y"]
    assert steps[-1].action == Action.GOAL_FOUND


def test_depth_limit():
    chain = {f"N{i}": [f"N{i + 1}"] for i in range(10)}
    chain["N10"] = []
    g = Graph.from_dict(chain)

    steps = list(backtrack(g, "N0", ["N10"]))

    assert visits(steps) == [f"N{i}" for i in range(MAX_DEPTH + 1)]
    limit = [s for s in steps if s.action == Action.DEPTH_LIMIT]
    assert len(limit) == 1
    assert limit[0].current_node == f"N{MAX_DEPTH + 1}"
    assert limit[0].path == tuple(f"N{i}" for i in range(MAX_DEPTH + 1))
    assert steps[-1].action == Action.BACKTRACK
    assert steps[-1].path == ()
    assert steps[-1].found == ()


def test_cycle_without_goals_unwinds_to_empty_path():
    g = Graph.from_dict({"A": ["B"], "B": ["A"]})
    steps = list(backtrack(g, "A", []))

    assert actions(steps) == [Action.VISIT, Action.VISIT, Action.BACKTRACK, Action.BACKTRACK]
    assert steps[2].path == ("A",)
    assert steps[3].path == ()


def test_goal_at_start():
    g = Graph.from_dict({"A": ["B"], "B": []})
    steps = list(backtrack(g, "A", ["A"]))
    assert actions(steps) == [Action.VISIT, Action.GOAL_FOUND]


def test_missing_start_yields_nothing(diamond_graph):
    assert list(backtrack(diamond_graph, None, ["D"])) == []
    assert list(backtrack(diamond_graph, "Z", ["D"])) == []
    assert list(backtrack(Graph(), "A", ["D"])) == []

from graph import Graph, NodeStatus
from search import Action, Snapshot, run
from ui import render_canvas, render_legend, node_status, CanvasConfig
from ui.controls import playback_controls, pseudocode_viewer, state_panel


def make_step(**fields):
    base = dict(step=0, algorithm="BFS", action=Action.VISIT, current_node="B")
    base.update(fields)
    return Snapshot(**base)


def test_status_precedence():
    step = make_step(queue=("C", "A"), visited=("A", "B"), found=("A",))
    goals = ("A", "E")

    assert node_status("A", step, "D", goals) == NodeStatus.FOUND
    assert node_status("B", step, "D", goals) == NodeStatus.CURRENT
    assert node_status("C", step, "D", goals) == NodeStatus.FRONTIER
    assert node_status("D", step, "D", goals) == NodeStatus.START
    assert node_status("E", step, "D", goals) == NodeStatus.GOAL
    assert node_status("F", step, "D", goals) == NodeStatus.DEFAULT


def test_found_beats_current():
    step = make_step(action=Action.GOAL_FOUND, visited=("B",), found=("B",))
    assert node_status("B", step) == NodeStatus.FOUND


def test_visited_beats_frontier_and_start():
    step = make_step(stack=("A",), visited=("A",))
    assert node_status("A", step, start="A") == NodeStatus.VISITED


def test_without_a_step_only_selection_counts():
    assert node_status("A", None, "A", ["A"]) == NodeStatus.START
    assert node_status("B", None, "A", ["B"]) == NodeStatus.GOAL
    assert node_status("C") == NodeStatus.DEFAULT


def test_empty_canvas():
    svg = render_canvas(Graph())
    assert svg.startswith("<svg")
    assert CanvasConfig.empty_text in svg
    assert 'class="node' not in svg


def test_canvas_draws_every_node_and_edge(example_graph):
    svg = render_canvas(example_graph, None, "A", ["B", "L"])
    assert svg.count('<g class="node ') == example_graph.node_count()
    assert svg.count('<g class="edge"') == example_graph.edge_count()
    assert '<g class="node node-start" data-id="A">' in svg
    assert '<g class="node node-goal" data-id="B">' in svg


def test_canvas_colours_follow_the_step(fork_graph):
    steps = run("bfs", fork_graph, "A", ["B"])
    svg = render_canvas(fork_graph, steps[-1], "A", ["B"])
    assert 'node-found" data-id="B"' in svg
    assert 'node-visited" data-id="A"' in svg
    assert 'node-frontier" data-id="C"' in svg
    assert CanvasConfig.node_colors[NodeStatus.FOUND] in svg


def test_edge_to_unpositioned_node_is_skipped():
    g = Graph.from_dict({"A": ["B", "Q"], "B": []})
    svg = render_canvas(g, None, "A")
    assert svg.count('<g class="edge"') == 1
    assert 'data-to="Q"' not in svg


def test_node_labels_are_escaped():
    g = Graph()
    g.add_node("<x>")
    svg = render_canvas(g)
    assert "&lt;X&gt;" in svg
    assert "<X>" not in svg


def test_legend_lists_every_colour():
    html = render_legend()
    assert html.count("legend-item") == 6
    for label in ("Start", "Goal", "Current", "Visited", "Found"):
        assert label in html


def test_state_panel_shows_snapshot(fork_graph):
    steps = run("bfs", fork_graph, "A", ["B"])
    html = state_panel(steps[3])
    assert steps[3].description in html
    assert "Queue (BFS)" in html
    assert "Stack (DFS)" not in html
    assert "Pick a start node" in state_panel(None)


def test_playback_controls_counter():
    html = playback_controls(is_playing=True, current_step=2, total_steps=6, interval_ms=600)
    assert '<span id="current-step">3</span>' in html
    assert '<span id="total-steps">6</span>' in html
    assert "600ms" in html
    assert 'title="Pause"' in html


def test_pseudocode_viewer():
    assert "Select an algorithm" in pseudocode_viewer([])
    html = pseudocode_viewer(["if a < b:"], "Demo")
    assert "a &lt; b" in html
    assert "Demo" in html

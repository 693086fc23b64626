"""
main.py — Graph Search Stepper Flask App
==========================================
The web server that powers the stepper.

Routes:
  GET  /                        – main UI
  GET  /api/state               – current app state (for polling)
  POST /api/graph/node          – add a node
  POST /api/graph/node/remove   – remove a node (and every edge touching it)
  POST /api/graph/edge          – add a directed edge
  POST /api/graph/edge/remove   – remove a directed edge
  POST /api/graph/example       – load the example graph, start and goals
  POST /api/graph/clear         – empty the graph
  POST /api/graph/import        – import from adjacency-list text
  POST /api/config/start        – choose the start node
  POST /api/config/goal         – toggle a goal node
  POST /api/config/algo         – choose BFS / DFS / Backtracking
  POST /api/config/speed        – auto-play interval in ms
  POST /api/run                 – compute a run and show its first step
  POST /api/reset               – discard the run
  POST /api/step/next           – advance one step
  POST /api/step/prev           – rewind one step
  POST /api/step/goto           – jump to step N
  POST /api/step/play           – toggle play/pause

State management:
  Everything lives in the Flask session.  The snapshot list itself is NOT
  stored: runs are pure functions of (algorithm, graph, start, goals), so
  every navigation request recomputes the run and seeks the Stepper to the
  saved index.  Any change to the graph or the selection discards the run.
"""

import logging
import os
import secrets
import sys
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, render_template_string, request, session

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from graph import Graph, GraphError, normalize_id, EXAMPLE_START, EXAMPLE_GOALS
import search
from search import get_algorithm, list_algorithms
from playback import Stepper, DEFAULT_INTERVAL_MS, clamp_interval
from ui import (
    render_canvas,
    render_legend,
    graph_builder,
    selection_panel,
    algorithm_selector,
    playback_controls,
    state_panel,
    pseudocode_viewer,
)

logger = logging.getLogger("graph_search")


def configure_logging(level: Optional[str] = None) -> None:
    """Console logging for the whole app; level from GRAPH_SEARCH_LOG_LEVEL by default."""
    level_name = (level or os.environ.get("GRAPH_SEARCH_LOG_LEVEL", "INFO")).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root.addHandler(console_handler)


app = Flask(__name__)
app.secret_key = os.environ.get("GRAPH_SEARCH_SECRET_KEY") or secrets.token_hex(32)


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_graph() -> Graph:
    return Graph.from_dict(session.get("graph", {}))


def save_graph(graph: Graph) -> None:
    session["graph"] = graph.to_dict()


def get_state() -> Dict[str, Any]:
    """Return current app state as a dict."""
    return {
        "start":         session.get("start"),
        "goals":         list(session.get("goals", [])),
        "selected_algo": session.get("selected_algo", "bfs"),
        "has_run":       session.get("has_run", False),
        "current_step":  session.get("current_step", 0),
        "is_playing":    session.get("is_playing", False),
        "interval_ms":   session.get("interval_ms", DEFAULT_INTERVAL_MS),
    }


def set_state(**kwargs) -> None:
    for k, v in kwargs.items():
        session[k] = v


def discard_run() -> None:
    set_state(has_run=False, current_step=0, is_playing=False)


def error(message: str, status: int = 400):
    logger.info("Rejected request to %s: %s", request.path, message)
    return jsonify({"error": message}), status


def payload() -> Dict[str, Any]:
    return request.get_json(silent=True) or {}


def load_stepper(graph: Graph) -> Stepper:
    """Recompute the session's run and position a Stepper on the saved step."""
    state = get_state()
    stepper = Stepper()
    stepper.set_interval(state["interval_ms"])
    if state["has_run"]:
        steps = search.run(state["selected_algo"], graph, state["start"], state["goals"])
        stepper.load(steps, state["current_step"])
        if state["is_playing"]:
            stepper.play()
    return stepper


def save_stepper(stepper: Stepper) -> None:
    set_state(current_step=max(stepper.current_idx, 0), is_playing=stepper.is_playing)


# ---------------------------------------------------------------------------
# Response builders
# ---------------------------------------------------------------------------
def graph_response(graph: Graph) -> Dict[str, Any]:
    state = get_state()
    return {
        "svg":       render_canvas(graph, None, state["start"], state["goals"]),
        "builder":   graph_builder(graph.node_ids(), graph.edges()),
        "selection": selection_panel(graph.node_ids(), state["start"], state["goals"]),
        "state":     state_panel(None),
        "playback":  playback_controls(interval_ms=state["interval_ms"]),
        "node_ids":  graph.node_ids(),
        "is_playing": False,
    }


def step_response(graph: Graph, stepper: Stepper) -> Dict[str, Any]:
    state = get_state()
    step = stepper.current_step
    return {
        "svg":          render_canvas(graph, step, state["start"], state["goals"]),
        "state":        state_panel(step),
        "playback":     playback_controls(
            is_playing=stepper.is_playing,
            current_step=max(stepper.current_idx, 0),
            total_steps=stepper.total_steps,
            interval_ms=stepper.interval_ms,
        ),
        "step":         step.to_dict() if step else None,
        "current_step": max(stepper.current_idx, 0),
        "total_steps":  stepper.total_steps,
        "is_playing":   stepper.is_playing,
        "is_finished":  stepper.is_finished,
        "interval_ms":  stepper.interval_ms,
    }


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    graph = get_graph()
    state = get_state()
    stepper = load_stepper(graph)
    algo_info = get_algorithm(state["selected_algo"])

    return render_template_string(
        INDEX_TEMPLATE,
        svg=render_canvas(graph, stepper.current_step, state["start"], state["goals"]),
        legend=render_legend(),
        builder=graph_builder(graph.node_ids(), graph.edges()),
        selection=selection_panel(graph.node_ids(), state["start"], state["goals"]),
        algo_selector=algorithm_selector(list_algorithms(), state["selected_algo"]),
        playback=playback_controls(
            is_playing=stepper.is_playing,
            current_step=max(stepper.current_idx, 0),
            total_steps=stepper.total_steps,
            interval_ms=stepper.interval_ms,
        ),
        state_html=state_panel(stepper.current_step),
        pseudocode=pseudocode_viewer(
            algo_info.pseudocode if algo_info else [],
            algo_info.label if algo_info else "",
        ),
        interval_ms=stepper.interval_ms,
    )


@app.route("/api/state")
def api_state():
    graph = get_graph()
    state = get_state()
    state["graph"] = graph.to_dict()
    state["total_steps"] = load_stepper(graph).total_steps
    return jsonify(state)


# ---------------------------------------------------------------------------
# API: Graph Builder
# ---------------------------------------------------------------------------
@app.route("/api/graph/node", methods=["POST"])
def api_graph_add_node():
    graph = get_graph()
    try:
        node_id = graph.add_node(payload().get("name", ""))
    except GraphError as e:
        return error(str(e))
    save_graph(graph)
    discard_run()
    logger.info("Added node %s", node_id)
    return jsonify(graph_response(graph))


@app.route("/api/graph/node/remove", methods=["POST"])
def api_graph_remove_node():
    graph = get_graph()
    node_id = normalize_id(payload().get("name"))
    if not graph.remove_node(node_id):
        return error(f"Unknown node '{node_id}'")
    save_graph(graph)

    state = get_state()
    if state["start"] == node_id:
        set_state(start=None)
    set_state(goals=[g for g in state["goals"] if g != node_id])
    discard_run()
    logger.info("Removed node %s", node_id)
    return jsonify(graph_response(graph))


@app.route("/api/graph/edge", methods=["POST"])
def api_graph_add_edge():
    graph = get_graph()
    data = payload()
    try:
        added = graph.add_edge(data.get("from", ""), data.get("to", ""))
    except GraphError as e:
        return error(str(e))
    if added:
        save_graph(graph)
        discard_run()
    return jsonify(dict(graph_response(graph), added=added))


@app.route("/api/graph/edge/remove", methods=["POST"])
def api_graph_remove_edge():
    graph = get_graph()
    data = payload()
    if not graph.remove_edge(data.get("from", ""), data.get("to", "")):
        return error("No such edge")
    save_graph(graph)
    discard_run()
    return jsonify(graph_response(graph))


@app.route("/api/graph/example", methods=["POST"])
def api_graph_example():
    graph = Graph.example()
    save_graph(graph)
    set_state(start=EXAMPLE_START, goals=list(EXAMPLE_GOALS))
    discard_run()
    logger.info("Loaded example graph")
    return jsonify(graph_response(graph))


@app.route("/api/graph/clear", methods=["POST"])
def api_graph_clear():
    graph = Graph()
    save_graph(graph)
    set_state(start=None, goals=[])
    discard_run()
    return jsonify(graph_response(graph))


@app.route("/api/graph/import", methods=["POST"])
def api_graph_import():
    try:
        graph = Graph.from_adjacency_list(payload().get("text", ""))
    except GraphError as e:
        return error(str(e))
    save_graph(graph)
    set_state(start=None, goals=[])
    discard_run()
    logger.info("Imported graph with %d nodes", graph.node_count())
    return jsonify(graph_response(graph))


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/start", methods=["POST"])
def api_config_start():
    graph = get_graph()
    node_id = normalize_id(payload().get("node"))
    if node_id and node_id not in graph:
        return error(f"Unknown node '{node_id}'")
    set_state(start=node_id or None)
    discard_run()
    return jsonify(graph_response(graph))


@app.route("/api/config/goal", methods=["POST"])
def api_config_goal():
    graph = get_graph()
    node_id = normalize_id(payload().get("node"))
    if node_id not in graph:
        return error(f"Unknown node '{node_id}'")
    goals = get_state()["goals"]
    if node_id in goals:
        goals.remove(node_id)
    else:
        goals.append(node_id)
    set_state(goals=goals)
    discard_run()
    return jsonify(graph_response(graph))


@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    algo_key = payload().get("algo_key", "bfs")
    algo_info = get_algorithm(algo_key)
    if algo_info is None:
        return error(f"Unknown algorithm: {algo_key}")
    set_state(selected_algo=algo_key)
    discard_run()
    return jsonify({
        "algo_selector": algorithm_selector(list_algorithms(), algo_key),
        "pseudocode":    pseudocode_viewer(algo_info.pseudocode, algo_info.label),
    })


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    try:
        interval = clamp_interval(float(payload().get("interval_ms", DEFAULT_INTERVAL_MS)))
    except (TypeError, ValueError):
        return error("interval_ms must be a number")
    set_state(interval_ms=interval)
    return jsonify({"interval_ms": interval})


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    graph = get_graph()
    state = get_state()
    if not state["start"] or state["start"] not in graph:
        return error("Choose a start node first")

    set_state(has_run=True, current_step=0, is_playing=False)
    stepper = load_stepper(graph)
    logger.info(
        "Ran %s from %s towards %s: %d steps",
        state["selected_algo"], state["start"], state["goals"], stepper.total_steps,
    )
    return jsonify(step_response(graph, stepper))


@app.route("/api/reset", methods=["POST"])
def api_reset():
    graph = get_graph()
    discard_run()
    return jsonify(graph_response(graph))


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    graph = get_graph()
    stepper = load_stepper(graph)
    if not stepper.next_step():
        save_stepper(stepper)
        return error("Already at last step")
    save_stepper(stepper)
    return jsonify(step_response(graph, stepper))


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    graph = get_graph()
    stepper = load_stepper(graph)
    if not stepper.prev_step():
        return error("Already at first step")
    save_stepper(stepper)
    return jsonify(step_response(graph, stepper))


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    graph = get_graph()
    stepper = load_stepper(graph)
    idx = payload().get("index", 0)
    if not isinstance(idx, int) or not stepper.goto_step(idx):
        return error("Invalid step index")
    save_stepper(stepper)
    return jsonify(step_response(graph, stepper))


@app.route("/api/step/play", methods=["POST"])
def api_step_play():
    graph = get_graph()
    stepper = load_stepper(graph)
    if not stepper.total_steps:
        return error("Run an algorithm first")
    stepper.toggle_play()
    save_stepper(stepper)
    return jsonify(step_response(graph, stepper))


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Search Algorithms (BFS, DFS, Backtracking)</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body { font-family: -apple-system, BlinkMacSystemFont, sans-serif; background: #f9fafb; color: #111827; }
    h1 { text-align: center; font-size: 24px; padding: 16px; margin: 16px; background: #f3f4f6; border-radius: 8px; }
    h3 { font-size: 15px; margin: 12px 0 8px; }
    h4 { font-size: 13px; margin: 10px 0 4px; color: #374151; }
    #layout { display: grid; grid-template-columns: 340px 1fr 320px; gap: 16px; padding: 0 16px 16px; }
    .panel { background: #fff; border: 1px solid #e5e7eb; border-radius: 8px; padding: 12px; margin-bottom: 12px; }
    .row, .button-row { display: flex; gap: 6px; margin-bottom: 6px; flex-wrap: wrap; }
    input[type=text], select, textarea { flex: 1; padding: 6px; border: 1px solid #d1d5db; border-radius: 4px; width: 100%; }
    button { padding: 6px 10px; border: 1px solid #d1d5db; border-radius: 4px; background: #fff; cursor: pointer; }
    button:disabled { opacity: 0.4; cursor: default; }
    .btn-primary, .algo-btn.active, .goal-toggle.active { background: #111827; color: #fff; }
    .btn-link { border: none; background: none; color: #dc2626; }
    .badge { display: inline-block; padding: 2px 8px; margin: 2px; border-radius: 9999px; background: #e5e7eb; font-size: 12px; }
    .badge-current { background: #3b82f6; color: #fff; font-size: 16px; }
    .badge-outline { background: #fff; border: 1px solid #d1d5db; }
    .badge-found { background: #d1fae5; color: #065f46; }
    .description { padding: 10px; background: #eff6ff; border-radius: 6px; color: #1e3a8a; font-weight: 500; }
    .legend { display: flex; gap: 12px; flex-wrap: wrap; font-size: 12px; padding: 8px; border-top: 1px solid #e5e7eb; }
    .legend-dot { display: inline-block; width: 10px; height: 10px; border-radius: 50%; margin-right: 4px; }
    .code-line { font-family: monospace; font-size: 12px; white-space: pre; }
    .hint, .placeholder { font-size: 12px; color: #6b7280; }
    ul { list-style: none; font-size: 13px; }
    #error { color: #dc2626; font-size: 13px; min-height: 18px; }
  </style>
</head>
<body>
  <h1>Search Algorithms (BFS, DFS, Backtracking)</h1>
  <div id="layout">
    <div id="sidebar">
      <div id="builder">{{ builder|safe }}</div>
      <div id="selection">{{ selection|safe }}</div>
    </div>
    <div id="main">
      <div id="algo">{{ algo_selector|safe }}</div>
      <div id="playback">{{ playback|safe }}</div>
      <div class="panel">
        <div id="canvas-svg">{{ svg|safe }}</div>
        {{ legend|safe }}
      </div>
      <div id="error"></div>
    </div>
    <div id="details">
      <div id="state">{{ state_html|safe }}</div>
      <div id="pseudocode" class="panel">{{ pseudocode|safe }}</div>
    </div>
  </div>

  <script>
    let intervalMs = {{ interval_ms }};
    let timer = null;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      const body = await res.json();
      document.getElementById('error').textContent = body.error || '';
      if (!body.error) apply(body);
      return body;
    }

    function apply(data) {
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      if (data.builder) document.getElementById('builder').innerHTML = data.builder;
      if (data.selection) document.getElementById('selection').innerHTML = data.selection;
      if (data.state) document.getElementById('state').innerHTML = data.state;
      if (data.playback) document.getElementById('playback').innerHTML = data.playback;
      if (data.algo_selector) document.getElementById('algo').innerHTML = data.algo_selector;
      if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
      if (data.interval_ms) {
        intervalMs = data.interval_ms;
        if (timer && !('is_playing' in data)) syncTimer(true);
      }
      if ('is_playing' in data) syncTimer(data.is_playing);
    }

    function syncTimer(playing) {
      if (timer) { clearInterval(timer); timer = null; }
      if (playing) {
        timer = setInterval(async () => {
          const data = await post('/api/step/next');
          if (data.error || !data.is_playing) { clearInterval(timer); timer = null; }
        }, intervalMs);
      }
    }

    document.addEventListener('click', (e) => {
      const t = e.target;
      const val = (id) => document.getElementById(id).value;
      if (t.id === 'btn-add-node') post('/api/graph/node', {name: val('node-name')});
      else if (t.id === 'btn-add-edge') post('/api/graph/edge', {from: val('edge-from'), to: val('edge-to')});
      else if (t.id === 'btn-example') post('/api/graph/example');
      else if (t.id === 'btn-clear') post('/api/graph/clear');
      else if (t.id === 'btn-import') post('/api/graph/import', {text: val('import-text')});
      else if (t.id === 'btn-run') post('/api/run');
      else if (t.id === 'btn-reset') post('/api/reset');
      else if (t.id === 'btn-next') post('/api/step/next');
      else if (t.id === 'btn-prev') post('/api/step/prev');
      else if (t.id === 'btn-play') post('/api/step/play');
      else if (t.dataset.action === 'remove-node') post('/api/graph/node/remove', {name: t.dataset.node});
      else if (t.dataset.action === 'remove-edge') post('/api/graph/edge/remove', {from: t.dataset.from, to: t.dataset.to});
      else if (t.classList.contains('goal-toggle')) post('/api/config/goal', {node: t.dataset.node});
      else if (t.classList.contains('algo-btn')) post('/api/config/algo', {algo_key: t.dataset.algo});
    });

    document.addEventListener('keypress', (e) => {
      if (e.target.id === 'node-name' && e.key === 'Enter') {
        post('/api/graph/node', {name: e.target.value});
      }
    });

    document.addEventListener('change', (e) => {
      if (e.target.id === 'start-selector') post('/api/config/start', {node: e.target.value});
      if (e.target.id === 'speed-slider') post('/api/config/speed', {interval_ms: +e.target.value});
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    configure_logging()
    port = int(os.environ.get("PORT", 5000))
    logger.info("Graph Search Stepper listening on http://localhost:%d", port)
    app.run(debug=False, port=port)

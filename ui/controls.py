"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • graph_builder       – add / remove nodes and edges, example loader, text import
  • selection_panel     – start node picker and goal toggles
  • algorithm_selector  – BFS / DFS / Backtracking + run / reset
  • playback_controls   – prev / play-pause / next, step counter, speed slider
  • state_panel         – the current snapshot: description, node, action,
                          queue, stack, visited, found
  • pseudocode_viewer   – the selected algorithm's pseudocode

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - Every node id is escaped before it reaches the page.
  - The main app stitches them together.
"""

from typing import Iterable, List, Optional

from search import AlgoInfo
from search.snapshot import Snapshot
from playback import MIN_INTERVAL_MS, MAX_INTERVAL_MS
from ui.canvas import escape_html


def _badges(nodes: Iterable[str], css: str = "badge") -> str:
    return "".join(f'<span class="{css}">{escape_html(n)}</span>' for n in nodes)


def _options(node_ids: List[str], selected: Optional[str] = None, placeholder: str = "Select node") -> str:
    opts = [f'<option value="">{placeholder}</option>']
    for nid in node_ids:
        sel = "selected" if nid == selected else ""
        safe = escape_html(nid)
        opts.append(f'<option value="{safe}" {sel}>{safe}</option>')
    return "".join(opts)


# ---------------------------------------------------------------------------
# Graph Builder
# ---------------------------------------------------------------------------
def graph_builder(node_ids: List[str], edges: List[tuple]) -> str:
    node_rows = "".join(
        f'<li>{escape_html(nid)} '
        f'<button class="btn-link" data-action="remove-node" data-node="{escape_html(nid)}">✕</button></li>'
        for nid in node_ids
    )
    edge_rows = "".join(
        f'<li>{escape_html(src)} → {escape_html(tgt)} '
        f'<button class="btn-link" data-action="remove-edge" '
        f'data-from="{escape_html(src)}" data-to="{escape_html(tgt)}">✕</button></li>'
        for src, tgt in edges
    )

    return f"""
    <div class="panel graph-builder">
      <h3>Add nodes</h3>
      <div class="row">
        <input type="text" id="node-name" placeholder="Node name (e.g. A, B, C)">
        <button id="btn-add-node">+</button>
      </div>
      <div class="row">
        <button id="btn-example" class="btn-secondary">Load example</button>
        <button id="btn-clear" class="btn-secondary">Clear</button>
      </div>

      <h3>Add edges</h3>
      <div class="row">
        <select id="edge-from">{_options(node_ids, placeholder="From")}</select>
        <select id="edge-to">{_options(node_ids, placeholder="To")}</select>
        <button id="btn-add-edge">+</button>
      </div>

      <h3>Import</h3>
      <textarea id="import-text" rows="4" placeholder="A: B C
B: D"></textarea>
      <button id="btn-import" class="btn-secondary">Import graph</button>

      <h4>Nodes ({len(node_ids)})</h4>
      <ul class="node-list">{node_rows}</ul>
      <h4>Edges ({len(edges)})</h4>
      <ul class="edge-list">{edge_rows}</ul>
    </div>
    """


# ---------------------------------------------------------------------------
# Start / Goal Selection
# ---------------------------------------------------------------------------
def selection_panel(node_ids: List[str], start: Optional[str] = None, goals: Iterable[str] = ()) -> str:
    goals = list(goals)
    toggles = "".join(
        f'<button class="goal-toggle {"active" if nid in goals else ""}" '
        f'data-node="{escape_html(nid)}">{escape_html(nid)}</button>'
        for nid in node_ids
    )
    return f"""
    <div class="panel selection-panel">
      <h3>Start & goals</h3>
      <label>Start node:
        <select id="start-selector">{_options(node_ids, start)}</select>
      </label>
      <div class="goal-toggles">{toggles}</div>
      <p class="hint">Goals: {_badges(goals) or "none"}</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(algorithms: List[AlgoInfo], selected_key: str = "bfs") -> str:
    buttons = []
    for algo in algorithms:
        active = "active" if algo.key == selected_key else ""
        buttons.append(
            f'<button class="algo-btn {active}" data-algo="{algo.key}" '
            f'title="{algo.description}">{algo.label}</button>'
        )
    return f"""
    <div class="panel algorithm-selector">
      <h3>Algorithm</h3>
      <div class="button-row">{''.join(buttons)}</div>
      <div class="button-row">
        <button id="btn-run" class="btn-primary">▶ Run</button>
        <button id="btn-reset" class="btn-secondary">⟲ Reset</button>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    is_playing: bool = False,
    current_step: int = 0,
    total_steps: int = 0,
    interval_ms: int = 1000,
) -> str:
    play_icon = "⏸" if is_playing else "▶"
    play_label = "Pause" if is_playing else "Play"
    shown = current_step + 1 if total_steps else 0

    return f"""
    <div class="panel playback-controls">
      <div class="button-row">
        <button id="btn-prev" title="Previous step" {'disabled' if current_step <= 0 else ''}>◀</button>
        <button id="btn-play" title="{play_label}">{play_icon}</button>
        <button id="btn-next" title="Next step" {'disabled' if current_step >= total_steps - 1 else ''}>▶</button>
      </div>
      <div class="step-info">
        Step <span id="current-step">{shown}</span> of <span id="total-steps">{total_steps}</span>
      </div>
      <div class="speed-control">
        <label>Speed:</label>
        <input type="range" id="speed-slider" min="{MIN_INTERVAL_MS}" max="{MAX_INTERVAL_MS}"
               step="200" value="{interval_ms}">
        <span id="speed-value">{interval_ms}ms</span>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Current State
# ---------------------------------------------------------------------------
def state_panel(step: Optional[Snapshot] = None) -> str:
    if step is None:
        return """
        <div class="panel state-panel">
          <p class="placeholder">Pick a start node and goals, then click <strong>Run</strong>.</p>
        </div>
        """

    sections = [
        f'<div class="description">{escape_html(step.description)}</div>',
        f'<div><h4>Current node</h4>{_badges([step.current_node], "badge badge-current")}</div>',
        f'<div><h4>Action</h4><span class="badge badge-outline">{step.action.label}</span></div>',
    ]
    if step.queue:
        sections.append(f'<div><h4>Queue (BFS)</h4>{_badges(step.queue)}</div>')
    if step.stack:
        sections.append(f'<div><h4>Stack (DFS)</h4>{_badges(step.stack)}</div>')
    sections.append(f'<div><h4>Visited nodes</h4>{_badges(step.visited)}</div>')
    if step.path:
        sections.append(f'<div><h4>Path</h4>{" → ".join(escape_html(n) for n in step.path)}</div>')
    if step.found:
        sections.append(f'<div><h4>Goals found</h4>{_badges(step.found, "badge badge-found")}</div>')

    return f"""
    <div class="panel state-panel">
      {''.join(sections)}
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str], algo_label: str = "") -> str:
    if not pseudocode_lines:
        return '<div class="code-block placeholder">Select an algorithm to view pseudocode</div>'

    lines_html = "".join(
        f'<div class="code-line">{escape_html(line)}</div>' for line in pseudocode_lines
    )
    return f"""
    <div class="code-block">
      <h4>{algo_label}</h4>
      {lines_html}
    </div>
    """

"""
controls.py — Sidebar Panels
==============================
One function per sidebar panel.  Each takes plain values and returns an
HTML fragment; main.py drops the fragments into the page template and
swaps them in place after API calls.

Element ids (btn-run, btn-next, speed-selector, …) are what the page
script binds to, so they are part of the contract with main.py.
"""

from html import escape
from typing import List, Optional

from algorithms import AlgoInfo
from algorithms.heuristics import HEURISTICS
from engine import ComparisonResult, RunMetrics


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    is_playing: bool = False,
    current_step: int = 0,
    total_steps: int = 0,
    speed: str = "fast",
    is_finished: bool = False,
) -> str:
    play_icon = "⏸" if is_playing else "▶"
    play_label = "Pause" if is_playing else "Play"

    speeds = [("slow", "Slow"), ("medium", "Medium"), ("fast", "Fast"), ("turbo", "Turbo")]
    options = "".join(
        f'<option value="{k}" {"selected" if k == speed else ""}>{label}</option>'
        for k, label in speeds
    )

    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Playback</h3>
      <div class="button-row">
        <button id="btn-rewind" title="Rewind to start">⏮</button>
        <button id="btn-prev" title="Previous step">◀</button>
        <button id="btn-play" title="{play_label}">{play_icon}</button>
        <button id="btn-next" title="Next step">▶</button>
        <button id="btn-end" title="Jump to end">⏭</button>
      </div>
      <div class="step-info">
        Step <span id="current-step">{current_step}</span> / <span id="total-steps">{total_steps}</span>
        {' <span class="finished-badge">FINISHED</span>' if is_finished else ''}
      </div>
      <div class="speed-control">
        <label>Speed:</label>
        <select id="speed-selector">{options}</select>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    algorithms: List[AlgoInfo],
    selected_key: str = "bfs",
    selected_heuristic: str = "manhattan",
    can_run: bool = True,
) -> str:
    options = []
    selected: Optional[AlgoInfo] = None
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        if sel:
            selected = algo
        options.append(
            f'<option value="{algo.key}" {sel}>{escape(algo.name)} — {algo.complexity_time}</option>'
        )

    heuristic_block = ""
    if selected and selected.has_heuristic:
        h_opts = "".join(
            f'<option value="{h}" {"selected" if h == selected_heuristic else ""}>{h.capitalize()}</option>'
            for h in HEURISTICS
        )
        heuristic_block = f"""
        <div class="heuristic-picker">
          <label>Heuristic:</label>
          <select id="heuristic-selector">{h_opts}</select>
        </div>
        """

    info = f'<p class="algo-info">{escape(selected.description)}</p>' if selected else ""
    disabled = "" if can_run else "disabled"
    hint = "" if can_run else '<p class="placeholder">Place a start and an end cell to run.</p>'

    return f"""
    <div class="panel algorithm-selector">
      <h3>🧠 Algorithm</h3>
      <select id="algo-selector">
        {''.join(options)}
      </select>
      {heuristic_block}
      {info}
      <button id="btn-run" class="btn-primary" {disabled}>▶ Visualize</button>
      {hint}
    </div>
    """


# ---------------------------------------------------------------------------
# Board editing
# ---------------------------------------------------------------------------
def draw_mode_picker(draw_mode: Optional[str] = None) -> str:
    buttons = []
    for mode, label in (("wall", "🧱 Walls"), ("start", "🚩 Start"), ("end", "🎯 End")):
        active = 'active' if mode == draw_mode else ''
        buttons.append(f'<button class="mode-btn {active}" data-mode="{mode}">{label}</button>')
    return f"""
    <div class="panel draw-mode">
      <h3>✏️ Draw</h3>
      <div class="button-row">{''.join(buttons)}</div>
    </div>
    """


def board_actions(wall_prob: float = 0.25) -> str:
    return f"""
    <div class="panel board-actions">
      <h3>🌐 Board</h3>
      <label>Wall %: <input type="range" id="wall-prob" min="0" max="0.5" step="0.05" value="{wall_prob}">
             <span id="wall-prob-val">{wall_prob}</span></label>
      <div class="button-row">
        <button id="btn-random" class="btn-secondary">Random Walls</button>
        <button id="btn-reset" class="btn-secondary">Reset</button>
        <button id="btn-clear" class="btn-secondary">Clear</button>
      </div>
    </div>
    """


def display_options(show_distance: bool = True) -> str:
    return f"""
    <div class="panel display-options">
      <label>
        <input type="checkbox" id="show-distance-toggle" {'checked' if show_distance else ''}>
        Show distance
      </label>
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def _table_rows(rows) -> str:
    return "".join(
        "<tr>" + "".join(f"<td>{c}</td>" for c in row) + "</tr>"
        for row in rows
    )


def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if metrics is None:
        return """
        <div class="panel analytics-panel">
          <h3>📊 Analytics</h3>
          <p class="placeholder">Run an algorithm to see metrics.</p>
        </div>
        """

    rows = [
        ("Cells Visited", metrics.cells_visited),
        ("Path Length", metrics.path_length if metrics.path_found else "no path"),
        ("Frames", metrics.total_steps),
        ("Execution Time", f"{metrics.wall_time_ms:.2f} ms"),
    ]
    if metrics.heuristic:
        rows.append(("Heuristic", escape(metrics.heuristic)))

    return f"""
    <div class="panel analytics-panel">
      <h3>📊 {escape(metrics.algo_label)}</h3>
      <table>{_table_rows((label, f"<strong>{value}</strong>") for label, value in rows)}</table>
    </div>
    """


# ---------------------------------------------------------------------------
# Comparison Panel
# ---------------------------------------------------------------------------
def _badge(winner: str) -> str:
    return "🟰 Tie" if winner == "tie" else f"👑 {escape(winner)}"


def comparison_panel(comp: Optional[ComparisonResult] = None) -> str:
    if comp is None:
        return """
        <div class="panel comparison-panel">
          <h3>⚖️ Comparison</h3>
          <p class="placeholder">Pick two algorithms and compare them on this board.</p>
        </div>
        """

    a, b = comp.left, comp.right
    path_a = a.path_length if a.path_found else "—"
    path_b = b.path_length if b.path_found else "—"
    rows = [
        ("Cells Visited", a.cells_visited, b.cells_visited, _badge(comp.winner_cells)),
        ("Path Length", path_a, path_b, _badge(comp.winner_path)),
        ("Execution Time", f"{a.wall_time_ms:.2f} ms", f"{b.wall_time_ms:.2f} ms", _badge(comp.winner_time)),
    ]
    head = _table_rows([("", escape(a.algo_label), escape(b.algo_label), "Winner")])

    return f"""
    <div class="panel comparison-panel">
      <h3>⚖️ Comparison</h3>
      <table class="comparison-table">{head}{_table_rows(rows)}</table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str]) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div class="placeholder">Select an algorithm to view pseudocode</div>
        </div>
        """

    lines_html = [
        f'<div class="code-line" data-line="{i}">{escape(line)}</div>'
        for i, line in enumerate(pseudocode_lines)
    ]
    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel
# ---------------------------------------------------------------------------
def explanation_panel(explanation: str = "") -> str:
    if not explanation:
        explanation = "▶ Place a start and an end cell, then click <strong>Visualize</strong>."
    else:
        explanation = escape(explanation)
    return f"""<div class="explanation-text">{explanation}</div>"""

"""
main.py — Grid Pathfinding Visualizer Flask App
================================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/algorithms         – algorithm metadata table
  GET  /api/state              – current settings (for polling)
  POST /api/grid/cell          – click a cell in wall / start / end mode
  POST /api/grid/stroke        – paint walls along a mouse drag
  POST /api/grid/generate      – random walls
  POST /api/grid/reset         – clear the last run, keep the board
  POST /api/grid/clear         – fresh empty board, no endpoints
  POST /api/run                – run the selected algorithm
  POST /api/step/next          – advance one frame
  POST /api/step/prev          – rewind one frame
  POST /api/step/goto          – jump to frame N
  POST /api/step/end           – jump to the last frame
  POST /api/step/play          – toggle play/pause
  POST /api/config/algo        – select algorithm
  POST /api/config/heuristic   – select heuristic (A* / Greedy)
  POST /api/config/speed       – playback speed preset
  POST /api/config/show_distance
  POST /api/compare            – run two algorithms on the same board

State management:
  The Flask cookie session holds the board and the settings:
    • grid            – serialised Grid
    • start / end     – [row, col] or None
    • selected_algo / heuristic / speed / show_distance / draw_mode
    • run_id          – key of the last run in RUNS
  Finished runs (Recorder + Stepper) live in the process-local RUNS
  cache; they are far too large for a cookie.
"""

import logging
import uuid
from collections import OrderedDict
from typing import Optional

from flask import Flask, jsonify, render_template_string, request, session

import config
from grid import Grid, Position, SearchError, InvalidEndpoint
from algorithms import ALGORITHM_INFO, get_algorithm, list_algorithms
from engine import Recorder, compare
from ui import (
    render_canvas,
    playback_controls,
    algorithm_selector,
    draw_mode_picker,
    board_actions,
    display_options,
    analytics_panel,
    comparison_panel,
    pseudocode_viewer,
    explanation_panel,
)

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = config.SECRET_KEY

RUN_CACHE_SIZE = 64
RUNS: "OrderedDict[str, Recorder]" = OrderedDict()


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_grid() -> Grid:
    """Deserialise grid from session, or create an empty default board."""
    if "grid" not in session:
        session["grid"] = Grid(config.GRID_ROWS, config.GRID_COLS).to_dict()
    return Grid.from_dict(session["grid"])


def save_grid(grid: Grid):
    session["grid"] = grid.to_dict()


def get_endpoint(name: str) -> Optional[Position]:
    value = session.get(name)
    return Position(*value) if value else None


def set_endpoint(name: str, pos: Optional[Position]):
    session[name] = list(pos) if pos is not None else None


def get_state():
    """Return current app state as a dict."""
    start = get_endpoint("start")
    end   = get_endpoint("end")
    return {
        "start":          list(start) if start else None,
        "end":            list(end) if end else None,
        "selected_algo":  session.get("selected_algo", config.DEFAULT_ALGORITHM),
        "heuristic":      session.get("heuristic", config.DEFAULT_HEURISTIC),
        "speed":          session.get("speed", config.DEFAULT_SPEED),
        "show_distance":  session.get("show_distance", True),
        "draw_mode":      session.get("draw_mode"),
    }


def set_state(**kwargs):
    for k, v in kwargs.items():
        session[k] = v


def current_run() -> Optional[Recorder]:
    run_id = session.get("run_id")
    return RUNS.get(run_id) if run_id else None


def store_run(rec: Recorder) -> str:
    run_id = uuid.uuid4().hex
    RUNS[run_id] = rec
    while len(RUNS) > RUN_CACHE_SIZE:
        RUNS.popitem(last=False)
    session["run_id"] = run_id
    return run_id


def drop_run():
    run_id = session.pop("run_id", None)
    if run_id:
        RUNS.pop(run_id, None)


def parse_position(data: dict, key: Optional[str] = None) -> Position:
    value = data.get(key) if key else data
    try:
        return Position.coerce(value)
    except (TypeError, ValueError):
        raise InvalidEndpoint(f"expected a {{row, col}} position, got {value!r}", role=key or "cell") from None


def board_svg(rec: Optional[Recorder] = None) -> str:
    grid  = get_grid()
    state = get_state()
    result, cursor = None, None
    if rec is not None and rec.stepper is not None:
        result = rec.result
        cursor = rec.stepper.current_idx
    return render_canvas(
        grid,
        start=get_endpoint("start"),
        end=get_endpoint("end"),
        result=result,
        cursor=cursor,
        show_distance=state["show_distance"],
    )


def frame_payload(rec: Recorder) -> dict:
    """JSON body describing the current playback frame of a run."""
    stepper = rec.stepper
    step = stepper.current_step
    return {
        "svg":          board_svg(rec),
        "explanation":  explanation_panel(step.explanation if step else ""),
        "current_step": stepper.current_idx,
        "total_steps":  stepper.total_steps,
        "is_finished":  stepper.is_finished,
        "is_playing":   stepper.is_playing,
        "delay_ms":     stepper.delay_ms(),
    }


class NoRunLoaded(Exception):
    """Playback was requested before any search was run."""


def require_run() -> Recorder:
    rec = current_run()
    if rec is None:
        raise NoRunLoaded("No run to play back. Click Visualize first.")
    return rec


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
@app.errorhandler(SearchError)
def handle_search_error(e: SearchError):
    logger.warning("Rejected request to %s: %s", request.path, e)
    return jsonify({"error": str(e)}), 400


@app.errorhandler(NoRunLoaded)
def handle_missing_run(e: NoRunLoaded):
    return jsonify({"error": str(e)}), 400


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    state = get_state()
    rec   = current_run()
    algo_info = get_algorithm(state["selected_algo"])

    html = render_template_string(INDEX_TEMPLATE,
        svg=board_svg(rec),
        algo_selector=algorithm_selector(
            algorithms=list_algorithms(),
            selected_key=state["selected_algo"],
            selected_heuristic=state["heuristic"],
            can_run=bool(state["start"] and state["end"]),
        ),
        draw_mode=draw_mode_picker(state["draw_mode"]),
        board=board_actions(config.DEFAULT_WALL_PROB),
        display=display_options(state["show_distance"]),
        playback=playback_controls(
            is_playing=rec.stepper.is_playing if rec else False,
            current_step=rec.stepper.current_idx if rec else 0,
            total_steps=rec.stepper.total_steps if rec else 0,
            speed=state["speed"],
            is_finished=rec.stepper.is_finished if rec else False,
        ),
        analytics=analytics_panel(rec.metrics if rec else None),
        comparison=comparison_panel(),
        pseudocode=pseudocode_viewer(list(algo_info.pseudocode) if algo_info else []),
        explanation=explanation_panel(),
    )
    return html


# ---------------------------------------------------------------------------
# API: Read-only
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({
        key: {
            "name":                info.name,
            "description":         info.description,
            "has_heuristic":       info.has_heuristic,
            "guarantees_shortest": info.guarantees_shortest,
            "complexity_time":     info.complexity_time,
            "complexity_space":    info.complexity_space,
        }
        for key, info in ALGORITHM_INFO.items()
    })


@app.route("/api/state")
def api_state():
    rec = current_run()
    state = get_state()
    state["grid"] = get_grid().to_dict()
    state["current_step"] = rec.stepper.current_idx if rec else 0
    state["total_steps"]  = rec.stepper.total_steps if rec else 0
    return jsonify(state)


# ---------------------------------------------------------------------------
# API: Board Editing
# ---------------------------------------------------------------------------
@app.route("/api/grid/cell", methods=["POST"])
def api_grid_cell():
    data = request.get_json(silent=True) or {}
    mode = data.get("mode") or session.get("draw_mode")
    pos  = parse_position(data)
    grid = get_grid()
    if not grid.in_bounds(pos):
        return jsonify({"error": f"cell {tuple(pos)} is outside the grid"}), 400

    start = get_endpoint("start")
    end   = get_endpoint("end")

    if mode == "wall":
        if pos != start and pos != end:
            grid.toggle_wall(pos)
            save_grid(grid)
    elif mode in ("start", "end"):
        other = end if mode == "start" else start
        if grid.is_wall(pos):
            raise InvalidEndpoint(f"{mode} cannot be placed on a wall", role=mode, position=tuple(pos))
        if pos == other:
            raise InvalidEndpoint(f"{mode} cannot share a cell with the other endpoint", role=mode, position=tuple(pos))
        set_endpoint(mode, pos)
    else:
        return jsonify({"error": "Pick a draw mode first"}), 400

    set_state(draw_mode=mode)
    drop_run()
    state = get_state()
    return jsonify({"svg": board_svg(), "start": state["start"], "end": state["end"]})


@app.route("/api/grid/stroke", methods=["POST"])
def api_grid_stroke():
    data = request.get_json(silent=True) or {}
    a = parse_position(data, "from")
    b = parse_position(data, "to")

    grid = get_grid()
    for role, pos in (("from", a), ("to", b)):
        if not grid.in_bounds(pos):
            raise InvalidEndpoint(f"stroke {role} {tuple(pos)} is outside the grid", role=role, position=tuple(pos))
    protected = [p for p in (get_endpoint("start"), get_endpoint("end")) if p is not None]
    painted = grid.draw_line(a, b, protected=protected)
    save_grid(grid)
    drop_run()
    return jsonify({"svg": board_svg(), "painted": [list(p) for p in painted]})


@app.route("/api/grid/generate", methods=["POST"])
def api_grid_generate():
    data = request.get_json(silent=True) or {}
    wall_prob = data.get("wall_prob", config.DEFAULT_WALL_PROB)
    seed = data.get("seed")
    if isinstance(wall_prob, bool) or not isinstance(wall_prob, (int, float)) or not 0 <= wall_prob <= 1:
        return jsonify({"error": f"wall_prob must be a number between 0 and 1, got {wall_prob!r}"}), 400
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        return jsonify({"error": f"seed must be an integer, got {seed!r}"}), 400

    current = get_grid()
    keep = [p for p in (get_endpoint("start"), get_endpoint("end")) if p is not None]
    grid = Grid.generate_random(
        current.rows, current.cols,
        wall_prob=float(wall_prob),
        seed=seed,
        keep_clear=keep,
    )
    save_grid(grid)
    drop_run()
    return jsonify({"svg": board_svg(), "walls": grid.wall_count()})


@app.route("/api/grid/reset", methods=["POST"])
def api_grid_reset():
    drop_run()
    return jsonify({"svg": board_svg(), "analytics": analytics_panel()})


@app.route("/api/grid/clear", methods=["POST"])
def api_grid_clear():
    drop_run()
    grid = get_grid()
    grid.clear_walls()
    save_grid(grid)
    set_endpoint("start", None)
    set_endpoint("end", None)
    set_state(draw_mode=None)
    return jsonify({"svg": board_svg(), "analytics": analytics_panel()})


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    state = get_state()
    start, end = get_endpoint("start"), get_endpoint("end")
    if start is None or end is None:
        return jsonify({"error": "Place a start and an end cell first"}), 400

    rec = Recorder()
    rec.start(
        state["selected_algo"], get_grid(), start, end,
        heuristic=state["heuristic"],
        max_expanded=config.MAX_EXPANDED_CELLS,
    )
    rec.run_to_completion()
    rec.stepper.set_speed(state["speed"])

    drop_run()
    store_run(rec)

    payload = frame_payload(rec)
    payload["analytics"] = analytics_panel(rec.metrics)
    payload["metrics"]   = rec.metrics.to_dict()
    payload["result"]    = rec.result.to_dict()
    return jsonify(payload)


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    rec = require_run()
    if not rec.stepper.next_step():
        payload = frame_payload(rec)
        payload["error"] = "Already at last step"
        return jsonify(payload), 400
    return jsonify(frame_payload(rec))


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    rec = require_run()
    if not rec.stepper.prev_step():
        return jsonify({"error": "Already at first step"}), 400
    return jsonify(frame_payload(rec))


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    rec = require_run()
    idx = (request.get_json(silent=True) or {}).get("index", 0)
    if not isinstance(idx, int) or not rec.stepper.goto_step(idx):
        return jsonify({"error": "Invalid step index"}), 400
    return jsonify(frame_payload(rec))


@app.route("/api/step/end", methods=["POST"])
def api_step_end():
    rec = require_run()
    rec.stepper.jump_to_end()
    return jsonify(frame_payload(rec))


@app.route("/api/step/play", methods=["POST"])
def api_step_play():
    rec = require_run()
    rec.stepper.toggle_play()
    return jsonify({"is_playing": rec.stepper.is_playing})


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    algo_key = (request.get_json(silent=True) or {}).get("algo_key", config.DEFAULT_ALGORITHM)
    algo_info = get_algorithm(algo_key)
    if algo_info is None:
        return jsonify({"error": f"Unknown algorithm: {algo_key}"}), 400
    set_state(selected_algo=algo_key)

    state = get_state()
    return jsonify({
        "algo_selector": algorithm_selector(
            algorithms=list_algorithms(),
            selected_key=algo_key,
            selected_heuristic=state["heuristic"],
            can_run=bool(state["start"] and state["end"]),
        ),
        "pseudocode": pseudocode_viewer(list(algo_info.pseudocode)),
    })


@app.route("/api/config/heuristic", methods=["POST"])
def api_config_heuristic():
    h = (request.get_json(silent=True) or {}).get("heuristic", config.DEFAULT_HEURISTIC)
    set_state(heuristic=h)
    return jsonify({"heuristic": h})


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    speed = (request.get_json(silent=True) or {}).get("speed", config.DEFAULT_SPEED)
    if speed not in config.SPEED_PRESETS:
        return jsonify({"error": f"Unknown speed: {speed}"}), 400
    set_state(speed=speed)
    rec = current_run()
    if rec:
        rec.stepper.set_speed(speed)
    return jsonify({"speed": speed})


@app.route("/api/config/show_distance", methods=["POST"])
def api_config_show_distance():
    show = bool((request.get_json(silent=True) or {}).get("show_distance", True))
    set_state(show_distance=show)
    return jsonify({"show_distance": show, "svg": board_svg(current_run())})


# ---------------------------------------------------------------------------
# API: Comparison
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    data  = request.get_json(silent=True) or {}
    state = get_state()
    start, end = get_endpoint("start"), get_endpoint("end")
    if start is None or end is None:
        return jsonify({"error": "Place a start and an end cell first"}), 400

    grid = get_grid()
    recs = []
    for side, default in (("left", "bfs"), ("right", "astar")):
        rec = Recorder()
        rec.start(
            data.get(side, default), grid, start, end,
            heuristic=state["heuristic"],
            max_expanded=config.MAX_EXPANDED_CELLS,
        )
        rec.run_to_completion()
        recs.append(rec)

    comp = compare(recs[0], recs[1])
    return jsonify({
        "comparison": comparison_panel(comp),
        "left":  comp.left.to_dict(),
        "right": comp.right.to_dict(),
        "winner_cells": comp.winner_cells,
        "winner_path":  comp.winner_path,
        "winner_time":  comp.winner_time,
    })


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Pathfinding Visualizer</title>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-amber: #f59e0b;
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 340px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
      overflow: auto;
      user-select: none;
    }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
      border-top: 1px solid var(--border);
      min-height: 220px;
    }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 14px;
      margin-bottom: 14px;
    }
    .panel h3 { font-size: 14px; margin-bottom: 10px; }
    .button-row { display: flex; gap: 6px; margin: 8px 0; }

    button, select {
      background: var(--bg-dark);
      color: var(--text-primary);
      border: 1px solid var(--border);
      border-radius: 6px;
      padding: 6px 10px;
      cursor: pointer;
    }
    button:disabled { opacity: 0.4; cursor: not-allowed; }
    .btn-primary { background: var(--accent-cyan); border: none; width: 100%; margin-top: 10px; }
    .mode-btn.active { border-color: var(--accent-amber); color: var(--accent-amber); }
    .placeholder, .algo-info { color: var(--text-secondary); font-size: 12px; margin-top: 8px; }
    .finished-badge { color: var(--accent-amber); font-weight: 700; }
    table { width: 100%; font-size: 13px; }
    td, th { padding: 3px 4px; text-align: left; }

    .code-block { font-family: 'JetBrains Mono', monospace; font-size: 12px; white-space: pre; }
    .code-line { padding: 1px 6px; }
    .explanation-text { font-size: 14px; line-height: 1.5; }
    .error { color: #f43f5e; font-size: 12px; min-height: 16px; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="algo-panel">{{ algo_selector|safe }}</div>
    <div id="draw-mode">{{ draw_mode|safe }}</div>
    <div id="board">{{ board|safe }}</div>
    <div id="display">{{ display|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
    <div id="comparison">{{ comparison|safe }}</div>
    <div id="error" class="error"></div>
  </div>

  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
    </div>

    <div id="bottom-panel">
      <div id="pseudocode-container">
        <h3>Pseudocode</h3>
        <div id="pseudocode">{{ pseudocode|safe }}</div>
      </div>
      <div id="explanation-container">
        <h3>Step Explanation</h3>
        <div id="explanation">{{ explanation|safe }}</div>
      </div>
    </div>
  </div>

  <script>
    let drawMode = null;
    let mouseDown = false;
    let lastCell = null;
    let playing = false;

    // API helpers
    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      const body = await res.json();
      document.getElementById('error').textContent = res.ok ? '' : (body.error || '');
      return body;
    }

    function showFrame(data) {
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      if (data.explanation) document.getElementById('explanation').innerHTML = data.explanation;
      if (data.analytics) document.getElementById('analytics').innerHTML = data.analytics;
      if (data.current_step !== undefined) document.getElementById('current-step').textContent = data.current_step;
      if (data.total_steps !== undefined) document.getElementById('total-steps').textContent = data.total_steps;
    }

    function cellOf(target) {
      if (!target || !target.dataset || target.dataset.row === undefined) return null;
      return {row: +target.dataset.row, col: +target.dataset.col};
    }

    // Board editing: click + drag painting
    const canvas = document.getElementById('canvas-svg');
    canvas.addEventListener('mousedown', async (e) => {
      const cell = cellOf(e.target);
      if (!cell || !drawMode || playing) return;
      mouseDown = true;
      lastCell = cell;
      showFrame(await post('/api/grid/cell', {...cell, mode: drawMode}));
      if (drawMode !== 'wall') location.reload();
    });
    canvas.addEventListener('mouseover', async (e) => {
      const cell = cellOf(e.target);
      if (!mouseDown || drawMode !== 'wall' || !cell || !lastCell) return;
      if (cell.row === lastCell.row && cell.col === lastCell.col) return;
      const from = lastCell;
      lastCell = cell;
      showFrame(await post('/api/grid/stroke', {from: from, to: cell}));
    });
    document.addEventListener('mouseup', () => { mouseDown = false; lastCell = null; });

    document.querySelectorAll('.mode-btn').forEach(btn => {
      btn.addEventListener('click', () => {
        drawMode = drawMode === btn.dataset.mode ? null : btn.dataset.mode;
        document.querySelectorAll('.mode-btn').forEach(b =>
          b.classList.toggle('active', b.dataset.mode === drawMode));
      });
    });

    // Board actions
    document.getElementById('wall-prob')?.addEventListener('input', (e) => {
      document.getElementById('wall-prob-val').textContent = e.target.value;
    });
    document.getElementById('btn-random')?.addEventListener('click', async () => {
      showFrame(await post('/api/grid/generate', {wall_prob: +document.getElementById('wall-prob').value}));
    });
    document.getElementById('btn-reset')?.addEventListener('click', async () => {
      showFrame(await post('/api/grid/reset'));
    });
    document.getElementById('btn-clear')?.addEventListener('click', async () => {
      await post('/api/grid/clear');
      location.reload();
    });
    document.getElementById('show-distance-toggle')?.addEventListener('change', async (e) => {
      showFrame(await post('/api/config/show_distance', {show_distance: e.target.checked}));
    });

    // Run + playback
    async function playLoop() {
      while (playing) {
        const data = await post('/api/step/next');
        showFrame(data);
        if (data.is_finished || data.error) break;
        await new Promise(r => setTimeout(r, data.delay_ms || 20));
      }
      playing = false;
    }

    document.getElementById('algo-panel').addEventListener('click', async (e) => {
      if (e.target.id !== 'btn-run') return;
      playing = false;
      const data = await post('/api/run');
      if (data.error) return;
      showFrame(data);
      playing = true;
      playLoop();
    });
    document.getElementById('btn-play')?.addEventListener('click', () => {
      playing = !playing;
      if (playing) playLoop();
    });
    document.getElementById('btn-next')?.addEventListener('click', async () => {
      showFrame(await post('/api/step/next'));
    });
    document.getElementById('btn-prev')?.addEventListener('click', async () => {
      showFrame(await post('/api/step/prev'));
    });
    document.getElementById('btn-rewind')?.addEventListener('click', async () => {
      showFrame(await post('/api/step/goto', {index: 0}));
    });
    document.getElementById('btn-end')?.addEventListener('click', async () => {
      playing = false;
      showFrame(await post('/api/step/end'));
    });

    // Settings
    document.getElementById('algo-panel').addEventListener('change', async (e) => {
      if (e.target.id === 'algo-selector') {
        const data = await post('/api/config/algo', {algo_key: e.target.value});
        if (data.algo_selector) document.getElementById('algo-panel').innerHTML = data.algo_selector;
        if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
      } else if (e.target.id === 'heuristic-selector') {
        await post('/api/config/heuristic', {heuristic: e.target.value});
      }
    });
    document.getElementById('speed-selector')?.addEventListener('change', async (e) => {
      await post('/api/config/speed', {speed: e.target.value});
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    logger.info("Grid Pathfinding Visualizer listening on http://%s:%d", config.HOST, config.PORT)
    app.run(debug=config.DEBUG, host=config.HOST, port=config.PORT)

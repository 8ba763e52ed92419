"""
canvas.py — SVG Grid Renderer
==============================
Pure rendering function: Grid + (optional) SearchResult + cursor → SVG.

The renderer consumes:
  • grid           – wall layout
  • start / end    – endpoint positions (either may be None while editing)
  • result, cursor – a finished search and how many of its records have
                     been revealed (the playback step number)
  • config         – visual config (cell size, colors, fonts, …)

Design decisions:
  - NO mutation.  Stateless — the caller passes in everything and gets
    back a string.
  - The first `cursor` records are revealed: visited cells first, then
    path cells, exactly in the order the search produced them.
  - Each cell carries data-row / data-col so the browser can map clicks
    and drags back to grid coordinates.
"""

from typing import Dict, Optional

from grid import CellState, Grid, Position
from algorithms.state import SearchResult


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    cell_size:  int = 20
    gap:        int = 1
    bg:         str = "#0d1117"

    # cell colors (state → fill)
    cell_colors: Dict[str, str] = {
        "empty":    "#1c2128",   # dark grey
        "wall":     "#484f58",   # slate
        "start":    "#0ea5e9",   # cyan
        "end":      "#ec4899",   # pink
        "visited":  "#10b981",   # emerald green
        "current":  "#06b6d4",   # bright teal — latest revealed cell
        "path":     "#f59e0b",   # amber — final path
    }

    label_color: str = "#e6edf3"
    label_size:  int = 8


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    grid: Grid,
    start: Optional[Position] = None,
    end: Optional[Position] = None,
    result: Optional[SearchResult] = None,
    cursor: Optional[int] = None,
    show_distance: bool = True,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        grid          : The board to render.
        start, end    : Endpoint positions, or None if not placed yet.
        result        : Finished search to overlay (None for a bare board).
        cursor        : Number of records revealed; None reveals everything.
        show_distance : Draw distance labels on visited cells.
        config        : Visual config.
    """
    pitch  = config.cell_size + config.gap
    width  = grid.cols * pitch + config.gap
    height = grid.rows * pitch + config.gap

    states, distances, current = _overlay(grid, result, cursor)
    if start is not None:
        states[tuple(start)] = CellState.START.value
    if end is not None:
        states[tuple(end)] = CellState.END.value

    svg_parts = [
        f'<svg id="grid-svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">'
    ]

    for cell in grid.cells():
        key = (cell.row, cell.col)
        state = CellState.WALL.value if cell.is_wall else states.get(key, CellState.EMPTY.value)
        if key == current and state == CellState.VISITED.value:
            state = CellState.CURRENT.value
        fill = config.cell_colors.get(state, config.cell_colors["empty"])

        x = config.gap + cell.col * pitch
        y = config.gap + cell.row * pitch
        svg_parts.append(
            f'<rect class="cell {state}" data-row="{cell.row}" data-col="{cell.col}" '
            f'x="{x}" y="{y}" width="{config.cell_size}" height="{config.cell_size}" fill="{fill}"/>'
        )

        if show_distance and key in distances and state in ("visited", "current", "path"):
            svg_parts.append(
                f'<text x="{x + config.cell_size / 2}" y="{y + config.cell_size / 2 + 3}" '
                f'text-anchor="middle" font-size="{config.label_size}" '
                f'font-family="\'JetBrains Mono\', monospace" fill="{config.label_color}" '
                f'pointer-events="none">{_fmt_distance(distances[key])}</text>'
            )

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _overlay(grid: Grid, result: Optional[SearchResult], cursor: Optional[int]):
    """Work out per-cell state, distance labels and the latest revealed cell."""
    states:    Dict[tuple, str]   = {}
    distances: Dict[tuple, float] = {}
    current = None
    if result is None:
        return states, distances, current

    visited = result.visited_in_order
    if cursor is None:
        cursor = len(visited) + len(result.path)

    for rec in visited[:cursor]:
        key = (rec.row, rec.col)
        states[key]    = CellState.VISITED.value
        distances[key] = rec.distance
        current        = key

    for p in result.path[:max(0, cursor - len(visited))]:
        key = (p.row, p.col)
        states[key] = CellState.PATH.value
        current     = key

    return states, distances, current


def _fmt_distance(d: float) -> str:
    if d == float("inf"):
        return "∞"
    return str(int(d)) if float(d).is_integer() else f"{d:.1f}"

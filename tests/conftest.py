"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from grid import Grid


@pytest.fixture
def open_grid() -> Grid:
    """A 3x3 board with no walls."""
    return Grid(3, 3)


@pytest.fixture
def wall_row_grid() -> Grid:
    """5x5 board with a wall across row 2, open only at (2, 2)."""
    return Grid.from_rows([
        ".....",
        ".....",
        "##.##",
        ".....",
        ".....",
    ])


@pytest.fixture
def enclosed_end_grid() -> Grid:
    """5x5 board where the end cell (2, 2) is boxed in by walls."""
    return Grid.from_rows([
        ".....",
        "..#..",
        ".#.#.",
        "..#..",
        ".....",
    ])


@pytest.fixture
def maze_grid() -> Grid:
    """A small maze with several dead ends and one corridor to the far corner."""
    return Grid.from_rows([
        "..#.......",
        ".##.####..",
        "....#..#.#",
        "#.#...##..",
        "..#.#....#",
        ".##.#.##..",
        "....#..#..",
    ])


@pytest.fixture
def client():
    """Flask test client with a fresh session."""
    from main import app, RUNS

    app.config["TESTING"] = True
    RUNS.clear()
    with app.test_client() as c:
        yield c
    RUNS.clear()

"""
Behavioural tests for the five search algorithms.

Every algorithm shares one engine, so most properties are checked across
all registry keys at once.
"""

from collections import deque

import pytest

from algorithms import compute
from algorithms.astar import AStarStrategy, astar
from algorithms.bfs import bfs
from algorithms.dfs import dfs
from algorithms.dijkstra import dijkstra
from algorithms.greedy_bfs import greedy_bfs
from algorithms.state import PathStep, SearchState, VisitedRecord
from grid import Grid, Position, InvalidEndpoint, InvalidGrid, NodeBudgetExceeded

ALGORITHM_KEYS = ["bfs", "dfs", "dijkstra", "astar", "greedy"]
SHORTEST_PATH_KEYS = ["bfs", "dijkstra", "astar"]


def reference_distances(grid: Grid, start):
    """Plain BFS distance map, independent of the engine under test."""
    dist = {tuple(start): 0}
    queue = deque([tuple(start)])
    while queue:
        cur = queue.popleft()
        for nbr in grid.neighbours(Position(*cur)):
            if not grid.is_wall(nbr) and tuple(nbr) not in dist:
                dist[tuple(nbr)] = dist[cur] + 1
                queue.append(tuple(nbr))
    return dist


def is_adjacent(a, b) -> bool:
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


# ---------------------------------------------------------------------------
# Concrete scenarios
# ---------------------------------------------------------------------------
class TestOpenGrid:
    """3x3 board with no walls, start (0, 0), end (2, 2)."""

    def test_bfs_visit_order(self, open_grid):
        result = bfs(open_grid, (0, 0), (2, 2))
        assert result.visited_in_order == [
            VisitedRecord(0, 1, 1),
            VisitedRecord(1, 0, 1),
            VisitedRecord(0, 2, 2),
            VisitedRecord(1, 1, 2),
            VisitedRecord(2, 0, 2),
            VisitedRecord(1, 2, 3),
            VisitedRecord(2, 1, 3),
        ]

    def test_bfs_path(self, open_grid):
        result = bfs(open_grid, (0, 0), (2, 2))
        assert result.path == [PathStep(0, 1), PathStep(0, 2), PathStep(1, 2), PathStep(2, 2)]

    def test_dfs_follows_last_pushed_neighbour(self, open_grid):
        result = dfs(open_grid, (0, 0), (2, 2))
        assert result.visited_in_order == [
            VisitedRecord(1, 0, 1),
            VisitedRecord(2, 0, 2),
            VisitedRecord(2, 1, 3),
        ]
        assert result.path == [PathStep(1, 0), PathStep(2, 0), PathStep(2, 1), PathStep(2, 2)]

    def test_greedy_heads_for_the_goal(self, open_grid):
        result = greedy_bfs(open_grid, (0, 0), (2, 2))
        assert [(v.row, v.col) for v in result.visited_in_order] == [(0, 1), (0, 2), (1, 2)]
        assert result.path_length == 4

    @pytest.mark.parametrize("key", ALGORITHM_KEYS)
    def test_path_length_is_four(self, open_grid, key):
        result = compute(key, open_grid, (0, 0), (2, 2))
        assert result.path_length == 4
        assert result.path[-1] == PathStep(2, 2)

    def test_result_serialises_with_plain_keys(self, open_grid):
        data = bfs(open_grid, (0, 0), (2, 2)).to_dict()
        assert set(data) == {"algorithm", "visited_in_order", "path"}
        assert data["visited_in_order"][0] == {"row": 0, "col": 1, "distance": 1}
        assert data["path"][-1] == {"row": 2, "col": 2}


class TestWallRow:
    """5x5 board with a wall across row 2, open only at (2, 2)."""

    @pytest.mark.parametrize("key", ALGORITHM_KEYS)
    def test_path_goes_through_the_gap(self, wall_row_grid, key):
        result = compute(key, wall_row_grid, (0, 0), (4, 4))
        assert PathStep(2, 2) in result.path

    @pytest.mark.parametrize("key", SHORTEST_PATH_KEYS)
    def test_shortest_path_length(self, wall_row_grid, key):
        assert compute(key, wall_row_grid, (0, 0), (4, 4)).path_length == 8

    @pytest.mark.parametrize("key", ALGORITHM_KEYS)
    def test_straight_through_the_gap(self, wall_row_grid, key):
        result = compute(key, wall_row_grid, (0, 2), (4, 2))
        assert PathStep(2, 2) in result.path
        assert result.path_length >= 4

    @pytest.mark.parametrize("key", SHORTEST_PATH_KEYS)
    def test_straight_line_is_shortest(self, wall_row_grid, key):
        assert compute(key, wall_row_grid, (0, 2), (4, 2)).path_length == 4


class TestUnreachable:
    """End cell boxed in by walls."""

    @pytest.mark.parametrize("key", ALGORITHM_KEYS)
    def test_empty_path_and_every_reachable_cell_visited(self, enclosed_end_grid, key):
        result = compute(key, enclosed_end_grid, (0, 0), (2, 2))
        assert result.path == []
        assert not result.found
        # 25 cells - 4 walls - enclosed end - start
        assert len(result.visited_in_order) == 19
        assert all(v.distance != float("inf") for v in result.visited_in_order)


class TestEdgeCases:
    @pytest.mark.parametrize("key", ALGORITHM_KEYS)
    def test_start_equals_end(self, open_grid, key):
        result = compute(key, open_grid, (1, 1), (1, 1))
        assert result.path == []
        assert result.visited_in_order == []

    @pytest.mark.parametrize("key", ALGORITHM_KEYS)
    def test_adjacent_end(self, open_grid, key):
        result = compute(key, open_grid, (0, 0), (0, 1))
        assert result.path == [PathStep(0, 1)]

    def test_single_cell_grid(self):
        result = bfs(Grid(1, 1), (0, 0), (0, 0))
        assert result.path == []

    def test_accepts_nested_rows_and_mappings(self):
        result = astar(["...", "...", "..."], {"row": 0, "col": 0}, {"row": 2, "col": 2})
        assert result.path_length == 4


class TestValidation:
    @pytest.mark.parametrize("start,end", [((0, 1), (2, 2)), ((0, 0), (0, 1))])
    def test_endpoint_on_wall(self, start, end):
        grid = Grid.from_rows([".#.", "...", "..."])
        with pytest.raises(InvalidEndpoint):
            bfs(grid, start, end)

    def test_endpoint_out_of_bounds(self, open_grid):
        with pytest.raises(InvalidEndpoint) as exc:
            dijkstra(open_grid, (0, 0), (3, 0))
        assert exc.value.role == "end"
        assert exc.value.position == (3, 0)

    def test_endpoint_not_a_position(self, open_grid):
        with pytest.raises(InvalidEndpoint):
            bfs(open_grid, "corner", (2, 2))

    def test_ragged_grid(self):
        with pytest.raises(InvalidGrid):
            bfs(["...", ".."], (0, 0), (1, 1))

    def test_empty_grid(self):
        with pytest.raises(InvalidGrid):
            bfs([], (0, 0), (0, 0))

    def test_not_a_grid(self):
        with pytest.raises(InvalidGrid):
            bfs("...", (0, 0), (0, 1))

    def test_errors_are_value_errors(self, open_grid):
        with pytest.raises(ValueError):
            bfs(open_grid, (-1, 0), (2, 2))

    def test_node_budget(self):
        with pytest.raises(NodeBudgetExceeded) as exc:
            bfs(Grid(10, 10), (0, 0), (9, 9), max_expanded=5)
        assert exc.value.budget == 5
        assert exc.value.algorithm == "bfs"

    def test_budget_large_enough_is_silent(self, open_grid):
        assert bfs(open_grid, (0, 0), (2, 2), max_expanded=100).found


# ---------------------------------------------------------------------------
# Properties over a maze
# ---------------------------------------------------------------------------
MAZE_START = (0, 0)
MAZE_END = (6, 9)


class TestProperties:
    @pytest.mark.parametrize("key", ALGORITHM_KEYS)
    def test_path_is_contiguous(self, maze_grid, key):
        result = compute(key, maze_grid, MAZE_START, MAZE_END)
        cells = [MAZE_START] + [(p.row, p.col) for p in result.path]
        assert cells[-1] == MAZE_END
        for a, b in zip(cells, cells[1:]):
            assert is_adjacent(a, b)
            assert not maze_grid.is_wall(Position(*b))

    @pytest.mark.parametrize("key", ALGORITHM_KEYS)
    def test_visited_cells_are_unique_and_open(self, maze_grid, key):
        result = compute(key, maze_grid, MAZE_START, MAZE_END)
        seen = [(v.row, v.col) for v in result.visited_in_order]
        assert len(seen) == len(set(seen))
        assert MAZE_START not in seen
        assert MAZE_END not in seen
        assert not any(maze_grid.is_wall(Position(*c)) for c in seen)

    @pytest.mark.parametrize("key", SHORTEST_PATH_KEYS)
    def test_shortest_path(self, maze_grid, key):
        result = compute(key, maze_grid, MAZE_START, MAZE_END)
        assert result.path_length == reference_distances(maze_grid, MAZE_START)[MAZE_END] == 15

    @pytest.mark.parametrize("key", ["dfs", "greedy"])
    def test_non_optimal_algorithms_still_find_a_path(self, maze_grid, key):
        assert compute(key, maze_grid, MAZE_START, MAZE_END).path_length >= 15

    @pytest.mark.parametrize("key", SHORTEST_PATH_KEYS)
    def test_recorded_distances_are_exact(self, maze_grid, key):
        truth = reference_distances(maze_grid, MAZE_START)
        result = compute(key, maze_grid, MAZE_START, MAZE_END)
        for v in result.visited_in_order:
            assert v.distance == truth[(v.row, v.col)]

    @pytest.mark.parametrize("key", ["bfs", "dijkstra"])
    def test_distances_never_decrease(self, maze_grid, key):
        result = compute(key, maze_grid, MAZE_START, MAZE_END)
        distances = [v.distance for v in result.visited_in_order]
        assert distances == sorted(distances)

    def test_dijkstra_matches_bfs_on_unit_grid(self, maze_grid):
        assert (
            dijkstra(maze_grid, MAZE_START, MAZE_END).visited_in_order
            == bfs(maze_grid, MAZE_START, MAZE_END).visited_in_order
        )

    @pytest.mark.parametrize("key", ALGORITHM_KEYS)
    def test_deterministic(self, maze_grid, key):
        first = compute(key, maze_grid, MAZE_START, MAZE_END)
        second = compute(key, maze_grid, MAZE_START, MAZE_END)
        assert first == second

    @pytest.mark.parametrize("key", ALGORITHM_KEYS)
    def test_grid_is_not_mutated(self, maze_grid, key):
        before = maze_grid.snapshot()
        compute(key, maze_grid, MAZE_START, MAZE_END)
        assert maze_grid == before

    @pytest.mark.parametrize("heuristic", ["manhattan", "euclidean", "zero"])
    def test_astar_optimal_with_every_heuristic(self, maze_grid, heuristic):
        result = astar(maze_grid, MAZE_START, MAZE_END, heuristic=heuristic)
        assert result.path_length == 15

    def test_astar_expands_no_more_than_dijkstra(self, maze_grid):
        a = astar(maze_grid, MAZE_START, MAZE_END)
        d = dijkstra(maze_grid, MAZE_START, MAZE_END)
        assert len(a.visited_in_order) <= len(d.visited_in_order)

    @pytest.mark.parametrize("end", [(9, 14), (0, 14), (9, 0), (4, 7)])
    def test_bfs_matches_manhattan_on_open_grid(self, end):
        result = bfs(Grid(10, 15), (0, 0), end)
        assert result.path_length == end[0] + end[1]

    @pytest.mark.parametrize("key", ALGORITHM_KEYS)
    def test_no_diagonal_shortcut(self, key):
        grid = Grid.from_rows([
            "###",
            "#..",
            "#.#",
        ])
        result = compute(key, grid, (1, 1), (2, 1))
        assert result.path == [PathStep(2, 1)]

    @pytest.mark.parametrize("key", ALGORITHM_KEYS)
    def test_path_cells_expanded_in_path_order(self, maze_grid, key):
        result = compute(key, maze_grid, MAZE_START, MAZE_END)
        order = {(v.row, v.col): i for i, v in enumerate(result.visited_in_order)}
        # every path cell but the end was expanded after its predecessor
        positions = [order[(p.row, p.col)] for p in result.path[:-1]]
        assert positions == sorted(positions)
        assert len(set(positions)) == len(positions)


# ---------------------------------------------------------------------------
# A* open-set relaxation
# ---------------------------------------------------------------------------
class TestAStarRelax:
    """
    3x3 board, end (2, 2).  Cell (1, 2) is already open with g = 4 via
    (1, 1); expanding (0, 2) at g = 1 offers it g = 2.
    """

    OPEN_CELL = 5    # (1, 2)
    OLD_PREV  = 4    # (1, 1)
    NEW_PREV  = 2    # (0, 2)

    @pytest.fixture
    def scenario(self):
        state = SearchState(Grid(3, 3), Position(0, 0), Position(2, 2))
        strategy = AStarStrategy()
        frontier = strategy.make_frontier(state)
        state.distance[self.OPEN_CELL] = 4
        state.predecessor[self.OPEN_CELL] = self.OLD_PREV
        frontier.push(self.OPEN_CELL)
        state.in_frontier[self.OPEN_CELL] = True
        state.distance[self.NEW_PREV] = 1
        return state, strategy, frontier

    def test_strictly_better_g_is_taken(self, scenario):
        state, strategy, frontier = scenario
        assert strategy.relax(state, frontier, self.NEW_PREV, self.OPEN_CELL) is True
        assert state.distance[self.OPEN_CELL] == 2
        assert state.predecessor[self.OPEN_CELL] == self.NEW_PREV

    def test_improved_entry_pops_before_the_stale_one(self, scenario):
        state, strategy, frontier = scenario
        strategy.relax(state, frontier, self.NEW_PREV, self.OPEN_CELL)
        frontier.push(self.OPEN_CELL)
        assert len(frontier) == 2
        assert frontier.pop() == self.OPEN_CELL
        # the stale entry is still queued and is skipped once the cell is closed
        assert self.OPEN_CELL in frontier

    def test_equal_or_worse_g_is_skipped(self, scenario):
        state, strategy, frontier = scenario
        state.distance[self.OLD_PREV] = 3
        assert strategy.relax(state, frontier, self.OLD_PREV, self.OPEN_CELL) is False
        assert state.distance[self.OPEN_CELL] == 4
        assert state.predecessor[self.OPEN_CELL] == self.OLD_PREV

    def test_cell_off_the_open_set_is_always_taken(self, scenario):
        state, strategy, frontier = scenario
        state.in_frontier[self.OPEN_CELL] = False
        state.distance[self.OLD_PREV] = 3
        assert strategy.relax(state, frontier, self.OLD_PREV, self.OPEN_CELL) is True
        assert state.distance[self.OPEN_CELL] == 4

"""
Unit tests for the grid data layer.
"""

import pytest

from grid import Grid, Position, InvalidGrid
from grid.grid import line_between


class TestConstruction:
    """Test building grids."""

    def test_empty_grid_has_no_walls(self):
        g = Grid(4, 5)
        assert g.size == 20
        assert g.wall_count() == 0

    def test_non_positive_dimensions_rejected(self):
        with pytest.raises(InvalidGrid):
            Grid(0, 3)
        with pytest.raises(InvalidGrid):
            Grid(3, -1)

    def test_wrong_wall_count_rejected(self):
        with pytest.raises(InvalidGrid):
            Grid(2, 2, [True, False, False])

    def test_from_rows_strings(self):
        g = Grid.from_rows(["..#", "#.."])
        assert (g.rows, g.cols) == (2, 3)
        assert g.is_wall(Position(0, 2))
        assert g.is_wall(Position(1, 0))
        assert not g.is_wall(Position(1, 1))

    def test_from_rows_bool_sequences(self):
        g = Grid.from_rows([[False, True], [True, False]])
        assert g.wall_count() == 2

    def test_from_rows_ragged_rejected(self):
        with pytest.raises(InvalidGrid):
            Grid.from_rows(["...", ".."])

    def test_from_rows_empty_rejected(self):
        with pytest.raises(InvalidGrid):
            Grid.from_rows([])
        with pytest.raises(InvalidGrid):
            Grid.from_rows([""])

    def test_str_round_trips_through_from_rows(self):
        rows = [".#.", "...", "##."]
        assert str(Grid.from_rows(rows)) == "\n".join(rows)


class TestNeighbours:
    """Neighbour order is North, East, South, West."""

    def test_interior_cell_order(self):
        g = Grid(3, 3)
        assert g.neighbours(Position(1, 1)) == [(0, 1), (1, 2), (2, 1), (1, 0)]

    def test_corner_cell_is_clipped(self):
        g = Grid(3, 3)
        assert g.neighbours(Position(0, 0)) == [(0, 1), (1, 0)]

    def test_walls_are_included(self):
        g = Grid.from_rows([".#", ".."])
        assert Position(0, 1) in g.neighbours(Position(0, 0))

    def test_index_version_matches(self):
        g = Grid(4, 5)
        for cell in g.cells():
            idx = g.index(cell.position)
            expected = [g.index(p) for p in g.neighbours(cell.position)]
            assert g.neighbour_indices(idx) == expected


class TestEditing:
    """Test wall editing helpers."""

    def test_toggle_returns_new_flag(self):
        g = Grid(2, 2)
        assert g.toggle_wall(Position(0, 1)) is True
        assert g.toggle_wall(Position(0, 1)) is False

    def test_clear_walls(self):
        g = Grid.from_rows(["##", "#."])
        g.clear_walls()
        assert g.wall_count() == 0

    def test_draw_line_horizontal(self):
        g = Grid(3, 5)
        painted = g.draw_line(Position(1, 0), Position(1, 4))
        assert painted == [(1, c) for c in range(5)]
        assert g.wall_count() == 5

    def test_draw_line_skips_protected(self):
        g = Grid(3, 5)
        painted = g.draw_line((1, 0), (1, 4), protected=[(1, 2)])
        assert Position(1, 2) not in painted
        assert not g.is_wall(Position(1, 2))

    def test_line_between_has_no_gaps_on_long_axis(self):
        cells = line_between(Position(0, 0), Position(2, 6))
        assert cells[0] == (0, 0)
        assert cells[-1] == (2, 6)
        assert [c.col for c in cells] == list(range(7))

    def test_snapshot_is_independent(self):
        g = Grid(2, 2)
        snap = g.snapshot()
        g.set_wall(Position(0, 0))
        assert not snap.is_wall(Position(0, 0))


class TestGenerateRandom:
    """Test random obstacle fields."""

    def test_same_seed_same_grid(self):
        a = Grid.generate_random(10, 10, wall_prob=0.3, seed=42)
        b = Grid.generate_random(10, 10, wall_prob=0.3, seed=42)
        assert a == b

    def test_keep_clear_is_respected(self):
        g = Grid.generate_random(4, 4, wall_prob=1.0, seed=1, keep_clear=[(0, 0), (3, 3)])
        assert g.wall_count() == 14
        assert not g.is_wall(Position(0, 0))
        assert not g.is_wall(Position(3, 3))

    def test_zero_probability_is_empty(self):
        assert Grid.generate_random(5, 5, wall_prob=0.0, seed=3).wall_count() == 0


class TestSerialisation:
    def test_to_dict_encodes_walls(self):
        g = Grid.from_rows([".#", "#."])
        assert g.to_dict() == {"rows": 2, "cols": 2, "walls": "0110"}

    def test_from_dict_restores_grid(self):
        g = Grid.from_rows(["..#", "#.."])
        assert Grid.from_dict(g.to_dict()) == g


class TestPosition:
    def test_coerce_accepts_pairs_and_mappings(self):
        assert Position.coerce((1, 2)) == Position(1, 2)
        assert Position.coerce([1, 2]) == Position(1, 2)
        assert Position.coerce({"row": 1, "col": 2}) == Position(1, 2)

    def test_coerce_rejects_garbage(self):
        with pytest.raises(TypeError):
            Position.coerce("1,2")
        with pytest.raises(TypeError):
            Position.coerce({"row": 1})
        with pytest.raises(TypeError):
            Position.coerce((1, 2, 3))

"""
Tests for the unweighted searches: BFS, DFS and bidirectional BFS.
"""

from gridsearch import create_grid, grid_from_rows, run

from conftest import reachable_cells


class TestBFS:
    """Breadth-first search."""

    def test_open_grid(self, empty_grid, check_path):
        result = run(empty_grid, None, None, "bfs")
        assert result.success
        assert result.path_length == 8
        assert result.cost == 8.0
        check_path(empty_grid, result.path)

    def test_trace_is_level_order(self, empty_grid):
        result = run(empty_grid, None, None, "bfs")
        assert result.trace[:3] == [(0, 0), (0, 1), (1, 0)]
        # the target is the only cell 8 steps away, so everything else comes first
        assert len(result.trace) == 25
        assert result.trace[-1] == (4, 4)
        assert result.expanded == 25

    def test_gap(self, gap_grid, check_path):
        result = run(gap_grid, None, None, "bfs")
        assert result.path_length == 10
        assert (3, 4) in result.path
        check_path(gap_grid, result.path)

    def test_ignores_cell_costs(self):
        grid = grid_from_rows([
            "S9T",
            "...",
        ])
        result = run(grid, None, None, "bfs")
        assert result.path == [(0, 0), (0, 1), (0, 2)]
        assert result.path_length == 2
        # cost is still reported in terms of entry costs
        assert result.cost == 10.0

    def test_enclosed_target(self, enclosed_grid):
        result = run(enclosed_grid, None, None, "bfs")
        assert not result.success
        assert result.path == []
        assert result.path_length == 0
        assert set(result.trace) == reachable_cells(enclosed_grid)
        assert len(result.trace) == len(set(result.trace))

    def test_adjacent_endpoints(self):
        grid = create_grid(1, 2, start=(0, 0), target=(0, 1))
        result = run(grid, None, None, "bfs")
        assert result.path == [(0, 0), (0, 1)]
        assert result.path_length == 1


class TestDFS:
    """Depth-first search."""

    def test_follows_first_direction(self, empty_grid, check_path):
        result = run(empty_grid, None, None, "dfs")
        expected = [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4), (1, 4), (2, 4), (3, 4), (4, 4)]
        assert result.trace == expected
        assert result.path == expected
        check_path(empty_grid, result.path)

    def test_path_is_not_always_shortest(self, check_path):
        grid = create_grid(3, 3, start=(1, 0), target=(1, 2))
        result = run(grid, None, None, "dfs")
        assert result.success
        assert result.path == [(1, 0), (0, 0), (0, 1), (0, 2), (1, 2)]
        assert result.path_length == 4
        assert run(grid, None, None, "bfs").path_length == 2
        check_path(grid, result.path)

    def test_enclosed_target(self, enclosed_grid):
        result = run(enclosed_grid, None, None, "dfs")
        assert not result.success
        assert set(result.trace) == reachable_cells(enclosed_grid)
        assert len(result.trace) == len(set(result.trace))


class TestBidirectional:
    """Two BFS frontiers meeting in the middle."""

    def test_open_grid(self, empty_grid, check_path):
        result = run(empty_grid, None, None, "bidirectional")
        assert result.success
        assert result.path_length == 8
        assert result.meta["meeting"] in result.path
        check_path(empty_grid, result.path)

    def test_gap(self, gap_grid, check_path):
        result = run(gap_grid, None, None, "bidirectional")
        assert result.path_length == 10
        check_path(gap_grid, result.path)

    def test_trace_holds_both_sides(self, empty_grid):
        result = run(empty_grid, None, None, "bidirectional")
        assert result.trace[0] == (0, 0)
        assert result.trace[1] == (4, 4)
        assert len(result.trace) == len(set(result.trace))
        # stops well before flooding the whole grid
        assert len(result.trace) < 25

    def test_adjacent_endpoints(self):
        grid = create_grid(1, 2, start=(0, 0), target=(0, 1))
        result = run(grid, None, None, "bidirectional")
        assert result.path == [(0, 0), (0, 1)]

    def test_meeting_detected_while_enqueueing(self):
        grid = grid_from_rows(["S..T"])
        result = run(grid, None, None, "bidirectional")
        # (0, 2) is already on the backward frontier when (0, 1) reaches it,
        # so it is never dequeued
        assert result.trace == [(0, 0), (0, 3), (0, 1)]
        assert result.meta["meeting"] == (0, 2)
        assert result.path == [(0, 0), (0, 1), (0, 2), (0, 3)]
        assert result.expanded == 3

    def test_enclosed_target_stops_when_a_frontier_empties(self, enclosed_grid):
        result = run(enclosed_grid, None, None, "bidirectional")
        assert not result.success
        assert result.trace == [(0, 0), (4, 4)]
        assert result.expanded == 2

    def test_enclosed_start(self):
        grid = grid_from_rows([
            "S#...",
            "#....",
            "....T",
        ])
        result = run(grid, None, None, "bidirectional")
        assert not result.success
        assert result.path == []

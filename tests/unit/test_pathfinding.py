"""
Unit tests for breadth-first shortest path search.
"""
from minefield.grid import neighbors
from minefield.pathfinding import shortest_path


def assert_valid_path(path, start, goal, cols, rows, blocked) -> None:
    """Check a path is connected, open and joins start to goal."""
    assert path[0] == start
    assert path[-1] == goal
    for cell in path:
        assert cell not in blocked
    for current, following in zip(path, path[1:]):
        assert following in neighbors(current, cols, rows)


# ============================================================================
# Shortest Path Tests
# ============================================================================

class TestShortestPath:
    """Test shortest path search."""

    def test_open_grid_uses_diagonals(self) -> None:
        """On an empty 3x3 grid the diagonal is shortest."""
        assert shortest_path(0, 8, 3, 3, set()) == [0, 4, 8]

    def test_routes_around_blocked_center(self) -> None:
        """Blocking the center leaves a 3-hop detour through a diagonal."""
        path = shortest_path(0, 8, 3, 3, {4})
        assert path == [0, 1, 5, 8]
        assert_valid_path(path, 0, 8, 3, 3, {4})

    def test_blocked_start_returns_none(self) -> None:
        """No path when start is blocked."""
        assert shortest_path(0, 8, 3, 3, {0}) is None

    def test_blocked_goal_returns_none(self) -> None:
        """No path when goal is blocked."""
        assert shortest_path(0, 8, 3, 3, {8}) is None

    def test_walled_goal_returns_none(self) -> None:
        """No path when every goal neighbor is blocked."""
        assert shortest_path(0, 8, 3, 3, {4, 5, 7}) is None

    def test_start_equals_goal(self) -> None:
        """Start and goal on one cell is a single-cell path."""
        assert shortest_path(3, 3, 3, 3, set()) == [3]

    def test_wall_with_gap(self) -> None:
        """Path should go through the only gap in a wall."""
        # 5x3 grid, column 2 blocked except the bottom cell (index 12)
        blocked = {2, 7}
        path = shortest_path(0, 4, 5, 3, blocked)
        assert path is not None
        assert 12 in path
        assert_valid_path(path, 0, 4, 5, 3, blocked)

    def test_path_length_matches_king_distance(self) -> None:
        """On an open grid hops equal the Chebyshev distance."""
        path = shortest_path(0, 29, 6, 5, frozenset())
        assert len(path) - 1 == 5

    def test_repeated_calls_are_identical(self) -> None:
        """Searching twice with the same input gives the same path."""
        blocked = frozenset({4, 10, 15})
        first = shortest_path(0, 29, 6, 5, blocked)
        second = shortest_path(0, 29, 6, 5, blocked)
        assert first == second

    def test_blocked_set_is_not_mutated(self) -> None:
        """Search should leave the blocked set untouched."""
        blocked = {4}
        shortest_path(0, 8, 3, 3, blocked)
        assert blocked == {4}

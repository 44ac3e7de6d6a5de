"""
Index arithmetic and king-move adjacency on a rectangular grid.
"""
from typing import List, Tuple


def to_position(index: int, cols: int) -> Tuple[int, int]:
    """Convert flat cell index to (row, col) position."""
    return index // cols, index % cols


def to_index(row: int, col: int, cols: int) -> int:
    """Convert (row, col) position to flat cell index."""
    return row * cols + col


def in_bounds(row: int, col: int, cols: int, rows: int) -> bool:
    """Check if position is within grid bounds."""
    return 0 <= row < rows and 0 <= col < cols


def neighbors(index: int, cols: int, rows: int) -> List[int]:
    """
    Get the cells one king move away from a cell.

    Orthogonal neighbors come first (left, right, up, down), then the
    diagonals (up-left, up-right, down-left, down-right).

    Args:
        index: Center cell index.
        cols: Number of columns.
        rows: Number of rows.

    Returns:
        Up to 8 neighboring cell indices.
    """
    row, col = to_position(index, cols)
    has_left = col > 0
    has_right = col < cols - 1
    has_up = row > 0
    has_down = row < rows - 1

    result = []
    if has_left:
        result.append(index - 1)
    if has_right:
        result.append(index + 1)
    if has_up:
        result.append(index - cols)
    if has_down:
        result.append(index + cols)

    if has_up and has_left:
        result.append(index - cols - 1)
    if has_up and has_right:
        result.append(index - cols + 1)
    if has_down and has_left:
        result.append(index + cols - 1)
    if has_down and has_right:
        result.append(index + cols + 1)
    return result

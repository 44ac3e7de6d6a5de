"""
Breadth-first shortest path over the king-move grid.

Used both as the solvability check during generation and for the
escape-route hint.
"""
from collections import deque
from typing import AbstractSet, List, Optional

import numpy as np

from .grid import neighbors


def shortest_path(
    start: int,
    goal: int,
    cols: int,
    rows: int,
    blocked: AbstractSet[int],
) -> Optional[List[int]]:
    """
    Find a shortest path of open cells from start to goal.

    Args:
        start: Start cell index.
        goal: Goal cell index.
        cols: Number of columns.
        rows: Number of rows.
        blocked: Impassable cell indices.

    Returns:
        Cell indices from start to goal inclusive, or None if the goal
        cannot be reached.
    """
    if start in blocked or goal in blocked:
        return None

    previous = np.full(cols * rows, -1, dtype=np.int32)
    previous[start] = start
    queue = deque([start])

    while queue:
        current = queue.popleft()
        if current == goal:
            break

        for neighbor in neighbors(current, cols, rows):
            if neighbor in blocked or previous[neighbor] != -1:
                continue
            previous[neighbor] = current
            queue.append(neighbor)

    if previous[goal] == -1:
        return None

    path = [goal]
    cursor = goal
    while cursor != start:
        cursor = int(previous[cursor])
        path.append(cursor)
    path.reverse()
    return path

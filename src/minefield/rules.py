"""
Movement and outcome rules.

The query functions are pure. apply_move is the one place that mutates a
GameState, and only after can_move_to has accepted the target.
"""
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from .board import Board
from .game_state import GamePhase, GameState, begin
from .grid import in_bounds, neighbors, to_index, to_position


# ============================================================================
# Constants
# ============================================================================

class LandingResult(Enum):
    """What the player finds on the cell they land on."""

    SAFE = "safe"
    MINE = "mine"
    GOAL = "goal"


class Direction(Enum):
    """One king move, as a (row, col) delta."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP_LEFT = (-1, -1)
    UP_RIGHT = (-1, 1)
    DOWN_LEFT = (1, -1)
    DOWN_RIGHT = (1, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        """Row and column offset of this move."""
        return self.value


# Primary and alternate key for each direction
KEY_BINDINGS: Dict[str, Direction] = {
    "arrowleft": Direction.LEFT,
    "a": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "d": Direction.RIGHT,
    "arrowup": Direction.UP,
    "w": Direction.UP,
    "arrowdown": Direction.DOWN,
    "s": Direction.DOWN,
    "home": Direction.UP_LEFT,
    "q": Direction.UP_LEFT,
    "pageup": Direction.UP_RIGHT,
    "e": Direction.UP_RIGHT,
    "end": Direction.DOWN_LEFT,
    "z": Direction.DOWN_LEFT,
    "pagedown": Direction.DOWN_RIGHT,
    "c": Direction.DOWN_RIGHT,
}


# ============================================================================
# Move Queries
# ============================================================================

def can_move_to(board: Board, state: GameState, target: int) -> bool:
    """
    Check if the player may step onto a cell.

    Mines are legal targets; stepping on one loses the game.

    Args:
        board: Current board.
        state: Current session state.
        target: Candidate cell index.

    Returns:
        True if the move is legal.
    """
    if state.is_terminal:
        return False
    if target < 0 or target >= board.tile_count:
        return False
    if target == state.current_index:
        return False
    return target in neighbors(state.current_index, board.cols, board.rows)


def legal_targets(board: Board, state: GameState) -> List[int]:
    """Get every cell the player may step onto next."""
    return [
        index
        for index in neighbors(state.current_index, board.cols, board.rows)
        if can_move_to(board, state, index)
    ]


def evaluate_landing(board: Board, target: int) -> LandingResult:
    """Classify the cell the player lands on."""
    if board.is_mine(target):
        return LandingResult.MINE
    if target == board.goal_index:
        return LandingResult.GOAL
    return LandingResult.SAFE


# ============================================================================
# Directional Input
# ============================================================================

def direction_for_key(key: str) -> Optional[Direction]:
    """Look up the direction bound to a key name (case-insensitive)."""
    return KEY_BINDINGS.get(key.lower())


def step_in_direction(
    index: int, direction: Direction, cols: int, rows: int
) -> Optional[int]:
    """
    Get the cell one move away in a direction.

    Returns:
        Target cell index, or None if the move leaves the grid.
    """
    row, col = to_position(index, cols)
    delta_row, delta_col = direction.delta
    new_row = row + delta_row
    new_col = col + delta_col
    if not in_bounds(new_row, new_col, cols, rows):
        return None
    return to_index(new_row, new_col, cols)


def get_directional_target(
    current_index: int,
    key: Union[str, Direction],
    cols: int,
    rows: int,
) -> Optional[int]:
    """
    Map a directional input to the neighboring cell.

    Args:
        current_index: Cell the player stands on.
        key: Key name or Direction.
        cols: Number of columns.
        rows: Number of rows.

    Returns:
        Target cell index, or None for unknown input or off-grid moves.
    """
    direction = key if isinstance(key, Direction) else direction_for_key(key)
    if direction is None:
        return None
    return step_in_direction(current_index, direction, cols, rows)


# ============================================================================
# Move Application
# ============================================================================

def apply_move(
    board: Board, state: GameState, target: int
) -> Optional[LandingResult]:
    """
    Move the player if the move is legal.

    A ready session is put into play by its first accepted move.

    Args:
        board: Current board.
        state: Session state, mutated on acceptance.
        target: Cell to step onto.

    Returns:
        Landing result, or None if the move was rejected.
    """
    if not can_move_to(board, state, target):
        return None

    begin(state)
    landing = evaluate_landing(board, target)
    state.steps += 1
    state.current_index = target

    if landing == LandingResult.MINE:
        state.phase = GamePhase.DEAD
    else:
        state.visited_safe.add(target)
        if landing == LandingResult.GOAL:
            state.phase = GamePhase.CLEAR
    return landing

"""
Game state module for the minefield.

Holds the mutable record of one play session on one board.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Set


# ============================================================================
# Constants
# ============================================================================

class GamePhase(Enum):
    """Possible phases of a session."""

    READY = "ready"
    PLAYING = "playing"
    DEAD = "dead"
    CLEAR = "clear"

    @property
    def is_terminal(self) -> bool:
        """Check if no further move is possible."""
        return self in (GamePhase.DEAD, GamePhase.CLEAR)


# ============================================================================
# Game State
# ============================================================================

@dataclass
class GameState:
    """
    Session record for one board.

    Attributes:
        phase: Current phase.
        current_index: Cell the player stands on.
        steps: Accepted moves so far.
        visited_safe: Mine-free cells the player has stood on.
    """

    phase: GamePhase
    current_index: int
    steps: int = 0
    visited_safe: Set[int] = field(default_factory=set)

    def __post_init__(self) -> None:
        """Count the starting cell as visited."""
        if not self.visited_safe:
            self.visited_safe.add(self.current_index)

    @property
    def is_terminal(self) -> bool:
        """Check if the session has ended."""
        return self.phase.is_terminal

    @property
    def is_dead(self) -> bool:
        """Check if the player stepped on a mine."""
        return self.phase == GamePhase.DEAD

    @property
    def is_clear(self) -> bool:
        """Check if the player reached the goal."""
        return self.phase == GamePhase.CLEAR


def create_initial_state(
    start_index: int, phase: GamePhase = GamePhase.READY
) -> GameState:
    """Create a fresh state with the player on the start cell."""
    return GameState(
        phase=phase,
        current_index=start_index,
        steps=0,
        visited_safe={start_index},
    )


def begin(state: GameState) -> bool:
    """
    Move a ready session into play.

    Returns:
        True if the phase changed, False otherwise.
    """
    if state.phase != GamePhase.READY:
        return False
    state.phase = GamePhase.PLAYING
    return True

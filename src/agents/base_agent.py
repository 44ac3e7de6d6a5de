"""
Base agent interface for minefield players.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

import numpy as np

from minefield.environment import ACTIONS, PLAYER, DETONATED


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for minefield agents.

    All agents must implement the select_action method to choose
    which direction to move based on the current observation.
    """

    def __init__(self, board_rows: int, board_cols: int) -> None:
        """
        Initialize the agent.

        Args:
            board_rows: Number of rows in the board.
            board_cols: Number of columns in the board.
        """
        self.board_rows = board_rows
        self.board_cols = board_cols
        self.total_cells = board_rows * board_cols

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
        info: Optional[Dict[str, Any]] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell knowledge.
            valid_actions: Optional mask of legal actions.
            info: Optional info dict from the last environment call.

        Returns:
            Action index into ACTIONS.
        """
        pass

    def index_to_position(self, index: int) -> Tuple[int, int]:
        """Convert flat cell index to (row, col) position."""
        return index // self.board_cols, index % self.board_cols

    def action_between(self, from_index: int, to_index: int) -> Optional[int]:
        """
        Get the action that moves between two adjacent cells.

        Returns:
            Action index, or None if the cells are not one move apart.
        """
        from_row, from_col = self.index_to_position(from_index)
        to_row, to_col = self.index_to_position(to_index)
        delta = (to_row - from_row, to_col - from_col)
        for action, direction in enumerate(ACTIONS):
            if direction.delta == delta:
                return action
        return None

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get legal actions mask from observation.

        Args:
            observation: 2D array of cell knowledge.

        Returns:
            Boolean mask where True = move stays on the grid.
        """
        mask = np.zeros(len(ACTIONS), dtype=bool)
        if np.any(observation == DETONATED):
            return mask

        players = np.argwhere(observation == PLAYER)
        if len(players) == 0:
            return mask

        row, col = players[0]
        for action, direction in enumerate(ACTIONS):
            delta_row, delta_col = direction.delta
            new_row, new_col = row + delta_row, col + delta_col
            mask[action] = (
                0 <= new_row < self.board_rows
                and 0 <= new_col < self.board_cols
            )
        return mask

    def reset(self) -> None:
        """Reset agent state for new episode."""
        pass

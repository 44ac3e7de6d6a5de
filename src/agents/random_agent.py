"""
Random agent for the minefield.

Serves as a baseline by selecting random legal moves.
"""
from typing import Any, Dict, Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that selects legal moves uniformly at random.

    This provides a baseline for comparing the route-following agent.
    """

    def __init__(
        self,
        board_rows: int = 5,
        board_cols: int = 6,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_rows: Number of rows in the board.
            board_cols: Number of columns in the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_rows, board_cols)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
        info: Optional[Dict[str, Any]] = None,
    ) -> int:
        """
        Select a random legal action.

        Args:
            observation: 2D array of cell knowledge.
            valid_actions: Optional mask of legal actions.
            info: Unused.

        Returns:
            Random action index from legal actions.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.where(valid_actions)[0]

        if len(valid_indices) == 0:
            # No legal actions, return any action (will be rejected)
            return 0

        return int(self.rng.choice(valid_indices))

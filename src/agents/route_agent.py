"""
Route-following agent for the minefield.

Walks the escape-route hint the environment reports in its info dict.
"""
from typing import Any, Dict, Optional

import numpy as np

from .random_agent import RandomAgent


# ============================================================================
# Route Agent
# ============================================================================

class RouteAgent(RandomAgent):
    """
    Agent that follows the shortest escape route.

    The route in info["route"] starts at the player's cell, so the next
    move is always towards route[1]. Without a route the agent falls back
    to a random legal move.
    """

    def __init__(
        self,
        board_rows: int = 5,
        board_cols: int = 6,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(board_rows, board_cols, seed)
        self.route_moves = 0
        self.fallback_moves = 0

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
        info: Optional[Dict[str, Any]] = None,
    ) -> int:
        """
        Select the next move along the escape route.

        Args:
            observation: 2D array of cell knowledge.
            valid_actions: Optional mask of legal actions.
            info: Info dict carrying the "route" hint.

        Returns:
            Action index into ACTIONS.
        """
        route = (info or {}).get("route")
        if route and len(route) >= 2:
            action = self.action_between(route[0], route[1])
            if action is not None and (
                valid_actions is None or valid_actions[action]
            ):
                self.route_moves += 1
                return action

        self.fallback_moves += 1
        return super().select_action(observation, valid_actions, info)

    def reset(self) -> None:
        """Reset move counters for a new episode."""
        self.route_moves = 0
        self.fallback_moves = 0

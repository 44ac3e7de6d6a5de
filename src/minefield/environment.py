"""
Gymnasium environment wrapper for the minefield.

Provides a standard RL interface for playing escape rounds.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, escape_route, generate
from .game_state import GamePhase, GameState, create_initial_state
from .grid import to_position
from .rules import (
    Direction,
    LandingResult,
    apply_move,
    can_move_to,
    step_in_direction,
)


# ============================================================================
# Constants
# ============================================================================

# Action i moves the player in ACTIONS[i]
ACTIONS = tuple(Direction)

UNKNOWN = -1
VISITED = 0
PLAYER = 1
GOAL = 2
DETONATED = 9


# ============================================================================
# Minefield Environment
# ============================================================================

class MinefieldEnv(gym.Env):
    """
    Gymnasium environment for escaping a minefield.

    Observation:
        2D array where:
        - -1 = unknown cell
        - 0 = visited safe cell
        - 1 = player position
        - 2 = goal cell
        - 9 = mine the player stepped on

    Actions:
        Discrete action space of size 8, one per Direction.

    Rewards:
        - +1 for stepping onto a new safe cell
        - 0 for stepping back onto a visited cell
        - +10 for reaching the goal
        - -10 for stepping on a mine
        - -0.1 for an illegal move (off the grid or after the round ended)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the minefield environment.

        Args:
            config: Board configuration (default: 6x5 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.board: Optional[Board] = None
        self.state: Optional[GameState] = None

        self.observation_space = spaces.Box(
            low=UNKNOWN,
            high=DETONATED,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(len(ACTIONS))

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Generate a fresh board and start a new round.

        Args:
            seed: Random seed for reproducibility.
            options: Optional "mine_count" override for this round.

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)

        options = options or {}
        board_seed = self.config.seed
        if seed is not None or board_seed is None:
            board_seed = int(self.np_random.integers(0, 2**32))

        self.board = generate(
            self.config,
            seed=board_seed,
            mine_count=options.get("mine_count", self.config.mine_count),
        )
        self.state = create_initial_state(
            self.board.start_index, GamePhase.PLAYING
        )

        return self.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one move in the environment.

        Args:
            action: Index into ACTIONS.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        reward = self._calculate_reward(int(action))

        observation = self.get_observation()
        terminated = self.state.is_terminal
        truncated = False
        info = self._get_info()

        return observation, reward, terminated, truncated, info

    def _target_for(self, action: int) -> Optional[int]:
        """Convert action to the target cell, or None if off the grid."""
        return step_in_direction(
            self.state.current_index,
            ACTIONS[action],
            self.board.cols,
            self.board.rows,
        )

    def _calculate_reward(self, action: int) -> float:
        """
        Apply a move and score it.

        Args:
            action: Index into ACTIONS.

        Returns:
            Reward value.
        """
        target = self._target_for(action)
        if target is None:
            return -0.1

        revisit = target in self.state.visited_safe
        landing = apply_move(self.board, self.state, target)

        if landing is None:
            return -0.1
        if landing == LandingResult.GOAL:
            return 10.0
        if landing == LandingResult.MINE:
            return -10.0
        return 0.0 if revisit else 1.0

    def get_observation(self) -> np.ndarray:
        """
        Get what the player knows as a numpy array.

        Returns:
            Array of shape (rows, cols) with dtype int8.
        """
        obs = np.full(
            (self.board.rows, self.board.cols), UNKNOWN, dtype=np.int8
        )
        for index in self.state.visited_safe:
            obs[to_position(index, self.board.cols)] = VISITED

        obs[to_position(self.board.goal_index, self.board.cols)] = GOAL

        current = to_position(self.state.current_index, self.board.cols)
        obs[current] = DETONATED if self.state.is_dead else PLAYER
        return obs

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of legal moves.

        Returns:
            Boolean array where True = legal action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for action in range(len(ACTIONS)):
            target = self._target_for(action)
            if target is not None:
                mask[action] = can_move_to(self.board, self.state, target)
        return mask

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        route = None
        if not self.state.is_terminal:
            route = escape_route(self.board, self.state.current_index)

        return {
            "steps": self.state.steps,
            "phase": self.state.phase.value,
            "board_seed": self.board.seed,
            "visited": len(self.state.visited_safe),
            "valid_actions": int(self.get_action_mask().sum()),
            "route": route,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as ASCII string."""
        lines = []
        obs = self.get_observation()
        reveal_mines = self.state.is_terminal

        for row in range(self.board.rows):
            row_str = ""
            for col in range(self.board.cols):
                val = obs[row, col]
                index = row * self.board.cols + col
                if val == PLAYER:
                    row_str += "@"
                elif val == DETONATED:
                    row_str += "X"
                elif val == GOAL:
                    row_str += "G"
                elif reveal_mines and self.board.is_mine(index):
                    row_str += "*"
                elif val == VISITED:
                    row_str += "o"
                else:
                    row_str += "."
                row_str += " "
            lines.append(row_str)

        return "\n".join(lines)


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[BoardConfig] = None,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for parallel rollouts.

    Args:
        n_envs: Number of parallel environments.
        config: Board configuration.

    Returns:
        Vectorized environment.
    """
    def make_env() -> MinefieldEnv:
        return MinefieldEnv(config=config)

    return gym.vector.AsyncVectorEnv([make_env for _ in range(n_envs)])

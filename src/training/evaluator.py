"""
Evaluation module for minefield agents.

Plays seeded episodes and reports clear rates and step counts.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from minefield.board import BoardConfig
from minefield.environment import MinefieldEnv

from agents.base_agent import BaseAgent


# ============================================================================
# Episode Statistics
# ============================================================================

@dataclass
class EpisodeStats:
    """Statistics for a single episode."""

    total_reward: float = 0.0
    steps: int = 0
    cleared: bool = False
    visited_cells: int = 0
    board_seed: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for reporting."""
        return {
            "total_reward": self.total_reward,
            "steps": self.steps,
            "cleared": self.cleared,
            "visited_cells": self.visited_cells,
            "board_seed": self.board_seed,
        }


# ============================================================================
# Agent Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare multiple agents.

    Every agent plays the same sequence of boards, derived from the
    evaluator seed.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_episodes: int = 100,
        max_steps: int = 100,
        seed: int = 0,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for evaluation.
            num_episodes: Number of evaluation episodes.
            max_steps: Maximum steps per episode.
            seed: Seed for the first episode's board.
        """
        self.board_config = board_config or BoardConfig()
        self.num_episodes = num_episodes
        self.max_steps = max_steps
        self.seed = seed

    def run_episode(
        self, agent: BaseAgent, env: MinefieldEnv, seed: int
    ) -> EpisodeStats:
        """Play one episode and collect its statistics."""
        stats = EpisodeStats()

        observation, info = env.reset(seed=seed)
        agent.reset()
        stats.board_seed = info["board_seed"]

        for _ in range(self.max_steps):
            valid_actions = env.get_action_mask()
            action = agent.select_action(observation, valid_actions, info)

            observation, reward, terminated, truncated, info = env.step(action)

            stats.total_reward += reward
            stats.steps += 1
            stats.visited_cells = info.get("visited", 0)

            if terminated or truncated:
                stats.cleared = info.get("phase") == "clear"
                break

        return stats

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Dictionary with evaluation metrics.
        """
        env = MinefieldEnv(config=self.board_config)

        clears = 0
        total_reward = 0.0
        total_steps = 0
        total_visited = 0

        for episode in range(self.num_episodes):
            stats = self.run_episode(agent, env, self.seed + episode)
            clears += int(stats.cleared)
            total_reward += stats.total_reward
            total_steps += stats.steps
            total_visited += stats.visited_cells

        return {
            "clear_rate": clears / self.num_episodes,
            "avg_reward": total_reward / self.num_episodes,
            "avg_steps": total_steps / self.num_episodes,
            "avg_visited": total_visited / self.num_episodes,
        }

    def compare(
        self, agents: Dict[str, BaseAgent]
    ) -> Dict[str, Dict[str, float]]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary of agent_name -> agent.

        Returns:
            Dictionary of agent_name -> evaluation metrics.
        """
        results = {}
        for name, agent in agents.items():
            print(f"Evaluating {name}...")
            results[name] = self.evaluate(agent)
        return results

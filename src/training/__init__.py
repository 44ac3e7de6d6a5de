"""
Evaluation module for minefield agents.

Provides seeded evaluation and agent comparison.
"""
from .evaluator import EpisodeStats, Evaluator

__all__ = [
    "EpisodeStats",
    "Evaluator",
]

"""
Minefield agents module.

Provides agents for playing escape rounds:
- RandomAgent: Baseline random selection
- RouteAgent: Follows the shortest escape route hint
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .route_agent import RouteAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "RouteAgent",
]

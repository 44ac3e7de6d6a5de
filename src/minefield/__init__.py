"""
Minefield escape game module.

Provides seeded board generation, shortest-path routing and the
movement rules of a single round.
"""
from .errors import ConfigurationError, MinefieldError, UnsolvableLayoutError
from .rng import create_generator, hash_seed, shuffle
from .grid import neighbors
from .pathfinding import shortest_path
from .tile import Tile
from .board import (
    Board,
    BoardConfig,
    GenerationResult,
    escape_route,
    generate,
    try_generate,
)
from .game_state import GamePhase, GameState, begin, create_initial_state
from .rules import (
    Direction,
    LandingResult,
    apply_move,
    can_move_to,
    evaluate_landing,
    get_directional_target,
    legal_targets,
)
from .environment import MinefieldEnv, make_vec_env

__all__ = [
    "MinefieldError",
    "ConfigurationError",
    "UnsolvableLayoutError",
    "hash_seed",
    "create_generator",
    "shuffle",
    "neighbors",
    "shortest_path",
    "Tile",
    "Board",
    "BoardConfig",
    "GenerationResult",
    "generate",
    "try_generate",
    "escape_route",
    "GamePhase",
    "GameState",
    "create_initial_state",
    "begin",
    "Direction",
    "LandingResult",
    "apply_move",
    "can_move_to",
    "evaluate_landing",
    "get_directional_target",
    "legal_targets",
    "MinefieldEnv",
    "make_vec_env",
]

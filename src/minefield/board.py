"""
Board module for the minefield.

Generates mine layouts by rejection sampling: shuffle the candidate cells
with a seeded generator, keep the layout if start and goal are still
connected, otherwise re-seed and try again.
"""
import time
from dataclasses import dataclass, field, replace
from typing import FrozenSet, List, Optional, Set, Tuple

import numpy as np

from .constants import (
    ATTEMPT_SEED_STRIDE,
    BOARD_COLS,
    BOARD_ROWS,
    MAX_ATTEMPTS,
    MAX_MINE_COUNT,
    MINE_COUNT,
    START_INDEX,
    UINT32_MASK,
)
from .errors import ConfigurationError, UnsolvableLayoutError
from .pathfinding import shortest_path
from .rng import Seed, create_generator, hash_seed, shuffle
from .tile import Tile, build_tiles


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a minefield board.

    Attributes:
        seed: Seed for the layout (defaults to the current time).
        cols: Number of columns.
        rows: Number of rows.
        mine_count: Requested number of mines.
    """

    seed: Optional[Seed] = None
    cols: int = BOARD_COLS
    rows: int = BOARD_ROWS
    mine_count: int = MINE_COUNT

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.cols < 1 or self.rows < 1:
            raise ConfigurationError("Board dimensions must be positive")

    @property
    def tile_count(self) -> int:
        """Total number of cells."""
        return self.cols * self.rows

    @property
    def start_index(self) -> int:
        """Cell the player starts on."""
        return START_INDEX

    @property
    def goal_index(self) -> int:
        """Cell the player escapes from."""
        return self.tile_count - 1

    def reserved_safe(self) -> Set[int]:
        """Cells that never hold a mine: start, goal and two start neighbors."""
        reserved = {self.start_index, self.goal_index, 1, self.cols}
        return {index for index in reserved if 0 <= index < self.tile_count}

    def mine_candidates(self) -> List[int]:
        """Cells that may hold a mine, in index order."""
        reserved = self.reserved_safe()
        return [
            index for index in range(self.tile_count) if index not in reserved
        ]

    def resolve_mine_count(self) -> int:
        """
        Clamp the requested mine count into what this grid can hold.

        Raises:
            ConfigurationError: If the request can never be satisfied.
        """
        candidates = len(self.mine_candidates())
        requested = int(self.mine_count)
        if candidates < 2 or requested >= candidates:
            raise ConfigurationError(
                f"Too many mines for a {self.cols}x{self.rows} board "
                f"(requested {requested}, {candidates} candidate cells)"
            )
        max_mines = min(MAX_MINE_COUNT, candidates - 1)
        return max(1, min(max_mines, requested))


# ============================================================================
# Board Class
# ============================================================================

@dataclass(frozen=True)
class Board:
    """
    Immutable minefield layout.

    Attributes:
        seed: Trial seed that produced this layout. It differs from the
            requested seed whenever earlier attempts were rejected.
        cols: Number of columns.
        rows: Number of rows.
        mine_count: Number of mines placed.
        safe_count: Number of mine-free cells.
        start_index: Starting cell.
        goal_index: Escape cell.
        mine_set: Indices of mined cells.
        tiles: Per-cell descriptors in index order.
    """

    seed: int
    cols: int
    rows: int
    mine_count: int
    safe_count: int
    start_index: int
    goal_index: int
    mine_set: FrozenSet[int]
    tiles: Tuple[Tile, ...] = field(repr=False)

    @property
    def tile_count(self) -> int:
        """Total number of cells."""
        return self.cols * self.rows

    def is_mine(self, index: int) -> bool:
        """Check if a cell holds a mine."""
        return index in self.mine_set

    def mine_mask(self) -> np.ndarray:
        """
        Get mine layout as a boolean array.

        Returns:
            Array of shape (rows, cols), True where a mine is.
        """
        mask = np.zeros(self.tile_count, dtype=bool)
        mask[list(self.mine_set)] = True
        return mask.reshape(self.rows, self.cols)


@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of one generation call.

    Attributes:
        board: Accepted board, or None when the budget ran out.
        attempts: Layouts tried, including the accepted one.
        mine_count: Mine count that was placed.
    """

    board: Optional[Board]
    attempts: int
    mine_count: int

    @property
    def succeeded(self) -> bool:
        """Check if a connected layout was found."""
        return self.board is not None

    def unwrap(self) -> Board:
        """
        Get the board or raise if generation was exhausted.

        Raises:
            UnsolvableLayoutError: If no layout was accepted.
        """
        if self.board is None:
            raise UnsolvableLayoutError(self.attempts, self.mine_count)
        return self.board


# ============================================================================
# Generation
# ============================================================================

def _default_seed() -> int:
    return int(time.time() * 1000)


def try_generate(
    config: Optional[BoardConfig] = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> GenerationResult:
    """
    Search for a connected mine layout.

    Args:
        config: Board configuration (default: 6x5 with 10 mines).
        max_attempts: Number of layouts to try before giving up.

    Returns:
        GenerationResult carrying the board, or no board on exhaustion.

    Raises:
        ConfigurationError: If the mine count can never fit the grid.
    """
    config = config or BoardConfig()
    mine_count = config.resolve_mine_count()
    candidates = config.mine_candidates()
    start, goal = config.start_index, config.goal_index

    seed = config.seed if config.seed is not None else _default_seed()
    hashed_seed = hash_seed(seed)

    for attempt in range(max_attempts):
        trial_seed = (hashed_seed + attempt * ATTEMPT_SEED_STRIDE) & UINT32_MASK
        shuffled = list(candidates)
        shuffle(shuffled, create_generator(trial_seed))
        mine_set = frozenset(shuffled[:mine_count])

        if shortest_path(start, goal, config.cols, config.rows, mine_set):
            board = Board(
                seed=trial_seed,
                cols=config.cols,
                rows=config.rows,
                mine_count=mine_count,
                safe_count=config.tile_count - mine_count,
                start_index=start,
                goal_index=goal,
                mine_set=mine_set,
                tiles=build_tiles(config.cols, config.rows, mine_set),
            )
            return GenerationResult(board, attempt + 1, mine_count)

    return GenerationResult(None, max_attempts, mine_count)


def generate(config: Optional[BoardConfig] = None, **overrides) -> Board:
    """
    Generate a connected board.

    Args:
        config: Board configuration (default: 6x5 with 10 mines).
        **overrides: Field overrides applied on top of config
            (seed, cols, rows, mine_count).

    Returns:
        The generated board.

    Raises:
        ConfigurationError: If the mine count can never fit the grid.
        UnsolvableLayoutError: If every attempt was disconnected.
    """
    config = config or BoardConfig()
    if overrides:
        config = replace(config, **overrides)
    return try_generate(config).unwrap()


def escape_route(
    board: Board, from_index: Optional[int] = None
) -> Optional[List[int]]:
    """
    Compute the hint route to the goal on the current board.

    Args:
        board: Board to route across.
        from_index: Cell to route from (default: the start cell).

    Returns:
        Cell indices ending at the goal, or None if there is no route.
    """
    start = board.start_index if from_index is None else from_index
    return shortest_path(
        start, board.goal_index, board.cols, board.rows, board.mine_set
    )

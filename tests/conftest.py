"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
# Root holds the main.py command-line entry point
sys.path.append(str(Path(__file__).parent.parent))

from minefield import (
    Board,
    BoardConfig,
    GamePhase,
    GameState,
    MinefieldEnv,
    create_initial_state,
    generate,
)
from minefield.tile import build_tiles


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Generate a default 6x5 board with 10 mines from a fixed seed."""
    return generate(BoardConfig(seed=42))


@pytest.fixture
def dense_board() -> Board:
    """Generate a 6x5 board at the 20 mine limit."""
    return generate(BoardConfig(seed="dense", mine_count=20))


@pytest.fixture
def hand_board() -> Board:
    """Build a 6x5 board with a single mine on cell 3."""
    mine_set = frozenset({3})
    return Board(
        seed=0,
        cols=6,
        rows=5,
        mine_count=1,
        safe_count=29,
        start_index=0,
        goal_index=29,
        mine_set=mine_set,
        tiles=build_tiles(6, 5, mine_set),
    )


# ============================================================================
# Game State Fixtures
# ============================================================================

@pytest.fixture
def ready_state() -> GameState:
    """Create a ready state on the start cell."""
    return create_initial_state(0)


@pytest.fixture
def playing_state() -> GameState:
    """Create a playing state on the start cell."""
    return create_initial_state(0, GamePhase.PLAYING)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def default_config() -> BoardConfig:
    """Default 6x5 configuration with a fixed seed."""
    return BoardConfig(seed=42)


@pytest.fixture
def large_config() -> BoardConfig:
    """Larger 12x10 configuration."""
    return BoardConfig(seed=7, cols=12, rows=10, mine_count=20)


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture
def env() -> MinefieldEnv:
    """Create an environment reset onto a seeded board."""
    environment = MinefieldEnv(render_mode="ansi")
    environment.reset(seed=0)
    return environment


@pytest.fixture
def hand_env(hand_board: Board) -> MinefieldEnv:
    """Create an environment playing on the hand-built board."""
    environment = MinefieldEnv(render_mode="ansi")
    environment.board = hand_board
    environment.state = create_initial_state(0, GamePhase.PLAYING)
    return environment

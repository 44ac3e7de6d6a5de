"""
Default dimensions and generation limits for the minefield.
"""

# ============================================================================
# Board Defaults
# ============================================================================

BOARD_COLS = 6
BOARD_ROWS = 5

MINE_COUNT = 10
MAX_MINE_COUNT = 20

START_INDEX = 0

# ============================================================================
# Generation Limits
# ============================================================================

MAX_ATTEMPTS = 4000
ATTEMPT_SEED_STRIDE = 7919

UINT32_MASK = 0xFFFFFFFF

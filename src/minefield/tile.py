"""
Tile module for the minefield.

Describes a single grid cell as handed to presentation layers.
"""
from dataclasses import dataclass
from typing import AbstractSet, Tuple

from .grid import to_position


# ============================================================================
# Tile Data Class
# ============================================================================

@dataclass(frozen=True)
class Tile:
    """
    Represents a single cell of a generated board.

    Attributes:
        index: Flat cell index (row * cols + col).
        id: 1-based number shown to players.
        row: Row of the cell.
        col: Column of the cell.
        is_mine: Whether this cell contains a mine.
    """

    index: int
    id: int
    row: int
    col: int
    is_mine: bool = False

    @property
    def label(self) -> str:
        """Display label used in text output."""
        return f"#{self.id}"


def build_tiles(
    cols: int, rows: int, mine_set: AbstractSet[int]
) -> Tuple[Tile, ...]:
    """Build descriptors for every cell in index order."""
    tiles = []
    for index in range(cols * rows):
        row, col = to_position(index, cols)
        tiles.append(
            Tile(
                index=index,
                id=index + 1,
                row=row,
                col=col,
                is_mine=index in mine_set,
            )
        )
    return tuple(tiles)

"""
Exceptions raised by board generation.

Illegal moves are never errors: the rule engine answers them with
False/None instead.
"""
from typing import Optional


class MinefieldError(Exception):
    """Base class for minefield errors."""


class ConfigurationError(MinefieldError, ValueError):
    """Board configuration can never produce a layout."""


class UnsolvableLayoutError(MinefieldError):
    """
    No connected layout was found within the attempt budget.

    Attributes:
        attempts: Number of layouts tried.
        mine_count: Mine count that was being placed.
    """

    def __init__(
        self,
        attempts: int,
        mine_count: int,
        message: Optional[str] = None,
    ) -> None:
        self.attempts = attempts
        self.mine_count = mine_count
        super().__init__(
            message
            or f"Failed to generate a solvable layout with {mine_count} "
            f"mines after {attempts} attempts"
        )

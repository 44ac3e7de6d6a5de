"""
Deterministic random numbers for board generation.

Everything here is plain 32-bit integer arithmetic so a seed produces the
same mine layout on every platform.
"""
from typing import Callable, MutableSequence, TypeVar, Union

from .constants import UINT32_MASK


FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619

T = TypeVar("T")

Seed = Union[int, float, str]


def hash_seed(seed: Seed) -> int:
    """
    Fold a seed of any kind into an unsigned 32-bit value (FNV-1a).

    Args:
        seed: Numeric or textual seed.

    Returns:
        Hash in the range [0, 2**32).
    """
    if isinstance(seed, float) and seed.is_integer():
        seed = int(seed)

    value = FNV_OFFSET_BASIS
    for byte in str(seed).encode("utf-8"):
        value ^= byte
        value = (value * FNV_PRIME) & UINT32_MASK
    return value


class Mulberry32:
    """
    Xorshift-multiply generator driven by one 32-bit state word.

    Calling the instance returns the next float in [0, 1).
    """

    def __init__(self, seed: int) -> None:
        self._state = seed & UINT32_MASK

    def __call__(self) -> float:
        self._state = (self._state + 0x6D2B79F5) & UINT32_MASK
        state = self._state

        value = ((state ^ (state >> 15)) * (state | 1)) & UINT32_MASK
        mixed = (value ^ (value >> 7)) * (value | 61)
        value ^= (value + mixed) & UINT32_MASK
        value = (value ^ (value >> 14)) & UINT32_MASK
        return value / 4294967296


def create_generator(seed: int) -> Callable[[], float]:
    """Create an independent generator for a 32-bit seed."""
    return Mulberry32(seed)


def shuffle(items: MutableSequence[T], generator: Callable[[], float]) -> None:
    """
    Shuffle a sequence in place (Fisher-Yates, last index first).

    Args:
        items: Sequence to reorder.
        generator: Source of floats in [0, 1).
    """
    for i in range(len(items) - 1, 0, -1):
        j = int(generator() * (i + 1))
        items[i], items[j] = items[j], items[i]

"""
Unit tests for the deterministic random number helpers.

Tests seed hashing, generator streams and in-place shuffling.
"""
import pytest
from minefield.rng import Mulberry32, create_generator, hash_seed, shuffle


# ============================================================================
# Seed Hashing Tests
# ============================================================================

class TestHashSeed:
    """Test FNV-1a seed hashing."""

    def test_empty_string_is_offset_basis(self) -> None:
        """Empty seed should hash to the FNV offset basis."""
        assert hash_seed("") == 2166136261

    def test_known_fnv1a_value(self) -> None:
        """Single character should match the reference FNV-1a hash."""
        assert hash_seed("a") == 0xE40C292C

    def test_number_hashes_like_its_text(self) -> None:
        """Numeric seed should hash its decimal text."""
        assert hash_seed(42) == hash_seed("42")

    def test_integral_float_hashes_like_int(self) -> None:
        """1234.0 and 1234 should be the same seed."""
        assert hash_seed(1234.0) == hash_seed(1234)

    def test_hash_is_unsigned_32_bit(self) -> None:
        """Hashes should stay within [0, 2**32)."""
        for seed in (0, 1, -1, "minefield", 10**12, "long seed " * 20):
            value = hash_seed(seed)
            assert 0 <= value < 2**32

    def test_hash_is_stable(self) -> None:
        """Same seed should always hash to the same value."""
        assert hash_seed("escape") == hash_seed("escape")

    def test_different_seeds_differ(self) -> None:
        """Nearby seeds should not collide."""
        assert hash_seed(1) != hash_seed(2)


# ============================================================================
# Generator Tests
# ============================================================================

class TestGenerator:
    """Test the seeded float stream."""

    def test_values_in_unit_interval(self) -> None:
        """Every draw should be in [0, 1)."""
        generator = create_generator(12345)
        for _ in range(1000):
            value = generator()
            assert 0.0 <= value < 1.0

    def test_same_seed_same_sequence(self) -> None:
        """Two generators with one seed should agree draw for draw."""
        first = create_generator(99)
        second = create_generator(99)
        assert [first() for _ in range(50)] == [second() for _ in range(50)]

    def test_different_seeds_diverge(self) -> None:
        """Different seeds should give different streams."""
        first = create_generator(1)
        second = create_generator(2)
        assert [first() for _ in range(10)] != [second() for _ in range(10)]

    def test_generators_are_independent(self) -> None:
        """Drawing from one generator should not move another."""
        reference = create_generator(7)
        expected = [reference() for _ in range(5)]

        generator = create_generator(7)
        other = create_generator(7)
        for _ in range(20):
            other()
        assert [generator() for _ in range(5)] == expected

    def test_reference_draws(self) -> None:
        """Seed 12345 reproduces the reference stream exactly."""
        generator = create_generator(12345)
        assert [generator() for _ in range(4)] == [
            0.9797282677609473,
            0.3067522644996643,
            0.484205421525985,
            0.817934412509203,
        ]

    def test_seed_is_masked_to_32_bits(self) -> None:
        """Seeds beyond 32 bits should wrap."""
        first = Mulberry32(2**32 + 5)
        second = Mulberry32(5)
        assert first() == second()


# ============================================================================
# Shuffle Tests
# ============================================================================

class TestShuffle:
    """Test Fisher-Yates shuffling."""

    def test_shuffle_is_a_permutation(self) -> None:
        """Shuffling should keep every element exactly once."""
        items = list(range(30))
        shuffle(items, create_generator(3))
        assert sorted(items) == list(range(30))

    def test_shuffle_is_reproducible(self) -> None:
        """Same seed should give the same order."""
        first = list(range(20))
        second = list(range(20))
        shuffle(first, create_generator(2024))
        shuffle(second, create_generator(2024))
        assert first == second

    def test_shuffle_swaps_from_last_index(self) -> None:
        """A generator stuck at 0 should swap each index with the front."""
        items = [0, 1, 2, 3]
        shuffle(items, lambda: 0.0)
        assert items == [1, 2, 3, 0]

    def test_top_draws_leave_order_unchanged(self) -> None:
        """Draws just below 1 pick j == i, which is a no-op swap."""
        items = ["a", "b", "c", "d"]
        shuffle(items, lambda: 0.999999)
        assert items == ["a", "b", "c", "d"]

    @pytest.mark.parametrize("items", [[], [1]])
    def test_short_sequences_untouched(self, items: list) -> None:
        """Empty and single-item sequences need no draws."""
        calls = []

        def generator() -> float:
            calls.append(1)
            return 0.5

        shuffle(items, generator)
        assert calls == []

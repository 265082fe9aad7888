"""Tests for the seeded Park-Miller stream."""

from __future__ import annotations

import pytest

from framekit.core.errors import InvalidConfiguration
from framekit.core.motion.random import (
    LCG_MODULUS,
    MAX_SEED,
    DeterministicSequence,
    validate_seed,
)


class TestValidateSeed:
    """Tests for seed validation."""

    @pytest.mark.parametrize("seed", [1, 42, 99, MAX_SEED])
    def test_accepts_valid_seeds(self, seed: int) -> None:
        """Seeds in [1, M - 1] pass through unchanged."""
        assert validate_seed(seed) == seed

    @pytest.mark.parametrize("seed", [0, -1, LCG_MODULUS, LCG_MODULUS + 5])
    def test_rejects_out_of_range(self, seed: int) -> None:
        """Zero, negatives and seeds >= M are rejected."""
        with pytest.raises(InvalidConfiguration, match="seed must be in"):
            validate_seed(seed)

    @pytest.mark.parametrize("seed", [1.5, "42", None, True])
    def test_rejects_non_integers(self, seed: object) -> None:
        """Floats, strings, None and bools are rejected."""
        with pytest.raises(InvalidConfiguration, match="seed must be an integer"):
            validate_seed(seed)  # type: ignore[arg-type]

    def test_zero_seed_rejected_by_constructor(self) -> None:
        """A zero seed would yield a degenerate stream."""
        with pytest.raises(InvalidConfiguration):
            DeterministicSequence(0)


class TestDeterministicSequence:
    """Tests for DeterministicSequence draws."""

    def test_first_draws_from_seed_one(self) -> None:
        """Known first states of the minimal standard generator."""
        stream = DeterministicSequence(1)
        states = []
        for _ in range(3):
            stream.next()
            states.append(stream.state)
        assert states == [16807, 282475249, 1622650073]

    def test_ten_thousandth_state(self) -> None:
        """Park-Miller check value: seed 1 reaches 1043618065 after 10000 draws."""
        stream = DeterministicSequence(1)
        stream.take(10_000)
        assert stream.state == 1043618065

    def test_output_formula(self) -> None:
        """Output is (state - 1) / (M - 1)."""
        stream = DeterministicSequence(42)
        value = stream.next()
        assert value == (stream.state - 1) / (LCG_MODULUS - 1)

    @pytest.mark.parametrize("seed", [1, 7, 42, 99, 123456789, MAX_SEED])
    def test_reproducible_and_in_unit_interval(self, seed: int) -> None:
        """Two streams from the same seed agree for 1000 draws, all in [0, 1)."""
        first = DeterministicSequence(seed).take(1000)
        second = DeterministicSequence(seed).take(1000)
        assert first == second
        assert all(0.0 <= v < 1.0 for v in first)

    def test_streams_are_independent(self) -> None:
        """Interleaved draws from two streams do not affect each other."""
        a = DeterministicSequence(42)
        b = DeterministicSequence(42)
        interleaved = []
        for _ in range(50):
            interleaved.append(a.next())
            b.next()
        assert interleaved == DeterministicSequence(42).take(50)

    def test_different_seeds_differ(self) -> None:
        """Different seeds give different streams."""
        assert DeterministicSequence(42).take(10) != DeterministicSequence(43).take(10)

    def test_iterator_protocol(self) -> None:
        """Iteration draws the same values as next()."""
        stream = DeterministicSequence(5)
        drawn = [v for _, v in zip(range(5), stream)]
        assert drawn == DeterministicSequence(5).take(5)

    def test_uniform_range(self) -> None:
        """uniform() scales draws into [low, high)."""
        stream = DeterministicSequence(11)
        values = [stream.uniform(400.0, 1000.0) for _ in range(200)]
        assert all(400.0 <= v < 1000.0 for v in values)

    def test_take_rejects_negative(self) -> None:
        """take() with negative n raises ValueError."""
        with pytest.raises(ValueError):
            DeterministicSequence(1).take(-1)

    def test_repr(self) -> None:
        """repr shows seed and state."""
        assert repr(DeterministicSequence(3)) == "DeterministicSequence(seed=3, state=3)"

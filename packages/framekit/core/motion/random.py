"""Seeded pseudorandom streams for procedural layout.

The generator is the Park-Miller "minimal standard" multiplicative LCG. All
arithmetic is exact integer arithmetic, so a given seed yields the same
sequence on every interpreter, platform and process.
"""

from __future__ import annotations

from collections.abc import Iterator

from framekit.core.errors import InvalidConfiguration

LCG_MULTIPLIER = 16807
LCG_MODULUS = 2147483647  # 2**31 - 1

MIN_SEED = 1
MAX_SEED = LCG_MODULUS - 1


def validate_seed(seed: int) -> int:
    """Validate a seed and return it unchanged.

    Args:
        seed: Candidate seed.

    Returns:
        The seed.

    Raises:
        InvalidConfiguration: If the seed is not an integer in [1, M - 1].
    """
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise InvalidConfiguration(f"seed must be an integer, got {type(seed).__name__}")
    if not MIN_SEED <= seed <= MAX_SEED:
        raise InvalidConfiguration(f"seed must be in [{MIN_SEED}, {MAX_SEED}], got {seed}")
    return seed


class DeterministicSequence:
    """Reproducible stream of floats in [0, 1).

    Each layout construction owns its own instance; streams are never shared
    between independent layouts.

    Example:
        >>> stream = DeterministicSequence(42)
        >>> first = stream.next()
        >>> DeterministicSequence(42).next() == first
        True
    """

    __slots__ = ("_seed", "_state")

    def __init__(self, seed: int) -> None:
        self._seed = validate_seed(seed)
        self._state = self._seed

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def state(self) -> int:
        """Current integer state (the last value produced by the recurrence)."""
        return self._state

    def next(self) -> float:
        """Advance the recurrence and return the next value in [0, 1)."""
        self._state = (self._state * LCG_MULTIPLIER) % LCG_MODULUS
        return (self._state - 1) / (LCG_MODULUS - 1)

    def uniform(self, low: float, high: float) -> float:
        """Next value scaled into [low, high)."""
        return low + self.next() * (high - low)

    def take(self, n: int) -> list[float]:
        """Draw the next n values."""
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        return [self.next() for _ in range(n)]

    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        return self.next()

    def __repr__(self) -> str:
        return f"DeterministicSequence(seed={self._seed}, state={self._state})"

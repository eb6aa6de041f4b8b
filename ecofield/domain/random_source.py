"""Independent stateful random generator."""

from __future__ import annotations

from random import Random


class RandomSource:
    """Uniform reals and integers from a private ``random.Random`` state.

    Each instance owns its own generator, so two sources never share a
    stream. Without a seed the state comes from OS entropy.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = Random(seed)

    def random_double(self, low: float = 0.0, high: float = 1.0) -> float:
        """Uniform draw in [low, high)."""
        return low + (high - low) * self._rng.random()

    def chance(self, probability: float) -> bool:
        """True with the given probability."""
        return self.random_double() < probability

    def random_int(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], both ends inclusive."""
        if low > high:
            raise ValueError(f"empty range: low={low} > high={high}")
        return self._rng.randint(low, high)

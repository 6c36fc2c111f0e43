"""Seedable random numbers and a weighted single-item reservoir sampler."""

from __future__ import annotations

import random
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

INT_MAX = 2**31 - 1
MAX_RESERVOIR_SIZE = 65536
_DEFAULT_SEED = 5489


class RandomNumberGenerator:
    """Random source; a positive seed makes it reproducible, otherwise a fixed default is used."""

    def __init__(self, seed: int = -1) -> None:
        self._rng = random.Random(_DEFAULT_SEED)
        self.seed = seed
        self.set_seed(seed)

    def set_seed(self, seed: int = -1) -> None:
        """Record the seed and, if it is positive, reseed the generator."""
        self.seed = seed
        if seed > 0:
            self._rng.seed(seed)

    def random_int(self) -> int:
        """Return a uniform integer in [0, INT_MAX]."""
        return self._rng.randint(0, INT_MAX)

    def random_double(self) -> float:
        """Return a uniform float in [0, 1)."""
        return self._rng.random()

    def __copy__(self) -> "RandomNumberGenerator":
        return RandomNumberGenerator(self.seed)


class ReservoirSampler(Generic[T]):
    """Keeps one item from a stream, each chosen with probability proportional to its weight."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.count = 0
        self.data: Optional[T] = None

    def clear(self) -> None:
        """Forget the weight seen so far; the next input is always kept."""
        self.count = 0

    def input(self, item: T, weight: int = 1) -> Optional[T]:
        """Offer an item and return the item currently held."""
        self.count += weight
        if self._rng.randint(0, MAX_RESERVOIR_SIZE) % self.count < weight:
            self.data = item
        return self.data
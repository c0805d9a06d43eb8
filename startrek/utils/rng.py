"""Pluggable random source for galaxy generation and combat rolls."""

import random
from typing import Optional


class GameRNG:
    """Wrapper around Python's random.Random.

    All randomness in the simulation goes through this class. Production
    sessions pass no seed and get an unseeded generator; tests pass a seed
    (or a subclass with scripted rolls) to pin outcomes.
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize RNG.

        Args:
            seed: Integer seed for reproducible rolls, or None for an
                unseeded generator
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return random integer in range [a, b], inclusive.

        Args:
            a: Lower bound (inclusive)
            b: Upper bound (inclusive)

        Returns:
            Random integer between a and b
        """
        return self.rng.randint(a, b)

    def choice(self, seq):
        """Choose random element from non-empty sequence.

        Args:
            seq: Sequence to choose from

        Returns:
            Random element from sequence
        """
        return self.rng.choice(seq)

    def random(self) -> float:
        """Return random float in [0.0, 1.0).

        Returns:
            Random float between 0.0 and 1.0
        """
        return self.rng.random()

    def uniform(self, a: float, b: float) -> float:
        """Return random float N such that a <= N <= b.

        Args:
            a: Lower bound
            b: Upper bound

        Returns:
            Random float between a and b
        """
        return self.rng.uniform(a, b)

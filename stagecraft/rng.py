"""Seeded random number generation."""

import random
import time
from typing import Optional


class EngineRandom:
    """A Mersenne Twister generator seeded from the clock by default."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._generator = random.Random(int(time.time()) if seed is None else seed)

    def random_int(self, minimum: int, maximum: int) -> int:
        """A uniform integer in [minimum, maximum]."""
        if minimum > maximum:
            raise ValueError(f"minimum {minimum} is greater than maximum {maximum}")
        return self._generator.randint(minimum, maximum)

    def random_float(self, minimum: float, maximum: float) -> float:
        """A uniform float in [minimum, maximum)."""
        if minimum > maximum:
            raise ValueError(f"minimum {minimum} is greater than maximum {maximum}")
        return minimum + (maximum - minimum) * self._generator.random()


main_random = EngineRandom()
import random
from typing import Optional


class RNG(random.Random):
    """Seeded RNG to keep deterministic behavior."""

    def roll(self, low: int, high: int) -> int:
        """Uniform die roll in [low, high]."""
        return self.randint(low, high)


def new_rng(seed: Optional[int] = None) -> RNG:
    rng = RNG()
    rng.seed(seed)
    return rng

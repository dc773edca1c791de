import random
from typing import Optional, Sequence
from yarn_trail.core.grid import Position

class UniformChooser:
    """Picks one candidate with equal probability. Seeded runs are repeatable."""

    def __init__(self, seed: int = None):
        self.seed = seed
        self.rng = random.Random(seed)

    def __call__(self, candidates: Sequence[Position]) -> Optional[Position]:
        if not candidates:
            return None
        return self.rng.choice(candidates)

"""Seedable uniform piece randomizer"""
import random
from typing import Optional, Sequence


class PieceRandom:
    """Picks piece kinds uniformly. Pass a seed for reproducible sequences."""
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_kind(self, names: Sequence[str]) -> str:
        assert names, "no piece kinds to choose from"
        return names[self._rng.randrange(len(names))]

from __future__ import annotations

import random
from typing import List, Optional

from .base import BaseStrategy
from .types import MoveOption


class RandomStrategy(BaseStrategy):
    name = "easy"
    description = "Picks any legal pawn uniformly at random."

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def select_move(self, options: List[MoveOption]) -> MoveOption:
        return self.rng.choice(options)

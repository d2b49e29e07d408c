from __future__ import annotations

import random
from typing import Dict, Optional, Type

from .base import BaseStrategy
from .heuristic import HeuristicStrategy
from .random_strategy import RandomStrategy

# "hard" shares the medium heuristic.
STRATEGY_REGISTRY: Dict[str, Type[BaseStrategy]] = {
    "easy": RandomStrategy,
    "medium": HeuristicStrategy,
    "hard": HeuristicStrategy,
}


def create(difficulty: str, rng: Optional[random.Random] = None) -> BaseStrategy:
    key = str(getattr(difficulty, "value", difficulty)).lower()
    cls = STRATEGY_REGISTRY.get(key)
    if cls is None:
        raise KeyError(f"Unknown strategy '{difficulty}'. Available: {available()}")
    if cls is RandomStrategy:
        return cls(rng=rng)
    return cls()


def available() -> list[str]:
    return list(STRATEGY_REGISTRY)

"""Automated players for the Ludo engine."""

from __future__ import annotations

import random
from typing import Optional

from ..types import GameState
from .base import BaseStrategy
from .features import build_move_options
from .heuristic import HeuristicStrategy
from .random_strategy import RandomStrategy
from .registry import STRATEGY_REGISTRY, available, create
from .types import MoveOption


def choose_move(state: GameState, rng: Optional[random.Random] = None) -> Optional[str]:
    """Pick a pawn for the current player at the game's AI difficulty."""
    return create(state.ai_difficulty, rng=rng).choose_move(state)


__all__ = [
    "BaseStrategy",
    "HeuristicStrategy",
    "MoveOption",
    "RandomStrategy",
    "STRATEGY_REGISTRY",
    "available",
    "build_move_options",
    "choose_move",
    "create",
]

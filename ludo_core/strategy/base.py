from __future__ import annotations

from typing import List, Optional

from ..types import GameState
from .features import build_move_options
from .types import MoveOption


class BaseStrategy:
    """Base class for automated players: picks one pawn among the legal moves."""

    name = "base"
    description = ""

    def choose_move(self, state: GameState) -> Optional[str]:
        options = build_move_options(state)
        if not options:
            return None
        return self.select_move(options).pawn_id

    def select_move(self, options: List[MoveOption]) -> MoveOption:  # pragma: no cover - abstract
        raise NotImplementedError

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List

from .base import BaseStrategy
from .types import MoveOption


@dataclass
class HeuristicStrategy(BaseStrategy):
    """Deploys pawns, hunts captures and heads for home, in that spirit.

    Ties keep the earliest pawn: the running best is replaced only by a
    strictly higher score.
    """

    name: ClassVar[str] = "medium"
    description: ClassVar[str] = "Scores deployment, captures and home-stretch entry."

    deploy_bonus: float = 10.0
    capture_bonus: float = 15.0
    home_stretch_bonus: float = 5.0

    def score(self, move: MoveOption) -> float:
        score = 0.0
        if move.from_base:
            score += self.deploy_bonus
        score += move.capture_count * self.capture_bonus
        if move.enters_home_stretch:
            score += self.home_stretch_bonus
        return score

    def select_move(self, options: List[MoveOption]) -> MoveOption:
        best, best_score = options[0], -1.0
        for move in options:
            score = self.score(move)
            if score > best_score:
                best, best_score = move, score
        return best

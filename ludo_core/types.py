from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .config import config

# Returned by the position calculator when a pawn cannot move.
REJECT = None


class Color(str, Enum):
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"


class GamePhase(str, Enum):
    ROLLING = "rolling"
    MOVING = "moving"
    WAITING = "waiting"
    FINISHED = "finished"


class GameMode(str, Enum):
    OFFLINE = "offline"
    AI = "ai"
    ONLINE = "online"


class AIDifficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True, slots=True)
class Pawn:
    """Immutable pawn snapshot.

    ``position`` is -1 in base, 0..51 on the shared track and 52..57 in the
    owner's home stretch (57 = fully home). The boolean flags mirror
    ``position`` and are recomputed by the engine on every move.
    """

    id: str
    owner_id: str
    position: int = config.BASE_POSITION
    in_base: bool = True
    in_home: bool = False
    is_safe: bool = False

    @property
    def in_home_stretch(self) -> bool:
        return self.position >= config.HOME_STRETCH_START

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "owner_id": self.owner_id,
            "position": self.position,
            "in_base": self.in_base,
            "in_home": self.in_home,
            "is_safe": self.is_safe,
        }


@dataclass(frozen=True, slots=True)
class Player:
    id: str
    name: str
    color: Color
    pawns: Tuple[Pawn, ...] = field(default_factory=tuple)
    is_ai: bool = False
    is_winner: bool = False

    @classmethod
    def create(cls, player_id: str, name: str, color: Color, is_ai: bool = False) -> "Player":
        """Build a player with four fresh pawns in base."""
        pawns = tuple(
            Pawn(id=f"{player_id}-pawn-{i}", owner_id=player_id)
            for i in range(config.PAWNS_PER_PLAYER)
        )
        return cls(id=player_id, name=name, color=Color(color), pawns=pawns, is_ai=is_ai)

    def pawn(self, pawn_id: str) -> Optional[Pawn]:
        return next((p for p in self.pawns if p.id == pawn_id), None)

    def finished_count(self) -> int:
        return sum(1 for p in self.pawns if p.in_home)

    def has_won(self) -> bool:
        return all(p.in_home for p in self.pawns)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color.value,
            "pawns": [p.to_dict() for p in self.pawns],
            "is_ai": self.is_ai,
            "is_winner": self.is_winner,
        }


@dataclass(frozen=True, slots=True)
class GameState:
    """One immutable snapshot of a game.

    ``possible_moves`` keeps pawn ids in enumeration order (pawn 0 first).
    """

    players: Tuple[Player, ...]
    current_player_index: int = 0
    dice_value: int = 0
    game_phase: GamePhase = GamePhase.ROLLING
    possible_moves: Tuple[str, ...] = ()
    selected_pawn: Optional[str] = None
    winner_id: Optional[str] = None
    game_mode: GameMode = GameMode.AI
    ai_difficulty: AIDifficulty = AIDifficulty.MEDIUM

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    @property
    def is_finished(self) -> bool:
        return self.game_phase is GamePhase.FINISHED

    def player_by_id(self, player_id: str) -> Optional[Player]:
        return next((p for p in self.players if p.id == player_id), None)

    def to_dict(self) -> dict:
        return {
            "players": [p.to_dict() for p in self.players],
            "current_player_index": self.current_player_index,
            "dice_value": self.dice_value,
            "game_phase": self.game_phase.value,
            "possible_moves": list(self.possible_moves),
            "selected_pawn": self.selected_pawn,
            "winner_id": self.winner_id,
            "game_mode": self.game_mode.value,
            "ai_difficulty": self.ai_difficulty.value,
        }

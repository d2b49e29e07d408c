"""
Ludo rules engine.
Move legality, move application, turn rotation and automated players over
immutable game snapshots.
"""

from ludo_core.board import LAYOUTS, PALETTE, SAFE_CELLS, is_safe_cell, start_cell
from ludo_core.config import Config, config
from ludo_core.game import (
    PlayerSpec,
    apply_move,
    current_player,
    default_players,
    end_turn,
    move_pawn,
    new_game,
    next_player_index,
    roll,
    roll_dice,
    select_pawn,
)
from ludo_core.moves import legal_moves, resolve_move
from ludo_core.simulator import Simulator
from ludo_core.strategy import choose_move
from ludo_core.types import (
    REJECT,
    AIDifficulty,
    Color,
    GameMode,
    GamePhase,
    GameState,
    Pawn,
    Player,
)

__all__ = [
    "AIDifficulty",
    "Color",
    "Config",
    "GameMode",
    "GamePhase",
    "GameState",
    "LAYOUTS",
    "PALETTE",
    "Pawn",
    "Player",
    "PlayerSpec",
    "REJECT",
    "SAFE_CELLS",
    "Simulator",
    "apply_move",
    "choose_move",
    "config",
    "current_player",
    "default_players",
    "end_turn",
    "is_safe_cell",
    "legal_moves",
    "move_pawn",
    "new_game",
    "next_player_index",
    "resolve_move",
    "roll",
    "roll_dice",
    "select_pawn",
    "start_cell",
]

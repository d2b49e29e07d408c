from __future__ import annotations

from typing import List

from ..board import is_safe_cell
from ..config import config
from ..moves import legal_moves, resolve_move
from ..types import GameState
from .types import MoveOption


def build_move_options(state: GameState) -> List[MoveOption]:
    """Describe every legal move of the current player, in pawn order."""
    player = state.current_player
    options: List[MoveOption] = []
    for pawn_id in legal_moves(player, state.dice_value):
        pawn = player.pawn(pawn_id)
        new_pos = resolve_move(pawn, state.dice_value, player.color)
        captures = sum(
            1
            for other in state.players
            if other.id != player.id
            for p in other.pawns
            if p.position == new_pos and not is_safe_cell(p.position)
        )
        options.append(
            MoveOption(
                pawn_id=pawn_id,
                current_pos=pawn.position,
                new_pos=new_pos,
                from_base=pawn.in_base,
                capture_count=captures,
                enters_home_stretch=new_pos >= config.HOME_STRETCH_START,
            )
        )
    return options

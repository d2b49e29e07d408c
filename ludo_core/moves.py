"""
Move rules: where a pawn lands for a die value, and which pawns may move.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .board import start_cell
from .config import config
from .types import REJECT, Color, Pawn, Player


def steps_from_start(position: int, color: Color) -> int:
    """Distance a pawn on the track or home stretch has travelled from its start."""
    if position >= config.HOME_STRETCH_START:
        return config.HOME_ENTRY_STEPS + (position - config.HOME_STRETCH_START)
    return (position - start_cell(color) + config.TRACK_LENGTH) % config.TRACK_LENGTH


def resolve_move(pawn: Pawn, dice_value: int, color: Color) -> Optional[int]:
    """
    Compute the landing position for ``pawn`` after moving ``dice_value``.

    Args:
        pawn: The pawn to move
        dice_value: The value rolled on the die (1-6)
        color: The owner's color

    Returns:
        int | None: The new position, or ``REJECT`` when the pawn is already
        home or would overshoot the last home-stretch cell.
    """
    if pawn.in_base:
        # Exit legality (six only) is checked by legal_moves
        return start_cell(color)

    if pawn.in_home:
        return REJECT

    steps = steps_from_start(pawn.position, color)
    if steps + dice_value >= config.HOME_ENTRY_STEPS:
        steps_into_home = steps + dice_value - config.HOME_ENTRY_STEPS
        if steps_into_home <= config.HOME_FINISH - config.HOME_STRETCH_START:
            return config.HOME_STRETCH_START + steps_into_home
        return REJECT

    return (pawn.position + dice_value) % config.TRACK_LENGTH


def can_leave_base(dice_value: int) -> bool:
    return dice_value == config.EXIT_ROLL


def is_legal(pawn: Pawn, dice_value: int, color: Color) -> bool:
    if pawn.in_base:
        return can_leave_base(dice_value)
    if pawn.in_home:
        return False
    return resolve_move(pawn, dice_value, color) is not REJECT


def legal_moves(player: Player, dice_value: int) -> Tuple[str, ...]:
    """Ids of the player's pawns that can move, in pawn order; empty if none."""
    return tuple(
        pawn.id for pawn in player.pawns if is_legal(pawn, dice_value, player.color)
    )

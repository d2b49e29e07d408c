from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

from loguru import logger

from .board import PALETTE, is_safe_cell, is_track_cell
from .config import config
from .moves import is_legal, legal_moves, resolve_move
from .types import (
    AIDifficulty,
    Color,
    GameMode,
    GamePhase,
    GameState,
    Pawn,
    Player,
)


@dataclass(frozen=True, slots=True)
class PlayerSpec:
    name: str
    color: Color
    is_ai: bool = False


# --- Setup ---
def default_players(count: int, mode: GameMode = GameMode.AI) -> List[PlayerSpec]:
    """Seat specs as the setup screen builds them: palette order, seat 0 human."""
    mode = GameMode(mode)
    specs = []
    for i, color in enumerate(PALETTE[:count]):
        if mode is GameMode.OFFLINE or i == 0:
            specs.append(PlayerSpec(name=f"Player {i + 1}", color=color))
        else:
            specs.append(PlayerSpec(name=f"AI {i}", color=color, is_ai=True))
    return specs


def new_game(
    players: Sequence[PlayerSpec],
    mode: GameMode = GameMode.AI,
    difficulty: AIDifficulty | str = config.AI_DIFFICULTY,
) -> GameState:
    if not config.MIN_PLAYERS <= len(players) <= config.MAX_PLAYERS:
        raise ValueError(
            f"A game needs {config.MIN_PLAYERS}-{config.MAX_PLAYERS} players, got {len(players)}"
        )
    seats = []
    for i, spec in enumerate(players):
        try:
            color = Color(spec.color)
        except ValueError:
            raise ValueError(
                f"Unknown color '{spec.color}'. Available: {[c.value for c in PALETTE]}"
            ) from None
        seats.append(Player.create(f"player-{i}", spec.name, color, spec.is_ai))
    return GameState(
        players=tuple(seats),
        game_mode=GameMode(mode),
        ai_difficulty=AIDifficulty(difficulty),
    )


# --- Dice ---
def roll_dice(rng: Optional[random.Random] = None) -> int:
    rng = rng or random
    return rng.randint(config.DICE_MIN, config.DICE_MAX)


# --- Rules ---
def _place(pawn: Pawn, position: int) -> Pawn:
    return replace(
        pawn,
        position=position,
        in_base=False,
        in_home=position == config.HOME_FINISH,
        is_safe=is_safe_cell(position),
    )


def _send_to_base(pawn: Pawn) -> Pawn:
    return replace(
        pawn,
        position=config.BASE_POSITION,
        in_base=True,
        in_home=False,
        is_safe=False,
    )


def apply_move(state: GameState, pawn_id: str, target_position: int) -> GameState:
    """
    Move one of the current player's pawns and resolve captures and the win.

    The move must be one the position calculator sanctions for the current
    die; anything else returns ``state`` unchanged.

    Args:
        state: Snapshot to move from
        pawn_id: Id of a pawn owned by the current player
        target_position: Landing position produced by ``resolve_move``

    Returns:
        GameState: A new snapshot, or ``state`` itself when the move is rejected
    """
    if state.is_finished:
        logger.warning(f"Ignoring move of {pawn_id}: game is finished")
        return state

    player = state.current_player
    pawn = player.pawn(pawn_id)
    if pawn is None:
        logger.warning(f"Ignoring move of {pawn_id}: not a pawn of {player.id}")
        return state

    dice = state.dice_value
    if (
        not config.DICE_MIN <= dice <= config.DICE_MAX
        or not is_legal(pawn, dice, player.color)
        or resolve_move(pawn, dice, player.color) != target_position
    ):
        logger.warning(
            f"Ignoring move of {pawn_id} to {target_position}: not legal for die {dice}"
        )
        return state

    moved = _place(pawn, target_position)
    captures = is_track_cell(target_position) and not moved.is_safe
    captured: List[str] = []

    players = []
    for idx, other in enumerate(state.players):
        if idx == state.current_player_index:
            pawns = tuple(moved if p.id == pawn_id else p for p in other.pawns)
            players.append(replace(other, pawns=pawns))
            continue
        if not captures:
            players.append(other)
            continue
        pawns = []
        for p in other.pawns:
            if p.position == target_position and not is_safe_cell(p.position):
                captured.append(p.id)
                p = _send_to_base(p)
            pawns.append(p)
        players.append(replace(other, pawns=tuple(pawns)))

    logger.debug(f"{pawn_id}: {pawn.position} -> {target_position} (die {dice})")
    if captured:
        logger.debug(f"{pawn_id} captured {captured} at {target_position}")

    next_state = replace(state, players=tuple(players))
    mover = next_state.current_player
    if mover.has_won():
        players[state.current_player_index] = replace(mover, is_winner=True)
        logger.info(f"{mover.name} ({mover.color.value}) wins")
        next_state = replace(
            next_state,
            players=tuple(players),
            winner_id=mover.id,
            game_phase=GamePhase.FINISHED,
        )
    return next_state


def next_player_index(state: GameState, dice_value: int) -> int:
    """A six keeps the turn; anything else passes to the next seat."""
    if dice_value == config.EXIT_ROLL:
        return state.current_player_index
    return (state.current_player_index + 1) % len(state.players)


# --- Actions ---
def current_player(state: GameState) -> Player:
    return state.current_player


def roll(state: GameState, rng: Optional[random.Random] = None) -> GameState:
    """Roll for the current player and record which pawns may move."""
    if state.game_phase is not GamePhase.ROLLING:
        logger.warning(f"Cannot roll during phase '{state.game_phase.value}'")
        return state
    dice = roll_dice(rng)
    moves = legal_moves(state.current_player, dice)
    logger.debug(f"{state.current_player.name} rolled {dice}, movable: {list(moves)}")
    return replace(
        state,
        dice_value=dice,
        possible_moves=moves,
        selected_pawn=None,
        game_phase=GamePhase.MOVING if moves else GamePhase.WAITING,
    )


def select_pawn(state: GameState, pawn_id: str) -> GameState:
    if state.game_phase is not GamePhase.MOVING or pawn_id not in state.possible_moves:
        return state
    return replace(state, selected_pawn=pawn_id)


def end_turn(state: GameState) -> GameState:
    """Hand the turn on (or back, after a six) and reset the roll."""
    if state.is_finished:
        return state
    index = next_player_index(state, state.dice_value)
    if index != state.current_player_index:
        logger.debug(f"Turn passes to {state.players[index].name}")
    return replace(
        state,
        current_player_index=index,
        dice_value=0,
        possible_moves=(),
        selected_pawn=None,
        game_phase=GamePhase.ROLLING,
    )


def move_pawn(state: GameState, pawn_id: str) -> GameState:
    """Move a pawn from ``possible_moves`` and finish the turn."""
    if state.game_phase is not GamePhase.MOVING or pawn_id not in state.possible_moves:
        logger.warning(
            f"Cannot move {pawn_id}: not a possible move in phase '{state.game_phase.value}'"
        )
        return state
    player = state.current_player
    pawn = player.pawn(pawn_id)
    target = resolve_move(pawn, state.dice_value, player.color)
    moved = apply_move(state, pawn_id, target)
    if moved is state or moved.is_finished:
        return moved
    return end_turn(moved)

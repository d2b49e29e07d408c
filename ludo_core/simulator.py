from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from loguru import logger

from .config import config
from .game import end_turn, move_pawn, roll
from .strategy import BaseStrategy, create
from .types import GamePhase, GameState

HumanPolicy = Callable[[GameState], Optional[str]]


@dataclass(slots=True)
class Simulator:
    """Drives a game snapshot through roll -> choose -> move -> rotate.

    AI seats use the strategy for the game's difficulty. Human seats ask
    ``human_policy`` and fall back to the same strategy when none is given.
    Delays only pace AI seats for onlookers.
    """

    state: GameState
    rng: random.Random = field(default_factory=random.Random)
    roll_delay: float = config.AI_ROLL_DELAY
    move_delay: float = config.AI_MOVE_DELAY
    human_policy: Optional[HumanPolicy] = None
    turns: int = field(default=0, init=False)
    _strategy: BaseStrategy = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._strategy = create(self.state.ai_difficulty, rng=self.rng)

    def _choose(self) -> Optional[str]:
        player = self.state.current_player
        if not player.is_ai and self.human_policy is not None:
            return self.human_policy(self.state)
        if player.is_ai and self.move_delay:
            time.sleep(self.move_delay)
        return self._strategy.choose_move(self.state)

    def step(self) -> GameState:
        """Perform exactly one action on the current snapshot."""
        state = self.state
        phase = state.game_phase
        if phase is GamePhase.FINISHED:
            return state

        if phase is GamePhase.ROLLING:
            if state.current_player.is_ai and self.roll_delay:
                time.sleep(self.roll_delay)
            self.turns += 1
            self.state = roll(state, self.rng)
        elif phase is GamePhase.WAITING:
            self.state = end_turn(state)
        else:
            pawn_id = self._choose()
            if pawn_id is None:
                self.state = end_turn(state)
            else:
                next_state = move_pawn(state, pawn_id)
                if next_state is state:
                    # Policy returned an illegal pawn; treat as a pass
                    logger.warning(f"Rejected choice {pawn_id}, passing the turn")
                    next_state = end_turn(state)
                self.state = next_state
        return self.state

    def run(self, max_turns: int = config.MAX_TURNS) -> GameState:
        """Step until the game finishes or ``max_turns`` rolls have been made."""
        while not self.state.is_finished:
            if self.state.game_phase is GamePhase.ROLLING and self.turns >= max_turns:
                logger.warning(f"Stopping after {self.turns} turns without a winner")
                break
            self.step()
        return self.state

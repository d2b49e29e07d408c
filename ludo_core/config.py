import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> int | None:
    value = os.getenv(name)
    return int(value) if value not in (None, "") else None


@dataclass(slots=True)
class Config:
    # --- Rule constants ---
    TRACK_LENGTH: int = 52  # shared ring, cells 0..51
    HOME_STRETCH_START: int = 52
    HOME_STRETCH_SIZE: int = 6  # 52..57
    HOME_FINISH: int = 57
    BASE_POSITION: int = -1
    PAWNS_PER_PLAYER: int = 4
    EXIT_ROLL: int = 6
    DICE_MIN: int = 1
    DICE_MAX: int = 6
    # Steps from a color's start cell to its home stretch
    HOME_ENTRY_STEPS: int = 51
    MIN_PLAYERS: int = 2
    MAX_PLAYERS: int = 4

    # --- Runtime (env overridable) ---
    NUM_PLAYERS: int = int(os.getenv("NUM_PLAYERS", 4))
    AI_DIFFICULTY: str = os.getenv("AI_DIFFICULTY", "medium")
    MAX_TURNS: int = int(os.getenv("MAX_TURNS", 1000))
    # Pacing only; 1.0 / 1.5 give the interactive feel
    AI_ROLL_DELAY: float = float(os.getenv("AI_ROLL_DELAY", 0.0))
    AI_MOVE_DELAY: float = float(os.getenv("AI_MOVE_DELAY", 0.0))
    SEED: int | None = _optional_int("SEED")

    def __post_init__(self):
        if self.NUM_PLAYERS < self.MIN_PLAYERS or self.NUM_PLAYERS > self.MAX_PLAYERS:
            raise ValueError("NUM_PLAYERS must be between 2 and 4")
        if self.AI_ROLL_DELAY < 0 or self.AI_MOVE_DELAY < 0:
            raise ValueError("AI delays must be non-negative")


config = Config()

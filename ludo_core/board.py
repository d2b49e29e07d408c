"""
Fixed board topology: per-color start and home-entrance cells plus the
shared safe cells. Built once at import time and exposed read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Mapping

from .config import config
from .types import Color


@dataclass(frozen=True, slots=True)
class ColorLayout:
    start: int  # track cell a pawn enters on when leaving base
    home_entrance: int  # last shared cell before the home stretch


def _build_layouts() -> Mapping[Color, ColorLayout]:
    starts = {Color.RED: 0, Color.BLUE: 13, Color.GREEN: 26, Color.YELLOW: 39}
    layouts = {}
    for color, start in starts.items():
        entrance = (start + config.HOME_ENTRY_STEPS) % config.TRACK_LENGTH
        layouts[color] = ColorLayout(start=start, home_entrance=entrance)
    return MappingProxyType(layouts)


LAYOUTS: Mapping[Color, ColorLayout] = _build_layouts()

# Start cells plus the four star cells
SAFE_CELLS: FrozenSet[int] = frozenset({0, 8, 13, 21, 26, 34, 39, 47})

PALETTE = tuple(LAYOUTS)


def start_cell(color: Color) -> int:
    return LAYOUTS[Color(color)].start


def home_entrance(color: Color) -> int:
    return LAYOUTS[Color(color)].home_entrance


def is_safe_cell(position: int) -> bool:
    """Safe cells and every home-stretch cell are capture-immune."""
    return position in SAFE_CELLS or position >= config.HOME_STRETCH_START


def is_track_cell(position: int) -> bool:
    return 0 <= position < config.TRACK_LENGTH

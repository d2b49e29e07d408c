from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MoveOption:
    """Structured metadata about a legal move."""

    pawn_id: str
    current_pos: int
    new_pos: int
    from_base: bool
    capture_count: int  # opposing unsafe pawns on the landing cell
    enters_home_stretch: bool

    @property
    def can_capture(self) -> bool:
        return self.capture_count > 0

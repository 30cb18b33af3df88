"""Scan cursor over a unit buffer."""
from __future__ import annotations

import sys

from .codepoints import QUESTION, STAR, Units, advance, unit_at

UNBOUNDED = sys.maxsize


class Cursor:
    """Start of a character within ``units`` together with its character index.

    The buffer ends at its first zero unit, at ``len(units)``, or once
    ``limit`` characters have been stepped over, whichever comes first.
    """

    __slots__ = ("units", "limit", "pos", "index")

    def __init__(self, units: Units, limit: int = UNBOUNDED, pos: int = 0, index: int = 0) -> None:
        self.units = units
        self.limit = limit
        self.pos = pos
        self.index = index

    def __repr__(self) -> str:  # pragma: no cover - debug convenience
        return f"Cursor(pos={self.pos}, index={self.index}, limit={self.limit})"

    @property
    def lead(self) -> int:
        return unit_at(self.units, self.pos)

    def at_end(self) -> bool:
        return self.index >= self.limit or not unit_at(self.units, self.pos)

    def at_star(self) -> bool:
        return not self.at_end() and self.lead == STAR

    def at_question(self) -> bool:
        return not self.at_end() and self.lead == QUESTION

    def advance(self) -> bool:
        """Step over one character; return whether another character follows."""
        if self.at_end():
            return False
        self.pos, _ = advance(self.units, self.pos)
        self.index += 1
        return not self.at_end()

    def copy(self) -> Cursor:
        return Cursor(self.units, self.limit, self.pos, self.index)

    def move_to(self, other: Cursor) -> None:
        self.pos = other.pos
        self.index = other.index

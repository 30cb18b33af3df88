"""Configuration models shared across the wildcompare engine."""
from __future__ import annotations

import enum
from dataclasses import dataclass


class CaseMode(str, enum.Enum):
    SENSITIVE = "sensitive"
    ASCII_INSENSITIVE = "ascii_insensitive"


@dataclass(frozen=True)
class MatchOptions:
    """Options for a single match call.

    case: How literal characters are compared.
        - SENSITIVE (default): exact unit-for-unit equality
        - ASCII_INSENSITIVE: ``A-Z`` and ``a-z`` compare equal; every other
          character, including non-ASCII letters, still compares exactly

    Wildcards are recognised the same way in every mode.
    """
    case: CaseMode = CaseMode.SENSITIVE

    @property
    def casefold(self) -> bool:
        return self.case == CaseMode.ASCII_INSENSITIVE

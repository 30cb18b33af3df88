"""UTF-8 code point primitives over raw storage units.

A buffer is any indexable sequence of byte values.  It ends at its first zero
unit or at its Python length, whichever comes first.  Nothing here validates
UTF-8: a malformed buffer segments into unspecified characters, but no
primitive ever indexes past ``len(units)`` or steps over a terminator.
"""
from __future__ import annotations

from collections.abc import Callable, Sequence

Units = Sequence[int]
CharEquality = Callable[[Units, int, Units, int], bool]

STAR = 0x2A
QUESTION = 0x3F

# Highest leading-unit value for each character width.
SINGLE_UNIT_MAX = 0xBF  # 0xxxxxxx, or a stray 10xxxxxx continuation unit
TWO_UNIT_MAX = 0xDF  # 110xxxxx
THREE_UNIT_MAX = 0xEF  # 1110xxxx


def unit_at(units: Units, pos: int) -> int:
    """Return the unit at ``pos``, reading the terminator past the end of ``units``."""
    if pos < len(units):
        return units[pos]
    return 0


def character_length(unit: int) -> int:
    """Number of units claimed by a character whose leading unit is ``unit``."""
    if unit > THREE_UNIT_MAX:
        return 4
    if unit > TWO_UNIT_MAX:
        return 3
    if unit > SINGLE_UNIT_MAX:
        return 2
    return 1


def advance(units: Units, pos: int) -> tuple[int, bool]:
    """Step from the character at ``pos`` to the next one.

    Continuation units are only stepped over while they are present, so a
    leading unit claiming more units than precede the terminator never moves
    the position beyond it.

    Returns:
        The new position and whether a further character starts there.
    """
    lead = unit_at(units, pos)
    if not lead:
        return pos, False
    step = 1
    for offset in range(1, character_length(lead)):
        if not unit_at(units, pos + offset):
            break
        step += 1
    pos += step
    return pos, bool(unit_at(units, pos))


def fold_ascii(unit: int) -> int:
    if 0x41 <= unit <= 0x5A:
        return unit | 0x20
    return unit


def equal_characters(a_units: Units, a_pos: int, b_units: Units, b_pos: int) -> bool:
    """Compare the characters at ``a_pos`` and ``b_pos`` unit by unit.

    The width comes from the leading unit of ``a``; once the leading units agree
    both sides claim the same width.
    """
    lead = unit_at(a_units, a_pos)
    if lead != unit_at(b_units, b_pos):
        return False
    for offset in range(1, character_length(lead)):
        unit = unit_at(a_units, a_pos + offset)
        if unit != unit_at(b_units, b_pos + offset):
            return False
        if not unit:
            break
    return True


def equal_characters_casefold(a_units: Units, a_pos: int, b_units: Units, b_pos: int) -> bool:
    """Like :func:`equal_characters`, but ASCII letters compare case-insensitively."""
    lead = unit_at(a_units, a_pos)
    if fold_ascii(lead) != fold_ascii(unit_at(b_units, b_pos)):
        return False
    for offset in range(1, character_length(lead)):
        unit = unit_at(a_units, a_pos + offset)
        if fold_ascii(unit) != fold_ascii(unit_at(b_units, b_pos + offset)):
            return False
        if not unit:
            break
    return True


def advance_and_equal_characters(
    a_units: Units,
    a_pos: int,
    b_units: Units,
    b_pos: int,
    equal: CharEquality = equal_characters,
) -> tuple[int, bool]:
    """Advance ``b_pos`` by one character, then compare the characters at ``a_pos`` and ``b_pos``."""
    b_pos, _ = advance(b_units, b_pos)
    return b_pos, equal(a_units, a_pos, b_units, b_pos)


def character_count(units: Units) -> int:
    """Count the characters in front of the terminator."""
    count = 1 if unit_at(units, 0) else 0
    pos, more = advance(units, 0)
    while more:
        count += 1
        pos, more = advance(units, pos)
    return count

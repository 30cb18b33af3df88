"""UTF-8 aware wildcard matching.

``*`` matches any run of zero or more characters and ``?`` matches exactly one
character.  Both are recognised only as complete single-unit characters, so a
multi-unit character whose trailing units happen to equal ``0x2A`` or ``0x3F``
is always a literal.

Matching never backtracks recursively.  The engine keeps a single checkpoint at
the most recent ``*``; when the text after it fails to match, the checkpoint's
subject side moves one character forward and the walk resumes from there.
Every earlier ``*`` has already been discharged by then, so one checkpoint is
enough.
"""
from __future__ import annotations

from collections.abc import Iterable

from . import codepoints
from .codepoints import QUESTION, STAR, CharEquality
from .cursor import Cursor
from .models import CaseMode, MatchOptions
from .utils import as_units, resolve_length, resolve_options

_EQUALITY: dict[CaseMode, CharEquality] = {
    CaseMode.SENSITIVE: codepoints.equal_characters,
    CaseMode.ASCII_INSENSITIVE: codepoints.equal_characters_casefold,
}


def _same(wild: Cursor, tame: Cursor, equal: CharEquality) -> bool:
    if wild.at_end():
        return tame.at_end()
    if tame.at_end():
        return False
    return wild.lead == QUESTION or equal(wild.units, wild.pos, tame.units, tame.pos)


def _wild_compare(wild: Cursor, tame: Cursor, equal: CharEquality) -> bool:
    # Up to the first '*' there is nothing to fall back to.
    while True:
        if tame.at_end():
            while wild.at_star():
                wild.advance()
            return wild.at_end()
        if wild.at_end():
            return False
        if wild.lead == STAR:
            break
        if wild.lead != QUESTION and not equal(wild.units, wild.pos, tame.units, tame.pos):
            return False
        wild.advance()
        tame.advance()

    wild_seq = wild
    tame_seq = tame
    while True:
        if wild.at_star():
            while wild.at_star():
                wild.advance()
            if wild.at_end():
                return True
            if tame.at_end():
                return False
            if not wild.at_question():
                while not equal(wild.units, wild.pos, tame.units, tame.pos):
                    if not tame.advance():
                        return False
            wild_seq = wild.copy()
            tame_seq = tame.copy()
        elif not _same(wild, tame, equal):
            if tame.at_end():
                return False
            # '?' right after the checkpoint always consumes the same subject
            # characters, so fold those into the checkpoint once.
            while wild_seq.at_question():
                wild_seq.advance()
                tame_seq.advance()
            wild.move_to(wild_seq)
            while True:
                if not tame_seq.advance():
                    if wild.at_end():
                        break
                    return False
                if not wild.at_end() and equal(wild.units, wild.pos, tame_seq.units, tame_seq.pos):
                    break
            tame.move_to(tame_seq)

        if tame.at_end():
            return wild.at_end()
        wild.advance()
        tame.advance()


def match(pattern: object, subject: object, *, options: MatchOptions | None = None, **kwargs) -> bool:
    """Match ``subject`` against the wildcard ``pattern``.

    Args:
        pattern: Wildcard pattern as ``str`` or UTF-8 storage units
        subject: Text to test, as ``str`` or UTF-8 storage units
        options: Match configuration; alternatively pass its fields as keywords
            (``case="ascii_insensitive"`` or ``casefold=True``)

    Both buffers end at their first zero unit or at their length.

    Returns:
        True if the whole subject is consumed by the pattern.

    Examples:
        >>> match("*issip*ss*", "mississipissippi")
        True
        >>> match("??", "a")
        False
    """
    opts = resolve_options(options, kwargs)
    return _wild_compare(Cursor(as_units(pattern)), Cursor(as_units(subject)), _EQUALITY[opts.case])


def match_bounded(
    pattern: object,
    subject: object,
    pattern_len: int,
    subject_len: int,
    *,
    options: MatchOptions | None = None,
    **kwargs,
) -> bool:
    """Match like :func:`match`, looking at no more than the given number of characters.

    ``pattern_len`` and ``subject_len`` count characters, not storage units.  A
    buffer ends at that count or at its terminator, whichever comes first, so
    this works on both terminated buffers and slices of longer storage.
    Negative counts are treated as zero.

    Examples:
        >>> match_bounded("a*", "abc\\x00", 2, 3)
        True
        >>> match_bounded("abc", "abcdef", 3, 3)
        True
    """
    opts = resolve_options(options, kwargs)
    wild = Cursor(as_units(pattern), resolve_length(pattern_len, "pattern_len"))
    tame = Cursor(as_units(subject), resolve_length(subject_len, "subject_len"))
    return _wild_compare(wild, tame, _EQUALITY[opts.case])


def match_all(
    subjects: Iterable[object], pattern: object, *, options: MatchOptions | None = None, **kwargs
) -> list[bool]:
    """Match every subject against one pattern."""
    equal = _EQUALITY[resolve_options(options, kwargs).case]
    units = as_units(pattern)
    return [_wild_compare(Cursor(units), Cursor(as_units(subject)), equal) for subject in subjects]


def character_count(buffer: object) -> int:
    """Number of characters in ``buffer`` before its terminator.

    Examples:
        >>> character_count("héllo")
        5
        >>> character_count(b"")
        0
    """
    return codepoints.character_count(as_units(buffer))

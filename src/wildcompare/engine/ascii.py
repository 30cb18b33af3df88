"""Byte-wise wildcard matching for single-unit text.

Same state machine as :mod:`wildcompare.engine.matcher`, with every unit taken
as one character.  On input made only of units below ``0x80`` both agree.
"""
from __future__ import annotations

import operator
from collections.abc import Callable

from .codepoints import QUESTION, STAR, Units, fold_ascii, unit_at
from .models import MatchOptions
from .utils import as_ascii_units, resolve_options

UnitEquality = Callable[[int, int], bool]


def _equal_casefold(a: int, b: int) -> bool:
    return fold_ascii(a) == fold_ascii(b)


def _units_match(wc: int, tc: int, equal: UnitEquality) -> bool:
    if not wc or not tc:
        return wc == tc
    return wc == QUESTION or equal(wc, tc)


def _fast_wild_compare(wild: Units, tame: Units, equal: UnitEquality) -> bool:
    w = t = 0
    while True:
        wc = unit_at(wild, w)
        tc = unit_at(tame, t)
        if not tc:
            while wc == STAR:
                w += 1
                wc = unit_at(wild, w)
            return not wc
        if wc == STAR:
            break
        if not wc or (wc != QUESTION and not equal(wc, tc)):
            return False
        w += 1
        t += 1

    wild_seq = w
    tame_seq = t
    while True:
        wc = unit_at(wild, w)
        tc = unit_at(tame, t)
        if wc == STAR:
            while wc == STAR:
                w += 1
                wc = unit_at(wild, w)
            if not wc:
                return True
            if not tc:
                return False
            if wc != QUESTION:
                while not equal(wc, tc):
                    t += 1
                    tc = unit_at(tame, t)
                    if not tc:
                        return False
            wild_seq = w
            tame_seq = t
        elif not _units_match(wc, tc, equal):
            if not tc:
                return False
            while unit_at(wild, wild_seq) == QUESTION:
                wild_seq += 1
                tame_seq += 1
            w = wild_seq
            wc = unit_at(wild, w)
            while True:
                tame_seq += 1
                tc = unit_at(tame, tame_seq)
                if not tc:
                    if not wc:
                        break
                    return False
                if wc and equal(wc, tc):
                    break
            t = tame_seq

        if not unit_at(tame, t):
            return not unit_at(wild, w)
        w += 1
        t += 1


def match_ascii(pattern: object, subject: object, *, options: MatchOptions | None = None, **kwargs) -> bool:
    """Match ``subject`` against ``pattern`` one storage unit at a time.

    For callers whose text is known to hold single-unit characters only; skips
    all character-width decoding.  ``str`` arguments must be ASCII.

    Examples:
        >>> match_ascii("a*zz*", "aaazz")
        True
        >>> match_ascii("*?", "")
        False
    """
    opts = resolve_options(options, kwargs)
    equal = _equal_casefold if opts.casefold else operator.eq
    return _fast_wild_compare(as_ascii_units(pattern), as_ascii_units(subject), equal)

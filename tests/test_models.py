"""Tests for match options and case-insensitive matching."""
from __future__ import annotations

import pytest

from wildcompare import CaseMode, MatchOptions, build_match_options, match, match_all, match_bounded


def test_default_options() -> None:
    options = MatchOptions()
    assert options.case is CaseMode.SENSITIVE
    assert not options.casefold


def test_build_match_options_from_kwargs() -> None:
    assert build_match_options().case is CaseMode.SENSITIVE
    assert build_match_options(case="ascii_insensitive").case is CaseMode.ASCII_INSENSITIVE
    assert build_match_options(case="ASCII_INSENSITIVE").casefold
    assert build_match_options(case=CaseMode.SENSITIVE).case is CaseMode.SENSITIVE
    assert build_match_options(casefold=True).case is CaseMode.ASCII_INSENSITIVE
    assert build_match_options(casefold=False).case is CaseMode.SENSITIVE


def test_build_match_options_rejects_bad_values() -> None:
    with pytest.raises(ValueError, match="Invalid case mode"):
        build_match_options(case="unicode")
    with pytest.raises(ValueError, match="Invalid case mode"):
        build_match_options(case=1)
    with pytest.raises(ValueError, match="Unknown match option"):
        build_match_options(pathname=True)


def test_options_and_kwargs_are_exclusive() -> None:
    with pytest.raises(ValueError):
        match("a", "a", options=MatchOptions(), casefold=True)


@pytest.mark.parametrize(
    "pattern,subject",
    [
        ("*issip*PI", "mississippi"),
        ("mi*Sip*", "miSsissippi"),
        ("bLaH", "bLah"),
        ("miSsisSippi", "miSsissippi"),
        ("abc?", "AbCD"),
        ("abc?", "AbC★"),
        ("⚛⚖☁O", "⚛⚖☁o"),
    ],
)
def test_ascii_insensitive_matches(pattern: str, subject: str) -> None:
    options = MatchOptions(case=CaseMode.ASCII_INSENSITIVE)
    assert match(pattern, subject, options=options)
    assert match(pattern, subject, casefold=True)
    assert match_bounded(pattern, subject, len(pattern), len(subject), options=options)
    assert not match(pattern, subject)


def test_ascii_insensitive_leaves_other_characters_exact() -> None:
    assert not match("CAFÉ", "café", casefold=True)
    assert match("CAF?", "café", casefold=True)
    assert not match("⚛⚖☁0", "⚛⚖☁O", casefold=True)
    assert not match("@", "`", casefold=True)


def test_match_all_with_options() -> None:
    assert match_all(["ABC", "abc", "abd"], "a?c", casefold=True) == [True, True, False]

"""wildcompare UTF-8 wildcard matching."""

from .engine.ascii import match_ascii
from .engine.matcher import character_count, match, match_all, match_bounded
from .engine.models import CaseMode, MatchOptions
from .engine.utils import build_match_options

__all__ = [
    "match",
    "match_bounded",
    "match_ascii",
    "match_all",
    "character_count",
    "CaseMode",
    "MatchOptions",
    "build_match_options",
]

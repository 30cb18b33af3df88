"""Test configuration ensuring local packages are importable, plus shared fixtures."""

from __future__ import annotations

import pathlib
import re
import sys
from collections.abc import Callable

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

for path in (SRC, ROOT):
    path_str = str(path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)


def _translate(pattern: str, flags: int) -> re.Pattern[str]:
    parts = []
    for ch in pattern:
        if ch == "*":
            if not parts or parts[-1] != ".*":
                parts.append(".*")
        elif ch == "?":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    return re.compile("".join(parts), re.DOTALL | flags)


@pytest.fixture(scope="session")
def reference_match() -> Callable[..., bool]:
    """Regex-backed oracle over decoded text, one code point per character."""

    def _match(pattern: str, subject: str, casefold: bool = False) -> bool:
        flags = re.IGNORECASE | re.ASCII if casefold else 0
        return _translate(pattern, flags).fullmatch(subject) is not None

    return _match

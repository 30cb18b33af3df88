"""Argument coercion and option resolution for the public match functions."""
from __future__ import annotations

import logging
import operator
from collections.abc import Mapping

from .codepoints import Units
from .models import CaseMode, MatchOptions

logger = logging.getLogger(__name__)

_OPTION_KEYS = {"case", "casefold"}


def as_units(buffer: object) -> Units:
    """Return ``buffer`` as an indexable sequence of UTF-8 storage units.

    ``str`` is encoded as UTF-8.  ``bytes``, ``bytearray`` and any sized,
    indexable sequence of byte values (lists, ``array.array``, numpy ``uint8``
    arrays) are used as they are, without copying.  A ``memoryview`` is
    reinterpreted as unsigned bytes.

    Examples:
        >>> as_units("é")
        b'\\xc3\\xa9'
        >>> as_units(b"abc")
        b'abc'
    """
    if isinstance(buffer, str):
        return buffer.encode("utf-8")
    if isinstance(buffer, (bytes, bytearray)):
        return buffer
    if isinstance(buffer, memoryview):
        if buffer.format != "B" or buffer.ndim != 1:
            return buffer.cast("B")
        return buffer
    if isinstance(buffer, Mapping) or not (hasattr(buffer, "__len__") and hasattr(buffer, "__getitem__")):
        raise TypeError(f"expected str or a sequence of code units, got {type(buffer).__name__}")
    return buffer


def as_ascii_units(buffer: object) -> Units:
    """Like :func:`as_units`, but ``str`` input must be pure ASCII."""
    if isinstance(buffer, str):
        try:
            return buffer.encode("ascii")
        except UnicodeEncodeError as exc:
            raise ValueError(f"ASCII matching needs ASCII text, got {buffer!r}") from exc
    return as_units(buffer)


def build_match_options(**kwargs) -> MatchOptions:
    """Build MatchOptions from flattened kwargs.

    Examples:
        # Instead of:
        MatchOptions(case=CaseMode.ASCII_INSENSITIVE)

        # You can pass:
        build_match_options(case="ascii_insensitive")
        build_match_options(casefold=True)
    """
    unknown = set(kwargs) - _OPTION_KEYS
    if unknown:
        raise ValueError(f"Unknown match option(s): {', '.join(sorted(unknown))}")

    case = kwargs.get("case", CaseMode.SENSITIVE)
    if isinstance(case, str):
        try:
            case = CaseMode(case.lower())
        except ValueError:
            raise ValueError(
                f"Invalid case mode: {case}. Must be 'sensitive' or 'ascii_insensitive'"
            ) from None
    else:
        raise ValueError(f"Invalid case mode: {case!r}")

    if kwargs.get("casefold"):
        case = CaseMode.ASCII_INSENSITIVE

    return MatchOptions(case=case)


def resolve_options(options: MatchOptions | None, kwargs: dict[str, object]) -> MatchOptions:
    """Return ``options``, or build them from ``kwargs`` when none were given."""
    if options is None:
        return build_match_options(**kwargs) if kwargs else MatchOptions()
    if kwargs:
        raise ValueError("pass either a MatchOptions instance or option keywords, not both")
    return options


def resolve_length(length: int, name: str) -> int:
    """Validate a character count for the bounded matcher.

    Negative counts describe an empty slice and are clamped to zero.

    Examples:
        >>> resolve_length(3, "subject_len")
        3
        >>> resolve_length(-1, "subject_len")
        0
    """
    length = operator.index(length)
    if length < 0:
        logger.warning("negative %s %d treated as an empty slice", name, length)
        return 0
    return length

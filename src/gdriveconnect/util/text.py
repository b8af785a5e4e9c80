from __future__ import annotations

import unicodedata
from typing import Any

# Unicode space separators that are not breaking whitespace.
_NON_BREAKING_SPACES: frozenset[str] = frozenset("\u00a0\u2007\u202f")
_CONTROL_WHITESPACE: frozenset[str] = frozenset("\t\n\x0b\x0c\r\x1c\x1d\x1e\x1f")


def is_whitespace(char: str) -> bool:
    """
    Whitespace in the Java `Character.isWhitespace` sense.

    Space, line and paragraph separators count, except the non-breaking
    spaces U+00A0, U+2007 and U+202F; so do tab, LF, VT, FF, CR and the
    U+001C..U+001F information separators.
    """
    if char in _CONTROL_WHITESPACE:
        return True
    if char in _NON_BREAKING_SPACES:
        return False
    return unicodedata.category(char) in ("Zs", "Zl", "Zp")


def has_text(value: Any) -> bool:
    """
    Returns True if value is a string with at least one non-whitespace character.

    None, empty strings and whitespace-only strings are all "no text". A
    non-breaking space is text.
    """
    return isinstance(value, str) and any(not is_whitespace(c) for c in value)

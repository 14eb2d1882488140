"""Numbered-list heuristics: ``"1."`` / ``"23."`` are list markers, not sentence ends."""

from __future__ import annotations

_DIGITS = frozenset("0123456789")
_INLINE_SPACE = frozenset(" \t")
_LEAD_CONTEXT = frozenset(" \t\n")

# Four or more digits before a period is a year or an amount, not an ordinal.
_MAX_ORDINAL_DIGITS = 3


def is_ordinal_period(text: str, pos: int) -> bool:
    """Return True if the period at *pos* closes a short numeric list marker.

    Walks backward from *pos*: spaces and tabs are skipped, then up to three
    ASCII digits are counted.  The code point before the digit run must be
    whitespace or the start of the text.
    """
    if pos <= 0 or pos >= len(text) or text[pos] != ".":
        return False

    i = pos - 1
    while i >= 0 and text[i] in _INLINE_SPACE:
        i -= 1

    digits = 0
    while i >= 0 and text[i] in _DIGITS:
        digits += 1
        if digits > _MAX_ORDINAL_DIGITS:
            return False
        i -= 1

    if i >= 0 and text[i] not in _LEAD_CONTEXT:
        return False

    return digits > 0


def is_numeric_ordinal(text: str) -> bool:
    """Return True if *text* is a bare ordinal such as ``"12."``."""
    stripped = text.strip()
    if len(stripped) < 2 or stripped[-1] != ".":
        return False
    return all(ch in _DIGITS for ch in stripped[:-1])

"""Locate sentence boundaries inside a text window.

Positions are code-point indices into a ``str``; ``-1`` means no boundary.
"""

from __future__ import annotations

from collections.abc import Set

from sentencekit.text.ordinal import is_ordinal_period

NOT_FOUND = -1

_DIGITS = frozenset("0123456789")


def is_boundary(text: str, pos: int, separators: Set[str]) -> bool:
    """Return True if ``text[pos]`` is a separator that is not an ordinal period."""
    ch = text[pos]
    if ch not in separators:
        return False
    return not (ch == "." and is_ordinal_period(text, pos))


def last_boundary(text: str, separators: Set[str]) -> int:
    """Return the index of the last boundary in *text*, scanning backward."""
    for i in range(len(text) - 1, -1, -1):
        if is_boundary(text, i, separators):
            return i
    return NOT_FOUND


def _starts_list_item(text: str, pos: int, end: int) -> bool:
    """True if the first non-whitespace code point in ``text[pos:end]`` is a digit."""
    while pos < end and text[pos].isspace():
        pos += 1
    return pos < end and text[pos] in _DIGITS


def next_split_point(text: str, start: int, max_len: int, separators: Set[str]) -> int:
    """Return the next split position at or after *start*.

    The scan first covers ``[start, start + max_len)``.  Inside that window a
    newline only splits when the next line opens with a digit (a new list
    item); other newlines are passed over so wrapped lines stay together.
    When the window holds no split point the scan continues, uncapped, to
    the end of *text*.  A non-positive *max_len* disables the window.
    """
    length = len(text)
    end = length if max_len <= 0 else min(start + max_len, length)

    for i in range(start, end):
        if text[i] == "\n":
            if _starts_list_item(text, i + 1, end):
                return i
            continue
        if is_boundary(text, i, separators):
            return i

    for i in range(end, length):
        if is_boundary(text, i, separators):
            return i

    return NOT_FOUND

"""Punctuation classes used for sentence boundary detection.

Two categories, both as immutable code-point sets built at import time:

- **terminal** — always ends a sentence (ASCII and full-width period,
  question mark, exclamation mark, semicolon, colon, plus newline).
- **pause** — comma variants; a boundary only during the first pass, so
  the first utterance can reach TTS sooner.
"""

from __future__ import annotations

TERMINAL_PUNCTUATION: frozenset[str] = frozenset(
    {
        ".",
        "。",
        "?",
        "？",
        "!",
        "！",
        ";",
        "；",
        ":",
        "：",
        "\n",
    }
)

PAUSE_PUNCTUATION: frozenset[str] = frozenset({",", "，"})

# Separator sets handed to the scanner.
STRICT_SEPARATORS: frozenset[str] = TERMINAL_PUNCTUATION
FIRST_PASS_SEPARATORS: frozenset[str] = TERMINAL_PUNCTUATION | PAUSE_PUNCTUATION


def is_terminal_punctuation(ch: str) -> bool:
    """Return True if *ch* always ends a sentence."""
    return ch in TERMINAL_PUNCTUATION


def is_pause_punctuation(ch: str) -> bool:
    """Return True if *ch* is a pause mark (boundary on the first pass only)."""
    return ch in PAUSE_PUNCTUATION


def separators_for(is_first: bool) -> frozenset[str]:
    """Select the comma-permissive set for the first pass, the strict set otherwise."""
    return FIRST_PASS_SEPARATORS if is_first else STRICT_SEPARATORS

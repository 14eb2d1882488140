"""Sentence extraction over streaming LLM text.

Two modes:

- :func:`extract_complete` — eager; every terminal boundary closes a
  sentence, no length filtering.
- :func:`extract_smart` — windowed; a segment is only emitted when it is
  long enough and ends on punctuation, so TTS does not receive choppy
  fragments such as ``"Ok."``.

Both return an :class:`ExtractionResult` whose ``remainder`` should be
prefixed onto the next chunk of the stream.
"""

from __future__ import annotations

from typing import NamedTuple

from sentencekit.text.buffers import ScratchBuffer, ScratchBufferPool, default_pool
from sentencekit.text.punctuation import STRICT_SEPARATORS, separators_for
from sentencekit.text.scanner import NOT_FOUND, is_boundary, next_split_point


class ExtractionResult(NamedTuple):
    """Sentences ready for synthesis plus the unconsumed tail."""

    sentences: list[str]
    remainder: str


def extract_complete(text: str, *, pool: ScratchBufferPool | None = None) -> ExtractionResult:
    """Split *text* at every terminal boundary.

    Ordinal periods (``"1."`` at a line start) do not close a sentence.
    Trailing text without a terminal boundary becomes the remainder.
    """
    if not text:
        return ExtractionResult([], "")

    sentences: list[str] = []
    with (pool or default_pool).borrow(len(text)) as current:
        for i, ch in enumerate(text):
            current.append(ch)
            if is_boundary(text, i, STRICT_SEPARATORS):
                sentence = current.getvalue().strip()
                if sentence:
                    sentences.append(sentence)
                current.clear()
        remainder = current.getvalue().strip()

    return ExtractionResult(sentences, remainder)


def extract_smart(
    text: str,
    min_len: int,
    max_len: int,
    is_first: bool,
    *,
    pool: ScratchBufferPool | None = None,
) -> ExtractionResult:
    """Split *text* into TTS-sized sentences.

    Args:
        text: Remainder of the previous call concatenated with new tokens.
        min_len: Minimum sentence length in code points.  Values below 1
            are treated as 1.
        max_len: Preferred window for finding a split point.  Values
            ``<= 0`` disable the window.  Text with no boundary inside the
            window is still split at the first boundary past it.
        is_first: Allow commas as boundaries (first utterance of a reply).

    Segments that are too short or do not end on punctuation are appended
    to the remainder, space-joined, in the order they were seen.
    """
    separators = separators_for(is_first)
    min_len = max(min_len, 1)
    length = len(text)
    sentences: list[str] = []

    with (pool or default_pool).borrow(max(max_len, 0) * 2) as remainder:
        cursor = 0
        while cursor < length:
            while cursor < length and text[cursor].isspace():
                cursor += 1
            if cursor >= length:
                break

            split = next_split_point(text, cursor, max_len, separators)
            if split == NOT_FOUND:
                _append_segment(remainder, text[cursor:].strip())
                break

            segment = text[cursor : split + 1].strip()
            if len(segment) >= min_len and segment[-1] in separators:
                sentences.append(segment)
            else:
                _append_segment(remainder, segment)
            cursor = split + 1

        return ExtractionResult(sentences, remainder.getvalue())


def _append_segment(remainder: ScratchBuffer, segment: str) -> None:
    if not segment:
        return
    if remainder:
        remainder.append(" ")
    remainder.append(segment)


def contains_separator(text: str, is_first: bool) -> bool:
    """Return True if *text* holds any separator of the selected set."""
    separators = separators_for(is_first)
    return any(ch in separators for ch in text)

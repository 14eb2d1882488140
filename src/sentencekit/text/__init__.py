"""Streaming sentence segmentation for text-to-speech."""

from sentencekit.text.buffers import ScratchBuffer, ScratchBufferPool
from sentencekit.text.config import SentenceSplitConfig
from sentencekit.text.extractor import (
    ExtractionResult,
    contains_separator,
    extract_complete,
    extract_smart,
)
from sentencekit.text.ordinal import is_numeric_ordinal, is_ordinal_period
from sentencekit.text.punctuation import (
    FIRST_PASS_SEPARATORS,
    PAUSE_PUNCTUATION,
    STRICT_SEPARATORS,
    TERMINAL_PUNCTUATION,
    is_pause_punctuation,
    is_terminal_punctuation,
    separators_for,
)
from sentencekit.text.scanner import last_boundary, next_split_point
from sentencekit.text.stream import SentenceStream, split_sentences

__all__ = [
    "ExtractionResult",
    "FIRST_PASS_SEPARATORS",
    "PAUSE_PUNCTUATION",
    "STRICT_SEPARATORS",
    "ScratchBuffer",
    "ScratchBufferPool",
    "SentenceSplitConfig",
    "SentenceStream",
    "TERMINAL_PUNCTUATION",
    "contains_separator",
    "extract_complete",
    "extract_smart",
    "is_numeric_ordinal",
    "is_ordinal_period",
    "is_pause_punctuation",
    "is_terminal_punctuation",
    "last_boundary",
    "next_split_point",
    "separators_for",
    "split_sentences",
]

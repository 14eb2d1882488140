"""Per-session sentence splitting for a streaming LLM reply."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from sentencekit.text.buffers import ScratchBufferPool
from sentencekit.text.config import SentenceSplitConfig
from sentencekit.text.extractor import contains_separator, extract_smart

logger = logging.getLogger("sentencekit.text.stream")


class SentenceStream:
    """Accumulates LLM tokens and hands back sentences as they complete.

    Each :meth:`feed` concatenates the new chunk onto the carried remainder
    and runs :func:`~sentencekit.text.extractor.extract_smart` over it.
    The stream starts in first-pass mode (commas split) when
    ``config.first_pass`` is set and switches to strict mode once a
    sentence has been emitted.

    Thread-safety: NOT thread-safe.  Use one instance per reply.

    Usage::

        stream = SentenceStream(SentenceSplitConfig(min_len=8))
        for token in llm_tokens:
            for sentence in stream.feed(token):
                await tts.synthesize(sentence)
        tail = stream.flush()
        if tail:
            await tts.synthesize(tail)
    """

    def __init__(
        self,
        config: SentenceSplitConfig | None = None,
        *,
        pool: ScratchBufferPool | None = None,
    ) -> None:
        self._config = config or SentenceSplitConfig()
        self._pool = pool
        self._buffer = ""
        self._is_first = self._config.first_pass
        self._emitted = 0

    @property
    def config(self) -> SentenceSplitConfig:
        return self._config

    @property
    def pending(self) -> str:
        """Text carried over to the next :meth:`feed`."""
        return self._buffer

    @property
    def is_first(self) -> bool:
        """True while commas still count as boundaries."""
        return self._is_first

    @property
    def emitted(self) -> int:
        """Number of sentences returned so far."""
        return self._emitted

    def feed(self, chunk: str) -> list[str]:
        """Add a chunk of text and return any sentences it completed."""
        if not chunk:
            return []

        text = self._buffer + chunk
        if not contains_separator(text, self._is_first):
            self._buffer = text
            return []

        sentences, remainder = extract_smart(
            text,
            self._config.min_len,
            self._config.max_len,
            self._is_first,
            pool=self._pool,
        )
        # Keep a word break between the carried tail and the next token.
        if remainder and text[-1].isspace():
            remainder += " "
        self._buffer = remainder

        if sentences:
            self._is_first = False
            self._emitted += len(sentences)
            logger.debug(
                "Emitting %d sentence(s), %d chars pending", len(sentences), len(remainder)
            )
        return sentences

    def flush(self) -> str | None:
        """Return whatever is still buffered and reset for the next reply."""
        text = self._buffer.strip()
        self.reset()
        if not text:
            return None
        logger.debug("Flushing %d trailing chars", len(text))
        return text

    def reset(self) -> None:
        """Drop buffered text and re-enter first-pass mode."""
        self._buffer = ""
        self._is_first = self._config.first_pass
        self._emitted = 0


async def split_sentences(
    token_stream: AsyncIterator[str],
    config: SentenceSplitConfig | None = None,
) -> AsyncIterator[str]:
    """Buffer streaming tokens and yield complete sentences.

    On stream end any remaining buffered text is yielded as-is (the final
    partial sentence, including fragments held back for being too short).

    Args:
        token_stream: Async iterator of text token deltas from an LLM.
        config: Window settings; defaults to :class:`SentenceSplitConfig`.
    """
    stream = SentenceStream(config)
    async for token in token_stream:
        for sentence in stream.feed(token):
            yield sentence

    tail = stream.flush()
    if tail:
        yield tail

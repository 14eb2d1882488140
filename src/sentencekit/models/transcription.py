"""Streaming speech-recognition results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class StreamingResult:
    """One partial or final result from a streaming ASR provider."""

    text: str
    is_final: bool = False
    error: Exception | None = None
    asr_type: str = ""
    mode: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

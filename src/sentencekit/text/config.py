"""Sentence splitting configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class SentenceSplitConfig(BaseModel):
    """Window and first-pass settings for a streaming sentence splitter.

    Attributes:
        min_len: Shortest sentence (in code points) sent to TTS.  Shorter
            fragments are held back in the remainder.
        max_len: Window in which a split point is sought.  ``0`` disables
            the window.
        first_pass: Treat commas as boundaries until the first sentence of
            a reply has been emitted.
    """

    min_len: int = Field(default=5, ge=1)
    max_len: int = Field(default=100, ge=0)
    first_pass: bool = True

    @model_validator(mode="after")
    def _check_window(self) -> SentenceSplitConfig:
        if self.max_len and self.min_len > self.max_len:
            raise ValueError(
                f"min_len ({self.min_len}) must not exceed max_len ({self.max_len})"
            )
        return self

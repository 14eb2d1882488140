"""Exception hierarchy for sentencekit."""

from __future__ import annotations


class SentenceKitError(Exception):
    """Base exception for all sentencekit errors."""


class ResourceError(SentenceKitError):
    """A pooled provider resource could not be used."""


class ResourceCreationError(ResourceError):
    """A resource factory failed to create its provider.

    Attributes:
        resource_type: Kind of resource (``"asr"``, ``"tts"``, ``"llm"`` ...).
        provider: Provider name passed to the creator.
    """

    def __init__(self, message: str, *, resource_type: str = "", provider: str = "") -> None:
        super().__init__(message)
        self.resource_type = resource_type
        self.provider = provider

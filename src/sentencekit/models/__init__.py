"""Data models shared with the surrounding voice service."""

from sentencekit.models.events import ExitChatEvent, ExitTrigger
from sentencekit.models.transcription import StreamingResult

__all__ = ["ExitChatEvent", "ExitTrigger", "StreamingResult"]

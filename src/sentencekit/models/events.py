"""Session events published on the event bus."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum, unique
from typing import Any

from pydantic import BaseModel, Field


@unique
class ExitTrigger(StrEnum):
    """How a chat exit was triggered."""

    EXIT_WORDS = "exit_words"
    TOOL_CALL = "tool_call"
    TIMEOUT = "timeout"


class ExitChatEvent(BaseModel):
    """Signals that a voice chat session should end.

    Attributes:
        client_state: Opaque session state owned by the transport layer.
        reason: Human-readable reason (``"user requested exit"`` ...).
        trigger_type: What triggered the exit.
        user_text: Raw user utterance that caused the exit, if any.
        timestamp: When the exit was requested (UTC).
    """

    client_state: Any = None
    reason: str = ""
    trigger_type: ExitTrigger
    user_text: str = ""
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

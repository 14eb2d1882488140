"""sentencekit - Streaming sentence segmentation for LLM to TTS voice pipelines."""

from sentencekit._version import __version__
from sentencekit.errors import ResourceCreationError, ResourceError, SentenceKitError
from sentencekit.models import ExitChatEvent, ExitTrigger, StreamingResult
from sentencekit.pool import Resource, ResourceFactory, ResourceWrapper
from sentencekit.text import (
    ExtractionResult,
    ScratchBuffer,
    ScratchBufferPool,
    SentenceSplitConfig,
    SentenceStream,
    contains_separator,
    extract_complete,
    extract_smart,
    is_numeric_ordinal,
    is_pause_punctuation,
    is_terminal_punctuation,
    split_sentences,
)
from sentencekit.tools import AITool, convert_mcp_tools

__all__ = [
    "__version__",
    # Errors
    "ResourceCreationError",
    "ResourceError",
    "SentenceKitError",
    # Models
    "ExitChatEvent",
    "ExitTrigger",
    "StreamingResult",
    # Pool
    "Resource",
    "ResourceFactory",
    "ResourceWrapper",
    # Text
    "ExtractionResult",
    "ScratchBuffer",
    "ScratchBufferPool",
    "SentenceSplitConfig",
    "SentenceStream",
    "contains_separator",
    "extract_complete",
    "extract_smart",
    "is_numeric_ordinal",
    "is_pause_punctuation",
    "is_terminal_punctuation",
    "split_sentences",
    # Tools
    "AITool",
    "convert_mcp_tools",
]

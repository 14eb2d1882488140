"""Convert MCP tool objects into tool definitions for LLM function calling."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

logger = logging.getLogger("sentencekit.tools.convert")


class AITool(BaseModel):
    """Tool definition for function calling."""

    name: str
    description: str
    parameters: dict[str, Any] = Field(default_factory=dict)


async def convert_mcp_tools(tools: Mapping[str, Any]) -> list[AITool]:
    """Collect :class:`AITool` definitions from MCP tool objects.

    Each value must expose an ``info()`` method (sync or async) returning an
    :class:`AITool` or a mapping with ``name``/``description``/``parameters``.
    Tools whose ``info()`` fails, or that have no ``info()``, are skipped.
    """
    converted: list[AITool] = []

    for tool_name, tool in tools.items():
        info = getattr(tool, "info", None)
        if not callable(info):
            logger.warning("Tool %s has no info() method, skipping", tool_name)
            continue
        try:
            result = info()
            if inspect.isawaitable(result):
                result = await result
            converted.append(
                result if isinstance(result, AITool) else AITool.model_validate(result)
            )
        except Exception:
            logger.exception("Failed to get info for tool %s", tool_name)
            continue

    logger.info("Converted %d MCP tools", len(converted))
    return converted

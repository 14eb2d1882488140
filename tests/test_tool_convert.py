"""Tests for MCP tool conversion."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from sentencekit.tools.convert import AITool, convert_mcp_tools


class SyncTool:
    def info(self) -> AITool:
        return AITool(name="get_weather", description="Weather lookup")


class AsyncTool:
    async def info(self) -> dict[str, Any]:
        return {
            "name": "exit_chat",
            "description": "End the conversation",
            "parameters": {"type": "object", "properties": {}},
        }


class BrokenTool:
    async def info(self) -> AITool:
        raise RuntimeError("server gone")


class NoInfoTool:
    pass


class TestConvertMcpTools:
    async def test_converts_sync_and_async_info(self) -> None:
        tools = await convert_mcp_tools({"weather": SyncTool(), "exit": AsyncTool()})
        assert [t.name for t in tools] == ["get_weather", "exit_chat"]
        assert tools[1].parameters["type"] == "object"
        assert tools[0].parameters == {}

    async def test_skips_failing_and_unsupported(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="sentencekit.tools.convert"):
            tools = await convert_mcp_tools(
                {"broken": BrokenTool(), "plain": NoInfoTool(), "weather": SyncTool()}
            )
        assert [t.name for t in tools] == ["get_weather"]
        levels = {r.getMessage(): r.levelno for r in caplog.records}
        assert levels["Failed to get info for tool broken"] == logging.ERROR
        assert levels["Tool plain has no info() method, skipping"] == logging.WARNING
        assert levels["Converted 1 MCP tools"] == logging.INFO

    async def test_invalid_info_payload_skipped(self) -> None:
        class BadPayload:
            def info(self) -> dict[str, Any]:
                return {"description": "missing name"}

        assert await convert_mcp_tools({"bad": BadPayload()}) == []

    async def test_empty(self) -> None:
        assert await convert_mcp_tools({}) == []

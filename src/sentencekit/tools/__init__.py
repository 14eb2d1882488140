"""Tool definition adapters."""

from sentencekit.tools.convert import AITool, convert_mcp_tools

__all__ = ["AITool", "convert_mcp_tools"]

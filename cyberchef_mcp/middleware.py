"""FastMCP middleware for tool call logging."""

import json
import logging
import time

from fastmcp.server.middleware import Middleware, MiddlewareContext
from fastmcp.tools.tool import ToolResult
from mcp import types as mt

logger = logging.getLogger(__name__)

MAX_LOGGED_ARGS_CHARS = 500


def _summarize_arguments(arguments: dict | None) -> str:
    """Compact, length-capped JSON of tool arguments for log lines."""
    if not arguments:
        return "{}"
    try:
        text = json.dumps(arguments, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        text = repr(arguments)
    if len(text) > MAX_LOGGED_ARGS_CHARS:
        return text[:MAX_LOGGED_ARGS_CHARS] + "..."
    return text


class ToolCallLoggingMiddleware(Middleware):
    """Logs every tool call with its arguments, outcome and duration."""

    async def on_call_tool(
        self,
        context: MiddlewareContext[mt.CallToolRequestParams],
        call_next,
    ) -> ToolResult:
        tool_name = context.message.name
        logger.info(f"[MCP] call {tool_name} args={_summarize_arguments(context.message.arguments)}")
        start = time.perf_counter()
        try:
            result = await call_next(context)
        except Exception as e:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info(f"[MCP] {tool_name} => error ({elapsed_ms:.0f}ms): {e}")
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"[MCP] {tool_name} => ok ({elapsed_ms:.0f}ms)")
        return result

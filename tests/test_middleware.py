"""Tests for tool call logging middleware."""

import logging
from types import SimpleNamespace
from typing import cast

import pytest
from fastmcp.server.middleware import MiddlewareContext
from mcp import types as mt

from cyberchef_mcp.middleware import (
    MAX_LOGGED_ARGS_CHARS,
    ToolCallLoggingMiddleware,
    _summarize_arguments,
)


def _call_context(name: str, arguments: dict | None) -> MiddlewareContext[mt.CallToolRequestParams]:
    message = mt.CallToolRequestParams(name=name, arguments=arguments)
    return cast(MiddlewareContext[mt.CallToolRequestParams], SimpleNamespace(message=message))


class TestSummarizeArguments:
    """Test argument summaries for log lines."""

    def test_empty(self):
        assert _summarize_arguments(None) == "{}"
        assert _summarize_arguments({}) == "{}"

    def test_json(self):
        assert _summarize_arguments({"input": "é"}) == '{"input": "é"}'

    def test_truncated(self):
        out = _summarize_arguments({"input": "x" * 1000})
        assert len(out) == MAX_LOGGED_ARGS_CHARS + 3
        assert out.endswith("...")


class TestToolCallLoggingMiddleware:
    """Test on_call_tool logging and pass-through."""

    @pytest.mark.asyncio
    async def test_passes_result_through(self, caplog):
        middleware = ToolCallLoggingMiddleware()
        sentinel = object()

        async def call_next(_context):
            return sentinel

        with caplog.at_level(logging.INFO, logger="cyberchef_mcp.middleware"):
            result = await middleware.on_call_tool(
                _call_context("cyberchef-ops-list", {}), call_next
            )

        assert result is sentinel
        assert "call cyberchef-ops-list" in caplog.text
        assert "cyberchef-ops-list => ok" in caplog.text

    @pytest.mark.asyncio
    async def test_reraises_and_logs_errors(self, caplog):
        middleware = ToolCallLoggingMiddleware()

        async def call_next(_context):
            raise RuntimeError("boom")

        with caplog.at_level(logging.INFO, logger="cyberchef_mcp.middleware"):
            with pytest.raises(RuntimeError, match="boom"):
                await middleware.on_call_tool(
                    _call_context("cyberchef-bake", {"input": "x"}), call_next
                )

        assert "cyberchef-bake => error" in caplog.text
        assert "boom" in caplog.text

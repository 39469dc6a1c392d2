"""MCP tool and prompt registration."""

from fastmcp import FastMCP

from ..catalog import OperationCatalog
from ..engine import BakeEngine
from ..prompts import USAGE_PROMPT
from .bake import bake_recipe, register_bake_tool
from .operations import describe_operation, list_operations, register_operation_tools


def register_usage_prompt(mcp: FastMCP) -> None:
    @mcp.prompt(name="cyberchef-prompt", description="How to use the CyberChef tools")
    def usage_prompt() -> str:
        return USAGE_PROMPT


def register_all_tools(mcp: FastMCP, catalog: OperationCatalog, engine: BakeEngine) -> None:
    """Register discovery, bake tools and the usage prompt."""
    register_operation_tools(mcp, catalog)
    register_bake_tool(mcp, catalog, engine)
    register_usage_prompt(mcp)


__all__ = [
    "bake_recipe",
    "describe_operation",
    "list_operations",
    "register_all_tools",
    "register_bake_tool",
    "register_operation_tools",
    "register_usage_prompt",
]

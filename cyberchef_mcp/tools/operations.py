"""MCP tools for operation discovery."""

import logging
from typing import Annotated, Any

from fastmcp import FastMCP
from pydantic import Field

from ..catalog import OperationCatalog
from ..prompts import OP_ARGS_DESCRIPTION, OPS_LIST_DESCRIPTION

logger = logging.getLogger(__name__)


def list_operations(catalog: OperationCatalog) -> list[str]:
    """Every catalog operation name, in catalog order."""
    return catalog.names()


def describe_operation(catalog: OperationCatalog, operation_name: str) -> list[dict[str, Any]]:
    """All normalized matches for a name with description and args."""
    matches = [op.summary() for op in catalog.find_matches(operation_name)]
    logger.debug(f"describe '{operation_name}': {[m['name'] for m in matches]}")
    return matches


def register_operation_tools(mcp: FastMCP, catalog: OperationCatalog) -> None:
    """Register list and describe tools bound to the catalog."""

    @mcp.tool(name="cyberchef-ops-list", description=OPS_LIST_DESCRIPTION, tags={"catalog"})
    async def ops_list() -> list[str]:
        return list_operations(catalog)

    @mcp.tool(name="cyberchef-op-args", description=OP_ARGS_DESCRIPTION, tags={"catalog"})
    async def op_args(
        operationName: Annotated[str, Field(description="Operation name, e.g. 'From Base64'")],
    ) -> list[dict[str, Any]]:
        return describe_operation(catalog, operationName)

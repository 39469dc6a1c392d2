"""MCP tool for baking recipes."""

import logging
from collections.abc import Mapping, Sequence
from typing import Annotated, Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from ..catalog import OperationCatalog, ResolutionError
from ..config import settings
from ..engine import BakeEngine, EngineError
from ..output import RenderingError, render_value, truncate_output
from ..prompts import BAKE_DESCRIPTION
from ..recipe import RecipeStep, compile_recipe, to_shareable_url

logger = logging.getLogger(__name__)


async def bake_recipe(
    catalog: OperationCatalog,
    engine: BakeEngine,
    input_text: str,
    recipe: Sequence[RecipeStep | Mapping[str, Any]],
) -> dict[str, str]:
    """Compile, bake and render a recipe. Returns {"url", "text"}.

    The recipe is compiled before the engine runs, so an unknown operation
    fails the request without baking anything.

    Raises:
        ResolutionError: Unknown operation name in the recipe
        EngineError: Engine rejected the recipe or was unreachable
        RenderingError: Result could not be rendered as text
    """
    compiled = compile_recipe(recipe, catalog)

    result = await engine.bake(input_text, compiled.engine_steps())
    text = render_value(result.value)

    url = to_shareable_url(
        compiled.text,
        settings.SHARE_BASE_URL,
        input_text if settings.SHARE_INCLUDE_INPUT else None,
    )
    return {"url": url, "text": truncate_output(text, settings.MAX_OUTPUT_CHARS)}


def register_bake_tool(mcp: FastMCP, catalog: OperationCatalog, engine: BakeEngine) -> None:
    """Register the bake tool bound to catalog and engine."""

    @mcp.tool(name="cyberchef-bake", description=BAKE_DESCRIPTION, tags={"bake"})
    async def bake(
        input: Annotated[str, Field(description="Input data to transform")],
        recipe: Annotated[list[RecipeStep], Field(description="Ordered operations with args")],
    ) -> dict[str, str]:
        try:
            return await bake_recipe(catalog, engine, input, recipe)
        except (ResolutionError, EngineError, RenderingError) as e:
            logger.warning(f"Bake failed: {e}")
            raise ToolError(str(e)) from e

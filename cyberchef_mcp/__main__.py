"""CyberChef MCP Server - CyberChef recipes as MCP tools."""

import logging
from typing import Literal, cast

import uvicorn
from fastmcp import FastMCP
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse
from starlette.routing import Route

from .catalog import OperationCatalog, load_catalog
from .config import settings
from .engine import BakeEngine, HttpBakeEngine
from .middleware import ToolCallLoggingMiddleware
from .tools import register_all_tools
from .tracing import init_tracing

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_mcp(
    catalog: OperationCatalog | None = None,
    engine: BakeEngine | None = None,
) -> FastMCP:
    """Create MCP server with tools bound to catalog and engine."""
    if catalog is None:
        catalog = load_catalog(settings.CATALOG_SOURCE)
    if engine is None:
        engine = HttpBakeEngine(settings.ENGINE_URL, timeout=settings.ENGINE_TIMEOUT)

    mcp = FastMCP(settings.MCP_NAME)
    register_all_tools(mcp, catalog, engine)
    mcp.add_middleware(ToolCallLoggingMiddleware())
    return mcp


def create_app(catalog: OperationCatalog | None = None, engine: BakeEngine | None = None):
    """Create MCP server application."""
    mcp = create_mcp(catalog, engine)

    cors_origins = [o.strip() for o in settings.CORS_ALLOWED_ORIGINS.split(",")]
    middleware = [
        Middleware(
            CORSMiddleware,  # type: ignore[arg-type]  # Starlette middleware typing
            allow_origins=cors_origins,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
            expose_headers=[
                "Content-Type",
                "MCP-Session-Id",
                "mcp-protocol-version",
            ],
            allow_credentials=True,
            max_age=600,
        ),
    ]

    transport = cast(Literal["http", "streamable-http", "sse"], settings.TRANSPORT)
    app = mcp.http_app(middleware=middleware, transport=transport)

    async def health(request):
        return JSONResponse({"status": "ok"})

    app.router.routes.append(Route("/health", health, methods=["GET"]))
    return app


def main():
    """Run server."""
    init_tracing()
    logger.info(f"Starting CyberChef MCP on {settings.HOST}:{settings.PORT}")
    logger.info(f"Bake engine: {settings.ENGINE_URL}")
    uvicorn.run(create_app(), host=settings.HOST, port=settings.PORT, log_level="info")


if __name__ == "__main__":
    main()

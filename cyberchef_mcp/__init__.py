"""CyberChef MCP server: recipe bridge between MCP tools and a bake engine."""

__version__ = "1.0.0"

"""Configuration settings for CyberChef MCP server."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings with CYBERCHEF_MCP_ env prefix."""

    model_config = SettingsConfigDict(env_prefix="CYBERCHEF_MCP_", env_file=".env", extra="ignore")

    # MCP Server
    MCP_NAME: str = "cyberchef-mcp"
    SERVICE_NAME: str = "cyberchef-mcp"

    # Operation catalog: path or http(s) URL to OperationConfig.json. Empty uses the
    # bundled subset; point this at a full generated OperationConfig.json for every op.
    CATALOG_SOURCE: str = ""

    # Bake engine (CyberChef-server compatible)
    ENGINE_URL: str = "http://localhost:3000"
    ENGINE_TIMEOUT: float = 30.0

    # Shareable URL
    SHARE_BASE_URL: str = "https://gchq.github.io/CyberChef/"
    SHARE_INCLUDE_INPUT: bool = False

    # Output limits
    MAX_OUTPUT_CHARS: int = 0  # 0 = unbounded

    # Server
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    TRANSPORT: str = "streamable-http"
    CORS_ALLOWED_ORIGINS: str = "*"


settings = Settings()

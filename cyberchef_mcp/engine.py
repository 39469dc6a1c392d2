"""Bake engine client (CyberChef-server compatible HTTP API)."""

import json
import logging
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from .tracing import trace_span

logger = logging.getLogger(__name__)


class EngineError(Exception):
    """Bake engine rejected the recipe or could not be reached."""

    pass


@dataclass(frozen=True)
class BakeResult:
    """Engine output: ``value`` is text, a byte list or any JSON value."""

    value: Any
    type: str | None = None


class BakeEngine(Protocol):
    async def bake(self, input_text: str, steps: list[dict[str, Any]]) -> BakeResult: ...


class HttpBakeEngine:
    """Runs recipes via ``POST {base_url}/bake``.

    Request body is ``{"input": ..., "recipe": [{"op": ..., "args": [...]}]}``;
    the response is ``{"value": ..., "type": ...}``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def bake(self, input_text: str, steps: list[dict[str, Any]]) -> BakeResult:
        url = f"{self.base_url}/bake"
        payload = {"input": input_text, "recipe": steps}
        logger.info(f"Bake request: url={url} steps={[s.get('op') for s in steps]}")

        with trace_span("cyberchef.bake", {"recipe.steps": len(steps)}):
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                try:
                    resp = await client.post(url, json=payload, headers={"Accept": "application/json"})
                    resp.raise_for_status()
                except httpx.HTTPStatusError as e:
                    try:
                        error_body = e.response.json()
                    except json.JSONDecodeError:
                        error_body = e.response.text[:500]
                    raise EngineError(f"HTTP {e.response.status_code}: {error_body}") from e
                except httpx.HTTPError as e:
                    logger.exception("Bake engine request failed")
                    raise EngineError(f"Bake engine unreachable at {url}: {e}") from e

        try:
            data = resp.json()
        except json.JSONDecodeError as e:
            raise EngineError(f"Bake engine returned non-JSON response: {resp.text[:200]}") from e

        if not isinstance(data, dict) or "value" not in data:
            raise EngineError("Bake engine response missing 'value'")

        return BakeResult(value=data["value"], type=data.get("type"))

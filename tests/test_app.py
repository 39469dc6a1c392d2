"""Tests for server application wiring."""

import pytest
from fastmcp import Client
from starlette.testclient import TestClient

from cyberchef_mcp.__main__ import create_app, create_mcp
from cyberchef_mcp.catalog import load_catalog


def test_health_route(catalog, fake_engine):
    app = create_app(catalog=catalog, engine=fake_engine)
    client = TestClient(app)
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_create_mcp_with_bundled_catalog(fake_engine):
    mcp = create_mcp(catalog=load_catalog(), engine=fake_engine)
    async with Client(mcp) as client:
        result = await client.call_tool("cyberchef-op-args", {"operationName": "rot13"})
    assert '"ROT13"' in result.content[0].text

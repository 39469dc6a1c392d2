"""Shared fixtures: a small operation catalog and a recording fake engine."""

from typing import Any

import pytest

from cyberchef_mcp.catalog import OperationCatalog, OperationDescriptor
from cyberchef_mcp.engine import BakeResult


class FakeEngine:
    """Records bake calls and returns a canned value."""

    def __init__(self, value: Any = "ok", error: Exception | None = None) -> None:
        self.value = value
        self.error = error
        self.calls: list[tuple[str, list[dict[str, Any]]]] = []

    async def bake(self, input_text: str, steps: list[dict[str, Any]]) -> BakeResult:
        self.calls.append((input_text, steps))
        if self.error:
            raise self.error
        return BakeResult(value=self.value)


@pytest.fixture
def catalog() -> OperationCatalog:
    return OperationCatalog(
        {
            "ROT13": OperationDescriptor(
                name="ROT13",
                description="A simple caesar substitution cipher.",
                args=(
                    {"name": "Rotate lower case chars", "type": "boolean", "value": True},
                    {"name": "Rotate upper case chars", "type": "boolean", "value": True},
                    {"name": "Amount", "type": "number", "value": 13},
                ),
            ),
            "From Base64": OperationDescriptor(
                name="From Base64",
                description="Decodes data from an ASCII Base64 string.",
                args=(
                    {"name": "Alphabet", "type": "editableOption", "value": []},
                    {"name": "Remove non-alphabet chars", "type": "boolean", "value": True},
                ),
            ),
            "XOR": OperationDescriptor(
                name="XOR",
                description="XOR the input with the given key.",
                args=({"name": "Key", "type": "toggleString", "value": ""},),
            ),
            "URL Decode": OperationDescriptor(name="URL Decode", description=None, args=()),
        }
    )


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def engine_factory():
    return FakeEngine

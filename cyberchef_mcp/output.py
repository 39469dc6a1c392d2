"""Normalize bake engine results into a single text representation."""

import json
from typing import Any


class RenderingError(Exception):
    """Engine result could not be rendered as text."""

    pass


def is_byte_sequence(value: Any) -> bool:
    """True for a list/tuple whose items are all ints in 0..255 (bools excluded)."""
    if not isinstance(value, (list, tuple)):
        return False
    return all(isinstance(n, int) and not isinstance(n, bool) and 0 <= n <= 255 for n in value)


def render_value(value: Any) -> str:
    """Render an engine result value as text.

    Classification (first match wins):
        1. str: returned unchanged
        2. bytes, bytearray or a sequence of ints in 0..255: UTF-8 decoded
        3. anything else: compact JSON

    Raises:
        RenderingError: If bytes are not valid UTF-8 or the value is not JSON serializable
    """
    if isinstance(value, str):
        return value

    if isinstance(value, (bytes, bytearray)) or is_byte_sequence(value):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as e:
            raise RenderingError(f"Result bytes are not valid UTF-8: {e}") from e

    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise RenderingError(f"Result of type {type(value).__name__} is not serializable: {e}") from e


def truncate_output(text: str, max_chars: int) -> str:
    """Cap output length; 0 disables the cap."""
    if max_chars <= 0 or len(text) <= max_chars:
        return text
    return f"{text[:max_chars]}\n\n[TRUNCATED - output exceeded {max_chars} chars.]"

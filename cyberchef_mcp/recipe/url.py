"""Shareable CyberChef URL construction."""

import base64
from urllib.parse import quote

# Parentheses stay literal so the recipe structure is readable in the address bar
_RESTORED = (("%28", "("), ("%29", ")"))


def encode_recipe_fragment(recipe_text: str) -> str:
    """Percent-encode recipe text as a URI component, keeping ``(`` and ``)``."""
    encoded = quote(recipe_text, safe="")
    for escaped, char in _RESTORED:
        encoded = encoded.replace(escaped, char)
    return encoded


def encode_input_fragment(input_text: str) -> str:
    """Encode input for the ``input=`` fragment param (unpadded Base64)."""
    b64 = base64.b64encode(input_text.encode("utf-8")).decode("ascii").rstrip("=")
    return quote(b64, safe="")


def to_shareable_url(recipe_text: str, base_url: str, input_text: str | None = None) -> str:
    """Build ``{base_url}#recipe=...`` (plus ``&input=...`` when input is given)."""
    url = f"{base_url}#recipe={encode_recipe_fragment(recipe_text)}"
    if input_text:
        url += f"&input={encode_input_fragment(input_text)}"
    return url

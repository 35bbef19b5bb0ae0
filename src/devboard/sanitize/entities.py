"""Entity encoding/decoding for the fixed HTML entity table."""

from __future__ import annotations

import re
from typing import Optional

# Order matters: ampersand first so later replacements are not re-escaped.
_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)

_NAMED_ENTITIES = {
    "&nbsp;": " ",
    "&lt;": "<",
    "&gt;": ">",
    "&amp;": "&",
    "&quot;": '"',
    "&#039;": "'",
    "&#x27;": "'",
}

# Longer numeric references cannot name a code point and stay verbatim.
_ENTITY_RE = re.compile(
    r"&(?:nbsp|lt|gt|amp|quot|#039|#x27);"
    r"|&#(\d{1,8});"
    r"|&#[xX]([0-9a-fA-F]{1,8});"
)


def escape_html(text: Optional[str]) -> str:
    """Escape the five HTML-significant characters."""
    if not text:
        return ""
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


def _code_point(value: int, raw: str) -> str:
    # Out-of-range and surrogate references stay as written
    if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
        return raw
    return chr(value)


def _replace_entity(match: re.Match) -> str:
    raw = match.group(0)
    decimal, hexadecimal = match.group(1), match.group(2)
    if raw in _NAMED_ENTITIES:
        return _NAMED_ENTITIES[raw]
    if decimal is not None:
        return _code_point(int(decimal), raw)
    return _code_point(int(hexadecimal, 16), raw)


def decode_entities(text: Optional[str]) -> str:
    """Decode the supported named entities and numeric character references.

    Decoding is a single pass, so ``&amp;lt;`` becomes ``&lt;`` and not ``<``.
    Anything that is not a recognised entity is left untouched.
    """
    if not text:
        return ""
    return _ENTITY_RE.sub(_replace_entity, text)


def decode_then_escape(text: Optional[str]) -> str:
    """Normalise a text run: decode entities, then escape the result.

    Encoded markup such as ``&lt;script&gt;`` can never come out as a live tag.
    """
    return escape_html(decode_entities(text))

"""Reduce rich text to plain text."""

from __future__ import annotations

import re
from typing import Optional

from devboard.sanitize.entities import decode_entities

_BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_BLOCK_CLOSE_RE = re.compile(r"</(p|div|h[1-6]|li|tr)>", re.IGNORECASE)
_BLOCK_OPEN_RE = re.compile(r"<(p|div|h[1-6]|li|tr)\b[^>]*>", re.IGNORECASE)
_ANY_TAG_RE = re.compile(r"<[^>]+>")
_EXTRA_NEWLINES_RE = re.compile(r"\n{3,}")


def strip_html(html: Optional[str]) -> str:
    """Drop all markup, turning line breaks and block boundaries into newlines."""
    if not html:
        return ""

    # Nothing after the last ">" can be a tag
    cut = html.rfind(">") + 1
    markup, tail = html[:cut], html[cut:]

    text = _BR_RE.sub("\n", markup)
    text = _BLOCK_CLOSE_RE.sub("\n", text)
    text = _BLOCK_OPEN_RE.sub("\n", text)
    text = _ANY_TAG_RE.sub("", text)
    text = decode_entities(text + tail)
    text = _EXTRA_NEWLINES_RE.sub("\n\n", text)
    return text.strip()

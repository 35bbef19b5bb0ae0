"""Tokenizer for single raw tags such as ``<a href="...">``."""

from __future__ import annotations

import re
from typing import Iterator, Optional

from devboard.core.models import DEFAULT_POLICY, ParsedTag, SanitizerPolicy
from devboard.sanitize.entities import decode_entities

# Any open or close tag; a "<" not followed by a letter is plain text.
TAG_PATTERN = re.compile(r"</?[a-zA-Z][^>]*>")

_NAME_RE = re.compile(r"^</?([a-zA-Z][a-zA-Z0-9]*)")
_ATTR_RE = re.compile(
    r"""(?<![a-zA-Z0-9-])([a-zA-Z][a-zA-Z0-9-]*)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s>]+))"""
)
_OPEN_NAME_RE = re.compile(r"<([a-zA-Z][a-zA-Z0-9]*)\b")
_TAG_START_RE = re.compile(r"</?[a-zA-Z]")


def iter_tags(html: str) -> Iterator[tuple[int, int]]:
    """Yield the (start, end) span of every TAG_PATTERN match, in linear time.

    Scanning stops at the first opener with no ">" after it, since no
    later tag can close either.
    """
    pos = 0
    while True:
        start = _TAG_START_RE.search(html, pos)
        if start is None:
            return
        end = html.find(">", start.end())
        if end == -1:
            return
        yield start.start(), end + 1
        pos = end + 1


def _is_void(tag_string: str, policy: SanitizerPolicy) -> bool:
    match = _OPEN_NAME_RE.match(tag_string)
    return bool(match) and match.group(1).lower() in policy.void_elements


def parse_tag(tag_string: str, *, policy: SanitizerPolicy = DEFAULT_POLICY) -> Optional[ParsedTag]:
    """Split one raw tag into name, attributes and open/close/self-close kind.

    Returns None when no tag name can be read. Attribute names are
    lowercased, values are entity-decoded, and a repeated attribute keeps
    its last value.
    """
    name_match = _NAME_RE.match(tag_string)
    if not name_match:
        return None

    attributes: dict[str, str] = {}
    for match in _ATTR_RE.finditer(tag_string):
        value = next((g for g in match.groups()[1:] if g is not None), "")
        attributes[match.group(1).lower()] = decode_entities(value)

    return ParsedTag(
        name=name_match.group(1).lower(),
        attributes=attributes,
        is_closing=tag_string.startswith("</"),
        is_self_closing=tag_string.endswith("/>") or _is_void(tag_string, policy),
    )

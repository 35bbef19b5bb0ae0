"""Allowlist HTML rewriter for semi-trusted rich text.

The input is treated as a flat stream of tags and text runs, not as a tree:

* text between tags is entity-decoded and re-escaped, so it is always inert;
* tags outside the allowlist are dropped but their text content is kept;
* allowed tags are rebuilt from their validated attributes only.

Unbalanced markup is passed through tag by tag without repair. The guarantee
is per tag: only allowlisted names and attributes ever reach the output.
"""

from __future__ import annotations

import logging
from typing import Optional

from devboard.core.models import DEFAULT_POLICY, ParsedTag, SanitizerPolicy
from devboard.sanitize.entities import decode_then_escape, escape_html
from devboard.sanitize.styles import sanitize_style
from devboard.sanitize.tags import iter_tags, parse_tag
from devboard.sanitize.urls import is_safe_url

logger = logging.getLogger(__name__)

# Appended to every accepted href; replaces any target/rel from the source tag.
_LINK_ATTRS = ('target="_blank"', 'rel="noopener noreferrer"')
_LINK_ATTR_NAMES = frozenset({"target", "rel"})


def _render_attributes(tag: ParsedTag, policy: SanitizerPolicy) -> list[str]:
    allowed = policy.attributes_for(tag.name)
    hardened = "href" in allowed and is_safe_url(tag.attributes.get("href"), policy=policy)
    rendered: list[str] = []

    for name, value in tag.attributes.items():
        if name not in allowed:
            logger.debug("Dropped attribute %r on <%s>", name, tag.name)
            continue
        if hardened and name in _LINK_ATTR_NAMES:
            continue

        if name == "href":
            if not hardened:
                logger.debug("Dropped unsafe href on <%s>: %r", tag.name, value)
                continue
            rendered.append(f'href="{escape_html(value)}"')
            rendered.extend(_LINK_ATTRS)
        elif name == "style":
            safe_style = sanitize_style(value, policy=policy)
            if safe_style:
                rendered.append(f'style="{escape_html(safe_style)}"')
        else:
            rendered.append(f'{name}="{escape_html(value)}"')

    return rendered


def _render_tag(tag: ParsedTag, policy: SanitizerPolicy) -> str:
    if tag.is_closing:
        return f"</{tag.name}>"

    attrs = _render_attributes(tag, policy)
    attrs_string = " " + " ".join(attrs) if attrs else ""
    self_close = " /" if tag.is_self_closing else ""
    return f"<{tag.name}{attrs_string}{self_close}>"


def sanitize_html(html: Optional[str], *, policy: SanitizerPolicy = DEFAULT_POLICY) -> str:
    """Sanitize ``html`` down to the allowlisted tag and attribute subset.

    Never raises; suspicious fragments are dropped and scanning continues.
    The result is safe to insert into a page without further escaping.
    """
    if not html:
        return ""

    result: list[str] = []
    last_index = 0

    for start, end in iter_tags(html):
        # Text before this tag
        if start > last_index:
            result.append(decode_then_escape(html[last_index:start]))
        last_index = end

        tag = parse_tag(html[start:end], policy=policy)
        if tag is None:
            continue
        if tag.name not in policy.allowed_tags:
            logger.debug("Dropped disallowed tag <%s>", tag.name)
            continue

        result.append(_render_tag(tag, policy))

    # Trailing text
    if last_index < len(html):
        result.append(decode_then_escape(html[last_index:]))

    return "".join(result)

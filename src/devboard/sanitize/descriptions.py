"""Rendering helpers for pull-request descriptions and work-item comments."""

from __future__ import annotations

import re
from typing import Optional

import markdown

from devboard.core.models import DEFAULT_POLICY, SanitizerPolicy
from devboard.sanitize.entities import escape_html
from devboard.sanitize.rewriter import sanitize_html

_PLACEHOLDER_TEMPLATE = (
    '<p style="color: var(--vscode-descriptionForeground); font-style: italic;">{text}</p>'
)

_EXCESS_BREAKS_RE = re.compile(r"(<br\s*/?>\s*){3,}", re.IGNORECASE)

_GUID = r"[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}"
_GUID_NAME_RE = re.compile(rf"^<?{_GUID}>?$")
_ESCAPED_GUID_MENTION_RE = re.compile(rf"@&lt;{_GUID}&gt;")
_RAW_GUID_MENTION_RE = re.compile(rf"@<{_GUID}>")
_LINKED_MENTION_RE = re.compile(r"<a[^<>]*data-vss-mention[^<>]*>@([^<]+)</a>", re.IGNORECASE)
_DIV_OPEN_RE = re.compile(r"<div>", re.IGNORECASE)
_DIV_CLOSE_RE = re.compile(r"</div>", re.IGNORECASE)

_ANONYMOUS_MENTION = "<strong>@User</strong>"


def placeholder(policy: SanitizerPolicy = DEFAULT_POLICY) -> str:
    """Markup shown in place of a missing description."""
    return _PLACEHOLDER_TEMPLATE.format(text=escape_html(policy.placeholder_text))


def collapse_breaks(html: str) -> str:
    """Collapse three or more consecutive line breaks into two."""
    return _EXCESS_BREAKS_RE.sub("<br><br>", html)


def sanitize_pr_description(html: Optional[str], *, policy: SanitizerPolicy = DEFAULT_POLICY) -> str:
    """Sanitize a pull-request description, substituting a placeholder when empty."""
    if not html:
        return placeholder(policy)

    sanitized = collapse_breaks(sanitize_html(html, policy=policy))
    if not sanitized.strip():
        return placeholder(policy)
    return sanitized


def render_markdown_description(text: Optional[str], *, policy: SanitizerPolicy = DEFAULT_POLICY) -> str:
    """Render a Markdown description (as used by Git hosting) to safe markup."""
    if not text or not text.strip():
        return placeholder(policy)
    return sanitize_pr_description(markdown.markdown(text, extensions=["extra"]), policy=policy)


def _linked_mention(match: re.Match) -> str:
    name = match.group(1)
    decoded = name.replace("&lt;", "<").replace("&gt;", ">").replace("&amp;", "&")
    if _GUID_NAME_RE.match(decoded):
        return _ANONYMOUS_MENTION
    return f"<strong>@{name}</strong>"


def sanitize_comment(html: Optional[str], *, policy: SanitizerPolicy = DEFAULT_POLICY) -> str:
    """Sanitize a work-item discussion comment.

    Identity mentions are rendered as bold names (or ``@User`` when only an
    identity GUID is available) before the allowlist pass.
    """
    if not html:
        return ""

    text = _ESCAPED_GUID_MENTION_RE.sub(_ANONYMOUS_MENTION, html)
    text = _RAW_GUID_MENTION_RE.sub(_ANONYMOUS_MENTION, text)
    text = _LINKED_MENTION_RE.sub(_linked_mention, text)

    # Comment editors wrap every line in a div
    text = _DIV_OPEN_RE.sub("", text)
    text = _DIV_CLOSE_RE.sub("<br>", text)

    return collapse_breaks(sanitize_html(text, policy=policy))

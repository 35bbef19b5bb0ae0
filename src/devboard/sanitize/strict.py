"""Tree-based sanitization backend built on bleach (html5lib).

The regex rewriter cannot see parser-differential tricks that rely on how a
browser builds its tree. This backend lets bleach parse and clean the input
with the same allowlists first, then hands the well-formed result to the
rewriter for link hardening and value-level style checks.
"""

from __future__ import annotations

from typing import Optional

import bleach
from bleach.css_sanitizer import CSSSanitizer

from devboard.core.models import DEFAULT_POLICY, SanitizerPolicy
from devboard.sanitize.rewriter import sanitize_html


def _bleach_clean(html: str, policy: SanitizerPolicy) -> str:
    return bleach.clean(
        html,
        tags=set(policy.allowed_tags),
        attributes={tag: sorted(attrs) for tag, attrs in policy.allowed_attributes.items()},
        protocols={proto.rstrip(":") for proto in policy.safe_url_protocols},
        css_sanitizer=CSSSanitizer(allowed_css_properties=set(policy.safe_style_properties)),
        strip=True,
        strip_comments=True,
    )


def sanitize_html_strict(html: Optional[str], *, policy: SanitizerPolicy = DEFAULT_POLICY) -> str:
    """Sanitize ``html`` with bleach first, then with the allowlist rewriter."""
    if not html:
        return ""
    return sanitize_html(_bleach_clean(html, policy), policy=policy)

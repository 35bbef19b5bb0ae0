"""URL allowlist check for link targets."""

from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import urljoin, urlsplit

from devboard.core.models import DEFAULT_POLICY, SanitizerPolicy

logger = logging.getLogger(__name__)

# Relative references are resolved against this; only the scheme of the result matters.
_BASE_URL = "https://example.com"

_STRIP_CHARS = "".join(chr(c) for c in range(0x21))
_TAB_OR_NEWLINE_RE = re.compile(r"[\t\r\n]")

_HOST_REQUIRED = frozenset({"http", "https"})


def _resolve(url: str) -> str:
    """Return the scheme (with trailing colon) of ``url`` resolved against the base.

    Raises ValueError when the URL cannot be resolved.
    """
    cleaned = _TAB_OR_NEWLINE_RE.sub("", url.strip(_STRIP_CHARS))
    resolved = urlsplit(urljoin(_BASE_URL, cleaned))
    resolved.port  # raises ValueError on a bad port
    if resolved.scheme in _HOST_REQUIRED and not resolved.hostname:
        raise ValueError(f"missing host in {url!r}")
    return f"{resolved.scheme}:"


def is_safe_url(url: Optional[str], *, policy: SanitizerPolicy = DEFAULT_POLICY) -> bool:
    """Check whether ``url`` may be used as a link target."""
    if not url:
        return False

    if url.startswith("/") or url.startswith("#"):
        return True

    try:
        protocol = _resolve(url)
    except ValueError:
        logger.debug("Rejected unresolvable URL %r", url)
        return False

    return protocol in policy.safe_url_protocols

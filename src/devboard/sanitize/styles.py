"""Inline CSS filtering for ``style`` attributes."""

from __future__ import annotations

import logging
from typing import Optional

from devboard.core.models import DEFAULT_POLICY, SanitizerPolicy

logger = logging.getLogger(__name__)


def sanitize_style(style: Optional[str], *, policy: SanitizerPolicy = DEFAULT_POLICY) -> str:
    """Keep only allowlisted declarations whose values carry no dangerous constructs.

    Returns ``""`` when nothing survives; callers then omit the attribute.
    """
    if not style:
        return ""

    safe_parts: list[str] = []
    for part in style.split(";"):
        prop, sep, value = part.partition(":")
        if not sep:
            continue

        prop = prop.strip().lower()
        value = value.strip()

        if prop not in policy.safe_style_properties:
            logger.debug("Dropped style property %r", prop)
            continue

        lowered = value.lower()
        if any(marker in lowered for marker in policy.dangerous_style_values):
            logger.debug("Dropped style value for %r: %r", prop, value)
            continue

        safe_parts.append(f"{prop}: {value}")

    return "; ".join(safe_parts)

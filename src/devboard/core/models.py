"""Pydantic models for the devboard rendering helpers."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


# --- Sanitizer backend ---

class SanitizerBackend(str, Enum):
    REGEX = "regex"
    STRICT = "strict"


# --- Estimate severity ---

class Severity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


# --- Whitelist tables ---

ALLOWED_TAGS = frozenset({
    "p", "br", "b", "i", "u", "strong", "em", "span", "div",
    "ul", "ol", "li", "a", "code", "pre", "blockquote",
    "h1", "h2", "h3", "h4", "h5", "h6", "hr",
})

ALLOWED_ATTRIBUTES: Mapping[str, frozenset[str]] = MappingProxyType({
    "a": frozenset({"href", "title", "target", "rel"}),
    "span": frozenset({"class", "style"}),
    "div": frozenset({"class", "style"}),
    "code": frozenset({"class"}),
    "pre": frozenset({"class"}),
})

SAFE_URL_PROTOCOLS = frozenset({"http:", "https:", "mailto:"})

SAFE_STYLE_PROPERTIES = frozenset({
    "color", "background-color", "font-size", "font-weight", "font-style",
    "text-align", "text-decoration", "margin", "padding", "border",
    "margin-top", "margin-bottom", "margin-left", "margin-right",
    "padding-top", "padding-bottom", "padding-left", "padding-right",
})

DANGEROUS_STYLE_VALUES = ("url(", "expression(", "javascript:", "behavior:")

VOID_ELEMENTS = frozenset({"br", "hr", "img"})


class SanitizerPolicy(BaseModel):
    """Read-only allowlists consulted by every sanitizer function."""

    model_config = ConfigDict(frozen=True)

    allowed_tags: frozenset[str] = ALLOWED_TAGS
    allowed_attributes: Mapping[str, frozenset[str]] = Field(
        default_factory=lambda: MappingProxyType(dict(ALLOWED_ATTRIBUTES))
    )
    safe_url_protocols: frozenset[str] = SAFE_URL_PROTOCOLS
    safe_style_properties: frozenset[str] = SAFE_STYLE_PROPERTIES
    dangerous_style_values: tuple[str, ...] = DANGEROUS_STYLE_VALUES
    void_elements: frozenset[str] = VOID_ELEMENTS
    placeholder_text: str = "No description provided"

    @field_validator("allowed_attributes")
    @classmethod
    def _freeze_attributes(cls, v: Mapping[str, frozenset[str]]) -> Mapping[str, frozenset[str]]:
        return MappingProxyType({tag: frozenset(attrs) for tag, attrs in v.items()})

    def attributes_for(self, tag: str) -> frozenset[str]:
        return self.allowed_attributes.get(tag, frozenset())


DEFAULT_POLICY = SanitizerPolicy()


# --- Parsed tag ---

class ParsedTag(BaseModel):
    name: str
    attributes: dict[str, str] = Field(default_factory=dict)
    is_closing: bool = False
    is_self_closing: bool = False


# --- Estimates ---

class EstimateSummary(BaseModel):
    original_estimate: float = 0
    completed_work: float = 0
    remaining_work: float = 0
    total_work: float = 0
    over_by: float = 0
    percentage: float = 0.0
    is_over: bool = False


# --- Config models ---

class SanitizerConfig(BaseModel):
    backend: SanitizerBackend = SanitizerBackend.REGEX
    max_input_length: int = Field(default=0, ge=0)
    placeholder_text: str = "No description provided"


class TimeConfig(BaseModel):
    max_minutes_per_entry: int = Field(default=180, gt=0)
    rounding_interval: int = Field(default=15, gt=0)


class AppConfig(BaseModel):
    sanitizer: SanitizerConfig = Field(default_factory=SanitizerConfig)
    time: TimeConfig = Field(default_factory=TimeConfig)
    log_level: str = "WARNING"

    def policy(self) -> SanitizerPolicy:
        """Return the default allowlists with the configured placeholder text."""
        if self.sanitizer.placeholder_text == DEFAULT_POLICY.placeholder_text:
            return DEFAULT_POLICY
        return DEFAULT_POLICY.model_copy(update={"placeholder_text": self.sanitizer.placeholder_text})

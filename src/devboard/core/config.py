"""Configuration loader: YAML files + environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from devboard.core.models import AppConfig, SanitizerBackend, SanitizerConfig, TimeConfig


def _find_project_root() -> Path:
    """Walk up from cwd to find a directory containing pyproject.toml."""
    cwd = Path.cwd()
    for p in [cwd, *cwd.parents]:
        if (p / "pyproject.toml").exists():
            return p
    return cwd


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load configuration from YAML + environment variables.

    Priority: env vars > .env file > YAML defaults.
    """
    root = _find_project_root()
    load_dotenv(root / ".env")

    # Load YAML
    yaml_path = Path(config_path) if config_path else root / "config" / "default.yaml"
    yaml_data: dict = {}
    if yaml_path.exists():
        with open(yaml_path) as f:
            yaml_data = yaml.safe_load(f) or {}

    # Sanitizer config with env overrides
    san_data = yaml_data.get("sanitizer", {})
    backend_str = os.getenv("DEVBOARD_SANITIZER_BACKEND", san_data.get("backend", "regex"))
    sanitizer = SanitizerConfig(
        backend=SanitizerBackend(backend_str),
        max_input_length=int(os.getenv("DEVBOARD_MAX_INPUT_LENGTH", san_data.get("max_input_length", 0))),
        placeholder_text=os.getenv(
            "DEVBOARD_PLACEHOLDER_TEXT", san_data.get("placeholder_text", "No description provided")
        ),
    )

    # Time-log config
    time_data = yaml_data.get("time", {})
    time_cfg = TimeConfig(
        max_minutes_per_entry=int(time_data.get("max_minutes_per_entry", 180)),
        rounding_interval=int(time_data.get("rounding_interval", 15)),
    )

    log_level = os.getenv("DEVBOARD_LOG_LEVEL", yaml_data.get("log_level", "WARNING"))

    return AppConfig(
        sanitizer=sanitizer,
        time=time_cfg,
        log_level=str(log_level).upper(),
    )

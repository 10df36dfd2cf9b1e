"""
Configuration for the last access scanner.

Holds the immutable ScanConfig and resolves default values from the
environment (optionally backed by a .env file).
"""

from __future__ import annotations

import logging
import os
from dataclasses import MISSING, dataclass, fields
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values

ENV_FILE_VAR = "LAS_ENV_FILE"
MAX_DEPTH_VAR = "LAS_MAX_DEPTH"
SKIP_HIDDEN_VAR = "LAS_SKIP_HIDDEN"

TRUE_VALUES = ("1", "t", "true")
FALSE_VALUES = ("0", "f", "false")
SKIP_HIDDEN_CHOICES = ("0", "1", "f", "t", "false", "true")


class ConfigurationError(ValueError):
    """Raised when a configuration value is missing or invalid."""


@dataclass(frozen=True)
class ScanConfig:
    """Parameters of a single scan."""

    root: Path
    max_depth: int = 1
    skip_hidden: bool = True

    def __post_init__(self):
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ConfigurationError(f"max_depth must be an integer, got {self.max_depth!r}")
        if self.max_depth < 0:
            raise ConfigurationError(f"max_depth must be non-negative, got {self.max_depth}")


def config_defaults() -> dict[str, object]:
    """Return the constructor defaults declared on ScanConfig."""
    return {field.name: field.default for field in fields(ScanConfig) if field.default is not MISSING}


def parse_bool_flag(value: str) -> bool:
    """Parse one of 0/1/f/t/false/true into a bool."""
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean value: {value!r} (expected one of {', '.join(SKIP_HIDDEN_CHOICES)})")


def parse_max_depth(value: str) -> int:
    """Parse a non-negative integer depth."""
    try:
        depth = int(value.strip())
    except ValueError as exc:
        raise ConfigurationError(f"Can't parse max_depth {value!r} into a valid unsigned int") from exc
    if depth < 0:
        raise ConfigurationError(f"max_depth must be non-negative, got {depth}")
    return depth


def resolve_env_path(env_path: Optional[str] = None) -> Path:
    """
    Determine which .env file supplies default settings.

    Priority order:
      1. Explicit parameter
      2. LAS_ENV_FILE environment variable
      3. ~/.env
    """
    if env_path:
        return Path(env_path).expanduser()
    env_file = os.environ.get(ENV_FILE_VAR)
    if env_file:
        return Path(env_file).expanduser()
    return Path.home() / ".env"


def _load_settings(env_path: Optional[str]) -> dict[str, str]:
    """Merge .env values with the process environment (environment wins)."""
    resolved = resolve_env_path(env_path)
    settings: dict[str, str] = {}
    if resolved.is_file():
        settings.update({key: value for key, value in dotenv_values(resolved).items() if value is not None})
        logging.debug("Loaded settings from %s", resolved)
    settings.update(os.environ)
    return settings


def load_env_defaults(env_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> dict[str, object]:
    """Return ScanConfig defaults, overridden by LAS_* settings when present.

    Raises:
        ConfigurationError: If an LAS_* value cannot be parsed.
    """
    settings = dict(environ) if environ is not None else _load_settings(env_path)
    defaults = config_defaults()
    if settings.get(MAX_DEPTH_VAR):
        try:
            defaults["max_depth"] = parse_max_depth(settings[MAX_DEPTH_VAR])
        except ConfigurationError as exc:
            raise ConfigurationError(f"{MAX_DEPTH_VAR}: {exc}") from exc
    if settings.get(SKIP_HIDDEN_VAR):
        try:
            defaults["skip_hidden"] = parse_bool_flag(settings[SKIP_HIDDEN_VAR].strip())
        except ConfigurationError as exc:
            raise ConfigurationError(f"{SKIP_HIDDEN_VAR}: {exc}") from exc
    return defaults

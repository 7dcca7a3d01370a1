"""Configuration loader for listing comparison.

Reads optional settings from a YAML file (JSON is accepted as well, being a
YAML subset). The file may override the exclusion rules used to drop banner
and summary lines, and the labels used for the two sides of a comparison.
Every key is optional; with no file at all the built-in Chocolatey defaults
apply.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml


CONFIG_PATH_ENV_VAR = "CHOCO_DIFF_CONFIG"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class ExclusionRules:
    """Predicates identifying lines of a listing that are not packages."""

    prefixes: tuple[str, ...]
    suffixes: tuple[str, ...]

    def matches(self, line: str) -> bool:
        """Return True when the stripped line is a banner or summary line."""
        trimmed = line.strip()
        return any(trimmed.startswith(prefix) for prefix in self.prefixes) or any(
            trimmed.endswith(suffix) for suffix in self.suffixes
        )


DEFAULT_RULES = ExclusionRules(
    prefixes=("Chocolatey v",),
    suffixes=("packages installed.",),
)


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    exclusions: ExclusionRules = DEFAULT_RULES
    left_label: str = "left"
    right_label: str = "right"

    def with_labels(self, left: str | None = None, right: str | None = None) -> Settings:
        """Return a copy with the given labels overriding the configured ones."""
        return replace(
            self,
            left_label=left or self.left_label,
            right_label=right or self.right_label,
        )


def _string_tuple(value: Any, field: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(item, str) and item for item in value):
        raise ConfigError(f"'{field}' must be a list of non-empty strings")
    return tuple(value)


def _parse_exclusions(data: Any) -> ExclusionRules:
    if data is None:
        return DEFAULT_RULES
    if not isinstance(data, dict):
        raise ConfigError("'exclude' must be a mapping")

    prefixes = DEFAULT_RULES.prefixes
    suffixes = DEFAULT_RULES.suffixes
    if "prefixes" in data:
        prefixes = _string_tuple(data["prefixes"], "exclude.prefixes")
    if "suffixes" in data:
        suffixes = _string_tuple(data["suffixes"], "exclude.suffixes")
    return ExclusionRules(prefixes=prefixes, suffixes=suffixes)


def _parse_labels(data: Any) -> tuple[str, str]:
    if data is None:
        return "left", "right"
    if not isinstance(data, dict):
        raise ConfigError("'labels' must be a mapping")

    labels = []
    for side in ("left", "right"):
        label = data.get(side, side)
        if not isinstance(label, str) or not label:
            raise ConfigError(f"'labels.{side}' must be a non-empty string")
        labels.append(label)
    return labels[0], labels[1]


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. CHOCO_DIFF_CONFIG environment variable
    3. None (built-in defaults)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings from a YAML or JSON file.

    Args:
        path: Optional path to the config file. If not provided, uses the
            CHOCO_DIFF_CONFIG env var or falls back to built-in defaults.

    Returns:
        A Settings object.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)
    if config_path is None:
        return Settings()

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in configuration file: {exc}") from exc

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    exclusions = _parse_exclusions(data.get("exclude"))
    left_label, right_label = _parse_labels(data.get("labels"))
    return Settings(exclusions=exclusions, left_label=left_label, right_label=right_label)

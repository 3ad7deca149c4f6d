"""
Configuration loader infrastructure.

Registry files define the content sources for UI pages:
- registry/integrations.yaml: integrations listed on the Integrations page

All human-edited configs are YAML with strict pydantic validation.
The config root defaults to this package directory and can be overridden
with the PAGECHECK_CONFIG_ROOT environment variable.
"""

import os
from pathlib import Path

import yaml


class ConfigError(Exception):
    """Raised when a configuration file is missing or invalid."""


def get_config_root() -> Path:
    """Return the directory holding the config taxonomy."""
    override = os.environ.get("PAGECHECK_CONFIG_ROOT")
    if override:
        return Path(override)
    return Path(__file__).parent


def get_registry_path(filename: str) -> Path:
    """Get path to a registry configuration file."""
    return get_config_root() / "registry" / filename


def load_yaml(path: Path) -> dict:
    """Load a YAML mapping with proper error handling."""
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


__all__ = ["ConfigError", "get_config_root", "get_registry_path", "load_yaml"]

"""
Integration Registry Loader

Defines the integrations shown on the Integrations page.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import ConfigError, get_registry_path, load_yaml


class IntegrationCategory(str, Enum):
    """Integration category used for the card badge."""
    SOURCE_CONTROL = "source_control"
    CHAT = "chat"
    ISSUE_TRACKING = "issue_tracking"
    CI = "ci"
    MONITORING = "monitoring"
    STORAGE = "storage"


class IntegrationSpec(BaseModel):
    """Specification for a single integration."""

    id: str = Field(..., description="Integration identifier (e.g., 'github')")
    name: str = Field(..., description="Display name for UI")
    category: IntegrationCategory = Field(..., description="Integration category")
    description: str = Field(..., description="One-line description shown on the card")
    url: str = Field(..., description="Documentation or setup link")

    icon: Optional[str] = Field(None, description="Material icon name")
    featured: bool = Field(False, description="Show in the featured section")

    model_config = ConfigDict(frozen=True, extra="forbid")


class IntegrationRegistry(BaseModel):
    """Integration registry configuration."""

    version: str = Field(..., description="Registry schema version")
    integrations: List[IntegrationSpec] = Field(..., description="Listed integrations")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("integrations")
    @classmethod
    def validate_integrations(cls, v: List[IntegrationSpec]) -> List[IntegrationSpec]:
        if not v:
            raise ValueError("integrations cannot be empty")
        ids = [spec.id for spec in v]
        if len(ids) != len(set(ids)):
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            raise ValueError(f"Duplicate integration IDs: {duplicates}")
        return v

    def featured(self) -> List[IntegrationSpec]:
        return [spec for spec in self.integrations if spec.featured]

    def others(self) -> List[IntegrationSpec]:
        return [spec for spec in self.integrations if not spec.featured]


@lru_cache(maxsize=4)
def _load_integrations_cached(path: Path) -> IntegrationRegistry:
    data = load_yaml(path)
    try:
        return IntegrationRegistry(**data)
    except Exception as e:
        raise ConfigError(f"Failed to validate registry at {path}: {e}") from e


def load_integrations(path: Optional[Path] = None) -> IntegrationRegistry:
    """
    Load the integration registry.

    Args:
        path: Optional explicit YAML path; defaults to registry/integrations.yaml

    Returns:
        Validated IntegrationRegistry

    Raises:
        ConfigError: file missing, not YAML, or fails validation
    """
    return _load_integrations_cached(path or get_registry_path("integrations.yaml"))


def clear_integrations_cache() -> None:
    """Force the next load_integrations() call to re-read from disk."""
    _load_integrations_cached.cache_clear()

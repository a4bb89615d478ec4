"""Warm-up configuration."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TemplateWarmupConfig(BaseModel):
    """Extra template directories to warm, keyed by namespace.

    An empty namespace means templates in that directory are addressed by
    their bare relative path. Directories are scanned in mapping order.
    ``paths`` is a read-only view: the configuration never changes once built.
    """

    model_config = ConfigDict(frozen=True)

    paths: Mapping[str, Path] = Field(default_factory=dict, validate_default=True)

    @field_validator("paths", mode="after")
    @classmethod
    def _freeze_paths(cls, value: Mapping[str, Path]) -> Mapping[str, Path]:
        return MappingProxyType(dict(value))

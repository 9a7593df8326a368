"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``esuctl.toml`` holds overrides only.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class EnumerateConfig(BaseModel):
    """[enumerate] section."""

    model_config = {"frozen": True}

    default_k: int = Field(default=3, ge=1)
    limit: int = Field(default=0, ge=0)


class LoaderConfig(BaseModel):
    """[loader] section."""

    model_config = {"frozen": True}

    mirror_edges: bool = False
    encoding: str = "utf-8"

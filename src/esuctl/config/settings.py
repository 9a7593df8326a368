"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ESUCTL_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``esuctl.toml`` discovered via walk-up
  4. Code defaults — baked into :mod:`esuctl.config.models`
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from esuctl.config.discovery import find_config
from esuctl.config.models import EnumerateConfig, LoaderConfig

# TOML path handed to settings_customise_sources during construction.
_pending_toml: ContextVar[Path | None] = ContextVar("_pending_toml", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a discovered ``esuctl.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is None or not toml_path.is_file():
            return
        try:
            self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


class EsuSettings(BaseSettings):
    """Frozen settings for the whole CLI, stored on the Click context.

    Attributes:
        config_path: The TOML file in effect, or None when running on defaults.
        undirected: ``--undirected`` flag; mirrors every loaded edge.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ESUCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    undirected: bool = False

    # --- TOML sections ---
    enumerate: EnumerateConfig = Field(default_factory=EnumerateConfig)
    loader: LoaderConfig = Field(default_factory=LoaderConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Slot the TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, _pending_toml.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_from: Path | None = None,
        **cli_flags: Any,
    ) -> EsuSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* that does not exist is ignored rather than
        falling back to discovery.
        """
        toml_path: Path | None
        if config_path:
            p = Path(config_path)
            toml_path = p if p.is_file() else None
        else:
            toml_path = find_config(search_from)

        token = _pending_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _pending_toml.reset(token)

"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``RESOLUTION_*`` prefix
  3. TOML file    — ``resolution.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

The store location is an explicit value on this object and is handed to
every service; nothing reads a process-wide default path.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from resolution.config.discovery import find_config
from resolution.config.models import EditConfig, StoreConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``resolution.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class ResolutionSettings(BaseSettings):
    """Unified settings for the resolution CLI.

    Stored on the :class:`AppContext` created by the root command.

    Attributes:
        root: Directory the store path is relative to (parent of
            ``resolution.toml``, or CWD if no config found).
        config_path: The TOML file in use, or None.
        store_file: Explicit ``--file`` override for the store location.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RESOLUTION_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    store_file: Path | None = None

    # --- TOML sections ---
    store: StoreConfig = Field(default_factory=StoreConfig)
    edit: EditConfig = Field(default_factory=EditConfig)

    @property
    def store_path(self) -> Path:
        """Resolved path of the backing CSV file."""
        if self.store_file is not None:
            return self.store_file
        return self.root / self.store.directory / self.store.filename

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> ResolutionSettings:
        """Construct settings from a CLI invocation.

        Discovers ``resolution.toml`` via walk-up (or explicit *config_path*),
        resolves *root* from the config file's parent directory, and merges
        CLI flags as highest-priority overrides.  Flags passed as None are
        dropped so they don't mask env or TOML values.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(root)

        resolved_root = root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        flags = {k: v for k, v in cli_flags.items() if v is not None}

        _tls.toml_path = toml_path
        try:
            return cls(
                root=resolved_root,
                config_path=toml_path,
                **flags,
            )
        finally:
            _tls.toml_path = None

"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``BUILDGATE_*`` prefix
  3. TOML file    — ``buildgate.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`buildgate.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from buildgate.config.discovery import find_config
from buildgate.config.models import BuiltinsConfig, ClientConfig, DocsConfig, LayoutConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``buildgate.toml`` file discovered via walk-up."""

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
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class GateSettings(BaseSettings):
    """Unified settings for the entire buildgate CLI.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.  Stored on the
    :class:`~buildgate.commands._context.AppContext` at the CLI root level.

    Attributes:
        project_dir: Directory the build was invoked against (``-p``, or CWD).
        config_path: The ``buildgate.toml`` in effect, or None.
        settings_file: Explicit settings-file override; skips layout discovery.
        search_upwards: Look for a settings file in parent directories.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "BUILDGATE_",
        "env_nested_delimiter": "__",
    }

    # --- Resolved paths (not in TOML) ---
    project_dir: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    settings_file: Path | None = None
    search_upwards: bool = True

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False

    # --- TOML sections ---
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    builtins: BuiltinsConfig = Field(default_factory=BuiltinsConfig)
    docs: DocsConfig = Field(default_factory=DocsConfig)
    client: ClientConfig = Field(default_factory=ClientConfig)

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
        project_dir: Path | None = None,
        **cli_flags: Any,
    ) -> GateSettings:
        """Construct settings from CLI invocation.

        Discovers ``buildgate.toml`` via walk-up from *project_dir* (or uses
        the explicit *config_path*, which must exist) and merges CLI flags as highest-priority
        overrides.  Flags passed as None are dropped so env vars and TOML
        values still apply.
        """
        resolved_dir = (project_dir or Path.cwd()).resolve()

        toml_path: Path | None = None
        if config_path:
            toml_path = Path(config_path)
            if not toml_path.is_file():
                raise click.ClickException(f"Config file '{toml_path}' does not exist.")
        else:
            toml_path = find_config(resolved_dir)

        overrides = {key: value for key, value in cli_flags.items() if value is not None}

        _tls.toml_path = toml_path
        try:
            return cls(
                project_dir=resolved_dir,
                config_path=toml_path,
                **overrides,
            )
        finally:
            _tls.toml_path = None

"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, buildgate.toml only contains overrides.
An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

# --- buildgate.toml sections ---


class LayoutConfig(BaseModel):
    """[layout] section: names that mark a directory as a build root."""

    model_config = {"frozen": True}

    settings_basename: str = "settings"
    build_basename: str = "build"
    script_extensions: tuple[str, ...] = (".toml", ".py")

    @field_validator("script_extensions")
    @classmethod
    def _dotted(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("at least one script extension is required")
        return tuple(ext if ext.startswith(".") else f".{ext}" for ext in value)


class BuiltinsConfig(BaseModel):
    """[builtins] section.

    Commands listed here run without a build definition. ``default`` is the
    command run when no task is requested.
    """

    model_config = {"frozen": True}

    commands: tuple[str, ...] = ("help", "init")
    default: str | None = "help"


class DocsConfig(BaseModel):
    """[docs] section."""

    model_config = {"frozen": True}

    base_url: str = "https://buildgate.readthedocs.io/en"
    version: str = "latest"


class ClientConfig(BaseModel):
    """[client] section."""

    model_config = {"frozen": True}

    app_name: str = "buildgate"

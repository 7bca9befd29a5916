"""Invocation parameters: what the user asked the build tool to do, and where."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, field_validator


class InvocationParameters(BaseModel):
    """Start parameters for one build invocation.

    Attributes:
        current_dir: Directory the tool was invoked against.
        task_names: Requested task/command tokens, in command-line order.
        settings_file: Explicit settings file; bypasses layout discovery.
        search_upwards: Look for a settings file in ancestor directories.
    """

    model_config = {"frozen": True}

    current_dir: Path
    task_names: tuple[str, ...] = ()
    settings_file: Path | None = None
    search_upwards: bool = True

    @field_validator("task_names", mode="before")
    @classmethod
    def _as_tuple(cls, value: object) -> object:
        if isinstance(value, list):
            return tuple(value)
        return value

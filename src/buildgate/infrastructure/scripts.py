"""Recognized settings and build script file names.

This module is the single owner of the file names that mark a build root.
The layout resolver uses it to look for files; the validator only quotes
the names back to the user.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from buildgate.config.models import LayoutConfig


class ScriptFileResolver:
    """Combine script basenames with the supported extensions.

    Extension order is significant: when several candidates exist in the
    same directory, the first extension wins.
    """

    def __init__(
        self,
        extensions: Sequence[str] = (".toml", ".py"),
        *,
        settings_basename: str = "settings",
        build_basename: str = "build",
    ) -> None:
        self.extensions = tuple(extensions)
        self.settings_basename = settings_basename
        self.build_basename = build_basename

    @classmethod
    def from_config(cls, config: LayoutConfig) -> ScriptFileResolver:
        return cls(
            config.script_extensions,
            settings_basename=config.settings_basename,
            build_basename=config.build_basename,
        )

    def file_names(self, basename: str) -> list[str]:
        return [f"{basename}{ext}" for ext in self.extensions]

    def settings_file_names(self) -> list[str]:
        return self.file_names(self.settings_basename)

    def build_script_names(self) -> list[str]:
        return self.file_names(self.build_basename)

    def resolve_script_file(self, directory: Path, basename: str) -> Path | None:
        """Return the first existing ``<basename><ext>`` file in *directory*."""
        for name in self.file_names(basename):
            candidate = directory / name
            if candidate.is_file():
                return candidate
        return None

    def find_settings_file(self, directory: Path) -> Path | None:
        return self.resolve_script_file(directory, self.settings_basename)

    def find_build_script(self, directory: Path) -> Path | None:
        return self.resolve_script_file(directory, self.build_basename)

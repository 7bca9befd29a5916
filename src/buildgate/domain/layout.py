"""Build layout value objects.

A :class:`BuildLayout` is produced per validation call and only answers
whether a build definition is present at the resolved root.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

if TYPE_CHECKING:
    from buildgate.domain.invocation import InvocationParameters


class BuildLayoutConfiguration(BaseModel):
    """The layout-relevant subset of the invocation parameters."""

    model_config = {"frozen": True}

    current_dir: Path
    settings_file: Path | None = None
    search_upwards: bool = True

    @classmethod
    def from_invocation(cls, params: InvocationParameters) -> BuildLayoutConfiguration:
        return cls(
            current_dir=params.current_dir,
            settings_file=params.settings_file,
            search_upwards=params.search_upwards,
        )


class BuildLayout(BaseModel):
    """Resolved location of a build.

    Attributes:
        root_dir: Directory holding the settings file, or the current
            directory when none was found.
        current_dir: Directory the build was invoked against.
        settings_file: The settings file in effect, if any.
        build_script: The root build script, if any.
    """

    model_config = {"frozen": True}

    root_dir: Path
    current_dir: Path
    settings_file: Path | None = None
    build_script: Path | None = None

    @property
    def definition_missing(self) -> bool:
        return self.settings_file is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "root_dir": str(self.root_dir),
            "current_dir": str(self.current_dir),
            "settings_file": str(self.settings_file) if self.settings_file else None,
            "build_script": str(self.build_script) if self.build_script else None,
            "definition_missing": self.definition_missing,
        }

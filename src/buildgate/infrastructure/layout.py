"""Layout resolver: locate the settings file that defines a build.

Search order:
  1. An explicit settings file (must exist).
  2. A settings file in the current directory.
  3. With upward search enabled, each ancestor directory, nearest first.

When nothing is found the current directory is the root and the layout
reports the build definition as missing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from buildgate.config.discovery import iter_ancestors
from buildgate.domain.layout import BuildLayout, BuildLayoutConfiguration
from buildgate.errors import SettingsFileNotFoundError

if TYPE_CHECKING:
    from pathlib import Path

    from buildgate.infrastructure.scripts import ScriptFileResolver

logger = logging.getLogger(__name__)


class BuildLayoutResolver:
    """Resolve a :class:`BuildLayout` from the filesystem. Never writes."""

    def __init__(self, scripts: ScriptFileResolver) -> None:
        self._scripts = scripts

    def resolve(self, config: BuildLayoutConfiguration) -> BuildLayout:
        current_dir = config.current_dir.resolve()

        if config.settings_file is not None:
            settings_file = config.settings_file
            if not settings_file.is_absolute():
                settings_file = current_dir / settings_file
            if not settings_file.is_file():
                raise SettingsFileNotFoundError(settings_file)
            return self._layout(settings_file.parent, current_dir, settings_file)

        settings_file = self._find_settings_file(current_dir, config.search_upwards)
        if settings_file is None:
            logger.debug("No settings file found for %s", current_dir)
            return self._layout(current_dir, current_dir, None)
        return self._layout(settings_file.parent, current_dir, settings_file)

    def _find_settings_file(self, current_dir: Path, search_upwards: bool) -> Path | None:
        if not search_upwards:
            return self._scripts.find_settings_file(current_dir)
        for directory in iter_ancestors(current_dir):
            found = self._scripts.find_settings_file(directory)
            if found is not None:
                return found
        return None

    def _layout(
        self, root_dir: Path, current_dir: Path, settings_file: Path | None
    ) -> BuildLayout:
        layout = BuildLayout(
            root_dir=root_dir,
            current_dir=current_dir,
            settings_file=settings_file,
            build_script=self._scripts.find_build_script(root_dir),
        )
        if settings_file is not None:
            logger.debug("Resolved build root %s (settings: %s)", root_dir, settings_file.name)
        return layout

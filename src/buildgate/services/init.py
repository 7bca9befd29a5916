"""Create a minimal build definition in a directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from buildgate.services.result import ServiceResult

if TYPE_CHECKING:
    from buildgate.infrastructure.scripts import ScriptFileResolver

logger = logging.getLogger(__name__)

_OP = "init"

# Starter content per extension; unknown extensions get an empty file.
_SETTINGS_TEMPLATES: dict[str, str] = {
    ".toml": '[build]\nname = "{name}"\n',
    ".py": 'name = "{name}"\n',
}
_BUILD_SCRIPT_TEMPLATES: dict[str, str] = {
    ".toml": "[tasks]\n",
    ".py": "tasks = {}\n",
}


class InitService:
    """Write a settings file (and optionally a build script) into a directory."""

    @staticmethod
    def init_build(
        path: Path,
        scripts: ScriptFileResolver,
        *,
        name: str | None = None,
        with_build_script: bool = False,
    ) -> ServiceResult:
        if path.exists() and not path.is_dir():
            return ServiceResult.failure(
                _OP, "NOT_A_DIRECTORY", f"'{path}' exists and is not a directory"
            )

        existing = scripts.find_settings_file(path) if path.is_dir() else None
        if existing is not None:
            return ServiceResult.failure(
                _OP,
                "ALREADY_INITIALIZED",
                f"'{path}' already contains a build definition",
                {"settings_file": str(existing)},
            )

        path.mkdir(parents=True, exist_ok=True)
        build_name = name or path.name
        extension = scripts.extensions[0]

        settings_file = path / scripts.settings_file_names()[0]
        settings_file.write_text(
            _SETTINGS_TEMPLATES.get(extension, "").format(name=build_name), encoding="utf-8"
        )
        created = [str(settings_file)]
        logger.debug("Wrote settings file %s", settings_file)

        if with_build_script and scripts.find_build_script(path) is None:
            build_script = path / scripts.build_script_names()[0]
            build_script.write_text(_BUILD_SCRIPT_TEMPLATES.get(extension, ""), encoding="utf-8")
            created.append(str(build_script))
            logger.debug("Wrote build script %s", build_script)

        return ServiceResult(
            ok=True,
            op=_OP,
            data={"path": str(path), "name": build_name, "created": created},
        )

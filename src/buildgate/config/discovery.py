"""Config file discovery.

Walk-up finder locates buildgate.toml, similar to how git finds .git/.
Supports BUILDGATE_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

CONFIG_FILENAME = "buildgate.toml"
CONFIG_ENV_VAR = "BUILDGATE_CONFIG"


def iter_ancestors(start: Path) -> Iterator[Path]:
    """Yield *start* and each of its parents, nearest first."""
    current = start.resolve()
    while True:
        yield current
        parent = current.parent
        if parent == current:
            return
        current = parent


def find_upwards(start: Path, names: Iterable[str]) -> Path | None:
    """Return the first file named in *names* found walking up from *start*.

    Within a directory, *names* are tried in order.
    """
    names = tuple(names)
    for directory in iter_ancestors(start):
        for name in names:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for buildgate.toml.

    Returns the path to the config file, or None if not found.
    Checks BUILDGATE_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    return find_upwards(start or Path.cwd(), [CONFIG_FILENAME])

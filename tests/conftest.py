"""Shared pytest fixtures and test helpers for buildgate tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from buildgate.domain.builtins import builtin_commands
from buildgate.infrastructure.layout import BuildLayoutResolver
from buildgate.infrastructure.scripts import ScriptFileResolver
from buildgate.output.client import ClientMetaData
from buildgate.output.docs import DocumentationRegistry
from buildgate.services.validator import BuildLayoutValidator

DOCS_BASE_URL = "https://docs.example.test/buildgate"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep developer BUILDGATE_* variables out of the tests."""
    for key in list(os.environ):
        if key.startswith("BUILDGATE_"):
            monkeypatch.delenv(key)
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def scripts() -> ScriptFileResolver:
    return ScriptFileResolver()


@pytest.fixture
def resolver(scripts: ScriptFileResolver) -> BuildLayoutResolver:
    return BuildLayoutResolver(scripts)


@pytest.fixture
def client() -> ClientMetaData:
    return ClientMetaData("buildgate")


@pytest.fixture
def docs() -> DocumentationRegistry:
    return DocumentationRegistry(DOCS_BASE_URL, "1.0")


@pytest.fixture
def validator(
    resolver: BuildLayoutResolver,
    scripts: ScriptFileResolver,
    docs: DocumentationRegistry,
    client: ClientMetaData,
) -> BuildLayoutValidator:
    """Validator wired to the real filesystem resolver and default built-ins."""
    return BuildLayoutValidator(
        resolver, scripts, docs, client, builtin_commands(["help", "init"], "help")
    )


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """A directory with no build definition."""
    path = tmp_path / "proj"
    path.mkdir()
    return path


@pytest.fixture
def build_root(tmp_path: Path) -> Path:
    """A directory holding a settings file and a build script."""
    path = tmp_path / "build-root"
    path.mkdir()
    (path / "settings.toml").write_text('[build]\nname = "demo"\n')
    (path / "build.toml").write_text("[tasks]\n")
    return path

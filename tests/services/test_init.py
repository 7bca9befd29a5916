"""Tests for InitService."""

from __future__ import annotations

from pathlib import Path

from buildgate.infrastructure.scripts import ScriptFileResolver
from buildgate.services.init import InitService


class TestInitBuild:
    def test_writes_settings_file(self, scripts: ScriptFileResolver, empty_dir: Path) -> None:
        result = InitService.init_build(empty_dir, scripts, name="demo")
        assert result.ok, result.error
        settings = empty_dir / "settings.toml"
        assert settings.read_text() == '[build]\nname = "demo"\n'
        assert result.data["created"] == [str(settings)]
        assert not (empty_dir / "build.toml").exists()

    def test_name_defaults_to_directory(
        self, scripts: ScriptFileResolver, empty_dir: Path
    ) -> None:
        result = InitService.init_build(empty_dir, scripts)
        assert result.data["name"] == "proj"

    def test_with_build_script(self, scripts: ScriptFileResolver, empty_dir: Path) -> None:
        result = InitService.init_build(empty_dir, scripts, with_build_script=True)
        assert result.ok
        assert (empty_dir / "build.toml").read_text() == "[tasks]\n"
        assert len(result.data["created"]) == 2

    def test_keeps_existing_build_script(
        self, scripts: ScriptFileResolver, empty_dir: Path
    ) -> None:
        (empty_dir / "build.py").write_text("tasks = {'x': 1}\n")
        result = InitService.init_build(empty_dir, scripts, with_build_script=True)
        assert result.ok
        assert (empty_dir / "build.py").read_text() == "tasks = {'x': 1}\n"
        assert not (empty_dir / "build.toml").exists()

    def test_python_extension_first(self, empty_dir: Path) -> None:
        scripts = ScriptFileResolver((".py", ".toml"))
        result = InitService.init_build(empty_dir, scripts, name="pyproj", with_build_script=True)
        assert result.ok
        assert (empty_dir / "settings.py").read_text() == 'name = "pyproj"\n'
        assert (empty_dir / "build.py").read_text() == "tasks = {}\n"

    def test_creates_missing_directory(self, scripts: ScriptFileResolver, tmp_path: Path) -> None:
        target = tmp_path / "new" / "project"
        result = InitService.init_build(target, scripts)
        assert result.ok
        assert (target / "settings.toml").is_file()

    def test_refuses_existing_build(self, scripts: ScriptFileResolver, build_root: Path) -> None:
        before = (build_root / "settings.toml").read_text()
        result = InitService.init_build(build_root, scripts, name="other")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "ALREADY_INITIALIZED"
        assert (build_root / "settings.toml").read_text() == before

    def test_refuses_file_path(self, scripts: ScriptFileResolver, tmp_path: Path) -> None:
        target = tmp_path / "a-file"
        target.write_text("")
        result = InitService.init_build(target, scripts)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_A_DIRECTORY"

"""Tests for layout and invocation value objects."""

from __future__ import annotations

from pathlib import Path

import pytest

from buildgate.domain.invocation import InvocationParameters
from buildgate.domain.layout import BuildLayout, BuildLayoutConfiguration


class TestInvocationParameters:
    def test_defaults(self) -> None:
        params = InvocationParameters(current_dir=Path("/work"))
        assert params.task_names == ()
        assert params.settings_file is None
        assert params.search_upwards is True

    def test_list_tasks_become_tuple(self) -> None:
        params = InvocationParameters(current_dir=Path("/work"), task_names=["a", "b"])
        assert params.task_names == ("a", "b")

    def test_frozen(self) -> None:
        params = InvocationParameters(current_dir=Path("/work"))
        with pytest.raises(Exception):
            params.task_names = ("x",)  # type: ignore[misc]


class TestBuildLayoutConfiguration:
    def test_from_invocation(self) -> None:
        params = InvocationParameters(
            current_dir=Path("/work"),
            task_names=("build",),
            settings_file=Path("/work/settings.toml"),
            search_upwards=False,
        )
        config = BuildLayoutConfiguration.from_invocation(params)
        assert config.current_dir == Path("/work")
        assert config.settings_file == Path("/work/settings.toml")
        assert config.search_upwards is False


class TestBuildLayout:
    def test_missing_without_settings_file(self) -> None:
        layout = BuildLayout(root_dir=Path("/w"), current_dir=Path("/w"))
        assert layout.definition_missing is True

    def test_build_script_alone_is_not_a_definition(self) -> None:
        layout = BuildLayout(
            root_dir=Path("/w"), current_dir=Path("/w"), build_script=Path("/w/build.toml")
        )
        assert layout.definition_missing is True

    def test_present_with_settings_file(self) -> None:
        layout = BuildLayout(
            root_dir=Path("/w"), current_dir=Path("/w/sub"), settings_file=Path("/w/settings.toml")
        )
        assert layout.definition_missing is False

    def test_to_dict(self) -> None:
        layout = BuildLayout(
            root_dir=Path("/w"), current_dir=Path("/w"), settings_file=Path("/w/settings.toml")
        )
        assert layout.to_dict() == {
            "root_dir": "/w",
            "current_dir": "/w",
            "settings_file": "/w/settings.toml",
            "build_script": None,
            "definition_missing": False,
        }

"""Tests for configuration models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from buildgate.config.models import BuiltinsConfig, DocsConfig, LayoutConfig


class TestLayoutConfig:
    def test_defaults(self) -> None:
        config = LayoutConfig()
        assert config.settings_basename == "settings"
        assert config.build_basename == "build"
        assert config.script_extensions == (".toml", ".py")

    def test_extensions_get_leading_dot(self) -> None:
        assert LayoutConfig(script_extensions=("toml", ".py")).script_extensions == (
            ".toml",
            ".py",
        )

    def test_extensions_required(self) -> None:
        with pytest.raises(ValidationError):
            LayoutConfig(script_extensions=())


class TestBuiltinsConfig:
    def test_defaults(self) -> None:
        config = BuiltinsConfig()
        assert config.commands == ("help", "init")
        assert config.default == "help"


class TestDocsConfig:
    def test_partial_override_keeps_defaults(self) -> None:
        config = DocsConfig.model_validate({"version": "2.0"})
        assert config.version == "2.0"
        assert config.base_url == "https://buildgate.readthedocs.io/en"

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            DocsConfig().version = "x"  # type: ignore[misc]

"""Tests for DocumentationRegistry."""

from __future__ import annotations

import pytest

from buildgate.output.docs import (
    BUILD_INIT_TOPIC,
    BUILD_SCRIPT_BASICS_TOPIC,
    DocumentationRegistry,
)


class TestUrlFor:
    def test_builds_userguide_url(self) -> None:
        docs = DocumentationRegistry("https://docs.example.test", "2.1")
        assert docs.url_for(BUILD_INIT_TOPIC) == (
            "https://docs.example.test/2.1/userguide/build_init.html"
        )

    def test_trailing_slash_stripped(self) -> None:
        docs = DocumentationRegistry("https://docs.example.test/", "latest")
        assert docs.url_for(BUILD_SCRIPT_BASICS_TOPIC) == (
            "https://docs.example.test/latest/userguide/tutorial_build_script_basics.html"
        )

    def test_empty_topic_rejected(self) -> None:
        with pytest.raises(ValueError):
            DocumentationRegistry("https://docs.example.test").url_for("")

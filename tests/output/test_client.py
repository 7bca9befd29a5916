"""Tests for ClientMetaData command rendering."""

from __future__ import annotations

from rich.text import Text

from buildgate.output.client import ClientMetaData


class TestDescribeCommand:
    def test_appends_to_sink(self) -> None:
        sink = Text("run '")
        ClientMetaData("buildgate").describe_command(sink, "init")
        assert sink.plain == "run 'buildgate init"
        assert sink.spans == []

    def test_multiple_args(self) -> None:
        sink = Text()
        ClientMetaData("./gatew").describe_command(sink, "check", "compile")
        assert sink.plain == "./gatew check compile"

    def test_no_args(self) -> None:
        sink = Text()
        ClientMetaData().describe_command(sink)
        assert sink.plain == "buildgate"

    def test_styled(self) -> None:
        sink = Text("Run ")
        ClientMetaData().describe_command(sink, "init", style="gate.user_input")
        assert len(sink.spans) == 1
        span = sink.spans[0]
        assert sink.plain[span.start : span.end] == "buildgate init"
        assert span.style == "gate.user_input"

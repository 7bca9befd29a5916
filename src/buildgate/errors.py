"""User-facing failures and the resolution-suggestion hook.

Presentation code never inspects concrete failure types.  It asks
:func:`is_resolution_aware` and, if so, hands the failure a
:class:`ResolutionContext` to fill with remedies.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import click
from rich.text import Text

if TYPE_CHECKING:
    from buildgate.output.client import ClientMetaData


class GateError(click.ClickException):
    """Base class for failures reported to the user (exit code 1)."""


class SettingsFileNotFoundError(GateError):
    """An explicitly requested settings file does not exist."""

    def __init__(self, settings_file: Path) -> None:
        super().__init__(f"Settings file '{settings_file}' does not exist.")
        self.settings_file = settings_file


class ResolutionContext:
    """Collects remedies for a single failure.

    Attributes:
        client: Renders how to invoke the tool's commands.
        resolutions: Remedies contributed so far, in order.
        missing_build_definition: Set when remedies that assume an
            existing build definition must not be offered.
    """

    def __init__(self, client: ClientMetaData) -> None:
        self.client = client
        self.resolutions: list[Text] = []
        self.missing_build_definition = False

    def do_not_suggest_resolutions_that_require_build_definition(self) -> None:
        self.missing_build_definition = True

    def append_resolution(self, render: Callable[[Text], None]) -> None:
        """Add one remedy; *render* writes it into an empty styled text."""
        output = Text()
        render(output)
        self.resolutions.append(output)


@runtime_checkable
class ResolutionAware(Protocol):
    """A failure that can suggest how to fix itself."""

    def append_resolutions(self, context: ResolutionContext) -> None: ...


def is_resolution_aware(failure: object) -> bool:
    return isinstance(failure, ResolutionAware)

"""Failure presentation: the "What went wrong" / "Try" report.

Remedies come from two places: the failure itself, when it is
resolution-aware, and a fixed list of generic suggestions.  A failure may
ask for generic suggestions that assume an existing build definition to
be left out.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

import click
from rich.text import Text

from buildgate.errors import ResolutionContext, is_resolution_aware
from buildgate.output.docs import HELP_TOPIC

if TYPE_CHECKING:
    from rich.console import Console

    from buildgate.output.client import ClientMetaData
    from buildgate.output.docs import DocumentationRegistry


@dataclass(frozen=True)
class GenericResolution:
    render: Callable[[Text, ResolutionContext, DocumentationRegistry], None]
    requires_build_definition: bool = False


def _inspect_layout(
    output: Text, context: ResolutionContext, _docs: DocumentationRegistry
) -> None:
    output.append("Run ")
    context.client.describe_command(output, "layout", style="gate.user_input")
    output.append(" to inspect the settings file and build script in use.")


def _verbose(output: Text, _context: ResolutionContext, _docs: DocumentationRegistry) -> None:
    output.append("Run with ")
    output.append("--verbose", style="gate.user_input")
    output.append(" to get more log output.")


def _get_help(output: Text, _context: ResolutionContext, docs: DocumentationRegistry) -> None:
    output.append("Get more help at ")
    output.append(docs.url_for(HELP_TOPIC), style="gate.link")
    output.append(".")


GENERIC_RESOLUTIONS: tuple[GenericResolution, ...] = (
    GenericResolution(_inspect_layout, requires_build_definition=True),
    GenericResolution(_verbose),
    GenericResolution(_get_help),
)


def collect_resolutions(
    failure: BaseException,
    client: ClientMetaData,
    docs: DocumentationRegistry,
) -> list[Text]:
    """Gather remedies for *failure*: its own first, then the generic ones."""
    context = ResolutionContext(client)
    if is_resolution_aware(failure):
        failure.append_resolutions(context)  # type: ignore[attr-defined]

    for generic in GENERIC_RESOLUTIONS:
        if generic.requires_build_definition and context.missing_build_definition:
            continue
        context.append_resolution(
            lambda output, render=generic.render: render(output, context, docs)
        )
    return context.resolutions


def failure_message(failure: BaseException) -> str:
    if isinstance(failure, click.ClickException):
        return failure.message
    return str(failure) or type(failure).__name__


def render_failure(console: Console, failure: BaseException, resolutions: list[Text]) -> None:
    """Print the failure report for *failure* to *console*."""
    console.print("FAILURE: Build could not start.", style="gate.failure")
    console.print()
    console.print("* What went wrong:", style="gate.header")
    console.print(Text(failure_message(failure)), soft_wrap=True)
    if resolutions:
        console.print()
        console.print("* Try:", style="gate.header")
        for resolution in resolutions:
            console.print(Text.assemble("> ", resolution), soft_wrap=True)

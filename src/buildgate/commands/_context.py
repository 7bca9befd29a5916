"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds the layout collaborators from settings,
creates the validator lazily, and centralizes output (stdout/stderr
routing + exit codes).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, NoReturn

import click

from buildgate.config.logging import configure_logging
from buildgate.domain.builtins import builtin_commands
from buildgate.domain.invocation import InvocationParameters
from buildgate.infrastructure.layout import BuildLayoutResolver
from buildgate.infrastructure.scripts import ScriptFileResolver
from buildgate.output.client import ClientMetaData
from buildgate.output.console import create_console, get_output
from buildgate.output.docs import DocumentationRegistry
from buildgate.output.failures import collect_resolutions, render_failure
from buildgate.output.formatters import OutputSettings, format_result
from buildgate.services.result import ServiceResult

if TYPE_CHECKING:
    from buildgate.config.settings import GateSettings
    from buildgate.errors import GateError
    from buildgate.services.validator import BuildLayoutValidator


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The validator is
    created on first use so ``--help`` never touches the filesystem.
    """

    def __init__(self, settings: GateSettings) -> None:
        self.settings = settings
        self.scripts = ScriptFileResolver.from_config(settings.layout)
        self.resolver = BuildLayoutResolver(self.scripts)
        self.client = ClientMetaData(settings.client.app_name)
        self.docs = DocumentationRegistry(settings.docs.base_url, settings.docs.version)
        self._validator: BuildLayoutValidator | None = None

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @property
    def validator(self) -> BuildLayoutValidator:
        """The session's validator (created lazily on first access)."""
        if self._validator is None:
            from buildgate.services.validator import BuildLayoutValidator

            self._validator = BuildLayoutValidator(
                self.resolver,
                self.scripts,
                self.docs,
                self.client,
                builtin_commands(self.settings.builtins.commands, self.settings.builtins.default),
            )
        return self._validator

    def invocation(self, task_names: Sequence[str] = ()) -> InvocationParameters:
        """Invocation parameters for *task_names* in the configured project dir."""
        return InvocationParameters(
            current_dir=self.settings.project_dir,
            task_names=tuple(task_names),
            settings_file=self.settings.settings_file,
            search_upwards=self.settings.search_upwards,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def fail(self, op: str, code: str, error: GateError) -> NoReturn:
        """Report *error* with its resolutions and exit with code 1."""
        resolutions = collect_resolutions(error, self.client, self.docs)
        if self.settings.json_output:
            self.emit(
                ServiceResult.failure(
                    op,
                    code,
                    error.message,
                    {"resolutions": [resolution.plain for resolution in resolutions]},
                )
            )
        console = create_console()
        render_failure(console, error, resolutions)
        click.echo(get_output(console), err=True, nl=False)
        raise SystemExit(1)

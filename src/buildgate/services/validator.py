"""Build definition validator.

Fails fast when the invocation directory is not a build root and the
requested tasks do not name a built-in command.  The failure message is
self-contained; :meth:`BuildLayoutError.append_resolutions` adds the
remedy for presentation layers that collect suggestions.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from rich.text import Text

from buildgate.domain.builtins import BuiltInCommand, find_matching
from buildgate.domain.layout import BuildLayout, BuildLayoutConfiguration
from buildgate.errors import GateError, ResolutionContext
from buildgate.output.docs import BUILD_INIT_TOPIC, BUILD_SCRIPT_BASICS_TOPIC

if TYPE_CHECKING:
    from buildgate.domain.invocation import InvocationParameters
    from buildgate.infrastructure.layout import BuildLayoutResolver
    from buildgate.infrastructure.scripts import ScriptFileResolver
    from buildgate.output.client import ClientMetaData
    from buildgate.output.docs import DocumentationRegistry

INIT_COMMAND = "init"


class BuildLayoutError(GateError):
    """The current directory holds no build definition."""

    def __init__(self, message: str, *, current_dir: Path, client: ClientMetaData) -> None:
        super().__init__(message)
        self.current_dir = current_dir
        self.client = client

    def append_resolutions(self, context: ResolutionContext) -> None:
        context.do_not_suggest_resolutions_that_require_build_definition()

        def render(output: Text) -> None:
            output.append("Run ")
            context.client.describe_command(output, INIT_COMMAND, style="gate.user_input")
            output.append(" to create a new build in this directory.")

        context.append_resolution(render)


def _quote_names(names: Sequence[str]) -> str:
    """``'a'``, ``'a' or 'b'``, ``'a', 'b' or 'c'``."""
    quoted = [f"'{name}'" for name in names]
    if len(quoted) <= 1:
        return "".join(quoted)
    return f"{', '.join(quoted[:-1])} or {quoted[-1]}"


class BuildLayoutValidator:
    """Check that an invocation targets a build root.

    One instance per build session.  Holds no mutable state, so repeated
    calls with the same inputs and filesystem give the same outcome.
    """

    def __init__(
        self,
        resolver: BuildLayoutResolver,
        scripts: ScriptFileResolver,
        docs: DocumentationRegistry,
        client: ClientMetaData,
        builtin_commands: Sequence[BuiltInCommand],
    ) -> None:
        self._resolver = resolver
        self._scripts = scripts
        self._docs = docs
        self._client = client
        self._builtin_commands = tuple(builtin_commands)

    @property
    def builtin_commands(self) -> tuple[BuiltInCommand, ...]:
        return self._builtin_commands

    def validate(self, params: InvocationParameters) -> BuildLayout:
        """Return the resolved layout, or raise :class:`BuildLayoutError`.

        Errors raised while resolving the layout propagate unchanged.
        """
        layout = self._resolver.resolve(BuildLayoutConfiguration.from_invocation(params))
        if not layout.definition_missing:
            return layout

        # Built-in commands run in any directory.
        if find_matching(self._builtin_commands, params.task_names) is not None:
            return layout

        raise BuildLayoutError(
            self._missing_definition_message(layout.current_dir),
            current_dir=layout.current_dir,
            client=self._client,
        )

    def _missing_definition_message(self, current_dir: Path) -> str:
        message = Text()
        message.append(f"Directory '{current_dir}' does not contain a build definition.\n\n")
        message.append(
            "A build should contain a "
            f"{_quote_names(self._scripts.settings_file_names())} file in its root directory. "
        )
        message.append(
            f"It may also contain a {_quote_names(self._scripts.build_script_names())} file.\n\n"
        )
        message.append("To create a new build in this directory run '")
        self._client.describe_command(message, INIT_COMMAND)
        message.append("'\n\n")
        message.append(f"For more detail on the '{INIT_COMMAND}' command see ")
        message.append(self._docs.url_for(BUILD_INIT_TOPIC))
        message.append("\n\n")
        message.append("For more detail on creating a build see ")
        message.append(self._docs.url_for(BUILD_SCRIPT_BASICS_TOPIC))
        return message.plain

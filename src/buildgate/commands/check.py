"""Command: check that the project directory can be used as a build root."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from buildgate.commands._base import GateCommand
from buildgate.config.logging import bind_invocation
from buildgate.domain.builtins import find_matching
from buildgate.services.result import ServiceResult
from buildgate.services.validator import BuildLayoutError

if TYPE_CHECKING:
    from buildgate.commands._context import AppContext

logger = logging.getLogger(__name__)

_CHECK_EXAMPLES = """\
  buildgate check
  buildgate check compile test
  buildgate -p ../other-project check assemble
  buildgate --no-search-upward check build
  buildgate -s config/settings.toml check build"""


@click.command("check", cls=GateCommand, examples=_CHECK_EXAMPLES)
@click.argument("tasks", nargs=-1)
@click.pass_obj
def check(app: AppContext, tasks: tuple[str, ...]) -> None:
    """Verify the project directory is a build root for TASKS.

    Succeeds without a build definition when TASKS name a built-in command.
    """
    params = app.invocation(tasks)
    bind_invocation(params.current_dir, params.task_names)

    try:
        layout = app.validator.validate(params)
    except BuildLayoutError as exc:
        logger.debug("Build definition missing in %s", exc.current_dir)
        app.fail("check", "BUILD_DEFINITION_MISSING", exc)

    data = layout.to_dict()
    data["tasks"] = list(params.task_names)
    data["builtin"] = None
    if layout.definition_missing:
        matched = find_matching(app.validator.builtin_commands, params.task_names)
        data["builtin"] = matched.name if matched else None
        logger.debug("No build definition; running built-in command %s", data["builtin"])

    app.emit(ServiceResult(ok=True, op="check", data=data))

"""Subcommand modules for buildgate.

Provides register_commands() which uses deferred imports to keep
``buildgate --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from buildgate.commands.check import check
    from buildgate.commands.init_cmd import init_cmd
    from buildgate.commands.layout import layout

    cli.add_command(check)
    cli.add_command(init_cmd)
    cli.add_command(layout)

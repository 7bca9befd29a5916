"""How the tool's own commands are shown to the user."""

from __future__ import annotations

from rich.text import Text


class ClientMetaData:
    """Describes how to invoke a command of this tool.

    Attributes:
        app_name: The executable name users type.
    """

    def __init__(self, app_name: str = "buildgate") -> None:
        self.app_name = app_name

    def describe_command(self, sink: Text, *args: str, style: str | None = None) -> None:
        """Append ``<app_name> <args...>`` to *sink*, styled when *style* is given."""
        command = " ".join([self.app_name, *args])
        if style:
            sink.append(command, style=style)
        else:
            sink.append(command)

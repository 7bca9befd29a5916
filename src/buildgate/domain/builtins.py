"""Built-in commands: commands the tool runs without a build definition.

The set is an ordered, read-only sequence fixed when the validator is
constructed.  Matching is a linear scan; the first match wins.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class BuiltInCommand(Protocol):
    """A named predicate over the requested task tokens."""

    @property
    def name(self) -> str: ...

    def matches(self, task_names: Sequence[str]) -> bool: ...


@dataclass(frozen=True)
class TaskNameCommand:
    """Built-in command selected by the first requested token.

    The *default* command also matches an invocation with no tokens,
    since that is what the tool runs when no task is requested.
    """

    name: str
    default: bool = False

    def matches(self, task_names: Sequence[str]) -> bool:
        if not task_names:
            return self.default
        return task_names[0] == self.name


def builtin_commands(
    names: Iterable[str],
    default: str | None = None,
) -> tuple[BuiltInCommand, ...]:
    """Build the ordered built-in command set from configured names."""
    return tuple(TaskNameCommand(name, default=name == default) for name in names)


def find_matching(
    commands: Iterable[BuiltInCommand], task_names: Sequence[str]
) -> BuiltInCommand | None:
    """Return the first command in *commands* matching *task_names*, or None."""
    for command in commands:
        if command.matches(task_names):
            return command
    return None

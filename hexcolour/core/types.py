"""Shared types for hexcolour: DomainError, Command, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


class DomainError(ValueError):
    """An argument lies outside the domain of an operation."""


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='hex', help='Encode one colour')

        @command.run
        def run(report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._configure_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register a function that adds subcommand arguments."""
        self._configure_fn = fn
        return fn

    def configure(self, parser: Any) -> None:
        if self._configure_fn is not None:
            self._configure_fn(parser)

    def execute(self, report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(report, args)


@dataclass
class Report:
    """Accumulates encoded colours for text/JSON output."""

    command: str = ''
    rows: list[dict[str, Any]] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)

    def add(self, label: str, hex_str: str, **extra: Any) -> None:
        """Add one encoded colour."""
        self.rows.append({'label': label, 'hex': hex_str, **extra})

    def note(self, key: str, value: Any) -> None:
        """Record a command-level fact (file written, style used, ...)."""
        self.meta[key] = value

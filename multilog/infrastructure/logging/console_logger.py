from __future__ import annotations

import sys
from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.pretty import pretty_repr

from ...application.ports.services import LoggerPort
from ...constants import ConsoleStyles
from .formatting import format_console_args

if TYPE_CHECKING:
    from collections.abc import Sequence


class ConsoleLogger(LoggerPort):
    """Writes prefixed, human-readable lines to the console.

    ``warn`` and ``error`` go to the error console, ``info``, ``log`` and
    ``debug`` to the standard output console.
    """

    def __init__(
        self,
        prefix: str,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        super().__init__()
        self._prefix = prefix
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    @property
    def prefix(self) -> str:
        return self._prefix

    @override
    def warn(self, *args: object) -> None:
        self._emit(self.error_console, args, style=ConsoleStyles.WARN)

    @override
    def error(self, *args: object) -> None:
        self._emit(self.error_console, args, style=ConsoleStyles.ERROR)

    @override
    def info(self, *args: object) -> None:
        self._emit(self.console, args)

    @override
    def debug(self, *args: object) -> None:
        self._emit(self.console, args, style=ConsoleStyles.DEBUG)

    @override
    def log(self, *args: object) -> None:
        self._emit(self.console, args)

    def format(self, args: Sequence[object]) -> list[object]:
        return format_console_args(self._prefix, args)

    def _emit(
        self, console: Console, args: Sequence[object], *, style: str | None = None
    ) -> None:
        # One line per call; "[APP]" or ":name:" in the text stay literal.
        items = [
            (
                item
                if isinstance(item, str)
                else pretty_repr(item, max_width=sys.maxsize)
            )
            for item in self.format(args)
        ]
        console.print(
            *items,
            style=style,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

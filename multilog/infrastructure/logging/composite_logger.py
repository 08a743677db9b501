from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from collections.abc import Iterable


class CompositeLogger(LoggerPort):
    """Forwards every call to each registered logger, in registration order.

    Members are called one after the other on the caller's thread. An
    exception raised by a member propagates immediately and the members
    after it do not receive that call.
    """

    def __init__(self, loggers: Iterable[LoggerPort] = ()) -> None:
        super().__init__()
        self._loggers: list[LoggerPort] = list(loggers)

    @property
    def loggers(self) -> tuple[LoggerPort, ...]:
        return tuple(self._loggers)

    def add_logger(self, logger: LoggerPort) -> None:
        self._loggers.append(logger)

    @override
    def warn(self, *args: object) -> None:
        for logger in self._loggers:
            logger.warn(*args)

    @override
    def error(self, *args: object) -> None:
        for logger in self._loggers:
            logger.error(*args)

    @override
    def info(self, *args: object) -> None:
        for logger in self._loggers:
            logger.info(*args)

    @override
    def log(self, *args: object) -> None:
        for logger in self._loggers:
            logger.log(*args)

    @override
    def debug(self, *args: object) -> None:
        for logger in self._loggers:
            logger.debug(*args)

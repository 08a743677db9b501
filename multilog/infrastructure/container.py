from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..config import ConfigLoader, LoggerConfig
from .logging.composite_logger import CompositeLogger
from .logging.console_logger import ConsoleLogger
from .logging.file_logger import FileLogger
from .logging.null_logger import NullLogger

if TYPE_CHECKING:
    from pathlib import Path

    from ..application.ports.services import LoggerPort


class DependencyContainer:
    pass

    def __init__(
        self,
        config: LoggerConfig | None = None,
        console: Console | None = None,
        error_console: Console | None = None,
        use_null_logger: bool = False,
    ) -> None:
        super().__init__()
        self.config = config or LoggerConfig()
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)
        self.use_null_logger = use_null_logger or self.config.use_null_logger
        self._logger_instance: LoggerPort | None = None
        self._console_logger_instance: ConsoleLogger | None = None
        self._file_logger_instance: FileLogger | None = None

    def create_console_logger(self) -> ConsoleLogger:
        if self._console_logger_instance is None:
            self._console_logger_instance = ConsoleLogger(
                self.config.prefix,
                console=self.console,
                error_console=self.error_console,
            )
        return self._console_logger_instance

    def create_file_logger(self) -> FileLogger:
        if self._file_logger_instance is None:
            file_logger = FileLogger()
            if self.config.log_file is not None:
                file_logger.open(self.config.log_file)
            self._file_logger_instance = file_logger
        return self._file_logger_instance

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                composite = CompositeLogger()
                if self.config.console_enabled:
                    composite.add_logger(self.create_console_logger())
                if self.config.log_file is not None:
                    composite.add_logger(self.create_file_logger())
                self._logger_instance = composite
        return self._logger_instance

    def close(self) -> None:
        if self._file_logger_instance is not None:
            self._file_logger_instance.close()


def create_default_container(
    config_file: Path | None = None,
    console: Console | None = None,
    error_console: Console | None = None,
) -> DependencyContainer:
    return DependencyContainer(
        config=ConfigLoader.load(config_file),
        console=console,
        error_console=error_console,
    )

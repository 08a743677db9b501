"""Tests for dependency injection container.

These tests verify the container builds the configured logger tree,
caches its instances and releases the log file on close.
"""

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from multilog.application.ports import LoggerPort
from multilog.config import LoggerConfig
from multilog.infrastructure import DependencyContainer, create_default_container
from multilog.infrastructure.logging import (
    CompositeLogger,
    ConsoleLogger,
    FileLogger,
    LogFileOpenError,
    NullLogger,
)


def quiet_console() -> Console:
    return Console(file=StringIO(), width=200, color_system=None)


class TestDependencyContainer:
    """Tests for DependencyContainer class."""

    def test_create_container_with_defaults(self):
        """Test creating container with default configuration."""
        container = DependencyContainer()

        assert container.config == LoggerConfig()
        assert container.console is not None
        assert container.error_console is not None
        assert container.use_null_logger is False

    def test_create_container_with_custom_consoles(self):
        """Test creating container with custom consoles."""
        console = quiet_console()
        error_console = quiet_console()
        container = DependencyContainer(console=console, error_console=error_console)

        assert container.console is console
        assert container.error_console is error_console

    def test_null_logger_from_config(self):
        container = DependencyContainer(config=LoggerConfig(use_null_logger=True))

        assert container.use_null_logger is True
        assert isinstance(container.create_logger(), NullLogger)


class TestLoggerFactory:
    """Tests for logger factory methods."""

    def test_create_logger_defaults_to_console_only(self):
        container = DependencyContainer(console=quiet_console())

        logger = container.create_logger()

        assert isinstance(logger, CompositeLogger)
        assert isinstance(logger, LoggerPort)
        assert len(logger.loggers) == 1
        assert isinstance(logger.loggers[0], ConsoleLogger)
        assert logger.loggers[0].prefix == "[multilog]"

    def test_create_logger_returns_null_logger_when_configured(self):
        container = DependencyContainer(use_null_logger=True)

        logger = container.create_logger()

        assert isinstance(logger, NullLogger)
        assert isinstance(logger, LoggerPort)

    def test_create_logger_is_singleton(self):
        container = DependencyContainer()

        assert container.create_logger() is container.create_logger()
        assert container.create_console_logger() is container.create_console_logger()
        assert container.create_file_logger() is container.create_file_logger()

    def test_console_then_file_order(self, tmp_path: Path):
        out = StringIO()
        config = LoggerConfig(prefix="[SVC]", log_file=tmp_path / "svc.log")
        container = DependencyContainer(
            config=config,
            console=Console(file=out, width=200, color_system=None),
            error_console=quiet_console(),
        )

        logger = container.create_logger()
        logger.info("up")
        container.close()

        assert isinstance(logger, CompositeLogger)
        assert [type(member) for member in logger.loggers] == [
            ConsoleLogger,
            FileLogger,
        ]
        assert out.getvalue() == "[SVC] up\n"
        assert (tmp_path / "svc.log").read_text(encoding="utf-8") == '\nINFO ["up"]'

    def test_file_only(self, tmp_path: Path):
        config = LoggerConfig(console_enabled=False, log_file=tmp_path / "only.log")
        container = DependencyContainer(config=config)

        logger = container.create_logger()

        assert isinstance(logger, CompositeLogger)
        assert logger.loggers == (container.create_file_logger(),)
        container.close()

    def test_file_logger_without_path_stays_closed(self):
        container = DependencyContainer()

        file_logger = container.create_file_logger()

        assert file_logger.is_open is False

    def test_close_releases_file(self, tmp_path: Path):
        config = LoggerConfig(log_file=tmp_path / "c.log")
        container = DependencyContainer(config=config, console=quiet_console())
        file_logger = container.create_file_logger()

        container.close()

        assert file_logger.is_open is False

    def test_close_without_file_logger(self):
        DependencyContainer().close()

    def test_unopenable_log_file_raises(self, tmp_path: Path):
        config = LoggerConfig(log_file=tmp_path / "nope" / "x.log")
        container = DependencyContainer(config=config, console=quiet_console())

        with pytest.raises(LogFileOpenError):
            container.create_logger()


class TestCreateDefaultContainer:
    def test_reads_config_file(self, tmp_path: Path):
        log_path = tmp_path / "from_toml.log"
        config_file = tmp_path / "multilog.toml"
        config_file.write_text(
            f'[console]\nprefix = "[TOML]"\nenabled = false\n\n[file]\npath = "{log_path.as_posix()}"\n',
            encoding="utf-8",
        )

        container = create_default_container(config_file)
        container.create_logger().error("x")
        container.close()

        assert container.config.prefix == "[TOML]"
        assert log_path.read_text(encoding="utf-8") == '\nERROR ["x"]'

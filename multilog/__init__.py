"""multilog package.

A small logging facade: one capability (``warn``, ``error``, ``info``,
``log``, ``debug``) with interchangeable implementations.

Features:
- Console logging with a fixed prefix (rich console output)
- Append-only file logging, one JSON-encoded line per call
- Fan-out to any number of loggers, in registration order
- A no-op logger for silent runs and tests
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("multilog")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from multilog.application.ports.services import LoggerPort
from multilog.config import ConfigLoader, LoggerConfig
from multilog.infrastructure.container import (
    DependencyContainer,
    create_default_container,
)
from multilog.infrastructure.logging import (
    CompositeLogger,
    ConsoleLogger,
    FileLogger,
    LogFileError,
    LogFileOpenError,
    NullLogger,
)

__all__ = [
    "__version__",
    # Capability
    "LoggerPort",
    # Implementations
    "CompositeLogger",
    "ConsoleLogger",
    "FileLogger",
    "NullLogger",
    # Errors
    "LogFileError",
    "LogFileOpenError",
    # Configuration and wiring
    "ConfigLoader",
    "DependencyContainer",
    "LoggerConfig",
    "create_default_container",
]

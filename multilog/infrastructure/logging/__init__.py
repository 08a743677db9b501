"""Logging infrastructure.

This module provides the logger implementations behind ``LoggerPort``.
"""

from .composite_logger import CompositeLogger
from .console_logger import ConsoleLogger
from .exceptions import LogFileError, LogFileOpenError, LoggingInfrastructureError
from .file_logger import FileLogger
from .formatting import encode_args, encode_file_line, format_console_args
from .null_logger import NullLogger

__all__ = [
    "CompositeLogger",
    "ConsoleLogger",
    "FileLogger",
    "LogFileError",
    "LogFileOpenError",
    "LoggingInfrastructureError",
    "NullLogger",
    "encode_args",
    "encode_file_line",
    "format_console_args",
]

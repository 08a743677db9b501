from __future__ import annotations

import os
from pathlib import Path
import threading
from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort
from ...constants import FileModes, LevelTags
from .exceptions import LogFileOpenError
from .formatting import encode_file_line

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType


_APPEND_FLAGS = os.O_WRONLY | os.O_APPEND | os.O_CREAT | getattr(os, "O_CLOEXEC", 0)


class FileLogger(LoggerPort):
    """Appends level-tagged JSON lines to a file.

    The logger starts closed. While closed every write is dropped without
    error. A held descriptor is tracked as ``int | None``: descriptor ``0``
    is a valid open file, only ``None`` means closed.
    """

    def __init__(self) -> None:
        super().__init__()
        self._fd: int | None = None
        self._path: Path | None = None
        self._lock = threading.Lock()

    @property
    def is_open(self) -> bool:
        return self._fd is not None

    @property
    def path(self) -> Path | None:
        return self._path

    def open(self, path: str | os.PathLike[str]) -> None:
        """Open ``path`` for appending, closing any previously open file.

        Raises:
            LogFileOpenError: If the file cannot be opened. The logger is
                left closed.
        """
        target = Path(path)
        with self._lock:
            self._close_unlocked()
            try:
                fd = os.open(target, _APPEND_FLAGS, FileModes.CREATE_PERMISSIONS)
            except OSError as exc:
                raise LogFileOpenError(
                    exc.errno,
                    f"Cannot open log file {target}: {exc.strerror}",
                    str(target),
                ) from exc
            self._fd = fd
            self._path = target

    def close(self) -> None:
        with self._lock:
            self._close_unlocked()

    @override
    def warn(self, *args: object) -> None:
        self.write(LevelTags.WARN, args)

    @override
    def error(self, *args: object) -> None:
        self.write(LevelTags.ERROR, args)

    @override
    def info(self, *args: object) -> None:
        self.write(LevelTags.INFO, args)

    @override
    def log(self, *args: object) -> None:
        self.write(LevelTags.LOG, args)

    @override
    def debug(self, *args: object) -> None:
        self.write(LevelTags.DEBUG, args)

    def write(self, level: str, args: Sequence[object]) -> None:
        with self._lock:
            if self._fd is None:
                return
            data = encode_file_line(level, args).encode(FileModes.ENCODING)
            view = memoryview(data)
            while view:
                written = os.write(self._fd, view)
                view = view[written:]

    def __enter__(self) -> FileLogger:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _close_unlocked(self) -> None:
        if self._fd is None:
            return
        fd = self._fd
        self._fd = None
        self._path = None
        os.close(fd)

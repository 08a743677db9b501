from typing import override

from ...application.ports.services import LoggerPort


class NullLogger(LoggerPort):
    pass

    @override
    def warn(self, *args: object) -> None:
        return

    @override
    def error(self, *args: object) -> None:
        return

    @override
    def info(self, *args: object) -> None:
        return

    @override
    def log(self, *args: object) -> None:
        return

    @override
    def debug(self, *args: object) -> None:
        return

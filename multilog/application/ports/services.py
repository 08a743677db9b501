from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerPort(Protocol):
    """The logging capability shared by every logger implementation.

    Each operation takes any number of heterogeneous arguments (text,
    structured data or ``None``) and returns nothing.
    """

    def warn(self, *args: object) -> None: ...

    def error(self, *args: object) -> None: ...

    def info(self, *args: object) -> None: ...

    def log(self, *args: object) -> None: ...

    def debug(self, *args: object) -> None: ...

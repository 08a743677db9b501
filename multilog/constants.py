from typing import ClassVar


class Defaults:
    PREFIX = "[multilog]"
    CONSOLE_ENABLED = True
    USE_NULL_LOGGER = False
    CONFIG_FILE = "multilog.toml"


class LevelTags:
    WARN = "WARN"
    ERROR = "ERROR"
    INFO = "INFO"
    LOG = "LOG"
    DEBUG = "DEBUG"


class ConsoleStyles:
    WARN = "yellow"
    ERROR = "red"
    DEBUG = "dim cyan"


class EnvVars:
    PREFIX = "MULTILOG_PREFIX"
    CONSOLE = "MULTILOG_CONSOLE"
    FILE = "MULTILOG_FILE"
    NULL = "MULTILOG_NULL"


class FileModes:
    CREATE_PERMISSIONS = 0o666
    ENCODING = "utf-8"


class BooleanStrings:
    TRUE: ClassVar[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
    FALSE: ClassVar[frozenset[str]] = frozenset({"0", "false", "no", "off"})

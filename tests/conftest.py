import pytest

from multilog.constants import EnvVars


@pytest.fixture(autouse=True)
def _isolate_multilog_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's MULTILOG_* variables out of the tests.

    ``LoggerConfig.from_env`` reads these variables; tests that need them
    set them explicitly through ``monkeypatch``.
    """
    for name in (EnvVars.PREFIX, EnvVars.CONSOLE, EnvVars.FILE, EnvVars.NULL):
        monkeypatch.delenv(name, raising=False)

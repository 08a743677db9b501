from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import BooleanStrings, Defaults, EnvVars


@dataclass(frozen=True, slots=True)
class LoggerConfig:
    prefix: str = Defaults.PREFIX
    console_enabled: bool = Defaults.CONSOLE_ENABLED
    log_file: Path | None = None
    use_null_logger: bool = Defaults.USE_NULL_LOGGER

    def __post_init__(self) -> None:
        if "\n" in self.prefix or "\r" in self.prefix:
            raise ValueError(f"prefix must be a single line, got {self.prefix!r}")

    @classmethod
    def from_env(cls) -> LoggerConfig:
        raw_file = os.getenv(EnvVars.FILE)
        log_file = Path(raw_file.strip()) if raw_file and raw_file.strip() else None
        return cls(
            prefix=os.getenv(EnvVars.PREFIX, Defaults.PREFIX),
            console_enabled=_coerce_bool(
                os.getenv(EnvVars.CONSOLE) or None,
                key=EnvVars.CONSOLE,
                default=Defaults.CONSOLE_ENABLED,
            ),
            log_file=log_file,
            use_null_logger=_coerce_bool(
                os.getenv(EnvVars.NULL) or None,
                key=EnvVars.NULL,
                default=Defaults.USE_NULL_LOGGER,
            ),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> LoggerConfig:
        config = LoggerConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: LoggerConfig) -> LoggerConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        console_section = _get_table(data, "console")
        file_section = _get_table(data, "file")
        logger_section = _get_table(data, "logger")
        config = base_config
        if (value := console_section.get("prefix")) is not None:
            config = replace(config, prefix=str(value))
        if (value := console_section.get("enabled")) is not None:
            config = replace(
                config, console_enabled=_coerce_bool(value, key="console.enabled")
            )
        if "path" in file_section:
            raw = file_section.get("path")
            cleaned = str(raw).strip() if raw is not None else ""
            config = replace(config, log_file=Path(cleaned) if cleaned else None)
        if (value := logger_section.get("null")) is not None:
            config = replace(
                config, use_null_logger=_coerce_bool(value, key="logger.null")
            )
        return config


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_bool(value: object, *, key: str, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in BooleanStrings.TRUE:
            return True
        if lowered in BooleanStrings.FALSE:
            return False
    raise ValueError(f"{key} must be a boolean, got {value!r}")

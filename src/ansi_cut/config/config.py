"""
Configuration management for the ansi_cut command line demo.
"""

import os
from dataclasses import dataclass
from typing import Any


DISABLED_VALUES = {"", "none", "false"}


def _optional_str(raw: str | None) -> str | None:
    if raw is None or raw.strip().lower() in DISABLED_VALUES:
        return None
    return raw


def _optional_int(raw: str | None) -> int | None:
    value = _optional_str(raw)
    return None if value is None else int(value)


@dataclass
class LogConfig:
    """Configuration for logging."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str | None = None

    @classmethod
    def from_env(cls) -> "LogConfig":
        """Read LOG_LEVEL, LOG_FORMAT and LOG_FILE.

        LOG_FILE set to "none", "false" or nothing disables file logging.

        Returns:
            LogConfig: A new LogConfig instance.
        """
        return cls(
            level=os.getenv("LOG_LEVEL", cls.level),
            format=os.getenv("LOG_FORMAT", cls.format),
            file=_optional_str(os.getenv("LOG_FILE")),
        )

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "LogConfig":
        """Create a LogConfig from a dictionary.

        Args:
            config: Dictionary containing logging configuration.

        Returns:
            LogConfig: A new LogConfig instance.
        """
        return cls(
            level=config.get("level", cls.level),
            format=config.get("format", cls.format),
            file=config.get("file"),
        )


@dataclass
class DemoConfig:
    """Defaults for the cut and chunks demo commands."""

    width: int = 4
    start: int = 4
    end: int | None = 8

    @classmethod
    def from_env(cls) -> "DemoConfig":
        """Create a DemoConfig from environment variables.

        Returns:
            DemoConfig: A new DemoConfig instance.
        """
        return cls(
            width=int(os.getenv("ANSI_CUT_WIDTH", cls.width)),
            start=int(os.getenv("ANSI_CUT_START", cls.start)),
            end=_optional_int(os.getenv("ANSI_CUT_END", str(cls.end))),
        )

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "DemoConfig":
        """Create a DemoConfig from a dictionary.

        Args:
            config: Dictionary containing demo configuration.

        Returns:
            DemoConfig: A new DemoConfig instance.
        """
        return cls(
            width=config.get("width", cls.width),
            start=config.get("start", cls.start),
            end=config.get("end", cls.end),
        )


@dataclass
class Config:
    """Main configuration class."""

    log: LogConfig
    demo: DemoConfig

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config: A new Config instance.
        """
        return cls(
            log=LogConfig.from_env(),
            demo=DemoConfig.from_env(),
        )

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "Config":
        """Create a Config from a dictionary.

        Args:
            config: Dictionary containing configuration.

        Returns:
            Config: A new Config instance.
        """
        return cls(
            log=LogConfig.from_dict(config.get("log", {})),
            demo=DemoConfig.from_dict(config.get("demo", {})),
        )

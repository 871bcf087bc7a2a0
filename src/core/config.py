"""Runtime configuration, read from environment variables."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Self

from src.core.exceptions import ConfigError

# Listen on every interface, like a plain ":8080" server would
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Level names understood by both the logging module and uvicorn
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_LEVEL_ALIASES: dict[str, str] = {"WARN": "WARNING", "FATAL": "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Self:
        """Build settings from CHESS_HOST, CHESS_PORT and CHESS_LOG_LEVEL (falling back to the defaults)."""
        env = os.environ if environ is None else environ

        raw_port = env.get("CHESS_PORT", str(DEFAULT_PORT))
        if not raw_port.isdigit() or not (0 < int(raw_port) < 65536):
            raise ConfigError(f"CHESS_PORT must be a port number, got {raw_port!r}")

        log_level = env.get("CHESS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        log_level = LOG_LEVEL_ALIASES.get(log_level, log_level)
        if log_level not in LOG_LEVELS:
            raise ConfigError(
                f"CHESS_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )

        return cls(
            host=env.get("CHESS_HOST", DEFAULT_HOST),
            port=int(raw_port),
            log_level=log_level,
        )


def configure_logging(settings: Settings) -> None:
    """Set up the root logger once for the whole process."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

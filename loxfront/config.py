"""Configuration for the Lox command-line driver."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOG_LEVEL_ENV = "LOX_LOG_LEVEL"


@dataclass
class DriverConfig:
    """Settings for one driver session; flags on the command line override these."""

    prompt: str = "> "
    log_level: str = "WARNING"
    explain: bool = False
    show_tokens: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DriverConfig":
        """Build a config from defaults plus ``LOX_LOG_LEVEL``."""
        environ = os.environ if environ is None else environ
        config = cls()
        level = environ.get(LOG_LEVEL_ENV)
        if level:
            config.log_level = level.upper()
        return config

    def numeric_log_level(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        return level

"""Configuration for the shellarg command line tool."""

import os
from dataclasses import dataclass
from typing import Optional

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ShellArgConfig:
    """Logging settings read from the environment."""

    log_level: str = "INFO"
    log_file: Optional[str] = None
    console_output: bool = False

    @staticmethod
    def from_env() -> "ShellArgConfig":
        """Load configuration from SHELLARG_* environment variables.

        Raises:
            ValueError: If SHELLARG_LOG_LEVEL is not a known level
        """
        log_level = os.getenv("SHELLARG_LOG_LEVEL", "INFO").strip().upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"SHELLARG_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)} (got '{log_level}')."
            )

        log_file = os.getenv("SHELLARG_LOG_FILE") or None
        console_output = os.getenv("SHELLARG_LOG_CONSOLE", "false").lower() == "true"

        return ShellArgConfig(
            log_level=log_level,
            log_file=log_file,
            console_output=console_output,
        )

"""
Runtime settings read from the environment.

Environment Variables:
    CALC_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    CALC_LOG_FORMAT: json, text (default: text)
    CALC_DISPLAY_WIDTH: Number of display cells (default: 10)
"""

import os
from dataclasses import dataclass

DEFAULT_DISPLAY_WIDTH = 10


@dataclass
class Settings:
    log_level: str
    log_format: str
    display_width: int

    @staticmethod
    def from_env() -> "Settings":
        log_level = os.getenv("CALC_LOG_LEVEL", "INFO").upper()
        log_format = os.getenv("CALC_LOG_FORMAT", "text").lower()
        display_width = int(os.getenv("CALC_DISPLAY_WIDTH", str(DEFAULT_DISPLAY_WIDTH)))
        if display_width < 1:
            raise ValueError(f"CALC_DISPLAY_WIDTH must be positive, got {display_width}")
        return Settings(
            log_level=log_level,
            log_format=log_format,
            display_width=display_width,
        )

"""
Environment driven settings.

Only logging is configurable; the container itself has no tunables.
"""

import os
from dataclasses import dataclass
from typing import Optional


ENV_LOG_LEVEL = "SIMPLE_MATRIX_LOG_LEVEL"
ENV_LOG_FILE = "SIMPLE_MATRIX_LOG_FILE"
ENV_LOG_ROTATION = "SIMPLE_MATRIX_LOG_ROTATION"


@dataclass
class LoggingSettings:
    log_level: str = "INFO"
    log_file: Optional[str] = None
    rotation: str = "10 MB"

    @classmethod
    def from_env(cls, environ=None):
        """Build settings from SIMPLE_MATRIX_* variables, falling back to defaults."""
        environ = os.environ if environ is None else environ
        return cls(
            log_level=environ.get(ENV_LOG_LEVEL, cls.log_level).upper(),
            log_file=environ.get(ENV_LOG_FILE) or None,
            rotation=environ.get(ENV_LOG_ROTATION, cls.rotation),
        )

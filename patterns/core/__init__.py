"""Core package - configuration, errors and logging setup."""

from .config import Settings, get_settings
from .errors import (
    PatternError,
    PatternConfigurationError,
    NoSuchPatternError,
    PatternComputedNoneError,
)
from .log import configure_logging

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "PatternError",
    "PatternConfigurationError",
    "NoSuchPatternError",
    "PatternComputedNoneError",
    # Logging
    "configure_logging",
]

# mycontext/core/__init__.py
"""
Core module - configuration, logging and the shared exception hierarchy.
"""
from .config import settings, Settings
from .exceptions import (
    MyContextError,
    SpawnError,
    CommandFailed,
    ConfigurationError,
    LLMError,
    RateLimitError,
    InstantDBError,
    ScaffoldError,
)
from .logging import log, logger, LogLevel

__all__ = [
    "settings",
    "Settings",
    "MyContextError",
    "SpawnError",
    "CommandFailed",
    "ConfigurationError",
    "LLMError",
    "RateLimitError",
    "InstantDBError",
    "ScaffoldError",
    "log",
    "logger",
    "LogLevel",
]

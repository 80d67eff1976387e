"""Observability helpers for ecsresolve (logging configuration)."""

from .logging import (
    CONSOLE_FORMAT,
    FILE_FORMAT,
    LogConfig,
    LogLevel,
    _setup_logging,
    _teardown_logging,
)

__all__ = [
    "LogConfig",
    "LogLevel",
    "CONSOLE_FORMAT",
    "FILE_FORMAT",
    "_setup_logging",
    "_teardown_logging",
]

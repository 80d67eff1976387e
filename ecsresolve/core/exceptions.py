"""Custom exception hierarchy for ecsresolve.

AWS failures never surface as exceptions: the executor turns them into
absent results. What remains here are configuration mistakes and
identifiers of the wrong type.
"""

from __future__ import annotations


class EcsResolveError(Exception):
    """Base exception for all ecsresolve errors."""


class ConfigurationError(EcsResolveError):
    """Raised for invalid configuration or unknown settings."""


class IdentifierError(EcsResolveError, TypeError):
    """Raised when a value cannot be normalized into a resource identifier."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Expected an identifier string or ResourceId, got {type(value).__name__}: {value!r}"
        )

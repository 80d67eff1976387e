"""Uniform invocation of a single AWS API call.

Every catalog method funnels its boto3 call through :func:`invoke`, which
classifies failures, logs them once, and degrades to ``None``. Callers
never see a botocore exception.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger

from ecsresolve.constants import ERROR_CODE_LABELS

log = logger.bind(component="executor")

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Failure:
    """Classified failure of one remote call.

    Attributes:
        operation: Qualified operation name, e.g. ``ecs.list_clusters``.
        code: Service-reported error code, or None for generic failures.
        message: Error text as reported by botocore.
    """

    operation: str
    code: str | None
    message: str

    @property
    def label(self) -> str:
        if self.code is None:
            return "generic error"
        return describe_code(self.code)


def describe_code(code: str) -> str:
    """Human label for a well-known error code; unknown codes label as themselves."""
    return ERROR_CODE_LABELS.get(code, code)


def classify(operation: str, exc: BotoCoreError | ClientError) -> Failure:
    if isinstance(exc, ClientError):
        error = exc.response.get("Error", {})
        code = error.get("Code") or None
        return Failure(operation=operation, code=code, message=error.get("Message") or str(exc))
    return Failure(operation=operation, code=None, message=str(exc))


def _report(failure: Failure) -> None:
    bound = log.bind(operation=failure.operation, code=failure.code)
    if failure.code is None:
        bound.error("{operation} failed: {message}", operation=failure.operation, message=failure.message)
    else:
        bound.error(
            "{operation} failed with {code} ({label}): {message}",
            operation=failure.operation,
            code=failure.code,
            label=failure.label,
            message=failure.message,
        )


def invoke(operation: str, call: Callable[[], T]) -> T | None:
    """Run one remote call, returning its result or None on failure.

    Args:
        operation: Qualified operation name used in diagnostics.
        call: Zero-argument callable performing exactly one remote call.

    Returns:
        The call's result unchanged, or None if botocore raised.
    """
    try:
        return call()
    except (ClientError, BotoCoreError) as e:
        _report(classify(operation, e))
        return None

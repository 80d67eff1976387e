"""Shared types: dynamic result values and resource identifiers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

from ecsresolve.core.exceptions import IdentifierError

Json: TypeAlias = dict[str, "Json"] | list["Json"] | str | int | float | bool | None
"""Dynamically shaped AWS response value. ``None`` doubles as the absent marker."""


@dataclass(frozen=True, slots=True)
class ResourceId:
    """Typed handle for a cluster, service, container-instance or EC2 identifier.

    Interchangeable with a raw string wherever an identifier is accepted.

    Example:
        >>> ResourceId("i-0abc")
        ResourceId(value='i-0abc')
        >>> str(ResourceId("i-0abc"))
        'i-0abc'
    """

    value: str

    def __str__(self) -> str:
        return self.value

    @property
    def short_name(self) -> str:
        """Trailing segment of an ARN (``cluster/prod`` -> ``prod``)."""
        return short_name(self.value)


Identifier: TypeAlias = str | ResourceId


def short_name(arn: str) -> str:
    """Strip everything up to and including the last ``/``."""
    return arn[arn.rfind("/") + 1:]


def to_identifier(value: object) -> str:
    """Normalize a raw string or ResourceId into an identifier string."""
    match value:
        case str():
            return value
        case ResourceId(value=inner):
            return inner
        case _:
            raise IdentifierError(value)


def to_identifiers(values: object) -> list[str]:
    """Normalize a sequence of identifiers; a bare string or non-sequence is an IdentifierError."""
    if isinstance(values, (str, dict)) or not isinstance(values, Iterable):
        raise IdentifierError(values)
    return [to_identifier(v) for v in values]

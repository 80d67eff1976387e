"""JMESPath extraction over dynamically shaped AWS responses."""

from __future__ import annotations

import jmespath
from jmespath.exceptions import JMESPathError
from loguru import logger

from ecsresolve.types import Json

log = logger.bind(component="query")


def search(expression: str, value: Json | None) -> Json | None:
    """Evaluate a JMESPath expression against a response.

    Absent input short-circuits before the expression is even parsed, so a
    failed call upstream never produces a second diagnostic here. Evaluation
    errors are logged once and reported as None.

    Example:
        >>> search("clusterArns[0]", {"clusterArns": ["arn:...:cluster/prod"]})
        'arn:...:cluster/prod'
        >>> search("clusterArns", None) is None
        True
    """
    if value is None:
        return None
    try:
        return jmespath.search(expression, value)
    except JMESPathError as e:
        log.bind(expression=expression).error(
            "Query {expression!r} failed: {error}", expression=expression, error=e,
        )
        return None

"""One method per ECS/EC2 operation: invoke, then extract with a JMESPath query.

Each method returns whatever the caller's query selects from the raw
response, or None when the call failed or the query matched nothing.

Example:
    >>> api = AwsApi(connect("us-east-1"))
    >>> api.list_clusters("clusterArns")
    ['arn:aws:ecs:us-east-1:123456789012:cluster/prod']
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ecsresolve.executor import invoke
from ecsresolve.query import search
from ecsresolve.types import Identifier, Json, to_identifier, to_identifiers

if TYPE_CHECKING:
    from ecsresolve.clients import AwsContext


def _params(**kwargs: Any) -> dict[str, Any]:
    """Drop unset parameters; boto3 rejects explicit None values."""
    return {k: v for k, v in kwargs.items() if v is not None}


class AwsApi:
    """Thin catalog over the ECS and EC2 clients of an :class:`AwsContext`."""

    def __init__(self, context: AwsContext) -> None:
        self._ctx = context

    @property
    def context(self) -> AwsContext:
        return self._ctx

    # =========================================================================
    # ECS: clusters and services
    # =========================================================================

    def list_clusters(self, query: str) -> Json | None:
        output = invoke("ecs.list_clusters", lambda: self._ctx.ecs.list_clusters())
        return search(query, output)

    def list_services(self, cluster: Identifier, query: str) -> Json | None:
        params = _params(cluster=to_identifier(cluster))
        output = invoke("ecs.list_services", lambda: self._ctx.ecs.list_services(**params))
        return search(query, output)

    def describe_services(
        self, cluster: Identifier, services: Sequence[Identifier], query: str,
    ) -> Json | None:
        params = _params(cluster=to_identifier(cluster), services=to_identifiers(services))
        output = invoke("ecs.describe_services", lambda: self._ctx.ecs.describe_services(**params))
        return search(query, output)

    def describe_task_definition(self, task_definition: Identifier, query: str) -> Json | None:
        params = _params(taskDefinition=to_identifier(task_definition))
        output = invoke(
            "ecs.describe_task_definition",
            lambda: self._ctx.ecs.describe_task_definition(**params),
        )
        return search(query, output)

    # =========================================================================
    # ECS: container instances
    # =========================================================================

    def list_container_instances(
        self, cluster: Identifier, filter: str | None, query: str,  # noqa: A002
    ) -> Json | None:
        params = _params(cluster=to_identifier(cluster), filter=filter)
        output = invoke(
            "ecs.list_container_instances",
            lambda: self._ctx.ecs.list_container_instances(**params),
        )
        return search(query, output)

    def describe_container_instances(
        self, cluster: Identifier, container_instances: Sequence[Identifier], query: str,
    ) -> Json | None:
        params = _params(
            cluster=to_identifier(cluster),
            containerInstances=to_identifiers(container_instances),
        )
        output = invoke(
            "ecs.describe_container_instances",
            lambda: self._ctx.ecs.describe_container_instances(**params),
        )
        return search(query, output)

    # =========================================================================
    # ECS: tasks
    # =========================================================================

    def list_tasks(self, cluster: Identifier, service: Identifier | None, query: str) -> Json | None:
        service_name = to_identifier(service) if service is not None else None
        params = _params(cluster=to_identifier(cluster), serviceName=service_name)
        output = invoke("ecs.list_tasks", lambda: self._ctx.ecs.list_tasks(**params))
        return search(query, output)

    def describe_tasks(
        self, cluster: Identifier, tasks: Sequence[Identifier], query: str,
    ) -> Json | None:
        params = _params(cluster=to_identifier(cluster), tasks=to_identifiers(tasks))
        output = invoke("ecs.describe_tasks", lambda: self._ctx.ecs.describe_tasks(**params))
        return search(query, output)

    # =========================================================================
    # EC2
    # =========================================================================

    def describe_instances(self, instance_ids: Sequence[Identifier], query: str) -> Json | None:
        params = _params(InstanceIds=to_identifiers(instance_ids))
        output = invoke("ec2.describe_instances", lambda: self._ctx.ec2.describe_instances(**params))
        return search(query, output)

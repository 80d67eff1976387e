"""Multi-hop lookups: service -> container instances -> EC2 instances -> private IPs.

Each hop feeds the identifiers extracted from one call into the next.
An absent or empty hop ends the chain with None; no call is ever made
with an empty identifier list.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from loguru import logger

from ecsresolve.constants import (
    CLUSTER_ARNS_QUERY,
    CONTAINER_INSTANCE_ARNS_QUERY,
    EC2_INSTANCE_IDS_QUERY,
    PRIVATE_IPS_QUERY,
    SERVICE_ARNS_QUERY,
    SERVICE_GROUP_FILTER,
)
from ecsresolve.core.exceptions import IdentifierError
from ecsresolve.types import Identifier, Json, short_name, to_identifier, to_identifiers

if TYPE_CHECKING:
    from ecsresolve.api import AwsApi

log = logger.bind(component="resolution")


def _coerce(values: Json | Iterable[object], what: str) -> list[str] | None:
    if values is None:
        return None
    try:
        return to_identifiers(values)
    except IdentifierError as e:
        log.error("Cannot read {what} from response: {error}", what=what, error=e)
        return None


# =============================================================================
# Chain hops
# =============================================================================


def container_instances_for_service(api: AwsApi, cluster: Identifier, service: Identifier) -> list[str] | None:
    """Container instance ARNs running tasks of ``service`` in ``cluster``."""
    flt = SERVICE_GROUP_FILTER.format(service=to_identifier(service))
    arns = api.list_container_instances(cluster, flt, CONTAINER_INSTANCE_ARNS_QUERY)
    return _coerce(arns, "container instance ARNs")


def ec2_ids_for_container_instances(
    api: AwsApi, cluster: Identifier, container_instances: Sequence[Identifier] | None,
) -> list[str] | None:
    """EC2 instance ids backing the given container instances."""
    if not container_instances:
        return None
    ids = api.describe_container_instances(
        to_identifier(cluster), to_identifiers(container_instances), EC2_INSTANCE_IDS_QUERY,
    )
    return _coerce(ids, "EC2 instance ids")


def private_ips_for_ec2_ids(api: AwsApi, instance_ids: Sequence[Identifier] | None) -> list[str] | None:
    """Private IPv4 address of the first instance of each reservation."""
    if not instance_ids:
        return None
    ips = api.describe_instances(to_identifiers(instance_ids), PRIVATE_IPS_QUERY)
    return _coerce(ips, "private IP addresses")


def private_ips_for_service(api: AwsApi, cluster: Identifier, service: Identifier) -> list[str] | None:
    """Private addresses of the EC2 hosts running ``service``."""
    container_instances = container_instances_for_service(api, cluster, service)
    ec2_ids = ec2_ids_for_container_instances(api, cluster, container_instances)
    ips = private_ips_for_ec2_ids(api, ec2_ids)
    log.bind(cluster=str(cluster), service=str(service)).debug(
        "Resolved {service} to {ips}", service=str(service), ips=ips,
    )
    return ips


# =============================================================================
# Listings
# =============================================================================


def _short_names(arns: Json | None, what: str) -> list[str]:
    names = [short_name(arn) for arn in _coerce(arns, what) or []]
    log.debug("{what}: {names}", what=what, names=names)
    return names


def cluster_names(api: AwsApi) -> list[str]:
    """Short names of every cluster in the region."""
    return _short_names(api.list_clusters(CLUSTER_ARNS_QUERY), "cluster ARNs")


def service_names(api: AwsApi, cluster: Identifier) -> list[str]:
    """Short names of the services in ``cluster``."""
    return _short_names(api.list_services(cluster, SERVICE_ARNS_QUERY), "service ARNs")

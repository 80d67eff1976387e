"""ecsresolve - resolve ECS services to the EC2 hosts and addresses behind them.

Example:

    from ecsresolve import Resolver

    with Resolver(region="us-east-1") as r:
        r.cluster_names()                       # ['prod', 'dev']
        r.service_private_ips("prod", "web")    # ['10.0.0.5', '10.0.1.7']

Lower-level pieces are usable on their own:

    from ecsresolve import AwsApi, connect

    api = AwsApi(connect())
    api.describe_services("prod", ["web"], "services[0].runningCount")
"""

from ecsresolve.api import AwsApi
from ecsresolve.clients import AwsContext, AwsModule, connect
from ecsresolve.config import Settings, load_settings
from ecsresolve.core.exceptions import ConfigurationError, EcsResolveError, IdentifierError
from ecsresolve.executor import Failure, invoke
from ecsresolve.facade import Resolver
from ecsresolve.metadata import MetadataConfig, detect_region
from ecsresolve.observability.logging import LogConfig
from ecsresolve.query import search
from ecsresolve.resolution import (
    cluster_names,
    container_instances_for_service,
    ec2_ids_for_container_instances,
    private_ips_for_ec2_ids,
    private_ips_for_service,
    service_names,
    to_identifier,
    to_identifiers,
)
from ecsresolve.types import Identifier, Json, ResourceId

__all__ = [
    # Facade
    "Resolver",
    # Clients
    "AwsApi",
    "AwsContext",
    "AwsModule",
    "connect",
    "detect_region",
    # Core
    "Failure",
    "invoke",
    "search",
    # Resolution chain
    "cluster_names",
    "service_names",
    "container_instances_for_service",
    "ec2_ids_for_container_instances",
    "private_ips_for_ec2_ids",
    "private_ips_for_service",
    "to_identifier",
    "to_identifiers",
    # Types
    "Identifier",
    "Json",
    "ResourceId",
    # Configuration
    "Settings",
    "MetadataConfig",
    "LogConfig",
    "load_settings",
    # Errors
    "EcsResolveError",
    "ConfigurationError",
    "IdentifierError",
]

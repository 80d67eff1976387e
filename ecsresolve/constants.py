"""Centralized constants for ecsresolve."""

from __future__ import annotations

from typing import Final

# =============================================================================
# Instance Metadata Service
# =============================================================================

METADATA_BASE_URL: Final = "http://169.254.169.254"
METADATA_TOKEN_PATH: Final = "/latest/api/token"
METADATA_IDENTITY_PATH: Final = "/latest/dynamic/instance-identity/document"
METADATA_TOKEN_HEADER: Final = "X-aws-ec2-metadata-token"
METADATA_TOKEN_TTL_HEADER: Final = "X-aws-ec2-metadata-token-ttl-seconds"
METADATA_TIMEOUT: Final = 2.0
METADATA_TOKEN_TTL: Final = 21600

# =============================================================================
# Queries used by the resolution chain
# =============================================================================

SERVICE_GROUP_FILTER: Final = "task:group == service:{service}"
CONTAINER_INSTANCE_ARNS_QUERY: Final = "containerInstanceArns"
EC2_INSTANCE_IDS_QUERY: Final = "containerInstances[*].ec2InstanceId"
PRIVATE_IPS_QUERY: Final = "Reservations[*].Instances[0].PrivateIpAddress"
CLUSTER_ARNS_QUERY: Final = "clusterArns"
SERVICE_ARNS_QUERY: Final = "serviceArns"

# =============================================================================
# Well-known service error codes
# =============================================================================

ERROR_CODE_LABELS: Final[dict[str, str]] = {
    # ECS
    "ServerException": "server-side failure",
    "ClientException": "client-side failure",
    "InvalidParameterException": "invalid parameter",
    "ClusterNotFoundException": "cluster not found",
    "ServiceNotFoundException": "service not found",
    "AccessDeniedException": "access denied",
    # EC2
    "InvalidInstanceID.NotFound": "instance not found",
    "InvalidInstanceID.Malformed": "malformed instance id",
    "UnauthorizedOperation": "unauthorized operation",
    "RequestLimitExceeded": "request limit exceeded",
}

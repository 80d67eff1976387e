"""boto3 client construction with dependency injection.

Provides the long-lived ECS/EC2 client pair shared by every call, and an
injector module that wires it from Settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import boto3
from botocore.exceptions import BotoCoreError
from injector import Module, provider, singleton
from loguru import logger

from ecsresolve.api import AwsApi
from ecsresolve.config import Settings
from ecsresolve.metadata import MetadataConfig, detect_region

if TYPE_CHECKING:
    from mypy_boto3_ec2 import EC2Client
    from mypy_boto3_ecs import ECSClient

log = logger.bind(component="clients")


@dataclass(frozen=True, slots=True)
class AwsContext:
    """ECS and EC2 clients bound to one region. Never mutated after construction."""

    ecs: ECSClient
    ec2: EC2Client
    region: str


def connect(
    region: str = "",
    *,
    profile: str | None = None,
    metadata: MetadataConfig | None = None,
) -> AwsContext:
    """Build the client pair, resolving the region if none is given.

    Region resolution order: explicit argument, instance metadata, then
    boto3's own chain (AWS_REGION, AWS_DEFAULT_REGION, ~/.aws/config).

    Raises:
        SystemExit: if the session or clients cannot be constructed.
    """
    if not region:
        region = detect_region(metadata)

    try:
        session = boto3.Session(profile_name=profile, region_name=region or None)
        ecs = session.client("ecs")
        ec2 = session.client("ec2")
    except BotoCoreError as e:
        log.critical("Failed to create AWS session: {error}", error=e)
        raise SystemExit(1) from e

    resolved = ecs.meta.region_name
    log.debug("Connected to ECS/EC2 in {region}", region=resolved)
    return AwsContext(ecs=ecs, ec2=ec2, region=resolved)


class AwsModule(Module):
    """DI module that provides the client context and API catalog.

    Usage:
        >>> from injector import Injector
        >>> from ecsresolve.clients import AwsModule
        >>> from ecsresolve.config import Settings
        >>>
        >>> injector = Injector([AwsModule()])
        >>> injector.binder.bind(Settings, to=Settings(region="us-east-1"))
        >>> api = injector.get(AwsApi)
    """

    @singleton
    @provider
    def provide_context(self, settings: Settings) -> AwsContext:
        return connect(settings.region, profile=settings.profile, metadata=settings.metadata)

    @singleton
    @provider
    def provide_api(self, context: AwsContext) -> AwsApi:
        return AwsApi(context)


__all__ = [
    "AwsContext",
    "AwsModule",
    "connect",
]

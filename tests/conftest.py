from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import boto3
import pytest
from botocore.stub import Stubber
from loguru import logger

from ecsresolve.api import AwsApi
from ecsresolve.clients import AwsContext

REGION = "us-east-1"


def _client(service: str) -> Any:
    return boto3.client(
        service,
        region_name=REGION,
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def log_records() -> Iterator[list[dict[str, Any]]]:
    """Loguru records emitted by ecsresolve while the test runs."""
    records: list[dict[str, Any]] = []
    logger.enable("ecsresolve")
    hid = logger.add(lambda m: records.append(m.record), level="TRACE", filter="ecsresolve")
    yield records
    logger.remove(hid)
    logger.disable("ecsresolve")


@pytest.fixture
def context() -> AwsContext:
    return AwsContext(ecs=_client("ecs"), ec2=_client("ec2"), region=REGION)


@pytest.fixture
def ecs_stub(context: AwsContext) -> Iterator[Stubber]:
    with Stubber(context.ecs) as stubber:
        yield stubber


@pytest.fixture
def ec2_stub(context: AwsContext) -> Iterator[Stubber]:
    with Stubber(context.ec2) as stubber:
        yield stubber


@pytest.fixture
def api(context: AwsContext) -> AwsApi:
    return AwsApi(context)


class RecordingClient:
    """Stands in for a boto3 client: records every operation and returns an empty response."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def __getattr__(self, operation: str) -> Any:
        def call(**params: Any) -> dict[str, Any]:
            self.calls.append((operation, params))
            return {}
        return call


@pytest.fixture
def recording_context() -> AwsContext:
    return AwsContext(ecs=RecordingClient(), ec2=RecordingClient(), region=REGION)

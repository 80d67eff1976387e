"""Region detection through the EC2 instance metadata service.

Outside EC2 (or when IMDS is unreachable) detection quietly yields an empty
string and boto3 falls back to its usual region resolution.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx
from loguru import logger

from ecsresolve.constants import (
    METADATA_BASE_URL,
    METADATA_IDENTITY_PATH,
    METADATA_TIMEOUT,
    METADATA_TOKEN_HEADER,
    METADATA_TOKEN_PATH,
    METADATA_TOKEN_TTL,
    METADATA_TOKEN_TTL_HEADER,
)

log = logger.bind(component="metadata")


@dataclass(frozen=True, slots=True)
class MetadataConfig:
    """Instance metadata service settings.

    Attributes:
        url: Base URL of the metadata service.
        timeout: Per-request timeout in seconds.
        token_ttl: Lifetime requested for the IMDSv2 session token.
        enabled: Set to False to skip detection entirely.
    """

    url: str = METADATA_BASE_URL
    timeout: float = METADATA_TIMEOUT
    token_ttl: int = METADATA_TOKEN_TTL
    enabled: bool = True


def _fetch_token(client: httpx.Client, config: MetadataConfig) -> str | None:
    """IMDSv2 session token, or None when the service only speaks IMDSv1."""
    try:
        resp = client.put(
            config.url + METADATA_TOKEN_PATH,
            headers={METADATA_TOKEN_TTL_HEADER: str(config.token_ttl)},
        )
    except httpx.HTTPError as e:
        log.debug("IMDSv2 token request failed: {error}", error=e)
        return None
    if resp.status_code != 200:
        log.debug("IMDSv2 token request returned {status}", status=resp.status_code)
        return None
    return resp.text


def _fetch_region(client: httpx.Client, config: MetadataConfig) -> str:
    url = config.url + METADATA_IDENTITY_PATH
    token = _fetch_token(client, config)
    headers = {METADATA_TOKEN_HEADER: token} if token else {}

    try:
        resp = client.get(url, headers=headers)
    except httpx.HTTPError as e:
        log.warning("Failed to get region through URL {url}: {error}", url=url, error=e)
        return ""

    if resp.status_code != 200:
        log.warning("Failed to get region: {url} returned {status}", url=url, status=resp.status_code)
        return ""

    try:
        document = resp.json()
    except ValueError as e:
        log.warning("Failed to get region because JSON decoding failed: {error}", error=e)
        return ""

    region = document.get("region") if isinstance(document, dict) else None
    if not isinstance(region, str):
        log.warning("Failed to get region: identity document has no region field")
        return ""

    log.debug("Detected region {region}", region=region)
    return region


def detect_region(
    config: MetadataConfig | None = None,
    *,
    client: httpx.Client | None = None,
) -> str:
    """Region of the EC2 instance this process runs on, or ``""``.

    Never raises: every failure is logged as a warning.

    Args:
        config: Metadata service settings. Defaults to MetadataConfig().
        client: Optional httpx client (tests inject a MockTransport here).
    """
    config = config or MetadataConfig()
    if not config.enabled:
        return ""
    if client is not None:
        return _fetch_region(client, config)
    with httpx.Client(timeout=config.timeout) as owned:
        return _fetch_region(owned, config)

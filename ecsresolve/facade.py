"""Synchronous facade tying settings, logging and the resolution chain together.

    from ecsresolve import Resolver

    with Resolver(region="us-west-2", logging=True) as r:
        for cluster in r.cluster_names():
            print(cluster, r.service_names(cluster))
        print(r.service_private_ips("prod", "web"))
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from types import TracebackType

from ecsresolve import resolution
from ecsresolve.api import AwsApi
from ecsresolve.clients import AwsContext, connect
from ecsresolve.config import Settings
from ecsresolve.observability.logging import LogConfig, _setup_logging, _teardown_logging
from ecsresolve.types import Identifier


class Resolver:
    """Owns one AwsContext and exposes the high-level lookups.

    Args:
        region: Overrides ``settings.region`` when non-empty.
        profile: Overrides ``settings.profile`` when given.
        logging: True to log with ``settings.logging``, a LogConfig to log
            with that, False to stay silent.
        settings: Base settings; defaults to Settings().
        context: Pre-built client context (skips connect()).
    """

    def __init__(
        self,
        region: str = "",
        *,
        profile: str | None = None,
        logging: bool | LogConfig = False,
        settings: Settings | None = None,
        context: AwsContext | None = None,
    ) -> None:
        settings = settings or Settings()
        if region:
            settings = replace(settings, region=region)
        if profile is not None:
            settings = replace(settings, profile=profile)
        self.settings = settings

        match logging:
            case LogConfig():
                self._log_config: LogConfig | None = logging
            case True:
                self._log_config = settings.logging
            case _:
                self._log_config = None

        self._context = context
        self._api: AwsApi | None = None
        self._handler_ids: list[int] = []
        self._logging_on = False

    def __enter__(self) -> Resolver:
        if self._log_config is not None:
            self._handler_ids = _setup_logging(self._log_config)
            self._logging_on = True
        if self._context is None:
            try:
                self._context = connect(
                    self.settings.region,
                    profile=self.settings.profile,
                    metadata=self.settings.metadata,
                )
            except BaseException:
                self._close_logging()
                raise
        self._api = AwsApi(self._context)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._close_logging()

    def _close_logging(self) -> None:
        if self._logging_on:
            _teardown_logging(self._handler_ids)
            self._handler_ids = []
            self._logging_on = False

    @property
    def api(self) -> AwsApi:
        if self._api is None:
            raise RuntimeError("Resolver is not open. Use it as a context manager.")
        return self._api

    @property
    def region(self) -> str:
        return self.api.context.region

    def cluster_names(self) -> list[str]:
        return resolution.cluster_names(self.api)

    def service_names(self, cluster: Identifier) -> list[str]:
        return resolution.service_names(self.api, cluster)

    def container_instances(self, cluster: Identifier, service: Identifier) -> list[str] | None:
        return resolution.container_instances_for_service(self.api, cluster, service)

    def ec2_ids(self, cluster: Identifier, container_instances: Sequence[Identifier] | None) -> list[str] | None:
        return resolution.ec2_ids_for_container_instances(self.api, cluster, container_instances)

    def private_ips(self, instance_ids: Sequence[Identifier] | None) -> list[str] | None:
        return resolution.private_ips_for_ec2_ids(self.api, instance_ids)

    def service_private_ips(self, cluster: Identifier, service: Identifier) -> list[str] | None:
        return resolution.private_ips_for_service(self.api, cluster, service)

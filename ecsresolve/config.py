"""TOML-based configuration.

Loads ~/.ecsresolve/defaults.toml (global) and ecsresolve.toml (project),
merges them, and builds a Settings instance.

Example ``ecsresolve.toml``::

    region = "us-west-2"
    profile = "prod"

    [metadata]
    timeout = 1.0

    [logging]
    level = "DEBUG"
    file = ".ecsresolve/ecsresolve.log"
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, TypeAlias, TypeVar

from ecsresolve.core.exceptions import ConfigurationError
from ecsresolve.metadata import MetadataConfig
from ecsresolve.observability.logging import LogConfig

RawConfig: TypeAlias = dict[str, Any]

T = TypeVar("T")

GLOBAL_CONFIG_PATH = Path.home() / ".ecsresolve" / "defaults.toml"
PROJECT_CONFIG_NAME = "ecsresolve.toml"


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved configuration.

    Args:
        region: AWS region. Empty means detect via instance metadata, then
            fall back to boto3's own resolution (env vars, config files).
        profile: Named AWS profile, or None for the default credential chain.
        metadata: Instance metadata service settings.
        logging: Logging settings used when a Resolver enables logging.
    """

    region: str = ""
    profile: str | None = None
    metadata: MetadataConfig = field(default_factory=MetadataConfig)
    logging: LogConfig = field(default_factory=LogConfig)


def _deep_merge(base: RawConfig, override: RawConfig) -> RawConfig:
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_toml(path: Path) -> RawConfig:
    if not path.is_file():
        return {}
    with path.open("rb") as f:
        return tomllib.load(f)


def load_config(
    *,
    project_dir: Path | None = None,
    global_path: Path | None = None,
) -> RawConfig:
    global_cfg = _read_toml(global_path or GLOBAL_CONFIG_PATH)
    project_cfg = _read_toml((project_dir or Path.cwd()) / PROJECT_CONFIG_NAME)
    return _deep_merge(global_cfg, project_cfg)


def _build(cls: type[T], section: str, raw: Any) -> T:
    if not isinstance(raw, dict):
        raise ConfigurationError(f"[{section}] must be a table, got {type(raw).__name__}")
    known = {f.name for f in fields(cls)}  # type: ignore[arg-type]
    unknown = set(raw) - known
    if unknown:
        raise ConfigurationError(
            f"Unknown key(s) in [{section}]: {', '.join(sorted(unknown))}. "
            f"Valid: {', '.join(sorted(known))}"
        )
    return cls(**raw)


def settings_from_dict(raw: RawConfig) -> Settings:
    raw = dict(raw)
    metadata = _build(MetadataConfig, "metadata", raw.pop("metadata", {}))
    logging = _build(LogConfig, "logging", raw.pop("logging", {}))
    top = _build(Settings, "top-level", raw)
    return Settings(region=top.region, profile=top.profile, metadata=metadata, logging=logging)


def load_settings(
    *,
    project_dir: Path | None = None,
    global_path: Path | None = None,
) -> Settings:
    return settings_from_dict(load_config(project_dir=project_dir, global_path=global_path))

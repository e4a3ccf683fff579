"""Environment-sourced configuration for the metadata tables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

FIELDS_FILE_ENV = "SAGEPAY_METADATA_FIELDS_FILE"
MAX_LIST_ENV = "SAGEPAY_METADATA_MAX_LIST"

DEFAULT_MAX_LIST = 300
"""Default cap on the number of countries returned by a list resource."""


def _env_int(
    name: str,
    default: int,
    *,
    min_value: int = 0,
    max_value: int | None = None,
) -> int:
    """Return a bounded integer setting sourced from the environment."""

    raw = os.getenv(name)
    if not raw or not raw.strip():
        return default
    try:
        parsed = int(raw)
    except ValueError:
        return default
    if parsed < min_value:
        return default
    if max_value is not None and parsed > max_value:
        return max_value
    return parsed


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if not raw or not raw.strip():
        return None
    return Path(raw.strip())


@dataclass(frozen=True)
class MetadataConfig:
    """Settings that shape how the tables are loaded and served."""

    fields_file: Path | None
    max_list: int

    @classmethod
    def from_env(cls) -> "MetadataConfig":
        """Create a config using the current environment."""

        return cls(
            fields_file=_env_path(FIELDS_FILE_ENV),
            max_list=_env_int(MAX_LIST_ENV, DEFAULT_MAX_LIST, min_value=1),
        )


DEFAULT_METADATA_CONFIG = MetadataConfig(fields_file=None, max_list=DEFAULT_MAX_LIST)

_CUSTOM_CONFIG: MetadataConfig | None = None


def set_metadata_config(config: MetadataConfig | None) -> None:
    """Override the metadata config (used by tests)."""

    global _CUSTOM_CONFIG
    _CUSTOM_CONFIG = config


def reset_metadata_config() -> None:
    """Reset the metadata config to the environment defaults."""

    set_metadata_config(None)


def get_metadata_config() -> MetadataConfig:
    if _CUSTOM_CONFIG is not None:
        return _CUSTOM_CONFIG
    return MetadataConfig.from_env()

"""Base tags attached to every metric and tag-set utilities."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

UNKNOWN_VALUE = "unknown"


def get_env_or_default(key: str, default_value: str) -> str:
    """The environment variable ``key``, or ``default_value`` when unset or empty."""
    return os.environ.get(key) or default_value


def _env() -> str:
    return get_env_or_default("ENVIRONMENT", "default_env")


def _service() -> str:
    return get_env_or_default("SERVICE", "default_service")


def _version() -> str:
    return get_env_or_default("FDB_VERSION", "default_version")


def _fdb_cluster_name() -> str:
    return get_env_or_default("FDB_CLUSTER_NAME", "default_fdb_cluster_name")


def _cluster_name() -> str:
    return get_env_or_default("CLUSTER_NAME", "default_cluster_name")


_DEFAULTS = {
    "env": _env,
    "service": _service,
    "version": _version,
    "fdb_cluster_name": _fdb_cluster_name,
    "cluster": _cluster_name,
}


def _default_value(tag_key: str) -> str:
    getter = _DEFAULTS.get(tag_key)
    return getter() if getter else UNKNOWN_VALUE


def get_base_tag_keys() -> list[str]:
    """Keys of the tags every metric carries."""
    return ["env", "service", "version", "fdb_cluster", "cluster"]


def get_base_tags() -> dict[str, str]:
    """The base tags with their values taken from the environment."""
    return {
        "env": _env(),
        "service": _service(),
        "version": _version(),
        "fdb_cluster": _fdb_cluster_name(),
        "cluster": _cluster_name(),
    }


def merge_tags(*tag_sets: Mapping[str, str]) -> dict[str, str]:
    """Merge tag sets; the first value wins unless it is ``unknown``."""
    result: dict[str, str] = {}
    for tag_set in tag_sets:
        for key, value in tag_set.items():
            if key not in result or result[key] == UNKNOWN_VALUE:
                result[key] = value
    return result


def standardize_tags(tags: Mapping[str, str], std_keys: Iterable[str]) -> dict[str, str]:
    """Keep exactly ``std_keys``, filling missing or empty ones with defaults."""
    return {key: tags.get(key) or _default_value(key) for key in std_keys}


def convert_bool(value: bool) -> float:
    """Gauge value of a boolean: 1.0 for True, 0.0 for False."""
    if not isinstance(value, bool):
        raise TypeError(f"expected a boolean, got {type(value).__name__}")
    if value:
        return 1.0
    return 0.0
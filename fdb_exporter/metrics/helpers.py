"""Setting gauges from status values."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fdb_exporter.metrics.scope import Scope
from fdb_exporter.metrics.tags import convert_bool

_log = logging.getLogger(__name__)


def set_gauge(scope: Scope, name: str, tags: Mapping[str, str], value: Any) -> None:
    """Set gauge ``name`` to a bool, int or float value; log other types."""
    if isinstance(value, bool):
        number = convert_bool(value)
    elif isinstance(value, (int, float)):
        number = float(value)
    else:
        _log.error("could not determine type for gauge %s", name)
        return
    scope.tagged(tags).update_gauge(name, number)


def set_multiple_gauges(
    scope: Scope, metrics: Mapping[str, Any], tags: Mapping[str, str]
) -> None:
    """Set every gauge in ``metrics`` with the same tags."""
    for name, value in metrics.items():
        set_gauge(scope, name, tags, value)
"""Base for groups of metrics collected from one section of the status."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from fdb_exporter.metrics.scope import Scope, Scoped
from fdb_exporter.models.status import FullStatus


@runtime_checkable
class Collectable(Protocol):
    """Something that sets its metrics from a status document."""

    def get_metrics(self, status: FullStatus) -> None:
        """Set the metrics of this group from ``status``."""
        ...


class MetricGroup(Scoped):
    """Correlated metrics collected together; owns a ``default`` scope."""

    def __init__(self, name: str, parent_scope: Scope, reporter: Any) -> None:
        super().__init__()
        self.name = name
        self.parent_scope = parent_scope
        self.reporter = reporter
        self.add_scope(parent_scope, "default", name)
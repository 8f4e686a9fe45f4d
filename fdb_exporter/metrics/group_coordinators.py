"""Coordinator reachability metrics."""

from __future__ import annotations

import logging
from typing import Any

from fdb_exporter.metrics.group import MetricGroup
from fdb_exporter.metrics.helpers import set_gauge
from fdb_exporter.metrics.tags import get_base_tags
from fdb_exporter.metrics.validation import is_valid_client
from fdb_exporter.models.status import FullStatus

_log = logging.getLogger(__name__)


class CoordinatorMetricGroup(MetricGroup):
    def __init__(self, reporter: Any) -> None:
        super().__init__("coordinator", reporter.get_scope("client"), reporter)

    def get_metrics(self, status: FullStatus) -> None:
        scope = self.get_scope("default")
        if not is_valid_client(status) or status.client.coordinators is None:
            _log.error("failed to get coordinators metric group")
            return
        coordinators = status.client.coordinators
        set_gauge(scope, "quorum", get_base_tags(), coordinators.quorum_reachable)
        reachable = sum(1 for c in coordinators.coordinators or [] if c.reachable)
        unreachable = len(coordinators.coordinators or []) - reachable
        set_gauge(scope, "reachable", get_base_tags(), reachable)
        set_gauge(scope, "unreachable", get_base_tags(), unreachable)
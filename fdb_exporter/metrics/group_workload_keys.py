"""Keys read by the workload."""

from __future__ import annotations

import logging
from typing import Any

from fdb_exporter.metrics.group import MetricGroup
from fdb_exporter.metrics.helpers import set_multiple_gauges
from fdb_exporter.metrics.tags import get_base_tags
from fdb_exporter.metrics.validation import is_valid_workload
from fdb_exporter.models.status import FullStatus

_log = logging.getLogger(__name__)


class WorkloadKeysMetricGroup(MetricGroup):
    def __init__(self, reporter: Any) -> None:
        super().__init__("keys", reporter.get_scope("workload"), reporter)

    def get_metrics(self, status: FullStatus) -> None:
        scope = self.get_scope("default")
        if not is_valid_workload(status) or status.cluster.workload.keys is None:
            _log.error("failed to get workload keys metric group")
            return
        workload_keys = status.cluster.workload.keys
        metrics: dict[str, Any] = {}
        if workload_keys.read is not None:
            metrics["read_count"] = workload_keys.read.counter
            metrics["read_hz"] = workload_keys.read.hz
        set_multiple_gauges(scope, metrics, get_base_tags())
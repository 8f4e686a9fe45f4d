"""Bytes read and written by the workload."""

from __future__ import annotations

import logging
from typing import Any

from fdb_exporter.metrics.group import MetricGroup
from fdb_exporter.metrics.helpers import set_multiple_gauges
from fdb_exporter.metrics.tags import get_base_tags
from fdb_exporter.metrics.validation import is_valid_workload
from fdb_exporter.models.status import FullStatus

_log = logging.getLogger(__name__)


class WorkloadBytesMetricGroup(MetricGroup):
    def __init__(self, reporter: Any) -> None:
        super().__init__("bytes", reporter.get_scope("workload"), reporter)

    def get_metrics(self, status: FullStatus) -> None:
        scope = self.get_scope("default")
        if not is_valid_workload(status) or status.cluster.workload.bytes is None:
            _log.error("failed to get workload bytes metric group")
            return
        workload_bytes = status.cluster.workload.bytes
        metrics: dict[str, Any] = {}
        if workload_bytes.read is not None:
            metrics["read_count"] = workload_bytes.read.counter
            metrics["read_hz"] = workload_bytes.read.hz
        if workload_bytes.written is not None:
            metrics["written_count"] = workload_bytes.written.counter
            metrics["written_hz"] = workload_bytes.written.hz
        set_multiple_gauges(scope, metrics, get_base_tags())
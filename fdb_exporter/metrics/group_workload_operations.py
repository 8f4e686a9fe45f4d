"""Operations performed by the workload."""

from __future__ import annotations

import logging
from typing import Any

from fdb_exporter.metrics.group import MetricGroup
from fdb_exporter.metrics.helpers import set_multiple_gauges
from fdb_exporter.metrics.tags import get_base_tags
from fdb_exporter.metrics.validation import is_valid_workload
from fdb_exporter.models.status import FullStatus

_log = logging.getLogger(__name__)


class WorkloadOperationsMetricGroup(MetricGroup):
    def __init__(self, reporter: Any) -> None:
        super().__init__("operations", reporter.get_scope("workload"), reporter)

    def get_metrics(self, status: FullStatus) -> None:
        scope = self.get_scope("default")
        if not is_valid_workload(status):
            _log.error("failed to get workload metric group")
            return
        operations = status.cluster.workload.operations
        if operations is None:
            _log.error("failed to get workload -> operations")
            return
        sections = {
            "reads": operations.reads,
            "writes": operations.writes,
            "location_requests": operations.location_requests,
            "low_priority_reads": operations.low_priority_reads,
            "memory_errors": operations.memory_errors,
            "read_requests": operations.read_requests,
        }
        metrics: dict[str, Any] = {}
        for prefix, section in sections.items():
            if section is not None:
                metrics[f"{prefix}_count"] = section.counter
                metrics[f"{prefix}_hz"] = section.hz
        set_multiple_gauges(scope, metrics, get_base_tags())
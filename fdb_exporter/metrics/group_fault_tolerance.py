"""Zone failure tolerance of the cluster."""

from __future__ import annotations

import logging
from typing import Any

from fdb_exporter.metrics.group import MetricGroup
from fdb_exporter.metrics.helpers import set_gauge
from fdb_exporter.metrics.tags import get_base_tags
from fdb_exporter.metrics.validation import is_valid_cluster_fault_tolerance
from fdb_exporter.models.status import FullStatus

_log = logging.getLogger(__name__)


class DbClusterFaultTolerance(MetricGroup):
    def __init__(self, reporter: Any) -> None:
        super().__init__("fault_tolerance", reporter.get_scope("cluster"), reporter)

    def get_metrics(self, status: FullStatus) -> None:
        scope = self.get_scope("default")
        if not is_valid_cluster_fault_tolerance(status):
            _log.error("failed to get database fault tolerance")
            return
        tolerance = status.cluster.fault_tolerance
        set_gauge(
            scope,
            "zone_failures_availability",
            get_base_tags(),
            tolerance.max_zone_failures_without_losing_availability,
        )
        set_gauge(
            scope,
            "zone_failures_data",
            get_base_tags(),
            tolerance.max_zone_failures_without_losing_data,
        )
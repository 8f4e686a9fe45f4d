"""Data distribution metrics of the cluster."""

from __future__ import annotations

import logging
from typing import Any

from fdb_exporter.metrics.group import MetricGroup
from fdb_exporter.metrics.helpers import set_multiple_gauges
from fdb_exporter.metrics.tags import get_base_tags
from fdb_exporter.metrics.validation import is_valid_cluster_data
from fdb_exporter.models.status import FullStatus

_log = logging.getLogger(__name__)


class DataMetricGroup(MetricGroup):
    def __init__(self, reporter: Any) -> None:
        super().__init__("data", reporter.get_scope("cluster"), reporter)

    def get_metrics(self, status: FullStatus) -> None:
        scope = self.get_scope("default")
        if (
            not is_valid_cluster_data(status)
            or status.cluster.data.moving_data is None
            or status.cluster.data.state is None
        ):
            _log.error("failed to get data metric group")
            return

        data = status.cluster.data
        moving = data.moving_data
        state = data.state
        metrics = {
            "average_partition_size_bytes": data.average_partition_size_bytes,
            "least_operating_space_bytes_log_server": data.least_operating_space_bytes_log_server,
            "least_operating_space_bytes_storage_server": (
                data.least_operating_space_bytes_storage_server
            ),
            "moving_data_in_flight_bytes": moving.in_flight_bytes,
            "moving_data_in_queue_bytes": moving.in_queue_bytes,
            "moving_data_total_written_types": moving.total_written_bytes,
            "total_disk_used_bytes": data.total_disk_used_bytes,
            "total_kv_size_bytes": data.total_kv_size_bytes,
            "min_replicas_remaining": state.min_replicas_remaining,
            "state_health": state.healthy,
            "missing_data": 1 if state.name == "missing_data" else 0,
        }
        set_multiple_gauges(scope, metrics, get_base_tags())
"""Quality-of-service metrics of the cluster."""

from __future__ import annotations

import logging
from typing import Any

from fdb_exporter.metrics.group import MetricGroup
from fdb_exporter.metrics.helpers import set_gauge
from fdb_exporter.metrics.tags import get_base_tags
from fdb_exporter.metrics.validation import is_valid_cluster_qos
from fdb_exporter.models.status import FullStatus

_log = logging.getLogger(__name__)


class DbClusterQos(MetricGroup):
    def __init__(self, reporter: Any) -> None:
        super().__init__("qos", reporter.get_scope("cluster"), reporter)

    def get_metrics(self, status: FullStatus) -> None:
        scope = self.get_scope("default")
        if not is_valid_cluster_qos(status):
            _log.error("failed to get database Qos")
            return
        qos = status.cluster.qos
        gauges = {
            "transaction_per_second_limit": qos.transactions_per_second_limit,
            "released_transactions_per_second": qos.released_transactions_per_second,
            "limiting_queue_bytes_storage_server": qos.limiting_queue_bytes_storage_server,
            "worst_storage_server_durability_lag_seconds": (
                qos.worst_durability_lag_storage_server.seconds
            ),
            "worst_queue_bytes_storage_server": qos.worst_queue_bytes_storage_server,
            "worst_queue_bytes_log_server": qos.worst_queue_bytes_log_server,
        }
        for name, value in gauges.items():
            set_gauge(scope, name, get_base_tags(), value)
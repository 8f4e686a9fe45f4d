"""Latency probe measurements of the cluster."""

from __future__ import annotations

import logging
from typing import Any

from fdb_exporter.metrics.group import MetricGroup
from fdb_exporter.metrics.helpers import set_gauge
from fdb_exporter.metrics.tags import get_base_tags
from fdb_exporter.metrics.validation import is_valid_cluster_latency_probe
from fdb_exporter.models.status import FullStatus

_log = logging.getLogger(__name__)


class LatencyProbeMetricGroup(MetricGroup):
    def __init__(self, reporter: Any) -> None:
        super().__init__("latency_probe", reporter.get_scope("cluster"), reporter)

    def get_metrics(self, status: FullStatus) -> None:
        scope = self.get_scope("default")
        if not is_valid_cluster_latency_probe(status):
            _log.error("failed to get cluster latency probes")
            return
        probe = status.cluster.latency_probe
        gauges = {
            "commit_seconds": probe.commit_seconds,
            "read_seconds": probe.read_seconds,
            "transaction_start_seconds": probe.transaction_start_seconds,
            "transaction_start_seconds_immediate": probe.immediate_priority_transaction_start_seconds,
            "transaction_start_seconds_batch": probe.batch_priority_transaction_start_seconds,
        }
        for name, value in gauges.items():
            set_gauge(scope, name, get_base_tags(), value)
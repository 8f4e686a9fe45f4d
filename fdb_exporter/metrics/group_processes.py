"""Per-process metrics: resources, roles, latencies and messages."""

from __future__ import annotations

import logging
import os
from collections import Counter
from typing import Any

from fdb_exporter.metrics.group import MetricGroup
from fdb_exporter.metrics.helpers import set_gauge, set_multiple_gauges
from fdb_exporter.metrics.scope import Scope
from fdb_exporter.metrics.tags import UNKNOWN_VALUE, get_base_tags
from fdb_exporter.metrics.validation import is_valid_processes
from fdb_exporter.models.process import LatencyStats, Process, ProcessRole
from fdb_exporter.models.status import FullStatus

_log = logging.getLogger(__name__)

# Every tag set in a scope must carry the same keys, so each role flag is
# always present and set to "0" or "1".
_ROLE_FLAGS = (
    "storage",
    "log",
    "master",
    "coordinator",
    "commit_proxy",
    "grv_proxy",
    "cluster_controller",
    "data_distributor",
    "ratekeeper",
    "resolver",
)

_QUANTILES = (("0.5", "median"), ("0.95", "p95"), ("0.99", "p99"))


class ProcessesMetricGroup(MetricGroup):
    def __init__(self, reporter: Any) -> None:
        parent = reporter.get_scope("cluster")
        super().__init__("processes", parent, reporter)
        self.add_scope(parent, "grv_count", "grv")
        self.add_scope(parent, "grv_lat", "grv")
        self.add_scope(parent, "commit_lat", "commit")
        self.add_scope(parent, "read_lat", "read")
        # Rarely emitted, but this is how the database warns about io_timeout
        # and similar per-process problems.
        self.add_scope(parent, "per_process", "per_process")

    def get_tags(self, process_name: str, process: Process) -> dict[str, str]:
        """Base tags plus the identity, zone, class and role flags of a process."""
        tags = get_base_tags()
        locality = process.locality
        if not os.environ.get("FDB_DEPLOYMENT_NO_K8S"):
            tags["machine_id"] = process.machine_id
            tags["address"] = process.address
        else:
            # Prefer the human-readable name published by the operator.
            tags["fdb_pod_name"] = (
                locality.operator_process_id if locality is not None else process_name
            )
        tags["zone"] = locality.zone_id if locality is not None else UNKNOWN_VALUE
        tags["class_type"] = process.class_type
        roles = {role.role for role in process.roles or []}
        tags.update({flag: "1" if flag in roles else "0" for flag in _ROLE_FLAGS})
        return tags

    def get_metrics(self, status: FullStatus) -> None:
        scope = self.get_scope("default")
        if not is_valid_processes(status):
            _log.error("failed to get processes metric group")
            return
        for process_name, process in status.cluster.processes.items():
            tags = self.get_tags(process_name, process)
            metrics = self._resource_metrics(process)
            self._emit_messages(process, tags)
            for role in process.roles or []:
                self._role_metrics(role, tags, metrics)
            set_multiple_gauges(scope, metrics, tags)

    @staticmethod
    def _resource_metrics(process: Process) -> dict[str, Any]:
        metrics: dict[str, Any] = {
            "degraded": process.degraded,
            "excluded": process.excluded,
            "run_loop_busy": process.run_loop_busy,
        }
        if process.cpu is not None:
            metrics["cpu_cores"] = process.cpu.usage_cores
        disk = process.disk
        if disk is not None:
            metrics["disk_busy"] = disk.busy
            metrics["disk_free"] = disk.free_bytes
            metrics["disk_total_bytes"] = disk.total_bytes
            if disk.reads is not None:
                metrics["disk_reads_count"] = disk.reads.counter
                metrics["disk_reads_hz"] = disk.reads.hz
            if disk.writes is not None:
                metrics["disk_writes_count"] = disk.writes.counter
                metrics["disk_writes_hz"] = disk.writes.hz
        memory = process.memory
        if memory is not None:
            metrics["mem_available_bytes"] = memory.available_bytes
            metrics["mem_limit_bytes"] = memory.limit_bytes
            metrics["mem_rss_bytes"] = memory.rss_bytes
            metrics["mem_unused_allocated_memory"] = memory.unused_allocated_memory
            metrics["mem_unused_bytes"] = memory.used_bytes
        network = process.network
        if network is not None:
            rates = {
                "network_conn_errors_hz": network.connection_errors,
                "network_conn_closed_hz": network.connections_closed,
                "network_conn_established": network.connections_established,
                "network_megabits_sent": network.megabits_sent,
                "network_megabits_received": network.megabits_received,
            }
            for name, rate in rates.items():
                if rate is not None:
                    metrics[name] = rate.hz
            metrics["network_current_connections"] = network.current_connections
        return metrics

    def _emit_messages(self, process: Process, tags: dict[str, str]) -> None:
        if not process.messages:
            return
        scope = self.get_scope("per_process")
        for name, count in Counter(msg.name for msg in process.messages).items():
            set_gauge(scope, "messages", {**tags, "message_name": name}, count)

    @staticmethod
    def _set_latencies(scope: Scope, stats: LatencyStats, tags: dict[str, str]) -> None:
        for quantile, attr in _QUANTILES:
            set_gauge(scope, "latency", {**tags, "quantile": quantile}, getattr(stats, attr))

    def _role_metrics(
        self, role: ProcessRole, tags: dict[str, str], metrics: dict[str, Any]
    ) -> None:
        if role.role == "grv_proxy":
            grv = role.grv_latency_statistics
            if grv is None:
                return
            count_scope = self.get_scope("grv_count")
            lat_scope = self.get_scope("grv_lat")
            for priority, stats in (("default", grv.default), ("batch", grv.batch)):
                if stats is None:
                    continue
                priority_tags = {**tags, "priority": priority}
                set_gauge(count_scope, "count", priority_tags, stats.count)
                self._set_latencies(lat_scope, stats, priority_tags)
        elif role.role == "commit_proxy":
            if role.commit_latency_statistics is not None:
                self._set_latencies(
                    self.get_scope("commit_lat"), role.commit_latency_statistics, tags
                )
        elif role.role == "storage":
            metrics["kvstore_available_bytes"] = role.kvstore_available_bytes
            metrics["kvstore_free_bytes"] = role.kvstore_free_bytes
            metrics["kvstore_total_bytes"] = role.kvstore_total_bytes
            metrics["kvstore_used_bytes"] = role.kvstore_used_bytes
            metrics["queue_disk_available_bytes"] = role.queue_disk_available_bytes
            metrics["queue_disk_free_bytes"] = role.queue_disk_free_bytes
            metrics["queue_disk_total_bytes"] = role.queue_disk_total_bytes
            metrics["queue_disk_used_bytes"] = role.queue_disk_used_bytes
            metrics["stored_bytes"] = role.stored_bytes
            if role.data_lag is not None:
                metrics["data_lag_seconds"] = role.data_lag.seconds
                metrics["data_lag_versions"] = role.data_lag.versions
            if role.durability_lag is not None:
                metrics["durability_lag_seconds"] = role.durability_lag.seconds
                metrics["durability_lag_versions"] = role.durability_lag.versions
            if role.total_queries is not None:
                metrics["query_count"] = role.total_queries.counter
                metrics["query_hz"] = role.total_queries.hz
            self._queue_metrics(role, metrics, "storage_queue_length")
            if role.read_latency_statistics is not None:
                self._set_latencies(
                    self.get_scope("read_lat"), role.read_latency_statistics, tags
                )
        elif role.role == "log":
            metrics["kvstore_available_bytes"] = role.kvstore_available_bytes
            metrics["kvstore_free_bytes"] = role.kvstore_free_bytes
            metrics["kvstore_total_bytes"] = role.kvstore_total_bytes
            metrics["kvstore_used_bytes"] = role.kvstore_used_bytes
            # Log servers report their free queue-disk bytes under the
            # available-bytes name.
            metrics["queue_disk_available_bytes"] = role.queue_disk_free_bytes
            metrics["queue_disk_total_bytes"] = role.queue_disk_total_bytes
            metrics["queue_disk_used_bytes"] = role.queue_disk_used_bytes
            self._queue_metrics(role, metrics, "log_queue_length")

    @staticmethod
    def _queue_metrics(role: ProcessRole, metrics: dict[str, Any], queue_name: str) -> None:
        if role.input_bytes is not None:
            metrics["input_bytes"] = role.input_bytes.counter
        if role.durable_bytes is not None:
            metrics["durability_bytes"] = role.durable_bytes.counter
        # Bytes received but not yet durable; growth means the servers behind
        # cannot keep up with the load.
        if role.input_bytes is not None and role.durable_bytes is not None:
            metrics[queue_name] = role.input_bytes.counter - role.durable_bytes.counter
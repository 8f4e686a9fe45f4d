"""Collecting every metric group from one status document."""

from __future__ import annotations

import os
from collections.abc import Mapping

from fdb_exporter.db import StatusFetcher, StatusUnavailableError, get_status
from fdb_exporter.errlog import log_error
from fdb_exporter.metrics.group import Collectable
from fdb_exporter.metrics.group_backup import BackupMetricGroup
from fdb_exporter.metrics.group_coordinators import CoordinatorMetricGroup
from fdb_exporter.metrics.group_data import DataMetricGroup
from fdb_exporter.metrics.group_dbstatus import DbStatusMetricGroup
from fdb_exporter.metrics.group_fault_tolerance import DbClusterFaultTolerance
from fdb_exporter.metrics.group_latency_probe import LatencyProbeMetricGroup
from fdb_exporter.metrics.group_lockstate import DbClusterLock
from fdb_exporter.metrics.group_messages import ClusterMessageMetricGroup
from fdb_exporter.metrics.group_processes import ProcessesMetricGroup
from fdb_exporter.metrics.group_qos import DbClusterQos
from fdb_exporter.metrics.group_workload_bytes import WorkloadBytesMetricGroup
from fdb_exporter.metrics.group_workload_keys import WorkloadKeysMetricGroup
from fdb_exporter.metrics.group_workload_operations import WorkloadOperationsMetricGroup
from fdb_exporter.metrics.group_workload_transactions import WorkloadTransactionsMetricGroup
from fdb_exporter.metrics.scope import Registry, Scope, Scoped
from fdb_exporter.metrics.tags import get_base_tags
from fdb_exporter.models.status import FullStatus, StatusFileError, get_status_from_file

DEFAULT_LISTEN_ADDRESS = ":8080"


class MetricReporter(Scoped):
    """Fetches the status and lets every metric group record its gauges."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        super().__init__()
        self._environ = os.environ if environ is None else environ
        self.registry = Registry()
        self.status: FullStatus | None = None
        self.closed = False
        self.retry_delay = 1.0

        self.scopes["root"] = Scope(self.registry, "", get_base_tags())
        self.add_scope(self.scopes["root"], "fdb", "fdb")
        self.add_scope(self.scopes["fdb"], "client", "client")
        self.add_scope(self.scopes["fdb"], "cluster", "cluster")
        self.add_scope(self.scopes["cluster"], "workload", "workload")

        self.groups: list[Collectable] = [
            CoordinatorMetricGroup(self),
            DbStatusMetricGroup(self),
            DbClusterFaultTolerance(self),
            DbClusterLock(self),
            WorkloadOperationsMetricGroup(self),
            WorkloadTransactionsMetricGroup(self),
            WorkloadKeysMetricGroup(self),
            WorkloadBytesMetricGroup(self),
            DataMetricGroup(self),
            ProcessesMetricGroup(self),
            DbClusterQos(self),
            LatencyProbeMetricGroup(self),
            ClusterMessageMetricGroup(self),
        ]
        if not self._environ.get("FDB_EXPORTER_NO_BACKUP_REPORTING"):
            self.groups.append(BackupMetricGroup(self))

    def collect(self, status: FullStatus) -> None:
        """Record the metrics of every group from ``status``."""
        if not self.groups:
            err = RuntimeError("no metric groups detected")
            log_error(err, str(err))
            raise err
        self.status = status
        for group in self.groups:
            group.get_metrics(status)

    def collect_once(self, fetch: StatusFetcher) -> None:
        """Fetch the status through ``fetch`` and record its metrics."""
        try:
            status = get_status(fetch, self._environ, self.retry_delay)
        except StatusUnavailableError as exc:
            log_error(exc, "failed to get status")
            raise
        self.collect(status)

    def collect_once_from_file(self, path: str | os.PathLike[str]) -> None:
        """Read the status from a JSON file and record its metrics."""
        try:
            status = get_status_from_file(path)
        except StatusFileError as exc:
            log_error(exc, "failed to read status from file")
            raise
        self.collect(status)

    def render(self) -> str:
        """The recorded gauges in the Prometheus text exposition format."""
        return self.registry.render()

    def close(self) -> None:
        """Mark the reporter as retired."""
        self.closed = True
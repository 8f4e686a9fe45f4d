"""Checks that the sections a metric group needs are present."""

from __future__ import annotations

from fdb_exporter.models.status import FullStatus


def is_valid_cluster_lock_state(status: FullStatus | None) -> bool:
    return bool(status and status.cluster and status.cluster.database_lock_state is not None)


def is_valid_cluster_qos(status: FullStatus | None) -> bool:
    return bool(status and status.cluster and status.cluster.qos is not None)


def is_valid_cluster_fault_tolerance(status: FullStatus | None) -> bool:
    return bool(status and status.cluster and status.cluster.fault_tolerance is not None)


def is_valid_cluster_data(status: FullStatus | None) -> bool:
    return bool(status and status.cluster and status.cluster.data is not None)


def is_valid_cluster_latency_probe(status: FullStatus | None) -> bool:
    return bool(status and status.cluster and status.cluster.latency_probe is not None)


def is_valid_client(status: FullStatus | None) -> bool:
    return bool(status and status.client is not None)


def is_valid_workload(status: FullStatus | None) -> bool:
    return bool(status and status.cluster and status.cluster.workload is not None)


def is_valid_processes(status: FullStatus | None) -> bool:
    return bool(status and status.cluster and status.cluster.processes is not None)


def is_valid_backup(status: FullStatus | None) -> bool:
    return bool(
        status
        and status.cluster
        and status.cluster.layers
        and status.cluster.layers.backup is not None
    )
"""Processes section of the status document."""

from __future__ import annotations

from dataclasses import dataclass, field

from fdb_exporter.models.common import Hz, JsonModel, Lag
from fdb_exporter.models.workload import WorkloadMetrics


@dataclass
class ProcessCpu(JsonModel):
    usage_cores: float = 0.0


@dataclass
class ProcessDiskCounter(JsonModel):
    counter: int = 0
    hz: float = 0.0
    sectors: float = 0.0


@dataclass
class ProcessDisk(JsonModel):
    busy: float = 0.0
    free_bytes: int = 0
    reads: ProcessDiskCounter | None = None
    total_bytes: int = 0
    writes: ProcessDiskCounter | None = None


@dataclass
class ProcessLocality(JsonModel):
    """Locality of a process.

    ``process_id`` holds the ``processid`` key; ``operator_process_id`` holds
    the human-readable ``process_id`` key published by a Kubernetes operator.
    """

    instance_id: str = ""
    machine_id: str = field(default="", metadata={"json": "machineid"})
    process_id: str = field(default="", metadata={"json": "processid"})
    operator_process_id: str = field(default="", metadata={"json": "process_id"})
    zone_id: str = field(default="", metadata={"json": "zoneid"})


@dataclass
class ProcessMemory(JsonModel):
    available_bytes: int = 0
    limit_bytes: int = 0
    rss_bytes: int = 0
    unused_allocated_memory: int = 0
    used_bytes: int = 0


@dataclass
class ProcessMessage(JsonModel):
    description: str = ""
    name: str = ""
    raw_log_message: str = ""
    time: float = 0.0
    type: str = ""


@dataclass
class LatencyStats(JsonModel):
    count: int = 0
    max: float = 0.0
    mean: float = 0.0
    median: float = 0.0
    min: float = 0.0
    p25: float = 0.0
    p90: float = 0.0
    p95: float = 0.0
    p99: float = 0.0
    p999: float = field(default=0.0, metadata={"json": "p99.9"})


@dataclass
class ProcessNetwork(JsonModel):
    connection_errors: Hz | None = None
    connections_closed: Hz | None = None
    connections_established: Hz | None = None
    current_connections: int = 0
    megabits_received: Hz | None = None
    megabits_sent: Hz | None = None
    tls_policy_failures: Hz | None = None


@dataclass
class GrvLatencyStats(JsonModel):
    batch: LatencyStats | None = None
    default: LatencyStats | None = None


@dataclass
class ProcessRole(JsonModel):
    id: str = ""
    role: str = ""
    # GRV proxy
    grv_latency_statistics: GrvLatencyStats | None = None
    # Commit proxy
    commit_latency_statistics: LatencyStats | None = None
    commit_batching_window_size: LatencyStats | None = None
    # Storage and log
    kvstore_available_bytes: int = 0
    kvstore_free_bytes: int = 0
    kvstore_total_bytes: int = 0
    kvstore_used_bytes: int = 0
    queue_disk_available_bytes: int = 0
    queue_disk_free_bytes: int = 0
    queue_disk_total_bytes: int = 0
    queue_disk_used_bytes: int = 0
    data_version: int = 0
    durable_bytes: WorkloadMetrics | None = None
    input_bytes: WorkloadMetrics | None = None
    # Storage only
    bytes_queried: WorkloadMetrics | None = None
    data_lag: Lag | None = None
    durability_lag: Lag | None = None
    durable_version: int = 0
    fetched_versions: WorkloadMetrics | None = None
    finished_queries: WorkloadMetrics | None = None
    keys_queried: WorkloadMetrics | None = None
    local_rate: int = 0
    low_priority_queries: WorkloadMetrics | None = None
    mutation_bytes: WorkloadMetrics | None = None
    mutations: WorkloadMetrics | None = None
    query_queue_max: int = 0
    read_latency_statistics: LatencyStats | None = None
    stored_bytes: int = 0
    total_queries: WorkloadMetrics | None = None


@dataclass
class Process(JsonModel):
    address: str = ""
    class_source: str = ""
    class_type: str = ""
    command_line: str = ""
    cpu: ProcessCpu | None = None
    disk: ProcessDisk | None = None
    excluded: bool = False
    degraded: bool = False
    fault_domain: str = ""
    locality: ProcessLocality | None = None
    machine_id: str = ""
    memory: ProcessMemory | None = None
    messages: list[ProcessMessage] | None = None
    network: ProcessNetwork | None = None
    roles: list[ProcessRole] | None = None
    run_loop_busy: float = 0.0
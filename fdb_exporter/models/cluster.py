"""Cluster section of the status document."""

from __future__ import annotations

from dataclasses import dataclass, field

from fdb_exporter.models.cluster_message import ClusterMessage
from fdb_exporter.models.common import (
    FaultTolerance,
    JsonModel,
    Lag,
    LatencyProbe,
    LockState,
    PageCache,
    RecoveryState,
)
from fdb_exporter.models.config import Configuration
from fdb_exporter.models.data import Data
from fdb_exporter.models.layers import Layers
from fdb_exporter.models.log import Log
from fdb_exporter.models.machine import Machine
from fdb_exporter.models.process import Process
from fdb_exporter.models.qos import Qos
from fdb_exporter.models.workload import Workload


@dataclass
class ClusterStatus(JsonModel):
    cluster_controller_timestamp: int = 0
    configuration: Configuration | None = None
    connection_string: str = ""
    data: Data | None = None
    database_available: bool = False
    database_lock_state: LockState | None = None
    datacenter_lag: Lag = field(default_factory=Lag)
    degraded_processes: int = 0
    fault_tolerance: FaultTolerance | None = None
    full_replication: bool = False
    generation: int = 0
    latency_probe: LatencyProbe | None = None
    logs: list[Log] | None = None
    machines: dict[str, Machine] | None = None
    messages: list[ClusterMessage] | None = None
    page_cache: PageCache | None = None
    processes: dict[str, Process] | None = None
    protocol_version: str = ""
    qos: Qos | None = None
    recovery_state: RecoveryState | None = None
    workload: Workload | None = None
    layers: Layers | None = None
"""Workload section of the status document."""

from __future__ import annotations

from dataclasses import dataclass

from fdb_exporter.models.common import JsonModel


@dataclass
class WorkloadMetrics(JsonModel):
    counter: int = 0
    hz: float = 0.0
    roughness: float = 0.0


@dataclass
class WorkloadBytes(JsonModel):
    read: WorkloadMetrics | None = None
    written: WorkloadMetrics | None = None


@dataclass
class WorkloadKeys(JsonModel):
    read: WorkloadMetrics | None = None


@dataclass
class WorkloadOperations(JsonModel):
    location_requests: WorkloadMetrics | None = None
    low_priority_reads: WorkloadMetrics | None = None
    memory_errors: WorkloadMetrics | None = None
    read_requests: WorkloadMetrics | None = None
    reads: WorkloadMetrics | None = None
    writes: WorkloadMetrics | None = None


@dataclass
class WorkloadTransactions(JsonModel):
    committed: WorkloadMetrics | None = None
    conflicted: WorkloadMetrics | None = None
    rejected_for_queued_too_long: WorkloadMetrics | None = None
    started: WorkloadMetrics | None = None
    started_batch_priority: WorkloadMetrics | None = None
    started_default_priority: WorkloadMetrics | None = None
    started_immediate_priority: WorkloadMetrics | None = None


@dataclass
class Workload(JsonModel):
    bytes: WorkloadBytes | None = None
    keys: WorkloadKeys | None = None
    operations: WorkloadOperations | None = None
    transactions: WorkloadTransactions | None = None
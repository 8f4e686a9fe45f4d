"""Quality-of-service section of the status document."""

from __future__ import annotations

from dataclasses import dataclass, field

from fdb_exporter.models.common import JsonModel, Lag


@dataclass
class PerformanceLimitedBy(JsonModel):
    description: str = ""
    name: str = ""
    reason_id: int = 0


@dataclass
class AutoThrottledTags(JsonModel):
    busy_read: int = 0
    busy_write: int = 0
    count: int = 0
    recommended_only: int = 0


@dataclass
class ManualThrottledTags(JsonModel):
    count: int = 0


@dataclass
class ThrottledTags(JsonModel):
    auto: AutoThrottledTags = field(default_factory=AutoThrottledTags)
    manual: ManualThrottledTags = field(default_factory=ManualThrottledTags)


@dataclass
class Qos(JsonModel):
    batch_performance_limited_by: PerformanceLimitedBy = field(
        default_factory=PerformanceLimitedBy
    )
    batch_released_transactions_per_second: float = 0.0
    batch_transactions_per_second_limit: float = 0.0
    limiting_data_lag_storage_server: Lag = field(default_factory=Lag)
    limiting_durability_lag_storage_server: Lag = field(default_factory=Lag)
    limiting_queue_bytes_storage_server: int = 0
    performance_limited_by: PerformanceLimitedBy = field(default_factory=PerformanceLimitedBy)
    released_transactions_per_second: float = 0.0
    throttled_tags: ThrottledTags = field(default_factory=ThrottledTags)
    transactions_per_second_limit: float = 0.0
    worst_data_lag_storage_server: Lag = field(default_factory=Lag)
    worst_durability_lag_storage_server: Lag = field(default_factory=Lag)
    worst_queue_bytes_log_server: int = 0
    worst_queue_bytes_storage_server: int = 0
"""Data distribution section of the status document."""

from __future__ import annotations

from dataclasses import dataclass

from fdb_exporter.models.common import JsonModel


@dataclass
class MovingData(JsonModel):
    highest_priority: int = 0
    in_flight_bytes: int = 0
    in_queue_bytes: int = 0
    total_written_bytes: int = 0


@dataclass
class State(JsonModel):
    description: str = ""
    healthy: bool = False
    min_replicas_remaining: int = 0
    name: str = ""


@dataclass
class TeamTracker(JsonModel):
    in_flight_bytes: int = 0
    primary: bool = False
    state: State | None = None
    unhealthy_servers: int = 0


@dataclass
class Data(JsonModel):
    average_partition_size_bytes: int = 0
    least_operating_space_bytes_log_server: int = 0
    least_operating_space_bytes_storage_server: int = 0
    moving_data: MovingData | None = None
    partitions_count: int = 0
    state: State | None = None
    system_kv_size_bytes: int = 0
    team_trackers: list[TeamTracker] | None = None
    total_disk_used_bytes: int = 0
    total_kv_size_bytes: int = 0
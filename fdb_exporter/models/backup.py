"""Backup layer section of the status document."""

from __future__ import annotations

from dataclasses import dataclass, field

from fdb_exporter.models.common import JsonModel


@dataclass
class BlobRecentIo(JsonModel):
    bytes_per_second: float = 0.0
    bytes_sent: int = 0
    requests_failed: int = 0
    requests_successful: int = 0


@dataclass
class BlobStatsRecent(JsonModel):
    bytes_per_second: float = 0.0
    bytes_sent: int = 0
    requests_failed: int = 0
    requests_successful: int = 0


@dataclass
class BlobStatsTotal(JsonModel):
    bytes_sent: int = 0
    requests_failed: int = 0
    requests_successful: int = 0


@dataclass
class BlobStats(JsonModel):
    recent: BlobStatsRecent = field(default_factory=BlobStatsRecent)
    total: BlobStatsTotal = field(default_factory=BlobStatsTotal)


@dataclass
class BackupInstance(JsonModel):
    blob_stats: BlobStats | None = None
    configured_workers: int = 0
    id: str = ""
    last_updated: float = 0.0
    main_thread_cpu_seconds: float = 0.0
    memory_usage: int = 0
    process_cpu_seconds: float = 0.0
    resident_size: int = 0
    version: str = ""


@dataclass
class BackupTag(JsonModel):
    current_container: str = ""
    current_status: str = ""
    last_restorable_seconds_behind: float = 0.0
    last_restorable_version: int = 0
    mutation_log_bytes_written: int = 0
    mutation_stream_id: str = ""
    range_bytes_written: int = 0
    running_backup: bool = False
    running_backup_is_restorable: bool = False


@dataclass
class Backup(JsonModel):
    blob_recent_io: BlobRecentIo | None = None
    instances: dict[str, BackupInstance] | None = None
    instances_running: int = 0
    last_updated: float = 0.0
    paused: bool = False
    tags: dict[str, BackupTag] | None = None
    total_workers: int = 0
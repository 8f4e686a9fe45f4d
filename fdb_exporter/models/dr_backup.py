"""Disaster-recovery backup sections of the status document."""

from __future__ import annotations

from dataclasses import dataclass

from fdb_exporter.models.common import JsonModel


@dataclass
class DrBackupInstance(JsonModel):
    configured_workers: int = 0
    id: str = ""
    last_updated: float = 0.0
    main_thread_cpu_seconds: float = 0.0
    memory_usage: int = 0
    process_cpu_seconds: float = 0.0
    resident_size: int = 0
    version: str = ""


@dataclass
class DrBackupTag(JsonModel):
    backup_state: str = ""
    mutation_log_bytes_written: int = 0
    mutation_stream_id: str = ""
    range_bytes_written: int = 0
    running_backup: bool = False
    running_backup_is_restorable: bool = False
    seconds_behind: float = 0.0


@dataclass
class DrBackup(JsonModel):
    instances: dict[str, DrBackupInstance] | None = None
    instances_running: int = 0
    last_updated: float = 0.0
    paused: bool = False
    tags: dict[str, DrBackupTag] | None = None
    total_workers: int = 0
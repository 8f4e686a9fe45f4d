"""Transaction log section of the status document."""

from __future__ import annotations

from dataclasses import dataclass

from fdb_exporter.models.common import JsonModel


@dataclass
class LogInterface(JsonModel):
    address: str = ""
    healthy: bool = False
    id: str = ""


@dataclass
class Log(JsonModel):
    begin_version: int = 0
    current: bool = False
    epoch: int = 0
    log_fault_tolerance: int = 0
    log_interfaces: list[LogInterface] | None = None
    log_replication_factor: int = 0
    log_write_anti_quorum: int = 0
    possibly_losing_data: bool = False
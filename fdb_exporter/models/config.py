"""Cluster configuration section of the status document."""

from __future__ import annotations

from dataclasses import dataclass

from fdb_exporter.models.common import JsonModel


@dataclass
class ExcludedServer(JsonModel):
    address: str = ""


@dataclass
class Configuration(JsonModel):
    backup_worker_enabled: int = 0
    blob_granules_enabled: int = 0
    commit_proxies: int = 0
    coordinators_count: int = 0
    excluded_servers: list[ExcludedServer] | None = None
    grv_proxies: int = 0
    log_routers: int = 0
    logs: int = 0
    perpetual_storage_wiggle: int = 0
    perpetual_storage_wiggle_locality: str = ""
    proxies: int = 0
    redundancy_mode: str = ""
    remote_logs: int = 0
    resolvers: int = 0
    storage_engine: str = ""
    storage_migration_type: str = ""
    tenant_mode: str = ""
    usable_regions: int = 0
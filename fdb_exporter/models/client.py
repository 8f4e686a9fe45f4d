"""Client section of the status document."""

from __future__ import annotations

from dataclasses import dataclass

from fdb_exporter.models.common import JsonModel


@dataclass
class ClientMessage(JsonModel):
    """A client-side message such as ``quorum_not_reachable``."""

    name: str = ""
    description: str = ""


@dataclass
class ClusterFile(JsonModel):
    path: str = ""
    up_to_date: bool = False


@dataclass
class Coordinator(JsonModel):
    address: str = ""
    protocol: str = ""
    reachable: bool = False


@dataclass
class Coordinators(JsonModel):
    coordinators: list[Coordinator] | None = None
    quorum_reachable: bool = False


@dataclass
class DatabaseStatus(JsonModel):
    available: bool = False
    healthy: bool = False


@dataclass
class ClientStatus(JsonModel):
    cluster_file: ClusterFile | None = None
    coordinators: Coordinators | None = None
    database_status: DatabaseStatus | None = None
    messages: list[ClientMessage] | None = None
    timestamp: int = 0
"""Cluster-wide messages of the status document."""

from __future__ import annotations

from dataclasses import dataclass

from fdb_exporter.models.common import JsonModel


@dataclass
class Issue(JsonModel):
    addresses: list[str] | None = None
    count: int = 0
    description: str = ""
    name: str = ""


@dataclass
class ClusterMessage(JsonModel):
    description: str = ""
    issues: list[Issue] | None = None
    name: str = ""
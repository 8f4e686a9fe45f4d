"""Layers section of the status document."""

from __future__ import annotations

from dataclasses import dataclass, field

from fdb_exporter.models.backup import Backup
from fdb_exporter.models.common import JsonModel
from fdb_exporter.models.dr_backup import DrBackup


@dataclass
class Layers(JsonModel):
    valid: bool = field(default=False, metadata={"json": "_valid"})
    backup: Backup | None = None
    dr_backup: DrBackup | None = None
    dr_backup_dest: DrBackup | None = None
"""Backup layer metrics."""

from __future__ import annotations

import logging
from typing import Any

from fdb_exporter.metrics.group import MetricGroup
from fdb_exporter.metrics.helpers import set_gauge, set_multiple_gauges
from fdb_exporter.metrics.tags import get_base_tags
from fdb_exporter.metrics.validation import is_valid_backup
from fdb_exporter.models.status import FullStatus

_log = logging.getLogger(__name__)


class BackupMetricGroup(MetricGroup):
    def __init__(self, reporter: Any) -> None:
        parent = reporter.get_scope("cluster")
        super().__init__("backup", parent, reporter)
        self.add_scope(parent, "backup_tag", "backup_tag")
        self.add_scope(parent, "backup_instances", "backup_instances")
        self.add_scope(parent, "backup_config", "backup_config")

    def get_metrics(self, status: FullStatus) -> None:
        self._get_no_backup_metrics(status)
        self._get_tagged_metrics(status)
        self._get_instance_metrics(status)

    def _emit_no_backup(self) -> None:
        set_gauge(self.get_scope("backup_config"), "absent", get_base_tags(), 1)

    def _get_no_backup_metrics(self, status: FullStatus) -> None:
        # Absent when there is no backup section, or when agents are connected
        # but no backup is configured (no tags).
        if not is_valid_backup(status) or status.cluster.layers.backup.tags is None:
            self._emit_no_backup()

    def _get_tagged_metrics(self, status: FullStatus) -> None:
        if not is_valid_backup(status):
            _log.error("Failed to get backup tag metric group")
            return
        scope = self.get_scope("backup_tag")
        for tag_name, tag in (status.cluster.layers.backup.tags or {}).items():
            tags = get_base_tags()
            tags["backup_tag"] = tag_name
            metrics = {
                "is_running": tag.running_backup,
                "running_is_restorable": tag.running_backup_is_restorable,
                "last_restorable_seconds_behind": tag.last_restorable_seconds_behind,
                "range_bytes_written": tag.range_bytes_written,
            }
            set_multiple_gauges(scope, metrics, tags)

    def _get_instance_metrics(self, status: FullStatus) -> None:
        if not is_valid_backup(status):
            _log.error("Failed to get backup instance metric group")
            return
        instances = status.cluster.layers.backup.instances
        if instances is not None:
            set_gauge(self.get_scope("backup_instances"), "count", get_base_tags(), len(instances))
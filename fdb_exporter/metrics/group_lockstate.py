"""Database lock state."""

from __future__ import annotations

import logging
from typing import Any

from fdb_exporter.metrics.group import MetricGroup
from fdb_exporter.metrics.helpers import set_gauge
from fdb_exporter.metrics.tags import get_base_tags
from fdb_exporter.metrics.validation import is_valid_cluster_lock_state
from fdb_exporter.models.status import FullStatus

_log = logging.getLogger(__name__)


class DbClusterLock(MetricGroup):
    def __init__(self, reporter: Any) -> None:
        super().__init__("lockstate", reporter.get_scope("cluster"), reporter)

    def get_metrics(self, status: FullStatus) -> None:
        scope = self.get_scope("default")
        if not is_valid_cluster_lock_state(status):
            _log.error("failed to get database lock_state")
            return
        set_gauge(scope, "locked", get_base_tags(), status.cluster.database_lock_state.locked)
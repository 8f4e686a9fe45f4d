"""Database availability and health as seen by the client."""

from __future__ import annotations

import logging
from typing import Any

from fdb_exporter.metrics.group import MetricGroup
from fdb_exporter.metrics.helpers import set_gauge
from fdb_exporter.metrics.tags import get_base_tags
from fdb_exporter.metrics.validation import is_valid_client
from fdb_exporter.models.status import FullStatus

_log = logging.getLogger(__name__)


class DbStatusMetricGroup(MetricGroup):
    def __init__(self, reporter: Any) -> None:
        super().__init__("status", reporter.get_scope("client"), reporter)

    def get_metrics(self, status: FullStatus) -> None:
        scope = self.get_scope("default")
        if not is_valid_client(status) or status.client.database_status is None:
            _log.error("failed to get database status")
            return
        db_status = status.client.database_status
        set_gauge(scope, "available", get_base_tags(), db_status.available)
        set_gauge(scope, "healthy", get_base_tags(), db_status.healthy)
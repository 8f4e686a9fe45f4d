"""Counts of cluster-wide messages by name."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any

from fdb_exporter.metrics.group import MetricGroup
from fdb_exporter.metrics.helpers import set_gauge
from fdb_exporter.metrics.tags import get_base_tags
from fdb_exporter.models.status import FullStatus

_log = logging.getLogger(__name__)


class ClusterMessageMetricGroup(MetricGroup):
    def __init__(self, reporter: Any) -> None:
        parent = reporter.get_scope("cluster")
        super().__init__("messages", parent, reporter)
        self.add_scope(parent, "global", "global")

    def get_tags(self, name: str) -> dict[str, str]:
        """Base tags with the message name added."""
        tags = get_base_tags()
        tags["name"] = name
        return tags

    def get_metrics(self, status: FullStatus) -> None:
        if status is None or status.cluster is None:
            _log.error("failed to get cluster messages metric group")
            return
        counts = Counter(message.name for message in status.cluster.messages or [])
        scope = self.get_scope("global")
        for name, count in counts.items():
            set_gauge(scope, "messages", self.get_tags(name), count)
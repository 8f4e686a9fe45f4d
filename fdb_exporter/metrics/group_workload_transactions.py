"""Transactions started, committed and conflicted by the workload."""

from __future__ import annotations

import logging
from typing import Any

from fdb_exporter.metrics.group import MetricGroup
from fdb_exporter.metrics.helpers import set_multiple_gauges
from fdb_exporter.metrics.tags import get_base_tag_keys, get_base_tags, standardize_tags
from fdb_exporter.metrics.validation import is_valid_workload
from fdb_exporter.models.status import FullStatus

_log = logging.getLogger(__name__)


class WorkloadTransactionsMetricGroup(MetricGroup):
    def __init__(self, reporter: Any) -> None:
        parent = reporter.get_scope("workload")
        super().__init__("transactions", parent, reporter)
        self.add_scope(parent, "started", "transactions")

    def get_valid_tag_keys(self, scope_key: str) -> list[str]:
        """The tag keys metrics in the scope ``scope_key`` carry."""
        keys = get_base_tag_keys()
        if scope_key == "started":
            keys.append("priority")
        return keys

    def get_tags(self, scope_key: str, priority: str) -> dict[str, str] | None:
        """Standardized tags for ``scope_key``; None for an unknown scope."""
        if scope_key == "default":
            return standardize_tags(get_base_tags(), self.get_valid_tag_keys(scope_key))
        if scope_key == "started":
            tags = get_base_tags()
            tags["priority"] = priority
            return standardize_tags(tags, self.get_valid_tag_keys(scope_key))
        _log.error("unknown scope")
        return None

    def get_metrics(self, status: FullStatus) -> None:
        transactions_scope = self.get_scope("default")
        if not is_valid_workload(status):
            _log.error("failed to get workload metric group")
            return
        transactions = status.cluster.workload.transactions
        if transactions is None:
            _log.error("failed to get workload -> transactions metric group")
            return

        metrics: dict[str, Any] = {}
        for prefix, section in (
            ("committed", transactions.committed),
            ("conflicted", transactions.conflicted),
            ("rejected_for_queued_too_long", transactions.rejected_for_queued_too_long),
        ):
            if section is not None:
                metrics[f"{prefix}_count"] = section.counter
                metrics[f"{prefix}_hz"] = section.hz
        set_multiple_gauges(transactions_scope, metrics, self.get_tags("default", ""))

        # Started transactions are split by batch, default and immediate priority.
        started_scope = self.get_scope("started")
        for prefix, priority, section in (
            ("started", "batch", transactions.started_batch_priority),
            ("default", "default", transactions.started_default_priority),
            ("immediate", "immediate", transactions.started_immediate_priority),
        ):
            if section is not None:
                set_multiple_gauges(
                    started_scope,
                    {f"{prefix}_count": section.counter, f"{prefix}_hz": section.hz},
                    self.get_tags("started", priority),
                )
import logging

from fdb_exporter.metrics.group_latency_probe import LatencyProbeMetricGroup
from fdb_exporter.metrics.scope import Registry, Scope, Scoped
from fdb_exporter.metrics.tags import get_base_tags
from fdb_exporter.models.status import FullStatus


def _reporter():
    registry = Registry()
    reporter = Scoped()
    reporter.scopes["root"] = Scope(registry, "", get_base_tags())
    reporter.add_scope(reporter.get_scope("root"), "fdb", "fdb")
    reporter.add_scope(reporter.get_scope("fdb"), "cluster", "cluster")
    return reporter, registry


def test_latency_probe_single_basic():
    reporter, registry = _reporter()
    status = FullStatus.from_dict(
        {
            "cluster": {
                "latency_probe": {
                    "batch_priority_transaction_start_seconds": 0.5,
                    "commit_seconds": 0.25,
                    "immediate_priority_transaction_start_seconds": 0.125,
                    "read_seconds": 0.75,
                    "transaction_start_seconds": 0.375,
                }
            }
        }
    )
    LatencyProbeMetricGroup(reporter).get_metrics(status)
    values = {s.name: s.value for s in registry.samples()}
    assert values == {
        "fdb_cluster_latency_probe_commit_seconds": 0.25,
        "fdb_cluster_latency_probe_read_seconds": 0.75,
        "fdb_cluster_latency_probe_transaction_start_seconds": 0.375,
        "fdb_cluster_latency_probe_transaction_start_seconds_batch": 0.5,
        "fdb_cluster_latency_probe_transaction_start_seconds_immediate": 0.125,
    }


def test_missing_latency_probe(caplog):
    reporter, registry = _reporter()
    with caplog.at_level(logging.ERROR):
        LatencyProbeMetricGroup(reporter).get_metrics(FullStatus.from_dict({"cluster": {}}))
    assert registry.samples() == []
    assert "failed to get cluster latency probes" in caplog.text
import logging

from fdb_exporter.metrics.group_fault_tolerance import DbClusterFaultTolerance
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


def test_fault_tolerance_metrics():
    reporter, registry = _reporter()
    status = FullStatus.from_dict(
        {
            "cluster": {
                "fault_tolerance": {
                    "max_zone_failures_without_losing_availability": 2,
                    "max_zone_failures_without_losing_data": 3,
                }
            }
        }
    )
    DbClusterFaultTolerance(reporter).get_metrics(status)
    values = {s.name: s.value for s in registry.samples()}
    assert values == {
        "fdb_cluster_fault_tolerance_zone_failures_availability": 2.0,
        "fdb_cluster_fault_tolerance_zone_failures_data": 3.0,
    }


def test_samples_carry_base_tags():
    reporter, registry = _reporter()
    status = FullStatus.from_dict({"cluster": {"fault_tolerance": {}}})
    DbClusterFaultTolerance(reporter).get_metrics(status)
    samples = registry.samples()
    assert len(samples) == 2
    assert all(s.tags == get_base_tags() for s in samples)


def test_missing_fault_tolerance(caplog):
    reporter, registry = _reporter()
    with caplog.at_level(logging.ERROR):
        DbClusterFaultTolerance(reporter).get_metrics(FullStatus.from_dict({"cluster": {}}))
    assert registry.samples() == []
    assert "failed to get database fault tolerance" in caplog.text
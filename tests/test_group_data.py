from fdb_exporter.metrics.group_data import DataMetricGroup
from fdb_exporter.metrics.scope import Registry, Scope, Scoped
from fdb_exporter.metrics.tags import get_base_tags
from fdb_exporter.models.status import FullStatus


def make_reporter():
    registry = Registry()
    reporter = Scoped()
    root = Scope(registry, "", get_base_tags())
    reporter.scopes["root"] = root
    reporter.add_scope(root, "fdb", "fdb")
    reporter.add_scope(reporter.scopes["fdb"], "client", "client")
    reporter.add_scope(reporter.scopes["fdb"], "cluster", "cluster")
    reporter.add_scope(reporter.scopes["cluster"], "workload", "workload")
    return reporter, registry


def values(registry, name):
    return [s.value for s in registry.samples() if s.name == name]


def single_basic(state_name="healthy", moving=None):
    return FullStatus.from_dict(
        {
            "cluster": {
                "data": {
                    "average_partition_size_bytes": 20668340,
                    "least_operating_space_bytes_log_server": 604285174979,
                    "least_operating_space_bytes_storage_server": 854875383,
                    "moving_data": moving
                    or {
                        "highest_priority": 0,
                        "in_flight_bytes": 0,
                        "in_queue_bytes": 0,
                        "total_written_bytes": 0,
                    },
                    "partitions_count": 2,
                    "state": {
                        "description": "",
                        "healthy": state_name == "healthy",
                        "min_replicas_remaining": 1,
                        "name": state_name,
                    },
                    "total_disk_used_bytes": 542511104,
                    "total_kv_size_bytes": 57120499,
                }
            }
        }
    )


def collect(status):
    reporter, registry = make_reporter()
    DataMetricGroup(reporter).get_metrics(status)
    return registry


def test_data_metric_group_single_basic():
    registry = collect(single_basic())
    names = {s.name for s in registry.samples()}
    expected = [
        "fdb_cluster_data_average_partition_size_bytes",
        "fdb_cluster_data_least_operating_space_bytes_log_server",
        "fdb_cluster_data_least_operating_space_bytes_storage_server",
        "fdb_cluster_data_moving_data_in_flight_bytes",
        "fdb_cluster_data_moving_data_in_queue_bytes",
        "fdb_cluster_data_moving_data_total_written_types",
        "fdb_cluster_data_total_disk_used_bytes",
        "fdb_cluster_data_total_kv_size_bytes",
    ]
    for name in expected:
        assert name in names


def test_data_values_single_basic():
    registry = collect(single_basic())
    assert values(registry, "fdb_cluster_data_average_partition_size_bytes") == [20668340]
    assert values(registry, "fdb_cluster_data_total_kv_size_bytes") == [57120499]
    assert values(registry, "fdb_cluster_data_min_replicas_remaining") == [1]
    assert values(registry, "fdb_cluster_data_state_health") == [1.0]
    assert values(registry, "fdb_cluster_data_missing_data") == [0.0]


def test_data_metric_group_moving_data():
    moving = {"in_flight_bytes": 1000, "in_queue_bytes": 2000, "total_written_bytes": 3000}
    registry = collect(single_basic(moving=moving))
    assert values(registry, "fdb_cluster_data_moving_data_in_flight_bytes") == [1000]
    assert values(registry, "fdb_cluster_data_moving_data_in_queue_bytes") == [2000]
    assert values(registry, "fdb_cluster_data_moving_data_total_written_types") == [3000]


def test_missing_data_state():
    registry = collect(single_basic(state_name="missing_data"))
    assert values(registry, "fdb_cluster_data_missing_data") == [1.0]
    assert values(registry, "fdb_cluster_data_state_health") == [0.0]


def test_no_data_section_emits_nothing():
    registry = collect(FullStatus.from_dict({"cluster": {}}))
    assert registry.samples() == []


def test_no_moving_data_emits_nothing():
    status = single_basic()
    status.cluster.data.moving_data = None
    assert collect(status).samples() == []
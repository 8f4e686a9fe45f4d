import json

import pytest

from fdb_exporter.db import StatusUnavailableError
from fdb_exporter.metrics.exposition import parse_metrics
from fdb_exporter.metrics.reporter import MetricReporter
from fdb_exporter.models.status import FullStatus, StatusFileError

STATUS = {
    "client": {
        "coordinators": {
            "quorum_reachable": True,
            "coordinators": [{"address": "127.0.0.1:4689", "reachable": True}],
        },
        "database_status": {"available": True, "healthy": True},
    },
    "cluster": {
        "database_available": True,
        "database_lock_state": {"locked": False},
        "fault_tolerance": {
            "max_zone_failures_without_losing_availability": 0,
            "max_zone_failures_without_losing_data": 0,
        },
        "data": {
            "average_partition_size_bytes": 20668340,
            "total_kv_size_bytes": 57120499,
            "moving_data": {"in_flight_bytes": 0, "in_queue_bytes": 0, "total_written_bytes": 0},
            "state": {"healthy": True, "name": "healthy", "min_replicas_remaining": 1},
        },
        "latency_probe": {"commit_seconds": 0.002, "read_seconds": 0.001},
        "qos": {"transactions_per_second_limit": 137666000.0},
        "workload": {
            "bytes": {"read": {"counter": 1521265096, "hz": 3361.99}},
            "keys": {"read": {"counter": 4192507, "hz": 11.4}},
            "operations": {"reads": {"counter": 8821994, "hz": 21.1999}},
            "transactions": {
                "committed": {"counter": 64050, "hz": 0.199989},
                "started_batch_priority": {"counter": 637, "hz": 0.199966},
            },
        },
        "processes": {
            "dbfd37cad094516ba1ee62c6345b3469": {
                "address": "127.0.0.1:4689",
                "class_type": "unset",
                "cpu": {"usage_cores": 0.0277308},
                "roles": [
                    {
                        "role": "grv_proxy",
                        "grv_latency_statistics": {
                            "default": {"count": 3, "median": 0.001, "p95": 0.002, "p99": 0.003},
                        },
                    }
                ],
            }
        },
        "messages": [{"name": "io_timeout"}],
        "layers": {
            "backup": {
                "tags": {"default": {"running_backup": True}},
                "instances": {"instance-one": {"version": "7.1.7"}},
            }
        },
    },
}


def _keys(reporter):
    return {m.key for m in parse_metrics(reporter.render()) if m.value}


@pytest.fixture
def reporter():
    rep = MetricReporter(environ={})
    rep.retry_delay = 0
    return rep


def test_collect_records_metrics_from_every_section(reporter):
    reporter.collect(FullStatus.from_dict(STATUS))
    keys = _keys(reporter)
    expected = {
        "fdb_client_coordinator_quorum",
        "fdb_client_coordinator_reachable",
        "fdb_client_coordinator_unreachable",
        "fdb_client_status_available",
        "fdb_client_status_healthy",
        "fdb_cluster_data_average_partition_size_bytes",
        "fdb_cluster_data_moving_data_in_flight_bytes",
        "fdb_cluster_latency_probe_commit_seconds",
        "fdb_cluster_workload_bytes_read_count",
        "fdb_cluster_workload_keys_read_count",
        "fdb_cluster_workload_operations_reads_count",
        "fdb_cluster_workload_transactions_committed_count",
        "fdb_cluster_workload_transactions_started_count",
        "fdb_cluster_processes_cpu_cores",
        "fdb_cluster_grv_latency",
        "fdb_cluster_global_messages",
        "fdb_cluster_backup_tag_is_running",
        "fdb_cluster_backup_instances_count",
    }
    assert expected <= keys


def test_started_transactions_carry_priority(reporter):
    reporter.collect(FullStatus.from_dict(STATUS))
    started = [
        m for m in parse_metrics(reporter.render())
        if m.key == "fdb_cluster_workload_transactions_started_count"
    ]
    assert started
    assert all("priority" in m.tags for m in started)


def test_collect_keeps_status(reporter):
    status = FullStatus.from_dict(STATUS)
    reporter.collect(status)
    assert reporter.status is status


def test_value_is_exposed(reporter):
    reporter.collect(FullStatus.from_dict(STATUS))
    values = {m.key: m.value for m in parse_metrics(reporter.render())}
    assert values["fdb_cluster_data_average_partition_size_bytes"] == "20668340"


def test_backup_reporting_can_be_disabled():
    rep = MetricReporter(environ={"FDB_EXPORTER_NO_BACKUP_REPORTING": "1"})
    default = MetricReporter(environ={})
    assert len(rep.groups) == len(default.groups) - 1
    rep.collect(FullStatus.from_dict(STATUS))
    assert not any(k.startswith("fdb_cluster_backup") for k in _keys(rep))


def test_absent_backup_is_reported(reporter):
    reporter.collect(FullStatus.from_dict({"client": STATUS["client"]}))
    assert "fdb_cluster_backup_config_absent" in _keys(reporter)


def test_base_tags_come_from_environment(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "staging")
    rep = MetricReporter(environ={})
    rep.collect(FullStatus.from_dict(STATUS))
    metrics = parse_metrics(rep.render())
    assert metrics
    assert all('env="staging"' in m.tags for m in metrics)


def test_collect_once_from_file(reporter, tmp_path):
    path = tmp_path / "status.json"
    path.write_text(json.dumps(STATUS))
    reporter.collect_once_from_file(path)
    assert "fdb_client_coordinator_quorum" in _keys(reporter)


def test_collect_once_from_missing_file_raises(reporter, tmp_path):
    with pytest.raises(StatusFileError):
        reporter.collect_once_from_file(tmp_path / "missing.json")


def test_collect_once_uses_fetcher(reporter):
    seen = []

    def fetch(key):
        seen.append(key)
        return json.dumps(STATUS).encode()

    reporter.collect_once(fetch)
    assert seen == [b"\xff\xff/status/json"]
    assert "fdb_client_status_healthy" in _keys(reporter)


def test_collect_once_failure_raises(reporter):
    def fetch(key):
        raise OSError("unreachable")

    with pytest.raises(StatusUnavailableError):
        reporter.collect_once(fetch)
    assert reporter.render() == ""


def test_collect_without_groups_raises(reporter):
    reporter.groups = []
    with pytest.raises(RuntimeError):
        reporter.collect(FullStatus.from_dict(STATUS))


def test_close_marks_reporter_closed(reporter):
    assert reporter.closed is False
    reporter.close()
    assert reporter.closed is True
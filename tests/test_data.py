import pytest

from fdb_exporter.models.data import Data, MovingData, State, TeamTracker


@pytest.fixture
def data():
    healthy = {"healthy": True, "min_replicas_remaining": 1, "name": "healthy"}
    return Data.from_dict(
        {
            "average_partition_size_bytes": 20668340,
            "least_operating_space_bytes_log_server": 604285174979,
            "least_operating_space_bytes_storage_server": 854875383,
            "moving_data": {
                "highest_priority": 0,
                "in_flight_bytes": 0,
                "in_queue_bytes": 0,
                "total_written_bytes": 0,
            },
            "partitions_count": 2,
            "state": healthy,
            "team_trackers": [{"in_flight_bytes": 0, "primary": True, "state": healthy}],
            "total_disk_used_bytes": 542511104,
            "total_kv_size_bytes": 57120499,
        }
    )


def test_data_single_basic(data):
    assert data.average_partition_size_bytes == 20668340
    assert data.least_operating_space_bytes_log_server == 604285174979
    assert data.least_operating_space_bytes_storage_server == 854875383
    assert data.partitions_count == 2
    assert data.total_disk_used_bytes == 542511104
    assert data.total_kv_size_bytes == 57120499


def test_moving_data_single_basic(data):
    moving = data.moving_data
    assert moving.highest_priority == 0
    assert moving.in_flight_bytes == 0
    assert moving.in_queue_bytes == 0
    assert moving.total_written_bytes == 0


def test_state_single_basic(data):
    state = data.state
    assert state.description == ""
    assert state.min_replicas_remaining == 1
    assert state.healthy is True
    assert state.name == "healthy"


def test_team_trackers_single_basic(data):
    assert len(data.team_trackers) == 1
    tracker = data.team_trackers[0]
    assert tracker.in_flight_bytes == 0
    assert tracker.primary is True
    assert tracker.state.healthy is True
    assert tracker.state.min_replicas_remaining == 1
    assert tracker.state.name == "healthy"


def test_missing_data_state():
    data = Data.from_dict({"state": {"name": "missing_data", "healthy": False}})
    assert data.state == State(name="missing_data", healthy=False)
    assert data.moving_data is None
    assert data.team_trackers is None


def test_defaults_round_trip():
    assert MovingData.from_dict({}) == MovingData()
    assert TeamTracker.from_dict({"state": None}) == TeamTracker()


def test_bytes_must_be_integer():
    with pytest.raises(ValueError):
        Data.from_dict({"total_kv_size_bytes": 1.5})
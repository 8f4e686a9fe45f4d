import pytest

from fdb_exporter.metrics.tags import (
    UNKNOWN_VALUE,
    convert_bool,
    get_base_tag_keys,
    get_base_tags,
    get_env_or_default,
    merge_tags,
    standardize_tags,
)

_ENV_VARS = ["ENVIRONMENT", "SERVICE", "FDB_VERSION", "FDB_CLUSTER_NAME", "CLUSTER_NAME"]


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_base_tags_defaults(clean_env):
    assert get_base_tags() == {
        "env": "default_env",
        "service": "default_service",
        "version": "default_version",
        "fdb_cluster": "default_fdb_cluster_name",
        "cluster": "default_cluster_name",
    }


def test_base_tags_from_environment(clean_env):
    clean_env.setenv("ENVIRONMENT", "prod")
    clean_env.setenv("CLUSTER_NAME", "east")
    tags = get_base_tags()
    assert tags["env"] == "prod"
    assert tags["cluster"] == "east"


def test_base_tag_keys_match_base_tags(clean_env):
    assert sorted(get_base_tag_keys()) == sorted(get_base_tags())


def test_env_or_default_treats_empty_as_unset(clean_env):
    clean_env.setenv("SERVICE", "")
    assert get_env_or_default("SERVICE", "fallback") == "fallback"
    clean_env.setenv("SERVICE", "svc")
    assert get_env_or_default("SERVICE", "fallback") == "svc"


def test_merge_tags_first_wins():
    assert merge_tags({"a": "1"}, {"a": "2", "b": "3"}) == {"a": "1", "b": "3"}


def test_merge_tags_unknown_is_replaced():
    assert merge_tags({"a": UNKNOWN_VALUE}, {"a": "x"}) == {"a": "x"}


def test_standardize_drops_extra_and_fills_missing(clean_env):
    result = standardize_tags({"env": "prod", "extra": "x", "service": ""}, ["env", "service"])
    assert result == {"env": "prod", "service": "default_service"}


def test_standardize_unknown_default_for_fdb_cluster(clean_env):
    result = standardize_tags({}, get_base_tag_keys())
    assert result["fdb_cluster"] == UNKNOWN_VALUE
    assert set(result) == set(get_base_tag_keys())


def test_standardize_does_not_modify_input(clean_env):
    tags = {"env": "prod", "extra": "x"}
    standardize_tags(tags, ["env"])
    assert tags == {"env": "prod", "extra": "x"}


def test_convert_bool():
    assert convert_bool(True) == 1.0
    assert convert_bool(False) == 0.0
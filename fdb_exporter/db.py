"""Reading the cluster status document from the database."""

from __future__ import annotations

import logging
import os
import re
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from fdb_exporter.errlog import log_error
from fdb_exporter.models.status import FullStatus

_log = logging.getLogger(__name__)

DEFAULT_API_VERSION = "710"

_TLS_ADDRESS = re.compile(r"[0-9]+:tls")

StatusFetcher = Callable[[bytes], bytes]


class StatusUnavailableError(Exception):
    """The status document could not be read, decoded or was incomplete."""


@dataclass(frozen=True)
class ClusterSettings:
    """Connection settings taken from the environment."""

    cluster_file: str
    api_version: int = int(DEFAULT_API_VERSION)
    tls_ca_file: str = ""
    tls_cert_file: str = ""
    tls_key_file: str = ""
    tls_verify_peers: str = ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClusterSettings:
        """Read the settings; raise ValueError when they are missing or invalid."""
        env = os.environ if environ is None else environ
        cluster_file = env.get("FDB_CLUSTER_FILE", "")
        if not cluster_file:
            raise ValueError("set FDB_CLUSTER_FILE environment variable")
        api_version_str = env.get("FDB_API_VERSION") or DEFAULT_API_VERSION
        try:
            api_version = int(api_version_str)
        except ValueError:
            raise ValueError(
                f"could not convert api version {api_version_str!r} to integer"
            ) from None
        return cls(
            cluster_file=cluster_file,
            api_version=api_version,
            tls_ca_file=env.get("FDB_TLS_CA_FILE", ""),
            tls_cert_file=env.get("FDB_TLS_CERT_FILE", ""),
            tls_key_file=env.get("FDB_TLS_KEY_FILE", ""),
            tls_verify_peers=env.get("FDB_TLS_VERIFY_PEERS", ""),
        )

    @property
    def tls(self) -> bool:
        """Whether the cluster file asks for TLS connections."""
        return is_tls_mode(self.cluster_file)


def is_tls_mode(cluster_file: str | os.PathLike[str]) -> bool:
    """Whether the cluster file's last line names a ``<port>:tls`` address."""
    with open(cluster_file, encoding="utf-8") as f:
        lines = f.read().splitlines()
    tls = False
    for line in lines:
        # e.g. docker:docker@172.19.0.2:4500:tls
        tls = _TLS_ADDRESS.search(line) is not None
    return tls


def is_status_incomplete(status: FullStatus) -> bool:
    """Whether the status lacks the cluster sections a healthy cluster reports."""
    cluster = status.cluster
    return (
        cluster is None
        or cluster.database_lock_state is None
        or cluster.fault_tolerance is None
        or cluster.data is None
        or not cluster.database_available
    )


def status_key() -> bytes:
    """The special key whose value is the status JSON document."""
    return b"\xff\xff/status/json"


def get_status_once(
    fetch: StatusFetcher, environ: Mapping[str, str] | None = None
) -> FullStatus:
    """Fetch and decode the status document once.

    ``fetch`` is called with :func:`status_key` and returns the raw JSON.
    """
    env = os.environ if environ is None else environ
    start = time.monotonic()
    try:
        raw = fetch(status_key())
    except Exception as exc:
        log_error(exc, "failed to get status")
        raise StatusUnavailableError("failed to get status") from exc
    try:
        status = FullStatus.from_json(raw)
    except ValueError as exc:
        log_error(exc, "failed to unmarshal status")
        raise StatusUnavailableError("failed to unmarshal status") from exc

    if env.get("DEBUG_LOG_INCOMPLETE_STATUS") == "true" and is_status_incomplete(status):
        text = raw.decode("utf-8", "replace") if isinstance(raw, bytes) else str(raw)
        _log.debug(
            "status json is missing cluster fields (took %.3fs): %s",
            time.monotonic() - start,
            text,
        )
        raise StatusUnavailableError("incomplete status")
    return status


def get_status(
    fetch: StatusFetcher,
    environ: Mapping[str, str] | None = None,
    retry_delay: float = 1.0,
) -> FullStatus:
    """Fetch the status, retrying once after ``retry_delay`` seconds."""
    try:
        return get_status_once(fetch, environ)
    except StatusUnavailableError as exc:
        _log.error("failed to get status, retrying: %s", exc)
    time.sleep(retry_delay)
    try:
        return get_status_once(fetch, environ)
    except StatusUnavailableError as exc:
        _log.error("failed to get status, retry failed: %s", exc)
        raise
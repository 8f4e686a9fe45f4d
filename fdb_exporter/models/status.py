"""Top-level status document and loading it from JSON."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass

from fdb_exporter.models.client import ClientStatus
from fdb_exporter.models.cluster import ClusterStatus
from fdb_exporter.models.common import JsonModel


class StatusFileError(Exception):
    """A status file could not be read or decoded."""


@dataclass
class FullStatus(JsonModel):
    """The ``client`` and ``cluster`` sections of the status JSON."""

    client: ClientStatus | None = None
    cluster: ClusterStatus | None = None

    @classmethod
    def from_json(cls, text: str | bytes) -> FullStatus:
        """Decode a status document; raise ValueError when it is malformed."""
        data = json.loads(text)
        if data is None:
            return cls()
        return cls.from_dict(data)


def get_status_from_file(path: str | os.PathLike[str]) -> FullStatus:
    """Read and decode the status document stored at ``path``."""
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as exc:
        raise StatusFileError(f"failed to open status file {path}") from exc
    try:
        return FullStatus.from_json(raw)
    except ValueError as exc:
        raise StatusFileError(f"failed to unmarshal status file {path}") from exc
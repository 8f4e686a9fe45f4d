"""Reading metrics back from the Prometheus text exposition format."""

from __future__ import annotations

import re
from dataclasses import dataclass

_METRIC_LINE = re.compile(r"(?P<name>[a-z_]+)\{(?P<tags>.*)\} (?P<value>[a-zA-Z0-9]+)")


@dataclass(frozen=True)
class FetchedMetric:
    """One exposed sample: its name, its raw value text and its raw label text."""

    key: str = ""
    value: str = ""
    tags: str = ""


def parse_metric_line(line: str) -> FetchedMetric:
    """Parse one sample line; an empty FetchedMetric when the line does not match."""
    match = _METRIC_LINE.search(line)
    if match is None:
        return FetchedMetric()
    return FetchedMetric(
        key=match.group("name"),
        value=match.group("value"),
        tags=match.group("tags"),
    )


def parse_metrics(text: str) -> list[FetchedMetric]:
    """Parse every sample line of an exposition, skipping comments and blank lines."""
    return [
        parse_metric_line(line)
        for line in text.splitlines()
        if line.strip() and not line.startswith("#")
    ]
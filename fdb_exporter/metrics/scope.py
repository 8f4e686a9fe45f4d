"""Hierarchical metric scopes backed by an in-memory gauge registry."""

from __future__ import annotations

import math
import threading
from collections.abc import Mapping
from itertools import groupby
from typing import NamedTuple

SEPARATOR = "_"


class ScopeNotFoundError(LookupError):
    """No scope is registered under the requested key."""


class ScopeExistsError(ValueError):
    """A scope is already registered under the requested key."""


class Sample(NamedTuple):
    """One gauge value with its full name and tag set."""

    name: str
    tags: dict[str, str]
    value: float


def _format_value(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


def _escape_label(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


class Registry:
    """Thread-safe store of the latest value of every gauge."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._gauges: dict[tuple[str, tuple[tuple[str, str], ...]], float] = {}

    def set_gauge(self, name: str, tags: Mapping[str, str], value: float) -> None:
        """Record ``value`` for the gauge ``name`` with the given tags."""
        key = (name, tuple(sorted(tags.items())))
        with self._lock:
            self._gauges[key] = float(value)

    def samples(self) -> list[Sample]:
        """All recorded gauges, sorted by name and tags."""
        with self._lock:
            items = sorted(self._gauges.items())
        return [Sample(name, dict(tags), value) for (name, tags), value in items]

    def render(self) -> str:
        """The gauges in the Prometheus text exposition format."""
        lines: list[str] = []
        for name, group in groupby(self.samples(), key=lambda s: s.name):
            lines.append(f"# TYPE {name} gauge")
            for sample in group:
                labels = ",".join(
                    f'{key}="{_escape_label(val)}"' for key, val in sorted(sample.tags.items())
                )
                lines.append(f"{name}{{{labels}}} {_format_value(sample.value)}")
        return "\n".join(lines) + ("\n" if lines else "")


class Scope:
    """A metric name prefix and a tag set that gauges are reported under."""

    def __init__(
        self,
        registry: Registry,
        prefix: str = "",
        tags: Mapping[str, str] | None = None,
    ) -> None:
        self.registry = registry
        self.prefix = prefix
        self.tags: dict[str, str] = dict(tags or {})

    def sub_scope(self, name: str) -> Scope:
        """A child scope whose prefix is extended by ``name``."""
        prefix = f"{self.prefix}{SEPARATOR}{name}" if self.prefix else name
        return Scope(self.registry, prefix, self.tags)

    def tagged(self, tags: Mapping[str, str]) -> Scope:
        """A scope with the same prefix and ``tags`` merged over the current ones."""
        return Scope(self.registry, self.prefix, {**self.tags, **tags})

    def update_gauge(self, name: str, value: float) -> None:
        """Set the gauge ``name`` in this scope to ``value``."""
        self.registry.set_gauge(self._full_name(name), self.tags, value)

    def _full_name(self, name: str) -> str:
        return f"{self.prefix}{SEPARATOR}{name}" if self.prefix else name


class Scoped:
    """A named collection of scopes."""

    def __init__(self) -> None:
        self.scopes: dict[str, Scope] = {}

    def add_scope(self, parent_scope: Scope, key: str, name: str) -> None:
        """Register a sub-scope of ``parent_scope`` called ``name`` under ``key``."""
        self.scopes[key] = parent_scope.sub_scope(name)

    def get_scope(self, key: str) -> Scope:
        """The scope registered under ``key``."""
        try:
            return self.scopes[key]
        except KeyError:
            raise ScopeNotFoundError(f"scope {key} does not exist") from None

    def create_scope(self, key: str, name: str, parent_scope: Scope) -> None:
        """Like :meth:`add_scope`, but refuse to replace an existing scope."""
        if key in self.scopes:
            raise ScopeExistsError(f"scope {key} already exists")
        self.scopes[key] = parent_scope.sub_scope(name)
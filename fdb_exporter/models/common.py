"""JSON-backed model base and small shared status structures."""

from __future__ import annotations

import inspect
import types
from collections.abc import Mapping
from dataclasses import dataclass, fields
from functools import lru_cache
from typing import Any, Union, get_args, get_origin

_NONE_TYPE = type(None)

_SIMPLE_NAMES: dict[str, Any] = {
    "int": int,
    "float": float,
    "str": str,
    "bool": bool,
    "None": _NONE_TYPE,
    "NoneType": _NONE_TYPE,
    "Any": Any,
}


def _split_top_level(text: str, separator: str) -> list[str]:
    parts: list[str] = []
    depth = 0
    start = 0
    for position, char in enumerate(text):
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        elif char == separator and depth == 0:
            parts.append(text[start:position].strip())
            start = position + 1
    parts.append(text[start:].strip())
    return parts


def _resolve(annotation: Any, namespace: Mapping[str, Any]) -> Any:
    """Turn a field annotation, possibly written as text, into a type."""
    if not isinstance(annotation, str):
        return annotation
    text = annotation.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"":
        text = text[1:-1].strip()

    alternatives = _split_top_level(text, "|")
    if len(alternatives) > 1:
        return Union[tuple(_resolve(alt, namespace) for alt in alternatives)]

    if text.endswith("]") and "[" in text:
        base, _, rest = text.partition("[")
        base = base.strip().rsplit(".", 1)[-1]
        args = [_resolve(arg, namespace) for arg in _split_top_level(rest[:-1], ",")]
        if base == "Optional" and len(args) == 1:
            return Union[args[0], _NONE_TYPE]
        if base == "Union":
            return Union[tuple(args)]
        if base in ("list", "List") and len(args) == 1:
            return list[args[0]]
        if base in ("dict", "Dict") and len(args) == 2:
            return dict[args[0], args[1]]
        raise TypeError(f"unsupported annotation {annotation!r}")

    if text in namespace:
        return namespace[text]
    name = text.rsplit(".", 1)[-1]
    if name in _SIMPLE_NAMES:
        return _SIMPLE_NAMES[name]
    raise TypeError(f"cannot resolve annotation {annotation!r}")


@lru_cache(maxsize=None)
def _field_types(cls: type) -> dict[str, Any]:
    module = inspect.getmodule(cls)
    namespace = vars(module) if module is not None else {}
    return {f.name: _resolve(f.type, namespace) for f in fields(cls)}


def _zero(tp: Any) -> Any:
    origin = get_origin(tp)
    if origin is list:
        return []
    if origin is dict:
        return {}
    if isinstance(tp, type):
        return tp()
    return None


def _convert(tp: Any, value: Any, where: str) -> Any:
    origin = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        if value is None:
            return None
        inner = [arg for arg in get_args(tp) if arg is not _NONE_TYPE]
        if len(inner) != 1:
            raise TypeError(f"{where}: unsupported union type {tp!r}")
        return _convert(inner[0], value, where)
    if value is None:
        return _zero(tp)
    if origin is list:
        if not isinstance(value, list):
            raise ValueError(f"{where}: expected a list, got {type(value).__name__}")
        (item_type,) = get_args(tp)
        return [_convert(item_type, item, f"{where}[{i}]") for i, item in enumerate(value)]
    if origin is dict:
        if not isinstance(value, Mapping):
            raise ValueError(f"{where}: expected an object, got {type(value).__name__}")
        _, item_type = get_args(tp)
        return {str(k): _convert(item_type, v, f"{where}[{k!r}]") for k, v in value.items()}
    if tp is bool:
        if not isinstance(value, bool):
            raise ValueError(f"{where}: expected a boolean, got {value!r}")
        return value
    if tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{where}: expected an integer, got {value!r}")
        return value
    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{where}: expected a number, got {value!r}")
        return float(value)
    if tp is str:
        if not isinstance(value, str):
            raise ValueError(f"{where}: expected a string, got {value!r}")
        return value
    if isinstance(tp, type) and issubclass(tp, JsonModel):
        return tp.from_dict(value)
    return value


class JsonModel:
    """Base for dataclasses decoded from the status JSON document.

    A field is read from the JSON key given by its ``"json"`` metadata entry,
    or from its own name otherwise; an exact key match is preferred over a
    case-insensitive one. Missing keys keep the field default, ``null`` gives
    ``None`` for optional fields and the zero value for the others, and
    unknown keys are ignored.
    """

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        """Build an instance from a decoded JSON object."""
        if not isinstance(data, Mapping):
            raise ValueError(f"{cls.__name__}: expected an object, got {type(data).__name__}")
        types_by_name = _field_types(cls)
        folded: dict[str, str] | None = None
        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            key = f.metadata.get("json", f.name)
            if key not in data:
                if folded is None:
                    folded = {}
                    for candidate in data:
                        folded.setdefault(str(candidate).lower(), candidate)
                key = folded.get(key.lower())
                if key is None:
                    continue
            kwargs[f.name] = _convert(types_by_name[f.name], data[key], f"{cls.__name__}.{f.name}")
        return cls(**kwargs)


@dataclass
class LockState(JsonModel):
    locked: bool = False


@dataclass
class Lag(JsonModel):
    seconds: float = 0.0
    versions: int = 0


@dataclass
class FaultTolerance(JsonModel):
    max_zone_failures_without_losing_availability: int = 0
    max_zone_failures_without_losing_data: int = 0


@dataclass
class LatencyProbe(JsonModel):
    batch_priority_transaction_start_seconds: float = 0.0
    commit_seconds: float = 0.0
    immediate_priority_transaction_start_seconds: float = 0.0
    read_seconds: float = 0.0
    transaction_start_seconds: float = 0.0


@dataclass
class Hz(JsonModel):
    hz: float = 0.0


@dataclass
class PageCache(JsonModel):
    log_hit_rate: float = 0.0
    storage_hit_rate: float = 0.0


@dataclass
class RecoveryState(JsonModel):
    active_generations: int = 0
    description: str = ""
    name: str = ""
    seconds_since_last_recovered: float = 0.0
"""Host (Arma/SQF) value representation.

The host side only knows strings, numbers, booleans, nil, arrays and
string-keyed hash maps. `host_value_of` maps Python field values onto that
model; `render_sqf` turns the result into the literal text the game server
parses.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any, TypeAlias

from pydantic import BaseModel

HostValue: TypeAlias = "str | int | float | bool | None | list[HostValue] | dict[str, HostValue]"


def rfc3339(ts: datetime) -> str:
    if ts.tzinfo is None or ts.utcoffset() is None:
        raise ValueError(f"Timestamp must be timezone aware: {ts!r}")
    return ts.astimezone(UTC).isoformat().replace("+00:00", "Z")


def host_value_of(value: Any) -> HostValue:
    # bool is a subclass of int; keep it a boolean.
    if value is None or isinstance(value, (bool, str, int, float)):
        return value
    if isinstance(value, datetime):
        return rfc3339(value)
    if isinstance(value, BaseModel):
        return {name: host_value_of(getattr(value, name)) for name in type(value).model_fields}
    if isinstance(value, Mapping):
        out: dict[str, HostValue] = {}
        for k, v in value.items():
            if not isinstance(k, str):
                raise TypeError(f"Host maps are keyed by string, got {type(k).__name__} key {k!r}")
            out[k] = host_value_of(v)
        return out
    if isinstance(value, (list, tuple)):
        return [host_value_of(v) for v in value]
    raise TypeError(f"No host representation for {type(value).__name__}")


def _sqf_string(s: str) -> str:
    return '"' + s.replace('"', '""') + '"'


def render_sqf(value: HostValue) -> str:
    """Render a host value as an SQF literal.

    Maps become arrays of `[key, value]` pairs, the input shape of
    `createHashMapFromArray`.
    """

    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return _sqf_string(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"SQF has no literal for {value!r}")
        return repr(value)
    if isinstance(value, Mapping):
        pairs = [f"[{_sqf_string(k)},{render_sqf(v)}]" for k, v in value.items()]
        return "[" + ",".join(pairs) + "]"
    if isinstance(value, list):
        return "[" + ",".join(render_sqf(v) for v in value) + "]"
    raise TypeError(f"Not a host value: {type(value).__name__}")

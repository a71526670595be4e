"""Total accessors over a deserialised JSON tree.

BIM documents are loosely typed: any field may be missing, ``null`` or of an
unexpected shape. The helpers here never raise; they return ``None`` (absent)
or a caller-supplied default instead.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


def get(node: Any, key: str) -> Any:
    """Return ``node[key]``, or ``None`` if *node* is not an object or lacks *key*."""
    if isinstance(node, Mapping):
        return node.get(key)
    return None


def is_truthy(value: Any) -> bool:
    """JSON truthiness: arrays and objects are always truthy, unlike in Python."""
    if isinstance(value, (list, tuple, Mapping)):
        return True
    return bool(value)


def as_list(value: Any) -> list[Any]:
    """Return *value* if it is an array, else an empty list."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def as_text(value: Any) -> str | None:
    """Coerce a scalar or an array of lines to text; objects and ``null`` are absent."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        # Multi-line expressions are stored as an array of lines.
        return "\n".join(line if isinstance(line, str) else json.dumps(line) for line in value)
    if isinstance(value, (bool, int, float)):
        return json.dumps(value)
    return None


def get_text(node: Any, key: str, default: str | None = None) -> str | None:
    text = as_text(get(node, key))
    return default if text is None else text


def get_truthy_text(node: Any, key: str) -> str | None:
    """Text of ``node[key]`` only when the raw value is truthy."""
    value = get(node, key)
    if not is_truthy(value):
        return None
    return as_text(value)


def get_flag(node: Any, key: str) -> bool | None:
    value = get(node, key)
    if value is None:
        return None
    return is_truthy(value)


def get_int(node: Any, key: str, default: int = 0) -> int:
    value = get(node, key)
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return default

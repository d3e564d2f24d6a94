"""Serialization of code model nodes to JSON-compatible dicts."""

from __future__ import annotations

from dataclasses import fields, is_dataclass


def serialize(obj: object) -> object:
    """Recursively serialize an object to a JSON-compatible structure."""
    if obj is None:
        return None
    if isinstance(obj, (bool, int, float, str)):
        return obj
    if isinstance(obj, (list, tuple)):
        return [serialize(x) for x in obj]
    if isinstance(obj, dict):
        return {str(k): serialize(v) for k, v in obj.items()}
    if is_dataclass(obj) and not isinstance(obj, type):
        return _node_serialize(obj)
    raise TypeError(f"cannot serialize {type(obj).__name__}")


def _node_serialize(obj: object) -> dict[str, object]:
    """Serialize a node as {"_type": class name, field: value, ...}."""
    result: dict[str, object] = {"_type": type(obj).__name__}
    for f in fields(obj):
        result[f.name] = serialize(getattr(obj, f.name))
    return result

"""Deterministic byte serialization of rendered children."""

import datetime
import json
from collections.abc import Mapping

from oamtranslate.core.errors import SerializationError


def _json_default(obj):
    """Render YAML timestamps as RFC 3339; refuse everything else."""
    if isinstance(obj, datetime.datetime):
        if obj.tzinfo is None:
            obj = obj.replace(tzinfo=datetime.timezone.utc)
        return obj.astimezone(datetime.timezone.utc).isoformat().replace("+00:00", "Z")
    if isinstance(obj, datetime.date):
        return obj.isoformat()
    raise TypeError(f"value of type {type(obj).__name__} is not serializable")


def _non_string_key(obj, path: str = ""):
    """Return the path of the first mapping key that is not a str, or None.

    json.dumps would coerce int and bool keys to strings, so the payload
    would no longer match the rendered child.
    """
    if isinstance(obj, Mapping):
        for key, value in obj.items():
            if not isinstance(key, str):
                return f"{path}[{key!r}]"
            found = _non_string_key(value, f"{path}.{key}")
            if found:
                return found
    elif isinstance(obj, (list, tuple)):
        for i, item in enumerate(obj):
            found = _non_string_key(item, f"{path}[{i}]")
            if found:
                return found
    return None


def serialize_child(child, workload: str = "", index: int | None = None) -> bytes:
    """Return the exact byte payload of a child manifest.

    Keys are sorted and separators are compact, so the same child always
    yields the same bytes regardless of dict insertion order.
    """
    if hasattr(child, "to_manifest"):
        child = child.to_manifest()
    if not isinstance(child, Mapping):
        raise SerializationError(
            f"child #{index} is a {type(child).__name__}, not a manifest",
            workload=workload, index=index,
        )
    bad_key = _non_string_key(child)
    if bad_key:
        raise SerializationError(
            f"child #{index} has a non-string key at {bad_key}",
            workload=workload, index=index,
        )
    try:
        text = json.dumps(child, sort_keys=True, separators=(",", ":"),
                          ensure_ascii=False, allow_nan=False, default=_json_default)
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"child #{index} cannot be serialized: {exc}",
            workload=workload, index=index,
        ) from exc
    return text.encode("utf-8")

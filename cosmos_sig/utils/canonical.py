"""
Canonical JSON serialization.

Any two implementations must produce identical bytes for structurally equal
values, otherwise signatures made by one cannot be verified by the other.
Object keys are sorted by code point at every level (equivalent to sorting the
UTF-8 bytes), arrays keep their order, separators are compact and non-ASCII
text is emitted as-is.
"""

import json
from collections.abc import Mapping
from typing import Any

from ..exceptions import EncodingError

__all__ = [
    "to_canonical_json",
    "to_canonical_json_bytes",
    "sort_object",
]


def sort_object(value: Any, path: str = "$") -> Any:
    """
    Rebuild value with every mapping's keys in sorted order.

    Args:
        value: JSON-representable value
        path: JSON path of value, used in error messages

    Returns:
        Equivalent structure made of dict, list, str, int, bool and None

    Raises:
        EncodingError: If value contains a type with no canonical form
    """
    if value is None or isinstance(value, (str, bool)):
        return value

    if isinstance(value, int):
        return int(value)

    if isinstance(value, float):
        # 1.0 vs 1 vs 1e0: no single textual form across implementations
        raise EncodingError("Floating point numbers cannot be canonicalized", path)

    if hasattr(value, "to_dict"):
        return sort_object(value.to_dict(), path)

    if isinstance(value, Mapping):
        keys = list(value.keys())
        for key in keys:
            if not isinstance(key, str):
                raise EncodingError(
                    f"Object keys must be strings, got {type(key).__name__}", path
                )
        return {key: sort_object(value[key], f"{path}.{key}") for key in sorted(keys)}

    if isinstance(value, (list, tuple)):
        return [sort_object(item, f"{path}[{i}]") for i, item in enumerate(value)]

    raise EncodingError(f"Type {type(value).__name__} cannot be canonicalized", path)


def to_canonical_json(value: Any) -> str:
    """
    Serialize value as canonical JSON text.

    Raises:
        EncodingError: If value contains a type with no canonical form, or is
            self-referencing or nested too deeply
    """
    try:
        return json.dumps(
            sort_object(value),
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except RecursionError as e:
        raise EncodingError("Value is self-referencing or nested too deeply") from e


def to_canonical_json_bytes(value: Any) -> bytes:
    """Serialize value as UTF-8 encoded canonical JSON."""
    text = to_canonical_json(value)
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(f"Unpaired surrogate in string: {e.reason}") from e

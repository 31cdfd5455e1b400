"""
Canonical payload serialization

Flattens a JSON-like tree into the exact text that is signed and verified.
Mapping entries are emitted in sorted key order so the output does not depend
on insertion order:

    {"b": [1, 2], "a": {"y": true, "x": null}}  ->  "axyyb12"

No separators are inserted anywhere; keys and values are concatenated.
"""

from typing import Any, Dict, List


def serialize(data: Any) -> str:
    """Serialize a payload tree into its canonical string

    Args:
        data: JSON-like value (dict, list/tuple or scalar)

    Returns:
        str: Canonical text used as signature input
    """
    parts: List[str] = []
    _serialize_into(data, parts)
    return "".join(parts)


def _serialize_into(data: Any, parts: List[str]) -> None:
    if isinstance(data, dict):
        _serialize_dict(data, parts)
    elif isinstance(data, (list, tuple)):
        for element in data:
            _serialize_into(element, parts)
    else:
        parts.append(scalar_to_str(data))


def _serialize_dict(data: Dict[Any, Any], parts: List[str]) -> None:
    # str ordering is by code point, which matches UTF-8 byte order
    for key, value in sorted(data.items(), key=lambda item: str(item[0])):
        parts.append(str(key))
        _serialize_into(value, parts)


def scalar_to_str(value: Any) -> str:
    """Textual form of a scalar as it appears in the signed message

    None becomes the empty string and booleans are lowercase, matching the
    JSON literals the counterparty signs.
    """
    if value is None:
        return ""
    if value is True:
        return "true"
    if value is False:
        return "false"
    return str(value)

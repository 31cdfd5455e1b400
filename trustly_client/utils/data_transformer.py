"""
Key normalization for payload trees
"""

from enum import Enum
from typing import Any


def _key_to_str(key: Any) -> str:
    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


def deep_stringify(data: Any) -> Any:
    """Return a copy of data with every mapping key converted to str

    Args:
        data: JSON-like value

    Returns:
        A new tree with string keys; scalars are returned unchanged
    """
    if isinstance(data, dict):
        return {_key_to_str(key): deep_stringify(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [deep_stringify(element) for element in data]
    return data

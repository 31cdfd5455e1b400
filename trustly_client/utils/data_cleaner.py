"""
Payload cleanup

Removes null values and empty containers from JSON-like trees before they
are sent or signed.
"""

from typing import Any, Dict, List, Optional


def vacuum(data: Any) -> Any:
    """Recursively strip None values and empty containers

    Falsy scalars such as False, 0 and "" are kept. The input is never
    modified; containers are rebuilt.

    Args:
        data: JSON-like value (dict, list/tuple or scalar)

    Returns:
        The cleaned value, or None if nothing is left
    """
    if isinstance(data, dict):
        return _vacuum_dict(data)
    if isinstance(data, (list, tuple)):
        return _vacuum_list(data)
    return data


def _vacuum_list(data) -> Optional[List[Any]]:
    cleaned = [item for item in (vacuum(element) for element in data) if item is not None]
    return cleaned or None


def _vacuum_dict(data: Dict[Any, Any]) -> Optional[Dict[Any, Any]]:
    cleaned = {}
    for key, element in data.items():
        processed = vacuum(element)
        if processed is None:
            continue
        cleaned[key] = processed
    return cleaned or None

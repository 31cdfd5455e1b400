"""
Payload tree shared by all protocol messages

Each message owns exactly one Payload and exposes protocol fields as views
over nested paths within it.
"""

import copy
import json
from typing import Any, Dict, Optional

JSONRPC_VERSION = "1.1"


class Payload:
    """Mutable JSON mapping with path based accessors"""

    def __init__(self, root: Optional[Dict[str, Any]] = None):
        self.root: Dict[str, Any] = copy.deepcopy(root) if root else {}

    def get_at(self, *path: str) -> Any:
        """Read a nested value, returning None if any step is missing"""
        node: Any = self.root
        for name in path:
            if not isinstance(node, dict):
                return None
            node = node.get(name)
            if node is None:
                return None
        return node

    def set_at(self, *path: str, value: Any) -> None:
        """Write a nested value, creating intermediate mappings"""
        *parents, leaf = path
        node = self.root
        for name in parents:
            child = node.get(name)
            if child is None:
                child = node[name] = {}
            elif not isinstance(child, dict):
                raise TypeError(f"Cannot set '{leaf}': '{name}' is not a mapping")
            node = child
        node[leaf] = value

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self.root)

    def to_json(self) -> str:
        return json.dumps(self.root)

    def __eq__(self, other):
        if isinstance(other, Payload):
            return self.root == other.root
        return NotImplemented

    def __repr__(self):
        return f"Payload({self.root!r})"

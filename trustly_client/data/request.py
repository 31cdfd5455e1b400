"""
Outbound JSON-RPC request

Wire layout:

    {
        "method": "Deposit",
        "version": "1.1",
        "params": {
            "UUID": "...",
            "Signature": "...",
            "Data": {..., "Attributes": {...}}
        }
    }
"""

from typing import Any, Dict, Optional

from trustly_client.data.payload import JSONRPC_VERSION, Payload
from trustly_client.exceptions import JSONRPCVersionError
from trustly_client.utils.data_cleaner import vacuum
from trustly_client.utils.data_transformer import deep_stringify


class Request:
    """Signed JSON-RPC call payload"""

    def __init__(self,
                 method: Optional[str] = None,
                 data: Any = None,
                 attributes: Optional[Dict[str, Any]] = None):
        """Build a request

        Args:
            method: RPC method name
            data: Call data; vacuumed before storing
            attributes: Optional attribute block stored as Data.Attributes

        Raises:
            TypeError: attributes given but data is not a mapping
        """
        self.payload = Payload({"version": JSONRPC_VERSION, "params": {}})
        self.method = method
        self._init_data(data, attributes)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Request":
        """Rebuild a request from an existing wire payload

        Raises:
            JSONRPCVersionError: version is not 1.1
        """
        root = deep_stringify(vacuum(payload)) or {}
        version = root.get("version")
        if version != JSONRPC_VERSION:
            raise JSONRPCVersionError(f"JSON RPC Version {version} is not supported")

        request = cls.__new__(cls)
        request.payload = Payload(root)
        request.payload.root.setdefault("params", {})
        return request

    def _init_data(self, data: Any, attributes: Optional[Dict[str, Any]]) -> None:
        if data is None:
            self.params["Data"] = {}
        else:
            if attributes is not None and not isinstance(data, dict):
                raise TypeError("Data must be a mapping if attributes are provided")
            cleaned = vacuum(data)
            self.params["Data"] = {} if cleaned is None else cleaned

        if attributes is None:
            return
        cleaned_attributes = vacuum(attributes)
        if cleaned_attributes is not None and "Attributes" not in self.params["Data"]:
            self.params["Data"]["Attributes"] = cleaned_attributes

    @property
    def params(self) -> Dict[str, Any]:
        return self.payload.root["params"]

    @property
    def version(self) -> Optional[str]:
        return self.payload.get_at("version")

    @property
    def method(self) -> Optional[str]:
        return self.payload.get_at("method")

    @method.setter
    def method(self, value: Optional[str]) -> None:
        self.payload.root["method"] = value

    @property
    def data(self) -> Any:
        return self.params.get("Data")

    @property
    def attributes(self) -> Optional[Dict[str, Any]]:
        return self.payload.get_at("params", "Data", "Attributes")

    def data_at(self, name: str) -> Any:
        return self.payload.get_at("params", "Data", name)

    def attribute_at(self, name: str) -> Any:
        return self.payload.get_at("params", "Data", "Attributes", name)

    def update_data_at(self, name: str, value: Any) -> None:
        self.payload.set_at("params", "Data", name, value=value)

    def update_attribute_at(self, name: str, value: Any) -> None:
        self.payload.set_at("params", "Data", "Attributes", name, value=value)

    @property
    def uuid(self) -> Optional[str]:
        return self.params.get("UUID")

    @uuid.setter
    def uuid(self, value: str) -> None:
        self.params["UUID"] = value

    @property
    def signature(self) -> Optional[str]:
        return self.params.get("Signature")

    @signature.setter
    def signature(self, value: str) -> None:
        self.params["Signature"] = value

    def to_json(self) -> str:
        return self.payload.to_json()

    def __repr__(self):
        return f"Request(method={self.method!r}, uuid={self.uuid!r})"

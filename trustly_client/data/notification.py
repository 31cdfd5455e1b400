"""
Inbound notifications and their acknowledgments

The counterparty posts notifications (webhooks) with lowercase params:

    {"method": "credit", "version": "1.1",
     "params": {"uuid", "signature", "data": {..., "attributes": {...}}}}

and expects a signed acknowledgment:

    {"version": "1.1",
     "result": {"method", "uuid", "data": {"status": "OK"}, "signature"}}
"""

import json
import logging
from typing import Any, Dict, Optional, Union

from trustly_client.data.payload import JSONRPC_VERSION, Payload
from trustly_client.exceptions import DataError, JSONRPCVersionError
from trustly_client.utils.data_transformer import deep_stringify

logger = logging.getLogger(__name__)

STATUS_OK = "OK"
STATUS_FAILED = "FAILED"


class NotificationRequest:
    """Notification received from the counterparty"""

    def __init__(self, body: Union[Dict[Any, Any], str, bytes]):
        """Parse a notification body

        Args:
            body: Already decoded mapping, or raw JSON text

        Raises:
            DataError: body is not valid JSON or not a JSON object
            JSONRPCVersionError: version is not 1.1
        """
        self.payload = Payload(self._parse_body(body))
        if self.version != JSONRPC_VERSION:
            raise JSONRPCVersionError(f"JSON RPC Version {self.version} is not supported")

    @staticmethod
    def _parse_body(body) -> Dict[str, Any]:
        if isinstance(body, dict):
            return deep_stringify(body)

        try:
            parsed = json.loads(body)
        except (TypeError, ValueError) as e:
            logger.error(f"Malformed notification body: {e}")
            raise DataError(str(e)) from e

        if not isinstance(parsed, dict):
            raise DataError(f"Notification body is not a JSON object: {parsed!r}")
        return parsed

    @property
    def version(self) -> Optional[str]:
        return self.payload.get_at("version")

    @property
    def method(self) -> Optional[str]:
        return self.payload.get_at("method")

    @property
    def signature(self) -> Optional[str]:
        return self.payload.get_at("params", "signature")

    @property
    def uuid(self) -> Optional[str]:
        return self.payload.get_at("params", "uuid")

    @property
    def data(self) -> Any:
        return self.payload.get_at("params", "data")

    def data_at(self, key: str) -> Any:
        return self.payload.get_at("params", "data", key)

    def attribute_at(self, key: str) -> Any:
        return self.payload.get_at("params", "data", "attributes", key)

    def to_json(self) -> str:
        return self.payload.to_json()

    def __repr__(self):
        return f"NotificationRequest(method={self.method!r}, uuid={self.uuid!r})"


class NotificationResponse:
    """Acknowledgment sent back for a notification

    The signature is not computed here; SignedClient.notification_response
    signs it with the merchant key.
    """

    def __init__(self, request: NotificationRequest, success: bool = True):
        self.payload = Payload({"version": JSONRPC_VERSION})
        if request.uuid:
            self.uuid = request.uuid
        if request.method:
            self.method = request.method
        self.update_data_at("status", STATUS_OK if success else STATUS_FAILED)

    @property
    def version(self) -> Optional[str]:
        return self.payload.get_at("version")

    @property
    def result(self) -> Dict[str, Any]:
        return self.payload.get_at("result") or {}

    @property
    def data(self) -> Optional[Dict[str, Any]]:
        return self.payload.get_at("result", "data")

    @property
    def status(self) -> Optional[str]:
        return self.payload.get_at("result", "data", "status")

    @property
    def method(self) -> Optional[str]:
        return self.payload.get_at("result", "method")

    @method.setter
    def method(self, value: str) -> None:
        self.update_result_at("method", value)

    @property
    def uuid(self) -> Optional[str]:
        return self.payload.get_at("result", "uuid")

    @uuid.setter
    def uuid(self, value: str) -> None:
        self.update_result_at("uuid", value)

    @property
    def signature(self) -> Optional[str]:
        return self.payload.get_at("result", "signature")

    @signature.setter
    def signature(self, value: str) -> None:
        self.update_result_at("signature", value)

    def update_result_at(self, name: str, value: Any) -> None:
        self.payload.set_at("result", name, value=value)

    def update_data_at(self, name: str, value: Any) -> None:
        self.payload.set_at("result", "data", name, value=value)

    def to_json(self) -> str:
        return self.payload.to_json()

    def __repr__(self):
        return f"NotificationResponse(status={self.status!r}, uuid={self.uuid!r})"

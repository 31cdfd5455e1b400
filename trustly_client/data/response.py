"""
Parsed JSON-RPC reply

A reply carries either a success branch or an error branch:

    {"version": "1.1", "result": {"method", "uuid", "signature", "data"}}
    {"version": "1.1", "error": {"name", "code", "message",
                                 "error": {"method", "uuid", "signature", "data"}}}

Both branches share the same inner layout, so accessors read from whichever
one is present.
"""

import logging
from typing import Any, Dict, Optional

from trustly_client.data.payload import JSONRPC_VERSION, Payload
from trustly_client.exceptions import DataError, JSONRPCVersionError
from trustly_client.transport.interface import TransportReply

logger = logging.getLogger(__name__)

VERSION_ERROR = "JSON RPC Version is not supported"


class Response:
    """Reply to a signed call, validated for shape and protocol version"""

    def __init__(self, reply: TransportReply):
        """Parse a transport reply

        Args:
            reply: Status, reason and decoded JSON body from the transport

        Raises:
            DataError: body has neither or both of the result and error branches
            JSONRPCVersionError: version is not 1.1
        """
        self.response_status = reply.status
        self.response_reason = reply.reason

        body = reply.body
        if not isinstance(body, dict):
            raise DataError(f"No result or error in response {body}")
        self.payload = Payload(body)

        if "result" in body and "error" in body:
            raise DataError(f"Both result and error in response {body}")

        result = self.payload.get_at("result")
        if result is None:
            result = self.payload.get_at("error", "error")
        if not isinstance(result, dict):
            raise DataError(f"No result or error in response {body}")
        self.response_result: Dict[str, Any] = result

        if self.payload.get_at("version") != JSONRPC_VERSION:
            logger.error(f"Unsupported JSON-RPC version: {self.payload.get_at('version')!r}")
            raise JSONRPCVersionError(VERSION_ERROR)

    @property
    def is_success(self) -> bool:
        return self.payload.get_at("result") is not None

    @property
    def is_error(self) -> bool:
        return self.payload.get_at("error") is not None

    @property
    def error_code(self) -> Any:
        if not self.is_error:
            return None
        return self._result_data_at("code")

    @property
    def error_message(self) -> Optional[str]:
        if not self.is_error:
            return None
        return self._result_data_at("message")

    @property
    def data(self) -> Any:
        return self.response_result.get("data")

    @property
    def uuid(self) -> Optional[str]:
        return self.response_result.get("uuid")

    @property
    def method(self) -> Optional[str]:
        return self.response_result.get("method")

    @property
    def signature(self) -> Optional[str]:
        return self.response_result.get("signature")

    @property
    def version(self) -> Optional[str]:
        return self.payload.get_at("version")

    def data_at(self, name: str) -> Any:
        return self._result_data_at(name)

    def _result_data_at(self, name: str) -> Any:
        data = self.data
        if not isinstance(data, dict):
            return None
        return data.get(name)

    def to_json(self) -> str:
        return self.payload.to_json()

    def __repr__(self):
        status = "success" if self.is_success else "error"
        return f"Response({status}, method={self.method!r}, uuid={self.uuid!r})"

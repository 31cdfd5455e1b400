"""
Protocol message model

- Payload: the JSON tree owned by each message
- Request: outbound signed call
- Response: parsed and version-checked reply
- NotificationRequest / NotificationResponse: inbound webhook and its acknowledgment
"""

from .notification import NotificationRequest, NotificationResponse
from .payload import JSONRPC_VERSION, Payload
from .request import Request
from .response import Response

__all__ = [
    "JSONRPC_VERSION",
    "Payload",
    "Request",
    "Response",
    "NotificationRequest",
    "NotificationResponse",
]

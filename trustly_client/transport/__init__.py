"""
Transport collaborators

The signed client hands serialized requests to a transport and receives a
decoded reply. HttpTransport is the production implementation (httpx).
"""

from .http import HttpTransport
from .interface import (
    HTTPClientError,
    HTTPServerError,
    ReplyParsingError,
    TransportConnectionError,
    TransportError,
    TransportInterface,
    TransportReply,
)

__all__ = [
    "HttpTransport",
    "TransportInterface",
    "TransportReply",
    "TransportError",
    "TransportConnectionError",
    "HTTPClientError",
    "HTTPServerError",
    "ReplyParsingError",
]

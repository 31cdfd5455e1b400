"""
Trustly signed JSON-RPC client

Client for the Trustly payment API (JSON-RPC 1.1 with RSA signatures):

1. Data model: Request, Response, NotificationRequest, NotificationResponse
2. Signing: canonical serialization of payload trees + RSA-SHA1 signatures
3. Client: SignedClient performs credentialed, signed calls and validates replies
"""

from .api.signed import SignedClient
from .config import ClientConfig
from .data import NotificationRequest, NotificationResponse, Request, Response
from .exceptions import (
    ConfigurationError,
    ConnectionFailedError,
    DataError,
    JSONRPCVersionError,
    SignatureError,
    TrustlyError,
)

__version__ = "0.1.0"

__all__ = [
    "SignedClient",
    "ClientConfig",
    "Request",
    "Response",
    "NotificationRequest",
    "NotificationResponse",
    "TrustlyError",
    "ConfigurationError",
    "ConnectionFailedError",
    "DataError",
    "JSONRPCVersionError",
    "SignatureError",
]

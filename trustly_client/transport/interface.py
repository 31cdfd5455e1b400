"""
Transport interface

Defines what the signed client needs from a transport so the HTTP layer can
be swapped (for tests or alternative clients) without touching the
signing and validation code.
"""

import abc
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class TransportReply:
    """Reply received from the API"""
    status: int
    reason: str
    body: Any
    text: str = ""


class TransportError(Exception):
    """Transport level failure, optionally carrying the reply that caused it"""

    def __init__(self, message: str, reply: Optional[TransportReply] = None):
        super().__init__(message)
        self.message = message
        self.reply = reply


class TransportConnectionError(TransportError):
    """Network, TLS or timeout failure; no reply available"""


class HTTPClientError(TransportError):
    """Reply with a 4xx status"""


class HTTPServerError(TransportError):
    """Reply with a 5xx status"""


class ReplyParsingError(TransportError):
    """Reply body is not valid JSON"""


class TransportInterface(abc.ABC):
    """Transport used by SignedClient"""

    @abc.abstractmethod
    def post(self, url: str, body: str, headers: Dict[str, str]) -> TransportReply:
        """POST a serialized request and return the decoded reply

        Args:
            url: Absolute endpoint URL
            body: Serialized JSON request
            headers: Request headers

        Returns:
            TransportReply: Reply with its JSON body decoded

        Raises:
            TransportError: Any failure; subclasses tell the kind apart
        """
        pass

    def close(self) -> None:
        """Release transport resources"""
        pass

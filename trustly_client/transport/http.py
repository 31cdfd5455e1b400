"""
HTTP transport

POSTs JSON-RPC requests with httpx and decodes JSON replies. Failures are
reported as TransportError subclasses; nothing is retried.
"""

import json
import logging
from typing import Dict, Optional

import httpx

from trustly_client.transport.interface import (
    HTTPClientError,
    HTTPServerError,
    ReplyParsingError,
    TransportConnectionError,
    TransportInterface,
    TransportReply,
)

logger = logging.getLogger(__name__)


class HttpTransport(TransportInterface):
    """httpx based transport"""

    def __init__(self, timeout: float = 30.0, client: Optional[httpx.Client] = None):
        """Initialize the transport

        Args:
            timeout: Request timeout in seconds, used when no client is given
            client: Preconfigured httpx client (owned by the caller)
        """
        self.timeout = timeout
        self._owns_client = client is None
        # One client for the transport lifetime, shared by concurrent calls
        self.client = client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def post(self, url: str, body: str, headers: Dict[str, str]) -> TransportReply:
        try:
            resp = self.client.post(url, content=body.encode("utf-8"), headers=headers)
        except httpx.TimeoutException as e:
            logger.error(f"Request to {url} timed out: {e}")
            raise TransportConnectionError(f"Request timed out: {e}") from e
        except httpx.RequestError as e:
            logger.error(f"Request to {url} failed: {e}")
            raise TransportConnectionError(str(e) or type(e).__name__) from e

        reply = TransportReply(
            status=resp.status_code,
            reason=resp.reason_phrase,
            body=None,
            text=resp.text,
        )
        logger.debug(f"Received {reply.status} {reply.reason} from {url}")

        if 400 <= resp.status_code < 500:
            raise HTTPClientError(resp.reason_phrase or "Client error", reply)
        if resp.status_code >= 500:
            raise HTTPServerError(resp.reason_phrase or "Server error", reply)

        try:
            reply.body = json.loads(resp.text)
        except ValueError as e:
            raise ReplyParsingError(str(e), reply) from e
        return reply

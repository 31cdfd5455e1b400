"""
Signed Trustly API client

Every call goes through the same sequence:

1. the operation wrapper checks required fields and builds a Request
2. a UUID is assigned, credentials are written into Data and the request is
   signed with the merchant private key
3. the serialized request is POSTed to /api/1
4. the reply is parsed, its UUID compared with the request's and its
   signature verified with the counterparty public key

Any failure surfaces as a TrustlyError subclass; nothing is retried.
"""

import logging
import time
import uuid
from typing import List, Optional, Union

from trustly_client.api.operations import OPERATIONS, Operation
from trustly_client.config import ClientConfig
from trustly_client.crypto.signature import load_private_key, load_public_key, sign, verify
from trustly_client.data.notification import NotificationRequest, NotificationResponse
from trustly_client.data.request import Request
from trustly_client.data.response import Response
from trustly_client.exceptions import (
    ConfigurationError,
    ConnectionFailedError,
    DataError,
    SignatureError,
    TrustlyError,
)
from trustly_client.telemetry.metrics import increment_counter, record_latency
from trustly_client.telemetry.tracer import create_span, current_trace_id
from trustly_client.transport.http import HttpTransport
from trustly_client.transport.interface import (
    HTTPClientError,
    ReplyParsingError,
    TransportError,
    TransportInterface,
    TransportReply,
)

logger = logging.getLogger(__name__)

DEFAULT_API_PATH = "/api/1"
REQUEST_HEADERS = {"Content-Type": "application/json"}
SIGNATURE_ERROR = "Incoming message signature is not valid"
UUID_MISMATCH = "Incoming response is not related to the request. UUID mismatch."

SignedMessage = Union[Response, NotificationRequest]


class SignedClient:
    """Client for the signed Trustly JSON-RPC API

    One client may serve concurrent calls. `last_request` holds the request of
    the most recent call from any thread and is only meant for debugging.
    """

    def __init__(self,
                 config: Optional[ClientConfig] = None,
                 transport: Optional[TransportInterface] = None):
        """Initialize the client

        Args:
            config: Connection, credential and key settings
            transport: Transport to send requests with; HttpTransport by default

        Raises:
            ConfigurationError: host, credentials or keys are missing or unusable
        """
        self.config = config or ClientConfig()
        self.api_host = self.config.host
        self.api_port = self.config.port
        self.api_is_https = self.config.is_https
        self.api_username = self.config.username
        self.api_password = self.config.password
        self.merchant_key = load_private_key(self.config.private_pem)
        self.trustly_key = load_public_key(self.config.public_pem)
        self.last_request: Optional[Request] = None

        self._validate()

        self.transport = transport or HttpTransport(timeout=self.config.timeout)
        logger.info(f"Trustly client configured for {self.base_url}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self) -> None:
        self.transport.close()

    # Configuration

    def configuration_errors(self) -> List[str]:
        errors = []
        if self.api_host is None:
            errors.append("Api host not specified")
        if self.trustly_key is None:
            errors.append("Trustly public key not specified")
        if self.api_username is None:
            errors.append("Username not specified")
        if self.api_password is None:
            errors.append("Password not specified")
        if self.merchant_key is None:
            errors.append("Merchant private key not specified")
        return errors

    def _validate(self) -> None:
        errors = self.configuration_errors()
        if errors:
            raise ConfigurationError("; ".join(errors))

    @property
    def base_url(self) -> str:
        schema = "https" if self.api_is_https else "http"
        default_port = 443 if self.api_is_https else 80
        port = "" if self.api_port in (None, default_port) else f":{self.api_port}"
        return f"{schema}://{self.api_host}{port}"

    @property
    def url(self) -> str:
        return f"{self.base_url}{DEFAULT_API_PATH}"

    # Operations

    def void(self, **options) -> Response:
        return self.call_operation("Void", options)

    def deposit(self, **options) -> Response:
        return self.call_operation("Deposit", options)

    def refund(self, **options) -> Response:
        return self.call_operation("Refund", options)

    def select_account(self, **options) -> Response:
        return self.call_operation("SelectAccount", options)

    def account_payout(self, **options) -> Response:
        return self.call_operation("AccountPayout", options)

    def register_account(self, **options) -> Response:
        return self.call_operation("RegisterAccount", options)

    def get_withdrawals(self, **options) -> Response:
        return self.call_operation("GetWithdrawals", options)

    def call_operation(self, name: str, options: dict) -> Response:
        """Build and send a call for a catalogued operation

        Args:
            name: Operation name, e.g. "Refund"
            options: Caller fields keyed by their wire names

        Raises:
            DataError: a required field is missing
            KeyError: unknown operation
        """
        operation: Operation = OPERATIONS[name]
        operation.check_required(options)
        request = Request(
            method=operation.name,
            data=operation.select_data(options),
            attributes=operation.select_attributes(options),
        )
        return self.call_rpc(request)

    # Signing

    def sign_merchant_request(self, message: Union[Request, NotificationResponse]) -> str:
        """Sign an outgoing message with the merchant private key"""
        data = message.data
        return sign(self.merchant_key, message.method, message.uuid, {} if data is None else data)

    def verify_signed_response(self, response: SignedMessage) -> bool:
        """Check a reply or notification signature with the counterparty key"""
        return verify(
            self.trustly_key,
            response.method,
            response.uuid,
            response.data,
            response.signature,
        )

    def verify_notification(self, notification: NotificationRequest) -> None:
        """Raise SignatureError unless the notification is signed by the counterparty"""
        if not self.verify_signed_response(notification):
            logger.error(f"Notification {notification.uuid} failed signature verification")
            raise SignatureError(SIGNATURE_ERROR)

    def notification_response(self, request: NotificationRequest, success: bool = True) -> NotificationResponse:
        """Build a signed acknowledgment for a notification"""
        response = NotificationResponse(request, success=success)
        response.signature = self.sign_merchant_request(response)
        return response

    # Call sequence

    def insert_credentials(self, request: Request) -> None:
        request.update_data_at("Username", self.api_username)
        request.update_data_at("Password", self.api_password)
        request.signature = self.sign_merchant_request(request)

    def call_rpc(self, request: Request) -> Response:
        """Credential, sign and send a request, returning the validated reply

        Raises:
            DataError: client error reply, unparseable reply or unrelated reply
            ConnectionFailedError: network failure or server error reply
            SignatureError: reply signature does not verify
            JSONRPCVersionError: reply version is not 1.1
        """
        if request.uuid is None:
            request.uuid = str(uuid.uuid4())
        self.insert_credentials(request)
        self.last_request = request

        method = request.method
        body = request.to_json()
        attributes = {"method": method or ""}

        with create_span(f"trustly.{method}", {"rpc.method": method or "", "rpc.uuid": request.uuid}):
            increment_counter("rpc.client.requests", 1, attributes)
            start_time = time.time()
            try:
                logger.debug(f"Sending {method} request {request.uuid}, trace {current_trace_id()}")
                try:
                    reply = self.transport.post(self.url, body, dict(REQUEST_HEADERS))
                except TransportError as e:
                    raise self._transport_fault(e, request, body) from e
                finally:
                    record_latency("rpc.client.latency", (time.time() - start_time) * 1000, attributes)

                response = self.handle_response(request, reply)
            except TrustlyError as e:
                increment_counter("rpc.client.errors", 1, {**attributes, "type": type(e).__name__})
                raise

        increment_counter("rpc.client.success", 1, attributes)
        return response

    def handle_response(self, request: Request, reply: TransportReply) -> Response:
        response = Response(reply)
        self.check_response(response, request)
        return response

    def check_response(self, response: Response, request: Request) -> None:
        if response.uuid != request.uuid:
            logger.error(f"UUID mismatch: {response.uuid} != {request.uuid}")
            raise DataError(UUID_MISMATCH)
        if not self.verify_signed_response(response):
            logger.error(f"Signature verification failed for {request.method} response {response.uuid}")
            raise SignatureError(SIGNATURE_ERROR)

    @staticmethod
    def _transport_fault(error: TransportError, request: Request, body: str) -> TrustlyError:
        message = error.message
        if error.reply is not None:
            message += f" -> {error.reply.status}: {error.reply.text} - {request.method}, {body}"

        logger.error(f"Transport failure for {request.method}: {error.message}")
        if isinstance(error, (HTTPClientError, ReplyParsingError)):
            return DataError(message)
        return ConnectionFailedError(message)

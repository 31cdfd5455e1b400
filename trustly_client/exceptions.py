"""
Trustly client exceptions

Every fault raised by the client derives from TrustlyError so callers can
catch the whole family at once.
"""


class TrustlyError(Exception):
    """Base class for all client faults"""


class ConfigurationError(TrustlyError):
    """Client configuration is incomplete or unusable"""


class DataError(TrustlyError):
    """Call data or reply payload is missing, malformed or unrelated"""


class ConnectionFailedError(TrustlyError, ConnectionError):
    """Network, TLS or server-side failure while talking to the API"""


class SignatureError(TrustlyError):
    """Incoming message signature does not verify"""


class JSONRPCVersionError(TrustlyError):
    """Payload carries an unsupported JSON-RPC version"""

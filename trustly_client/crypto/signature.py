"""
RSA signature engine

The signed message for every call, reply and notification is

    method + uuid + serialize(data)

signed with PKCS#1 v1.5 padding over a SHA-1 digest and transported as
base64 text.
"""

import base64
import binascii
import logging
from typing import Any, Optional, Union

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.serialization import (
    load_pem_private_key,
    load_pem_public_key,
)

from trustly_client.utils.serialization import serialize

logger = logging.getLogger(__name__)

PemData = Union[str, bytes]


def _pem_bytes(pem: PemData) -> bytes:
    if isinstance(pem, str):
        return pem.encode("utf-8")
    return pem


def load_private_key(pem: Optional[PemData]) -> Optional[rsa.RSAPrivateKey]:
    """Load an RSA private key from PEM text

    Args:
        pem: PEM encoded, unencrypted private key

    Returns:
        The key, or None when pem is missing, unparseable or not RSA
    """
    if not pem:
        return None
    try:
        key = load_pem_private_key(_pem_bytes(pem), password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        logger.warning(f"Unable to load private key: {e}")
        return None
    if not isinstance(key, rsa.RSAPrivateKey):
        logger.warning(f"Private key is not an RSA key: {type(key).__name__}")
        return None
    return key


def load_public_key(pem: Optional[PemData]) -> Optional[rsa.RSAPublicKey]:
    """Load an RSA public key from PEM text

    Args:
        pem: PEM encoded public key

    Returns:
        The key, or None when pem is missing, unparseable or not RSA
    """
    if not pem:
        return None
    try:
        key = load_pem_public_key(_pem_bytes(pem))
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        logger.warning(f"Unable to load public key: {e}")
        return None
    if not isinstance(key, rsa.RSAPublicKey):
        logger.warning(f"Public key is not an RSA key: {type(key).__name__}")
        return None
    return key


def serial_message(method: Optional[str], uuid: Optional[str], data: Any) -> bytes:
    """Build the exact bytes that get signed for a message"""
    return f"{method or ''}{uuid or ''}{serialize(data)}".encode("utf-8")


def sign(private_key: rsa.RSAPrivateKey, method: Optional[str], uuid: Optional[str], data: Any) -> str:
    """Sign a (method, uuid, data) triple

    Args:
        private_key: Signer's RSA private key
        method: RPC method name
        uuid: Message UUID
        data: Payload data subtree

    Returns:
        str: Base64 signature without trailing whitespace
    """
    signature = private_key.sign(
        serial_message(method, uuid, data),
        padding.PKCS1v15(),
        hashes.SHA1(),
    )
    return base64.b64encode(signature).decode("ascii").rstrip()


def verify(
    public_key: rsa.RSAPublicKey,
    method: Optional[str],
    uuid: Optional[str],
    data: Any,
    signature: Optional[str],
) -> bool:
    """Check a base64 signature over a (method, uuid, data) triple

    Missing method or uuid are treated as empty strings. A signature that
    is missing or not base64 text fails verification.

    Returns:
        bool: True if the signature matches
    """
    if signature is not None and not isinstance(signature, (str, bytes)):
        logger.debug(f"Signature is not text: {type(signature).__name__}")
        return False

    try:
        raw_signature = base64.b64decode(signature or "")
    except (binascii.Error, ValueError):
        logger.debug("Signature is not valid base64")
        return False

    try:
        public_key.verify(
            raw_signature,
            serial_message(method, uuid, data),
            padding.PKCS1v15(),
            hashes.SHA1(),
        )
    except InvalidSignature:
        return False
    return True

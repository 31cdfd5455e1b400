"""
Message signing

RSA-SHA1 signatures over the canonical serialization of (method, uuid, data).
"""

from .signature import (
    load_private_key,
    load_public_key,
    serial_message,
    sign,
    verify,
)

__all__ = [
    "load_private_key",
    "load_public_key",
    "serial_message",
    "sign",
    "verify",
]

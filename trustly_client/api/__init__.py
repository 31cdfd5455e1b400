"""
Signed API client

- operations: required/data/attribute field catalogue per RPC method
- signed: SignedClient, which credentials, signs, sends and validates calls
"""

from .operations import OPERATIONS, Operation
from .signed import SignedClient

__all__ = ["OPERATIONS", "Operation", "SignedClient"]

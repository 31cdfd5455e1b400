"""
Payload tree utilities

- data_cleaner: vacuum null and empty nodes out of a payload tree
- data_transformer: normalize mapping keys to strings
- serialization: canonical text encoding used for signatures
"""

from .data_cleaner import vacuum
from .data_transformer import deep_stringify
from .serialization import serialize

__all__ = ["vacuum", "deep_stringify", "serialize"]

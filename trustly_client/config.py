"""
Configuration settings for the signed client
"""
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

DEFAULT_HOST = "test.trustly.com"
DEFAULT_PORT = 443


def _env_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ClientConfig:
    """Connection, credential and key settings for SignedClient"""
    host: Optional[str] = DEFAULT_HOST
    port: Optional[int] = DEFAULT_PORT
    is_https: bool = True
    username: Optional[str] = None
    password: Optional[str] = None
    private_pem: Optional[str] = None  # merchant signing key
    public_pem: Optional[str] = None  # counterparty verification key
    timeout: float = 30.0  # seconds

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create config from environment variables"""
        port = os.getenv("TRUSTLY_PORT")
        return cls(
            host=os.getenv("TRUSTLY_HOST", DEFAULT_HOST),
            port=int(port) if port else DEFAULT_PORT,
            is_https=_env_bool(os.getenv("TRUSTLY_IS_HTTPS"), True),
            username=os.getenv("TRUSTLY_USERNAME"),
            password=os.getenv("TRUSTLY_PASSWORD"),
            private_pem=os.getenv("MERCHANT_PRIVATE_KEY"),
            public_pem=os.getenv("TRUSTLY_PUBLIC_KEY"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging; secrets are left out"""
        return {
            "host": self.host,
            "port": self.port,
            "is_https": self.is_https,
            "username": self.username,
            "timeout": self.timeout,
        }

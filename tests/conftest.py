"""
Shared fixtures: RSA key pairs, client config and mock transports
"""
import json

import httpx
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from trustly_client.api.signed import SignedClient
from trustly_client.config import ClientConfig
from trustly_client.crypto.signature import sign
from trustly_client.transport.http import HttpTransport


def _private_pem(key) -> str:
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")


def _public_pem(key) -> str:
    return key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("ascii")


@pytest.fixture(scope="session")
def merchant_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def trustly_key():
    """Counterparty key pair; its private half signs replies in tests"""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def merchant_private_pem(merchant_key):
    return _private_pem(merchant_key)


@pytest.fixture(scope="session")
def trustly_public_pem(trustly_key):
    return _public_pem(trustly_key)


@pytest.fixture
def config(merchant_private_pem, trustly_public_pem):
    return ClientConfig(
        host="test.trustly.com",
        username="User",
        password="Password",
        private_pem=merchant_private_pem,
        public_pem=trustly_public_pem,
    )


@pytest.fixture
def signed_reply(trustly_key):
    """Build a reply body signed with the counterparty key"""
    def build(method, uuid, data, error=False):
        result = {
            "method": method,
            "uuid": uuid,
            "data": data,
            "signature": sign(trustly_key, method, uuid, data),
        }
        if error:
            return {
                "version": "1.1",
                "error": {
                    "name": "JSONRPCError",
                    "code": data.get("code"),
                    "message": data.get("message"),
                    "error": result,
                },
            }
        return {"version": "1.1", "result": result}
    return build


@pytest.fixture
def mock_client(config):
    """Create a SignedClient whose HTTP traffic is served by handler"""
    clients = []

    def build(handler):
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(http_client)
        return SignedClient(config, transport=HttpTransport(client=http_client))

    yield build

    for http_client in clients:
        http_client.close()


@pytest.fixture
def json_reply():
    """Build an httpx reply with a JSON body"""
    def build(body, status=200):
        return httpx.Response(status, content=json.dumps(body).encode("utf-8"),
                              headers={"Content-Type": "application/json"})
    return build

"""
Shared test configuration and fixtures.
"""

from datetime import UTC, datetime
from unittest.mock import Mock

import httpx
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519, rsa

from infrastructure.providers import WalutomatRatesProvider

TEST_API_KEY = "test_api_key_12345"
FIXED_NOW = datetime(2024, 1, 1, 11, 59, 58, 734000, tzinfo=UTC)


@pytest.fixture(scope="session")
def rsa_private_key():
    """RSA key shared by the whole session, key generation is slow"""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_public_key(rsa_private_key):
    return rsa_private_key.public_key()


@pytest.fixture(scope="session")
def pkcs1_pem(rsa_private_key) -> bytes:
    return rsa_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture
def ed25519_private_key():
    return ed25519.Ed25519PrivateKey.generate()


@pytest.fixture
def mock_client():
    return Mock(spec=httpx.Client)


@pytest.fixture
def provider(mock_client, rsa_private_key):
    return WalutomatRatesProvider(
        api_key=TEST_API_KEY,
        private_key=rsa_private_key,
        client=mock_client,
        clock=lambda: FIXED_NOW,
    )


def json_response(payload, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, json=payload)

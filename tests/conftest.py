"""Root conftest — shared fixtures for all tests."""

from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from dotenv import load_dotenv

# Load .env at the root so keychain smoke runs pick up local overrides.
load_dotenv(Path(__file__).resolve().parent.parent / ".env", override=False)

CA_CERT_PEM = (
    b"-----BEGIN CERTIFICATE-----\n"
    b"MIIBszCCAVmgAwIBAgIUQ2FUZXN0Q0FDZXJ0aWZpY2F0ZTAKBggqhkjOPQQDAjAS\n"
    b"MRAwDgYDVQQDDAd0ZXN0LWNhMB4XDTI0MDEwMTAwMDAwMFoXDTM0MDEwMTAwMDAw\n"
    b"-----END CERTIFICATE-----\n"
)
CLIENT_CERT_PEM = (
    b"-----BEGIN CERTIFICATE-----\n"
    b"MIIBtDCCAVqgAwIBAgIUQ2xpZW50Q2VydGlmaWNhdGUwCgYIKoZIzj0EAwIwEjEQ\n"
    b"MA4GA1UEAwwHdGVzdC1jYTAeFw0yNDAxMDEwMDAwMDBaFw0zNDAxMDEwMDAwMDBa\n"
    b"-----END CERTIFICATE-----\n"
)


@pytest.fixture(scope="session")
def client_key_pem() -> bytes:
    """Real RSA private key in traditional OpenSSL PEM (BEGIN RSA PRIVATE KEY)."""
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture
def ca_cert_pem() -> bytes:
    return CA_CERT_PEM


@pytest.fixture
def client_cert_pem() -> bytes:
    return CLIENT_CERT_PEM

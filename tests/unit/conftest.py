"""In-memory fakes for the durable store and the keychain, plus config fixtures."""

from __future__ import annotations

import pytest

from db.models import AddressFamily, ConnectionConfiguration


class InMemoryStore:
    """KeyValueStore fake backed by a dict."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.writes: list[str] = []

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.writes.append(key)
        self.data[key] = value

    async def delete(self, *keys: str) -> int:
        return sum(1 for key in keys if self.data.pop(key, None) is not None)


class InMemorySecrets:
    """SecretBackend fake keyed by (service, account)."""

    def __init__(self) -> None:
        self.data: dict[tuple[str, str], str] = {}
        self.writes: list[tuple[str, str]] = []

    async def get_secret(self, service: str, account: str) -> str | None:
        return self.data.get((service, account))

    async def set_secret(self, service: str, account: str, secret: str) -> None:
        self.writes.append((service, account))
        self.data[(service, account)] = secret

    async def delete_secret(self, service: str, account: str) -> bool:
        return self.data.pop((service, account), None) is not None


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def secrets() -> InMemorySecrets:
    return InMemorySecrets()


@pytest.fixture
def secure_config(
    client_key_pem: bytes, client_cert_pem: bytes, ca_cert_pem: bytes
) -> ConnectionConfiguration:
    return ConnectionConfiguration(
        host="example.com",
        port=9090,
        family=AddressFamily.IPV6,
        certificate_authority_certificate=ca_cert_pem,
        client_certificate=client_cert_pem,
        client_key=client_key_pem,
    )


@pytest.fixture
def insecure_config() -> ConnectionConfiguration:
    return ConnectionConfiguration(host="localhost", port=9090)

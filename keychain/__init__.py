from keychain.base import SecretBackend
from keychain.client import KeyringClient

__all__ = [
    "KeyringClient",
    "SecretBackend",
]

"""AES-128-CBC encryption of client key material.

Key and IV are 16 random bytes each, carried as base64 strings; the IV is
called the "salt" throughout the stored format. Ciphertext is PKCS7-padded
and base64-encoded. These parameters are part of the on-disk format.
"""

import base64
import binascii
import os
from typing import NamedTuple

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from app.exceptions import CipherError, DecryptionError

SECRET_BYTES = 16
_BLOCK_BITS = algorithms.AES.block_size


class EncryptedString(NamedTuple):
    password: str
    salt: str
    ciphertext: str


def generate_random_secret() -> str:
    """16 cryptographically strong random bytes, base64-encoded."""
    return base64.b64encode(os.urandom(SECRET_BYTES)).decode("ascii")


def _decode_material(value: str, name: str) -> bytes:
    try:
        raw = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise CipherError(f"{name} is not valid base64") from exc
    if len(raw) != SECRET_BYTES:
        raise CipherError(f"{name} must decode to {SECRET_BYTES} bytes, got {len(raw)}")
    return raw


def _cipher(password: str, salt: str) -> Cipher:
    key = _decode_material(password, "password")
    iv = _decode_material(salt, "salt")
    return Cipher(algorithms.AES(key), modes.CBC(iv))


def encrypt(plaintext: str, password: str, salt: str) -> str:
    """UTF-8 plaintext -> base64 ciphertext. Raises CipherError on bad key/IV."""
    padder = padding.PKCS7(_BLOCK_BITS).padder()
    padded = padder.update(plaintext.encode("utf-8")) + padder.finalize()
    encryptor = _cipher(password, salt).encryptor()
    encrypted = encryptor.update(padded) + encryptor.finalize()
    return base64.b64encode(encrypted).decode("ascii")


def decrypt(ciphertext: str, password: str, salt: str) -> str:
    """Base64 ciphertext -> UTF-8 plaintext. Raises DecryptionError on any failure."""
    try:
        cipher = _cipher(password, salt)
    except CipherError as exc:
        raise DecryptionError(exc.message) from exc

    try:
        encrypted = base64.b64decode(ciphertext, validate=True)
        decryptor = cipher.decryptor()
        padded = decryptor.update(encrypted) + decryptor.finalize()
        unpadder = padding.PKCS7(_BLOCK_BITS).unpadder()
        plain = unpadder.update(padded) + unpadder.finalize()
        return plain.decode("utf-8")
    except ValueError as exc:
        # binascii.Error and UnicodeDecodeError are ValueError subclasses.
        raise DecryptionError(f"Cannot decrypt ciphertext: {exc}") from exc


def encrypt_string(text: str) -> EncryptedString:
    """Encrypt ``text`` under a freshly generated password and salt."""
    password = generate_random_secret()
    salt = generate_random_secret()
    return EncryptedString(password=password, salt=salt, ciphertext=encrypt(text, password, salt))

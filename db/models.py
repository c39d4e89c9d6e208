"""Pydantic v2 models for connection configurations.

``ConnectionConfiguration`` is the in-memory shape callers work with (PEM
material as bytes). ``SerializableConnectionConfiguration`` is the durable
JSON record; its field aliases are the stored wire names.
"""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class AddressFamily(IntEnum):
    IPV4 = 4
    IPV6 = 6


class ConnectionConfiguration(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str = Field(min_length=1)
    port: int = Field(ge=0, le=65535)
    family: AddressFamily | None = None
    certificate_authority_certificate: bytes | None = None
    client_certificate: bytes | None = None
    client_key: bytes | None = None

    @property
    def is_insecure(self) -> bool:
        """True for test/ephemeral configs that carry no TLS material at all."""
        return (
            self.client_key is None
            and self.client_certificate is None
            and self.certificate_authority_certificate is None
        )


class SerializableConnectionConfiguration(BaseModel):
    """Durable form: certificates as text, ``client_key`` as ``"<ciphertext>.<salt>"``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    host: str = Field(min_length=1)
    port: int = Field(ge=0, le=65535)
    family: AddressFamily | None = None
    certificate_authority_certificate: str | None = Field(
        default=None, alias="certificateAuthorityCertificate"
    )
    client_certificate: str | None = Field(default=None, alias="clientCertificate")
    client_key: str | None = Field(default=None, alias="clientKey")

    def to_json(self) -> str:
        """Stored JSON text. Absent optional fields are omitted."""
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, raw: str | bytes) -> "SerializableConnectionConfiguration":
        """Parse stored JSON text. Raises pydantic.ValidationError on bad input."""
        return cls.model_validate_json(raw)

"""Tests for db/models.py — in-memory and durable connection configuration models."""

import json

import pytest
from pydantic import ValidationError

from db.models import (
    AddressFamily,
    ConnectionConfiguration,
    SerializableConnectionConfiguration,
)


class TestConnectionConfiguration:
    def test_insecure_when_no_material(self) -> None:
        assert ConnectionConfiguration(host="h", port=22).is_insecure

    def test_secure_when_material_present(self) -> None:
        config = ConnectionConfiguration(
            host="h",
            port=22,
            certificate_authority_certificate=b"ca",
            client_certificate=b"cert",
            client_key=b"key",
        )
        assert not config.is_insecure

    def test_partial_material_is_not_insecure(self) -> None:
        assert not ConnectionConfiguration(host="h", port=22, client_key=b"key").is_insecure

    def test_empty_host_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ConnectionConfiguration(host="", port=22)

    def test_port_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ConnectionConfiguration(host="h", port=70000)

    def test_family_accepts_int(self) -> None:
        config = ConnectionConfiguration(host="h", port=22, family=6)
        assert config.family is AddressFamily.IPV6

    def test_frozen(self) -> None:
        config = ConnectionConfiguration(host="h", port=22)
        with pytest.raises(ValidationError):
            config.port = 23  # type: ignore[misc]


class TestSerializableConnectionConfiguration:
    def test_to_json_uses_wire_names(self) -> None:
        record = SerializableConnectionConfiguration(
            host="h",
            port=22,
            family=AddressFamily.IPV4,
            certificate_authority_certificate="ca",
            client_certificate="cert",
            client_key="ct.salt",
        )
        assert json.loads(record.to_json()) == {
            "host": "h",
            "port": 22,
            "family": 4,
            "certificateAuthorityCertificate": "ca",
            "clientCertificate": "cert",
            "clientKey": "ct.salt",
        }

    def test_to_json_omits_absent_fields(self) -> None:
        record = SerializableConnectionConfiguration(host="h", port=22)
        assert json.loads(record.to_json()) == {"host": "h", "port": 22}

    def test_from_json_reads_wire_names(self) -> None:
        raw = json.dumps(
            {
                "host": "h",
                "port": 22,
                "family": 6,
                "certificateAuthorityCertificate": "ca",
                "clientCertificate": "cert",
                "clientKey": "ct.salt",
            }
        )
        record = SerializableConnectionConfiguration.from_json(raw)
        assert record.family is AddressFamily.IPV6
        assert record.certificate_authority_certificate == "ca"
        assert record.client_key == "ct.salt"

    def test_from_json_ignores_unknown_fields(self) -> None:
        record = SerializableConnectionConfiguration.from_json('{"host": "h", "port": 1, "cwd": "/x"}')
        assert record.host == "h"

    def test_from_json_invalid_family(self) -> None:
        with pytest.raises(ValidationError):
            SerializableConnectionConfiguration.from_json('{"host": "h", "port": 1, "family": 5}')

    def test_from_json_not_json(self) -> None:
        with pytest.raises(ValidationError):
            SerializableConnectionConfiguration.from_json("not json")

    def test_from_json_missing_port(self) -> None:
        with pytest.raises(ValidationError):
            SerializableConnectionConfiguration.from_json('{"host": "h"}')

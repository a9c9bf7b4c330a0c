"""Tests for rendering write requests as CredHub wire payloads."""

import json

import pytest

from src.credhub import to_json, to_payload
from src.credhub.config import Operation
from src.credhub.name import CredentialName
from src.credhub.permissions import CredentialPermission
from src.credhub.request import WriteRequest
from src.credhub.serialization import PermissionPayload, WriteRequestPayload


@pytest.fixture
def permission():
    return (
        CredentialPermission.builder()
        .client("ci-client")
        .operations(Operation.READ, Operation.WRITE)
        .build()
    )


class TestPermissionPayload:
    def test_from_permission(self, permission):
        payload = PermissionPayload.from_permission(permission)
        assert payload.actor == "uaa-client:ci-client"
        assert payload.operations == ["read", "write"]

    def test_operations_are_tokens(self, permission):
        dumped = PermissionPayload.from_permission(permission).model_dump()
        assert all(isinstance(op, str) for op in dumped["operations"])


class TestWriteRequestPayload:
    def test_password_request(self):
        request = (
            WriteRequest.builder()
            .name(CredentialName.of("app", "db"))
            .password_value("secret")
            .overwrite(True)
            .build()
        )
        assert request.to_dict() == {
            "overwrite": True,
            "name": "/app/db",
            "type": "password",
            "value": "secret",
        }

    def test_json_request_with_permission(self, permission):
        request = (
            WriteRequest.builder()
            .name("/app/config")
            .json_value({"k": "v"})
            .additional_permission(permission)
            .build()
        )
        data = request.to_dict()
        assert set(data) == {"overwrite", "name", "type", "value", "additional_permissions"}
        assert data["type"] == "json"
        assert data["value"] == {"k": "v"}
        assert data["additional_permissions"] == [
            {"actor": "uaa-client:ci-client", "operations": ["read", "write"]},
        ]

    def test_empty_permissions_omitted(self):
        request = WriteRequest.builder().name("/cred").password_value("pw").build()
        assert "additional_permissions" not in request.to_dict()
        assert "additional_permissions" not in json.loads(request.to_json())

    def test_name_always_present(self):
        request = WriteRequest.builder().password_value("pw").build()
        data = request.to_dict()
        assert "name" in data
        assert data["name"] is None
        assert json.loads(request.to_json())["name"] is None

    def test_value_is_plain_dict(self):
        request = WriteRequest.builder().name("/cred").json_value({"a": {"b": [1, 2]}}).build()
        payload = WriteRequestPayload.from_request(request)
        assert type(payload.value) is dict
        assert payload.value == {"a": {"b": [1, 2]}}

    def test_to_json_document(self, permission):
        request = (
            WriteRequest.builder()
            .name("/cred")
            .json_value({"k": "v"})
            .additional_permission(permission)
            .build()
        )
        document = json.loads(to_json(request))
        assert document == {
            "overwrite": False,
            "name": "/cred",
            "type": "json",
            "value": {"k": "v"},
            "additional_permissions": [
                {"actor": "uaa-client:ci-client", "operations": ["read", "write"]},
            ],
        }

    def test_to_json_indent(self):
        request = WriteRequest.builder().name("/cred").password_value("pw").build()
        assert "\n" in request.to_json(indent=2)
        assert "\n" not in request.to_json()

    def test_indent_from_settings(self, monkeypatch):
        monkeypatch.setenv("CREDHUB_JSON_INDENT", "4")
        request = WriteRequest.builder().name("/cred").password_value("pw").build()
        assert '\n    "overwrite"' in request.to_json()

    def test_to_payload_function(self):
        request = WriteRequest.builder().name("/cred").password_value("pw").build()
        assert isinstance(to_payload(request), WriteRequestPayload)
        assert to_payload(request) == request.to_payload()

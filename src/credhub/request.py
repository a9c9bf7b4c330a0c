"""CredHub Credential Writes - Write Request.

A WriteRequest carries everything needed to create or update a credential:
its name, the overwrite flag, exactly one typed value and any permissions
to grant alongside it.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, List, Optional, Tuple, Union

from src.credhub.config import ValueType
from src.credhub.exceptions import InvalidArgumentError
from src.credhub.immutables import freeze_mapping, freeze_sequence, hashable, thaw
from src.credhub.name import CredentialName
from src.credhub.permissions import CredentialPermission
from src.credhub.serialization import WriteRequestPayload
from src.credhub.validators import require_mapping, require_not_none, require_string
from src.settings import get_settings

logger = logging.getLogger(__name__)


# ── Typed values ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class PasswordValue:
    """A single string value."""

    value: str
    value_type: ClassVar[ValueType] = ValueType.PASSWORD


@dataclass(frozen=True, eq=False)
class JsonValue:
    """A JSON document given as a mapping. Held as a read-only deep copy."""

    value: Mapping
    value_type: ClassVar[ValueType] = ValueType.JSON

    @classmethod
    def of(cls, mapping: Mapping) -> "JsonValue":
        return cls(freeze_mapping(mapping))

    def to_dict(self) -> dict:
        return thaw(self.value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        return dict(self.value) == dict(other.value)

    def __hash__(self) -> int:
        return hash(hashable(self.value))


CredentialValue = Union[PasswordValue, JsonValue]


# ── Write Request ─────────────────────────────────────────────────────


@dataclass(frozen=True, repr=False)
class WriteRequest:
    """Details of a request to write a new credential or update an existing one.

    Use :meth:`builder` to construct instances. Once built, none of the
    fields (including the permissions tuple) can change.
    """

    overwrite: bool = False
    credential_name: Optional[CredentialName] = None
    credential_value: Optional[CredentialValue] = None
    additional_permissions: Tuple[CredentialPermission, ...] = ()

    @staticmethod
    def builder() -> "WriteRequestBuilder":
        return WriteRequestBuilder()

    @property
    def name(self) -> Optional[str]:
        if self.credential_name is None:
            return None
        return self.credential_name.name

    @property
    def value_type(self) -> Optional[ValueType]:
        if self.credential_value is None:
            return None
        return self.credential_value.value_type

    @property
    def type(self) -> Optional[str]:
        """Canonical value type token, e.g. ``"password"`` or ``"json"``."""
        if self.credential_value is None:
            return None
        return self.credential_value.value_type.type

    @property
    def value(self) -> Any:
        if self.credential_value is None:
            return None
        return self.credential_value.value

    def to_payload(self) -> WriteRequestPayload:
        return WriteRequestPayload.from_request(self)

    def to_dict(self) -> dict:
        """Wire-shaped dict with snake_case keys."""
        return self.to_payload().to_dict()

    def to_json(self, indent: Optional[int] = None) -> str:
        if indent is None:
            indent = get_settings().json_indent
        return self.to_payload().to_json(indent=indent)

    def __repr__(self) -> str:
        return (
            f"WriteRequest(overwrite={self.overwrite!r}, "
            f"name={self.credential_name!r}, "
            f"value_type={self.value_type!r}, "
            f"value={self.value!r}, "
            f"additional_permissions={self.additional_permissions!r})"
        )


class WriteRequestBuilder:
    """Fluent builder for :class:`WriteRequest`.

    Arguments are checked as they are set; ``build()`` itself does not
    validate. A request built without a name or value carries ``None`` for
    them, and calling a second typed value setter replaces the first.

    Example:
        request = (
            WriteRequest.builder()
            .name(CredentialName.of("my-app", "db-password"))
            .password_value("secret")
            .overwrite(True)
            .build()
        )
    """

    def __init__(self):
        self._name: Optional[CredentialName] = None
        self._overwrite: bool = False
        self._value: Optional[CredentialValue] = None
        self._additional_permissions: Optional[List[CredentialPermission]] = None

    def password_value(self, value: str) -> "WriteRequestBuilder":
        """Set a password value. The type becomes ``password``."""
        require_string(value, "value")
        self._set_value(PasswordValue(value))
        return self

    def json_value(self, value: Mapping) -> "WriteRequestBuilder":
        """Set a JSON value from a mapping. The type becomes ``json``.

        The mapping is deep-copied, so later changes by the caller do not
        leak into the request.
        """
        require_mapping(value, "value")
        self._set_value(JsonValue.of(value))
        return self

    def _set_value(self, value: CredentialValue) -> None:
        if self._value is not None:
            logger.debug(
                f"Replacing {self._value.value_type.type} credential value "
                f"with {value.value_type.type} value",
                extra={"credential_name": self._name.name if self._name else None},
            )
        self._value = value

    def name(self, name: Union[CredentialName, str]) -> "WriteRequestBuilder":
        """Set the credential name, as a CredentialName or a plain path."""
        require_not_none(name, "name")
        if isinstance(name, str):
            name = CredentialName(name)
        elif not isinstance(name, CredentialName):
            raise InvalidArgumentError(
                f"name must be a CredentialName or string, got {type(name).__name__}",
                field="name",
            )
        self._name = name
        return self

    def overwrite(self, overwrite: bool) -> "WriteRequestBuilder":
        """``False`` to only create the credential, ``True`` to replace an existing one."""
        if not isinstance(overwrite, bool):
            raise InvalidArgumentError(
                f"overwrite must be a bool, got {type(overwrite).__name__}",
                field="overwrite",
            )
        self._overwrite = overwrite
        return self

    def additional_permission(self, permission: CredentialPermission) -> "WriteRequestBuilder":
        """Add one permission to grant when the credential is written."""
        _check_permission(permission)
        self._init_permissions()
        self._additional_permissions.append(permission)
        return self

    def additional_permissions(
        self, permissions: Iterable[CredentialPermission]
    ) -> "WriteRequestBuilder":
        """Add several permissions, keeping the iteration order."""
        require_not_none(permissions, "permissions")
        batch = list(permissions)
        for permission in batch:
            _check_permission(permission)
        self._init_permissions()
        self._additional_permissions.extend(batch)
        return self

    def _init_permissions(self) -> None:
        if self._additional_permissions is None:
            self._additional_permissions = []

    def build(self) -> WriteRequest:
        request = WriteRequest(
            overwrite=self._overwrite,
            credential_name=self._name,
            credential_value=self._value,
            additional_permissions=freeze_sequence(self._additional_permissions),
        )
        logger.debug(
            "Built credential write request",
            extra={
                "credential_name": request.name,
                "value_type": request.type,
                "permission_count": len(request.additional_permissions),
            },
        )
        return request


def _check_permission(permission: Any) -> None:
    require_not_none(permission, "permission")
    if not isinstance(permission, CredentialPermission):
        raise InvalidArgumentError(
            f"permission must be a CredentialPermission, got {type(permission).__name__}",
            field="permission",
        )

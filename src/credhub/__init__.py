"""CredHub Credential Writes.

Typed, builder-constructed payloads for writing credentials to CredHub,
together with the access-control permissions granted alongside them.
"""

from .config import (
    ActorType,
    ErrorCode,
    Operation,
    ValueType,
)
from .exceptions import (
    CredHubError,
    InvalidArgumentError,
    InvalidStateError,
)
from .actor import Actor
from .name import CredentialName
from .permissions import (
    CredentialPermission,
    CredentialPermissionBuilder,
)
from .request import (
    JsonValue,
    PasswordValue,
    WriteRequest,
    WriteRequestBuilder,
)
from .serialization import (
    PermissionPayload,
    WriteRequestPayload,
    to_json,
    to_payload,
)

__all__ = [
    # Config
    "ActorType",
    "ErrorCode",
    "Operation",
    "ValueType",
    # Errors
    "CredHubError",
    "InvalidArgumentError",
    "InvalidStateError",
    # Identity
    "Actor",
    "CredentialName",
    # Permissions
    "CredentialPermission",
    "CredentialPermissionBuilder",
    # Write Request
    "JsonValue",
    "PasswordValue",
    "WriteRequest",
    "WriteRequestBuilder",
    # Serialization
    "PermissionPayload",
    "WriteRequestPayload",
    "to_json",
    "to_payload",
]

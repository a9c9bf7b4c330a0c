"""CredHub Credential Writes - Configuration."""

from enum import Enum


class ValueType(Enum):
    """Shapes of credential values understood by CredHub."""

    VALUE = "value"
    JSON = "json"
    PASSWORD = "password"
    USER = "user"
    CERTIFICATE = "certificate"
    RSA = "rsa"
    SSH = "ssh"

    @property
    def type(self) -> str:
        """Canonical type token sent to the server."""
        return self.value


class Operation(Enum):
    """Operations an actor can be granted on a credential."""

    READ = "read"
    WRITE = "write"
    DELETE = "delete"
    READ_ACL = "read_acl"
    WRITE_ACL = "write_acl"

    @property
    def operation(self) -> str:
        """Lowercase wire token for the operation."""
        return self.value

    @classmethod
    def from_token(cls, token: str) -> "Operation":
        """Resolve a wire token such as ``"read"`` to an Operation.

        Raises:
            ValueError: If the token does not name a known operation.
        """
        if not isinstance(token, str):
            raise ValueError(f"operation token must be a string, got {type(token).__name__}")
        return cls(token.strip().lower())


class ActorType(Enum):
    """Kinds of principals that can be granted permissions."""

    APP = "mtls-app"
    USER = "uaa-user"
    CLIENT = "uaa-client"


class ErrorCode(Enum):
    """Error codes carried by credential request exceptions."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_STATE = "INVALID_STATE"

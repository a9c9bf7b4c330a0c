"""Credential names."""

from dataclasses import dataclass

from src.credhub.exceptions import InvalidArgumentError
from src.credhub.validators import require_string

SEPARATOR = "/"


@dataclass(frozen=True)
class CredentialName:
    """Fully-qualified name of a credential, such as ``/my-app/db-password``."""

    name: str

    def __post_init__(self):
        require_string(self.name, "name")

    @classmethod
    def of(cls, *segments: str) -> "CredentialName":
        """Join path segments under a single leading separator.

        Example:
            CredentialName.of("my-app", "db-password").name == "/my-app/db-password"
        """
        if not segments:
            raise InvalidArgumentError("at least one name segment is required", field="segments")

        parts = []
        for segment in segments:
            require_string(segment, "segment")
            stripped = segment.strip(SEPARATOR)
            if not stripped:
                raise InvalidArgumentError(f"Empty name segment: {segment!r}", field="segment")
            parts.append(stripped)
        return cls(SEPARATOR + SEPARATOR.join(parts))

    def __str__(self) -> str:
        return self.name

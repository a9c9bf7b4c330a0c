"""Wire payloads for credential writes.

Pydantic schemas for the snake_case JSON document CredHub expects on
``PUT /api/v1/data``. Sending the document is left to the caller.
"""

from typing import TYPE_CHECKING, Any, List, Optional, Set

from pydantic import BaseModel, Field

from src.credhub.immutables import thaw

if TYPE_CHECKING:
    from src.credhub.permissions import CredentialPermission
    from src.credhub.request import WriteRequest


class PermissionPayload(BaseModel):
    """One actor and the operation tokens granted to it."""

    actor: Optional[str] = None
    operations: List[str] = Field(default_factory=list)

    @classmethod
    def from_permission(cls, permission: "CredentialPermission") -> "PermissionPayload":
        actor = permission.actor.identity if permission.actor is not None else None
        return cls(actor=actor, operations=list(permission.operation_tokens))


class WriteRequestPayload(BaseModel):
    """Body of a credential write.

    ``name`` is always emitted, even when null. ``additional_permissions``
    is dropped from the output when empty rather than sent as ``[]``.
    """

    overwrite: bool = False
    name: Optional[str] = None
    type: Optional[str] = None
    value: Any = None
    additional_permissions: List[PermissionPayload] = Field(default_factory=list)

    @classmethod
    def from_request(cls, request: "WriteRequest") -> "WriteRequestPayload":
        return cls(
            overwrite=request.overwrite,
            name=request.name,
            type=request.type,
            value=thaw(request.value),
            additional_permissions=[
                PermissionPayload.from_permission(p) for p in request.additional_permissions
            ],
        )

    def _excluded(self) -> Set[str]:
        return set() if self.additional_permissions else {"additional_permissions"}

    def to_dict(self) -> dict:
        return self.model_dump(exclude=self._excluded())

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(exclude=self._excluded(), indent=indent)


def to_payload(request: "WriteRequest") -> WriteRequestPayload:
    """Build the wire payload for a write request."""
    return WriteRequestPayload.from_request(request)


def to_json(request: "WriteRequest", indent: Optional[int] = None) -> str:
    """Render a write request as a JSON document."""
    return to_payload(request).to_json(indent=indent)

"""CredHub Credential Writes - Permissions.

A CredentialPermission names one actor and the operations it may perform
on a credential. Instances are attached to a WriteRequest so access is
granted when the credential is written.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from src.credhub.actor import Actor
from src.credhub.config import Operation
from src.credhub.immutables import freeze_sequence
from src.credhub.serialization import PermissionPayload
from src.credhub.validators import (
    require_string,
    require_unset,
    resolve_operation,
    resolve_operations,
)

logger = logging.getLogger(__name__)

ONLY_ONE_ACTOR = "only one actor can be specified"


@dataclass(frozen=True)
class CredentialPermission:
    """Operations an actor is allowed to perform on a credential.

    Use :meth:`builder` to construct instances.
    """

    actor: Optional[Actor]
    operations: Tuple[Operation, ...] = ()

    @staticmethod
    def builder() -> "CredentialPermissionBuilder":
        return CredentialPermissionBuilder()

    @property
    def operation_tokens(self) -> List[str]:
        """Operations as lowercase wire tokens."""
        return [op.operation for op in self.operations]

    def to_dict(self) -> dict:
        return PermissionPayload.from_permission(self).model_dump()


class CredentialPermissionBuilder:
    """Fluent builder for :class:`CredentialPermission`.

    Exactly one actor may be set. Operations accumulate in call order,
    duplicates included.

    Example:
        permission = (
            CredentialPermission.builder()
            .app("app-123")
            .operations(Operation.READ, Operation.WRITE)
            .build()
        )
    """

    def __init__(self):
        self._actor: Optional[Actor] = None
        self._operations: Optional[List[Operation]] = None

    # ── Actor ─────────────────────────────────────────────────────────

    def app(self, app_id: str) -> "CredentialPermissionBuilder":
        """Grant to an application, typically a Cloud Foundry app GUID."""
        require_string(app_id, "appId")
        require_unset(self._actor, ONLY_ONE_ACTOR)
        self._actor = Actor.app(app_id)
        return self

    def user(self, user_id: str) -> "CredentialPermissionBuilder":
        """Grant to a UAA user in the default zone."""
        require_string(user_id, "userId")
        require_unset(self._actor, ONLY_ONE_ACTOR)
        self._actor = Actor.user(user_id)
        return self

    def zone_user(self, zone_id: str, user_id: str) -> "CredentialPermissionBuilder":
        """Grant to a UAA user in the given identity zone."""
        require_string(zone_id, "zoneId")
        require_string(user_id, "userId")
        require_unset(self._actor, ONLY_ONE_ACTOR)
        self._actor = Actor.user(user_id, zone_id=zone_id)
        return self

    def client(self, client_id: str) -> "CredentialPermissionBuilder":
        """Grant to an OAuth2 client in the default zone."""
        require_string(client_id, "clientId")
        require_unset(self._actor, ONLY_ONE_ACTOR)
        self._actor = Actor.client(client_id)
        return self

    def zone_client(self, zone_id: str, client_id: str) -> "CredentialPermissionBuilder":
        """Grant to an OAuth2 client in the given identity zone."""
        require_string(zone_id, "zoneId")
        require_string(client_id, "clientId")
        require_unset(self._actor, ONLY_ONE_ACTOR)
        self._actor = Actor.client(client_id, zone_id=zone_id)
        return self

    # ── Operations ────────────────────────────────────────────────────

    def operation(self, operation: Union[Operation, str]) -> "CredentialPermissionBuilder":
        """Add one operation. Repeated calls append in order."""
        resolved = resolve_operation(operation)
        self._init_operations()
        self._operations.append(resolved)
        return self

    def operations(self, *operations: Union[Operation, str]) -> "CredentialPermissionBuilder":
        """Add several operations in the order given."""
        resolved = resolve_operations(operations)
        self._init_operations()
        self._operations.extend(resolved)
        return self

    def _init_operations(self) -> None:
        if self._operations is None:
            self._operations = []

    # ── Build ─────────────────────────────────────────────────────────

    def build(self) -> CredentialPermission:
        """Snapshot the actor and operations into a CredentialPermission.

        The builder keeps its accumulated operations, so building again
        after further calls includes the earlier ones.
        """
        permission = CredentialPermission(
            actor=self._actor,
            operations=freeze_sequence(self._operations),
        )
        logger.debug(
            "Built credential permission",
            extra={
                "actor": permission.actor.identity if permission.actor else None,
                "operation_count": len(permission.operations),
            },
        )
        return permission

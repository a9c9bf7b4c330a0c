"""Principals that can be named in a credential permission."""

from dataclasses import dataclass
from typing import Optional

from src.credhub.config import ActorType
from src.credhub.exceptions import InvalidArgumentError
from src.credhub.validators import require_string

IDENTITY_SEPARATOR = ":"
ZONE_SEPARATOR = "/"


@dataclass(frozen=True)
class Actor:
    """An application, user or OAuth2 client, optionally in a UAA zone.

    The wire form is ``<type>:<id>`` or ``<type>:<zone>/<id>``, for example
    ``mtls-app:6b1f0a`` or ``uaa-user:zone-1/5c2e``.
    """

    actor_type: ActorType
    primary_identifier: str
    zone_id: Optional[str] = None

    @classmethod
    def app(cls, app_id: str) -> "Actor":
        """An application, usually a Cloud Foundry app GUID."""
        return cls(ActorType.APP, require_string(app_id, "appId"))

    @classmethod
    def user(cls, user_id: str, zone_id: Optional[str] = None) -> "Actor":
        """A UAA user, optionally scoped to an identity zone."""
        return cls._zoned(ActorType.USER, require_string(user_id, "userId"), "userId", zone_id)

    @classmethod
    def client(cls, client_id: str, zone_id: Optional[str] = None) -> "Actor":
        """A UAA OAuth2 client, optionally scoped to an identity zone."""
        return cls._zoned(ActorType.CLIENT, require_string(client_id, "clientId"), "clientId", zone_id)

    @classmethod
    def _zoned(
        cls, actor_type: ActorType, identifier: str, field: str, zone_id: Optional[str]
    ) -> "Actor":
        # The first separator splits zone from id, so neither a zone nor a
        # zoneless id may contain one.
        if zone_id is not None:
            require_string(zone_id, "zoneId")
            if ZONE_SEPARATOR in zone_id:
                raise InvalidArgumentError(
                    f"zoneId must not contain {ZONE_SEPARATOR!r}: {zone_id!r}", field="zoneId"
                )
        elif ZONE_SEPARATOR in identifier:
            raise InvalidArgumentError(
                f"{field} must not contain {ZONE_SEPARATOR!r} without a zone: {identifier!r}",
                field=field,
            )
        return cls(actor_type, identifier, zone_id)

    @classmethod
    def from_identity(cls, identity: str) -> "Actor":
        """Parse the ``<type>:[<zone>/]<id>`` form produced by :attr:`identity`."""
        require_string(identity, "identity")
        prefix, sep, rest = identity.partition(IDENTITY_SEPARATOR)
        if not sep or not rest:
            raise InvalidArgumentError(f"Malformed actor identity: {identity!r}", field="identity")

        try:
            actor_type = ActorType(prefix)
        except ValueError:
            raise InvalidArgumentError(
                f"Unknown actor type {prefix!r} in identity {identity!r}",
                field="identity",
            ) from None

        zone_id = None
        if actor_type != ActorType.APP and ZONE_SEPARATOR in rest:
            zone_id, _, rest = rest.partition(ZONE_SEPARATOR)
            if not zone_id or not rest:
                raise InvalidArgumentError(f"Malformed actor identity: {identity!r}", field="identity")
        return cls(actor_type, rest, zone_id)

    @property
    def identity(self) -> str:
        if self.zone_id is None:
            return f"{self.actor_type.value}{IDENTITY_SEPARATOR}{self.primary_identifier}"
        return (
            f"{self.actor_type.value}{IDENTITY_SEPARATOR}"
            f"{self.zone_id}{ZONE_SEPARATOR}{self.primary_identifier}"
        )

    def __str__(self) -> str:
        return self.identity

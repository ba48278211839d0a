"""Keycloak OIDC provider for JWT validation."""

import logging
from dataclasses import dataclass

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

logger = logging.getLogger(__name__)


@dataclass
class OIDCUser:
    """Authenticated person from OIDC token."""

    person_id: str
    org_id: str | None
    email: str | None
    username: str | None
    realm_roles: list[str]


class KeycloakProvider:
    """Keycloak OIDC - validates JWT and extracts person and organization."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
        org_claim: str = "org_id",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )
        self._org_claim = org_claim

    def decode_token(self, token: str) -> OIDCUser | None:
        """Introspect JWT, return person info or None when inactive or invalid."""
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError as e:
            logger.info("Token introspection failed: %s", e)
            return None
        if not token_info.get("active"):
            return None
        return self.user_from_claims(token_info)

    def user_from_claims(self, claims: dict) -> OIDCUser:
        org_id = claims.get(self._org_claim)
        return OIDCUser(
            person_id=claims.get("sub", ""),
            org_id=str(org_id) if org_id else None,
            email=claims.get("email"),
            username=claims.get("preferred_username"),
            realm_roles=claims.get("realm_access", {}).get("roles", []),
        )

"""Build permission contexts from requests."""

from uuid import UUID

import falcon
import falcon.asgi

from accessgraph.application.dto.permission_dto import PermissionContext


def _uuid_param(value: str | None, name: str) -> UUID | None:
    if not value:
        return None
    try:
        return UUID(str(value))
    except ValueError:
        raise falcon.HTTPBadRequest(description=f"Invalid {name}") from None


def authenticated_user(req: falcon.asgi.Request):
    """Calling user with an organization, or raise 401/403."""
    user = getattr(req.context, "user", None)
    if not user or user.person_id == "anonymous":
        raise falcon.HTTPUnauthorized(
            title="Unauthorized", description="Authentication required", code="AUTH_REQUIRED"
        )
    if not user.org_id:
        raise falcon.HTTPForbidden(
            title="Forbidden", description="Organization required", code="ORG_REQUIRED"
        )
    return user


def permission_context(
    user,
    resource_owner_id: str | None = None,
    resource_team_id: str | None = None,
    team_id: str | None = None,
) -> PermissionContext:
    """PermissionContext for the user with optional resource attributes."""
    return PermissionContext(
        person_id=user.person_id,
        org_id=user.org_id,
        team_id=_uuid_param(team_id, "team_id"),
        resource_owner_id=str(resource_owner_id) if resource_owner_id else None,
        resource_team_id=_uuid_param(resource_team_id, "resource_team_id"),
    )


def context_from_query(req: falcon.asgi.Request, user) -> PermissionContext:
    return permission_context(
        user,
        resource_owner_id=req.get_param("resource_owner_id"),
        resource_team_id=req.get_param("resource_team_id"),
        team_id=req.get_param("team_id"),
    )

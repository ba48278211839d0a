"""Permissions API resources."""

import falcon
import falcon.asgi

from accessgraph.application.dto.permission_dto import ExpiringGrant
from accessgraph.application.use_cases.permission.check_many import CheckManyPermissionsUseCase
from accessgraph.application.use_cases.permission.check_permission import CheckPermissionUseCase
from accessgraph.application.use_cases.permission.enumerate_permissions import (
    EnumeratePermissionsUseCase,
)
from accessgraph.application.use_cases.permission.list_delegable import (
    ListDelegablePermissionsUseCase,
)
from accessgraph.application.use_cases.permission.list_expiring_grants import (
    MAX_LOOKAHEAD_DAYS,
    ListExpiringGrantsUseCase,
)
from accessgraph.domain.exceptions import ValidationError
from accessgraph.interfaces.api.context import (
    authenticated_user,
    context_from_query,
    permission_context,
)
from accessgraph.interfaces.api.hooks.require_permission import require_permission

EXPIRY_REPORT_ACTION = "permissions.view_expiring"


class PermissionCheckResource:
    """GET/POST /v1/permissions/check - single and batch permission checks."""

    def __init__(
        self,
        check_permission: CheckPermissionUseCase,
        check_many: CheckManyPermissionsUseCase,
    ) -> None:
        self._check = check_permission
        self._check_many = check_many

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Check one action for the caller."""
        user = authenticated_user(req)
        action = req.get_param("action")
        if not action:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Missing required parameter: action"}
            return

        decision = await self._check.execute(action, context_from_query(req, user))
        resp.media = decision.to_dict()
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Check several actions: mode "all" (default) or "any"."""
        user = authenticated_user(req)
        body = await req.get_media()
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Request body must be a JSON object"}
            return
        try:
            actions = body["actions"]
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        mode = body.get("mode", "all")

        if not isinstance(actions, list) or not all(isinstance(a, str) for a in actions):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "actions must be a list of action codes"}
            return
        if mode not in ("all", "any"):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "mode must be 'all' or 'any'"}
            return

        ctx = permission_context(
            user,
            resource_owner_id=body.get("resource_owner_id"),
            resource_team_id=body.get("resource_team_id"),
            team_id=body.get("team_id"),
        )
        if mode == "all":
            decision = await self._check_many.all_required(actions, ctx)
        else:
            decision = await self._check_many.any_allowed(actions, ctx)

        resp.media = {**decision.to_dict(), "mode": mode, "actions": actions}
        resp.status = falcon.HTTP_200


class PermissionsResource:
    """GET /v1/permissions - full permission matrix of the caller."""

    def __init__(self, enumerate_permissions: EnumeratePermissionsUseCase) -> None:
        self._enumerate = enumerate_permissions

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = authenticated_user(req)
        matrix = await self._enumerate.execute(user.person_id, user.org_id)
        summary = matrix.summary
        resp.media = {
            "actions": [
                {
                    "code": a.code,
                    "name": a.name,
                    "category": a.category,
                    "allowed": a.allowed,
                    "scope": a.scope.value if a.scope else None,
                    "source": a.source.value,
                }
                for a in matrix.actions
            ],
            "summary": {
                "total": summary.total,
                "allowed": summary.allowed,
                "denied": summary.denied,
            },
        }
        resp.status = falcon.HTTP_200


class DelegablePermissionsResource:
    """GET /v1/permissions/delegable - grants the caller may delegate and has delegated."""

    def __init__(self, list_delegable: ListDelegablePermissionsUseCase) -> None:
        self._list_delegable = list_delegable

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = authenticated_user(req)
        overview = await self._list_delegable.execute(user.person_id)
        resp.media = {
            "items": [
                {
                    "position_id": str(d.position_id),
                    "position_name": d.position_name,
                    "action_type_id": str(d.action_type_id),
                    "action_code": d.action_code,
                    "action_name": d.action_name,
                    "category": d.category,
                    "risk_level": d.risk_level.value,
                    "scope": d.scope.value,
                }
                for d in overview.delegable
            ],
            "active_delegations": [
                {
                    "id": str(o.id),
                    "person_id": o.person_id,
                    "action_type_id": str(o.action_type_id),
                    "action_code": o.action_code,
                    "scope": o.scope.value if o.scope else None,
                    "expires_at": o.expires_at.isoformat() if o.expires_at else None,
                }
                for o in overview.active_delegations
            ],
        }
        resp.status = falcon.HTTP_200


def _grant_to_dict(g: ExpiringGrant) -> dict:
    return {
        "id": str(g.id),
        "type": g.kind,
        "person_id": g.person_id,
        "description": g.description,
        "expires_at": g.expires_at.isoformat(),
        "expires_in_days": g.expires_in_days,
        "urgency": g.urgency,
    }


class ExpiringGrantsResource:
    """GET /v1/permissions/expiring - overrides and group assignments expiring soon."""

    def __init__(
        self,
        list_expiring: ListExpiringGrantsUseCase,
        permission_checker: CheckPermissionUseCase,
        default_days: int = 7,
    ) -> None:
        self._list_expiring = list_expiring
        self.permission_checker = permission_checker
        self._default_days = default_days

    @falcon.before(require_permission(EXPIRY_REPORT_ACTION))
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        days = req.get_param_as_int(
            "days", max_value=MAX_LOOKAHEAD_DAYS, default=self._default_days
        )
        person_id = req.get_param("person_id")
        try:
            report = await self._list_expiring.execute(days=days, person_id=person_id)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        summary = report.summary
        resp.media = {
            "items": [_grant_to_dict(g) for g in report.items],
            "summary": {
                "total": summary.total,
                "critical": summary.critical,
                "warning": summary.warning,
                "notice": summary.notice,
            },
            "by_urgency": {
                urgency: [_grant_to_dict(g) for g in grants]
                for urgency, grants in report.by_urgency().items()
            },
        }
        resp.status = falcon.HTTP_200

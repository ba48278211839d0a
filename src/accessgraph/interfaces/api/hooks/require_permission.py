"""Route guards - falcon ``before`` hooks backed by the permission engine."""

from collections.abc import Callable

import falcon
import falcon.asgi

from accessgraph.application.dto.permission_dto import Decision, PermissionContext
from accessgraph.application.use_cases.permission.check_many import CheckManyPermissionsUseCase
from accessgraph.interfaces.api.context import authenticated_user, permission_context


class PermissionDeniedError(falcon.HTTPForbidden):
    """403 carrying the evaluated action and scope, never the resolution trace."""

    def __init__(
        self,
        action: str | None,
        decision: Decision,
        required_actions: list[str] | None = None,
        required_any_of: list[str] | None = None,
    ) -> None:
        super().__init__(title="Permission denied", code="PERMISSION_DENIED")
        self.action = action
        self.scope = decision.scope
        self.required_actions = required_actions
        self.required_any_of = required_any_of

    def to_dict(self, obj_type=dict):
        obj = super().to_dict(obj_type)
        obj["error"] = "Permission denied"
        obj["action"] = self.action
        obj["scope"] = self.scope.value if self.scope else None
        if self.required_actions is not None:
            obj["required_actions"] = self.required_actions
        if self.required_any_of is not None:
            obj["required_any_of"] = self.required_any_of
        return obj


ContextBuilder = Callable[[falcon.asgi.Request, object, dict], PermissionContext]


def _context(req: falcon.asgi.Request, params: dict, context_from: ContextBuilder | None):
    user = authenticated_user(req)
    return context_from(req, user, params) if context_from else permission_context(user)


def require_permission(action: str, context_from: ContextBuilder | None = None):
    """Hook that denies the request unless ``action`` is allowed.

    The resource must expose ``permission_checker``. The granted decision is
    stored on ``req.context.permission``.
    """

    async def hook(req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, params) -> None:
        ctx = _context(req, params, context_from)
        decision = await resource.permission_checker.execute(action, ctx)
        if not decision.allowed:
            raise PermissionDeniedError(action, decision)
        req.context.permission = decision

    return hook


def require_all_permissions(actions: list[str], context_from: ContextBuilder | None = None):
    """Hook that denies the request unless every one of ``actions`` is allowed.

    The broadest granted decision is stored on ``req.context.permission``.
    """

    async def hook(req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, params) -> None:
        ctx = _context(req, params, context_from)
        check_many = CheckManyPermissionsUseCase(resource.permission_checker)
        decision = await check_many.all_required(actions, ctx)
        if not decision.allowed:
            raise PermissionDeniedError(
                decision.action_code, decision, required_actions=list(actions)
            )
        req.context.permission = decision

    return hook


def require_any_permission(actions: list[str], context_from: ContextBuilder | None = None):
    """Hook that denies the request unless at least one of ``actions`` is allowed."""

    async def hook(req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, params) -> None:
        ctx = _context(req, params, context_from)
        check_many = CheckManyPermissionsUseCase(resource.permission_checker)
        decision = await check_many.any_allowed(actions, ctx)
        if not decision.allowed:
            raise PermissionDeniedError(None, decision, required_any_of=list(actions))
        req.context.permission = decision

    return hook


class ProtectShortcuts:
    """Guards for the common ``<module>.<verb>`` action codes."""

    def create(self, module: str):
        return require_permission(f"{module}.create")

    def read(self, module: str):
        return require_permission(f"{module}.read")

    def update(self, module: str):
        return require_permission(f"{module}.update")

    def delete(self, module: str):
        return require_permission(f"{module}.delete")

    def approve(self, module: str):
        return require_permission(f"{module}.approve")

    def manage(self, module: str):
        return require_permission(f"{module}.manage")


protect = ProtectShortcuts()

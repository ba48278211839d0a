"""Batch permission checks over several action codes."""

from accessgraph.application.dto.permission_dto import Decision, PermissionContext
from accessgraph.application.ports import PermissionChecker
from accessgraph.domain.value_objects import scope_rank


class CheckManyPermissionsUseCase:
    """All-required and any-allowed checks. Codes are evaluated in order."""

    def __init__(self, permission_checker: PermissionChecker) -> None:
        self._permission_checker = permission_checker

    async def all_required(self, action_codes: list[str], ctx: PermissionContext) -> Decision:
        """Deny on the first failing code; otherwise the broadest-scope decision."""
        if not action_codes:
            return Decision.deny()

        best: Decision | None = None
        for code in action_codes:
            decision = await self._permission_checker.execute(code, ctx)
            if not decision.allowed:
                return decision
            if best is None or scope_rank(decision.scope) > scope_rank(best.scope):
                best = decision
        return best

    async def any_allowed(self, action_codes: list[str], ctx: PermissionContext) -> Decision:
        """First allowing decision; deny only when every code is denied."""
        for code in action_codes:
            decision = await self._permission_checker.execute(code, ctx)
            if decision.allowed:
                return decision
        return Decision.deny()

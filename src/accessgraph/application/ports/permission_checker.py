"""Permission checker port - what route guards depend on."""

from typing import Protocol

from accessgraph.application.dto.permission_dto import Decision, PermissionContext


class PermissionChecker(Protocol):
    """Port for deciding whether a person may perform an action."""

    async def execute(self, action_code: str, ctx: PermissionContext) -> Decision: ...

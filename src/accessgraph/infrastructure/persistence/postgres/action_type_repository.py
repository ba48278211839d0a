"""PostgreSQL action type repository implementation."""

from psycopg import AsyncConnection

from accessgraph.domain.entities import ActionType
from accessgraph.domain.value_objects import RiskLevel

_COLUMNS = (
    "id, code, name, category, subcategory, risk_level, requires_approval, is_system, is_active"
)


def _row_to_action_type(r: tuple) -> ActionType:
    return ActionType(
        id=r[0],
        code=r[1],
        name=r[2],
        category=r[3],
        subcategory=r[4],
        risk_level=RiskLevel(r[5]),
        requires_approval=r[6],
        is_system=r[7],
        is_active=r[8],
    )


class PostgresActionTypeRepository:
    """Action type repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_all(self) -> list[ActionType]:
        """List all action types, active or retired."""
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM action_type ORDER BY code")
        rows = await cur.fetchall()
        return [_row_to_action_type(r) for r in rows]

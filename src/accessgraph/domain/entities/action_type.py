"""Action type entity - a namespaced permission code."""

from dataclasses import dataclass
from uuid import UUID

from accessgraph.domain.value_objects import RiskLevel


@dataclass(frozen=True)
class ActionType:
    """Action type - e.g. ``wiki.create`` with category and risk metadata."""

    id: UUID
    code: str
    name: str
    category: str
    risk_level: RiskLevel = RiskLevel.LOW
    subcategory: str | None = None
    requires_approval: bool = False
    is_system: bool = False
    is_active: bool = True

    @property
    def is_critical(self) -> bool:
        return self.risk_level == RiskLevel.CRITICAL

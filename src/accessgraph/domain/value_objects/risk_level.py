"""Risk level of an action type."""

from enum import StrEnum


class RiskLevel(StrEnum):
    """How dangerous an action is. Critical actions are never granted implicitly."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

"""Permission check DTOs."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Literal
from uuid import UUID

from accessgraph.domain.value_objects import ResolutionSource, RiskLevel, Scope


@dataclass(frozen=True)
class PermissionContext:
    """Who is asking, and optionally about which resource."""

    person_id: str
    org_id: str
    team_id: UUID | None = None
    resource_owner_id: str | None = None
    resource_team_id: UUID | None = None


@dataclass(frozen=True)
class Decision:
    """Outcome of a permission check."""

    allowed: bool
    scope: Scope | None
    source: ResolutionSource
    position_id: UUID | None = None
    team_id: UUID | None = None
    team_name: str | None = None
    can_delegate: bool | None = None
    action_code: str | None = None

    @classmethod
    def deny(cls, source: ResolutionSource = ResolutionSource.NONE) -> "Decision":
        return cls(allowed=False, scope=None, source=source)

    def for_action(self, action_code: str) -> "Decision":
        """Copy of the decision tagged with the evaluated action code."""
        return replace(self, action_code=action_code)

    def to_dict(self) -> dict[str, Any]:
        return {
            "allowed": self.allowed,
            "scope": self.scope.value if self.scope else None,
            "source": self.source.value,
            "position_id": str(self.position_id) if self.position_id else None,
            "team_id": str(self.team_id) if self.team_id else None,
            "team_name": self.team_name,
            "can_delegate": self.can_delegate,
            "action": self.action_code,
        }


@dataclass(frozen=True)
class PermissionMatrixEntry:
    """One row of the permission matrix."""

    code: str
    name: str
    category: str
    allowed: bool
    scope: Scope | None
    source: ResolutionSource


@dataclass(frozen=True)
class PermissionSummary:
    """Aggregate counts of the permission matrix."""

    total: int
    allowed: int
    denied: int


@dataclass
class PermissionMatrix:
    """All active actions evaluated for one person (display only)."""

    actions: list[PermissionMatrixEntry] = field(default_factory=list)

    @property
    def summary(self) -> PermissionSummary:
        allowed = sum(1 for a in self.actions if a.allowed)
        return PermissionSummary(
            total=len(self.actions),
            allowed=allowed,
            denied=len(self.actions) - allowed,
        )


@dataclass(frozen=True)
class DelegablePermission:
    """Position grant the holder may pass on to someone else."""

    position_id: UUID
    position_name: str | None
    action_type_id: UUID
    action_code: str
    action_name: str
    category: str
    risk_level: RiskLevel
    scope: Scope


Urgency = Literal["critical", "warning", "notice"]


@dataclass(frozen=True)
class ExpiringGrant:
    """Override or group assignment that runs out soon."""

    id: UUID
    kind: Literal["override", "group"]
    person_id: str
    description: str
    expires_at: datetime
    expires_in_days: int
    urgency: Urgency


@dataclass(frozen=True)
class ExpiringGrantsSummary:
    """Counts of expiring grants per urgency."""

    total: int
    critical: int
    warning: int
    notice: int


@dataclass
class ExpiringGrantsReport:
    """Expiring grants ordered by expiry, with per-urgency views."""

    items: list[ExpiringGrant] = field(default_factory=list)

    def by_urgency(self) -> dict[str, list[ExpiringGrant]]:
        groups: dict[str, list[ExpiringGrant]] = {"critical": [], "warning": [], "notice": []}
        for grant in self.items:
            groups[grant.urgency].append(grant)
        return groups

    @property
    def summary(self) -> ExpiringGrantsSummary:
        groups = self.by_urgency()
        return ExpiringGrantsSummary(
            total=len(self.items),
            critical=len(groups["critical"]),
            warning=len(groups["warning"]),
            notice=len(groups["notice"]),
        )


@dataclass(frozen=True)
class ActiveDelegation:
    """Granted override the person handed to someone else, still in force."""

    id: UUID
    person_id: str
    action_type_id: UUID
    action_code: str | None
    scope: Scope | None
    expires_at: datetime | None


@dataclass
class DelegationOverview:
    """What a person may delegate and what they have already delegated."""

    delegable: list[DelegablePermission] = field(default_factory=list)
    active_delegations: list[ActiveDelegation] = field(default_factory=list)

"""Pytest fixtures for AccessGraph tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from accessgraph.application.use_cases.permission.check_permission import (
    CheckPermissionUseCase,
)
from accessgraph.domain.entities import (
    ActionType,
    Membership,
    PermissionGroup,
    PermissionGroupAction,
    Position,
    PositionPermission,
    Team,
    UserGroupAssignment,
    UserPermissionOverride,
)
from accessgraph.domain.value_objects import MemberRole, RiskLevel, Scope
from accessgraph.infrastructure.registry.action_registry import CachedActionRegistry

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=UTC)


# --- Fake repositories ---


class FakeActionTypeRepository:
    """In-memory action type repository."""

    def __init__(self) -> None:
        self._by_code: dict[str, ActionType] = {}
        self.list_calls = 0

    async def list_all(self) -> list[ActionType]:
        self.list_calls += 1
        return sorted(self._by_code.values(), key=lambda a: a.code)

    def add(self, action: ActionType) -> ActionType:
        self._by_code[action.code] = action
        return action


class FakeTeamRepository:
    """In-memory team repository. Counts lookups for hierarchy tests."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Team] = {}
        self._positions: dict[UUID, Position] = {}
        self.lookups = 0

    async def get_by_id(self, team_id: UUID) -> Team | None:
        self.lookups += 1
        return self._by_id.get(team_id)

    async def list_positions(self, position_ids: list[UUID]) -> list[Position]:
        return [self._positions[p] for p in position_ids if p in self._positions]

    def add(self, team: Team) -> Team:
        self._by_id[team.id] = team
        return team

    def add_position(self, position: Position) -> Position:
        self._positions[position.id] = position
        return position


class FakeMembershipRepository:
    """In-memory membership repository, joined with teams on read."""

    def __init__(self, teams: FakeTeamRepository) -> None:
        self._store: list[Membership] = []
        self._teams = teams

    async def list_active_for_person(self, person_id: str) -> list[Membership]:
        result = []
        for m in self._store:
            if m.person_id != person_id or not m.is_active:
                continue
            team = self._teams._by_id.get(m.team_id)
            result.append(
                Membership(
                    id=m.id,
                    person_id=m.person_id,
                    team_id=m.team_id,
                    member_role=m.member_role,
                    position_id=m.position_id,
                    is_active=m.is_active,
                    team_name=team.name if team else None,
                    team_type=team.team_type if team else None,
                    parent_team_id=team.parent_team_id if team else None,
                )
            )
        return result

    def add(self, membership: Membership) -> Membership:
        self._store.append(membership)
        return membership


class FakePositionPermissionRepository:
    """In-memory position permission repository."""

    def __init__(self) -> None:
        self._store: list[PositionPermission] = []
        self.calls: list[tuple[list[UUID], UUID]] = []

    async def list_for_positions(
        self, position_ids: list[UUID], action_type_id: UUID
    ) -> list[PositionPermission]:
        self.calls.append((list(position_ids), action_type_id))
        return [
            p
            for p in self._store
            if p.position_id in position_ids
            and p.action_type_id == action_type_id
            and p.is_active
        ]

    async def list_delegable(self, position_ids: list[UUID]) -> list[PositionPermission]:
        return [
            p
            for p in self._store
            if p.position_id in position_ids and p.can_delegate and p.is_active
        ]

    def add(self, permission: PositionPermission) -> PositionPermission:
        self._store.append(permission)
        return permission


class FakeOverrideRepository:
    """In-memory override repository. Latest added wins."""

    def __init__(self) -> None:
        self._store: list[UserPermissionOverride] = []

    async def get_unrevoked(
        self, person_id: str, action_type_id: UUID
    ) -> UserPermissionOverride | None:
        for o in reversed(self._store):
            if (
                o.person_id == person_id
                and o.action_type_id == action_type_id
                and o.revoked_at is None
            ):
                return o
        return None

    async def list_expiring_grants(
        self, start: datetime, end: datetime, person_id: str | None = None
    ) -> list[UserPermissionOverride]:
        return [
            o
            for o in self._store
            if o.is_granted
            and o.revoked_at is None
            and o.expires_at is not None
            and start <= o.expires_at < end
            and (person_id is None or o.person_id == person_id)
        ]

    async def list_granted_by(self, granter_id: str) -> list[UserPermissionOverride]:
        return [
            o
            for o in reversed(self._store)
            if o.granted_by == granter_id and o.is_granted and o.revoked_at is None
        ]

    def add(self, override: UserPermissionOverride) -> UserPermissionOverride:
        self._store.append(override)
        return override


class FakeGroupRepository:
    """In-memory permission group repository."""

    def __init__(self) -> None:
        self._groups: dict[UUID, PermissionGroup] = {}
        self._actions: list[PermissionGroupAction] = []
        self._assignments: list[UserGroupAssignment] = []

    async def list_assignments(self, person_id: str) -> list[UserGroupAssignment]:
        return [a for a in self._assignments if a.person_id == person_id]

    async def list_group_actions(
        self, group_ids: list[UUID], action_type_id: UUID
    ) -> list[PermissionGroupAction]:
        return [
            a
            for a in self._actions
            if a.group_id in group_ids and a.action_type_id == action_type_id
        ]

    async def list_by_ids(self, group_ids: list[UUID]) -> list[PermissionGroup]:
        return [self._groups[g] for g in group_ids if g in self._groups]

    async def list_expiring_assignments(
        self, start: datetime, end: datetime, person_id: str | None = None
    ) -> list[UserGroupAssignment]:
        return [
            a
            for a in self._assignments
            if a.expires_at is not None
            and start <= a.expires_at < end
            and (person_id is None or a.person_id == person_id)
        ]

    def add_group(self, group: PermissionGroup) -> PermissionGroup:
        self._groups[group.id] = group
        return group

    def add_action(self, action: PermissionGroupAction) -> PermissionGroupAction:
        self._actions.append(action)
        return action

    def add_assignment(self, assignment: UserGroupAssignment) -> UserGroupAssignment:
        self._assignments.append(assignment)
        return assignment


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.action_types = FakeActionTypeRepository()
        self.teams = FakeTeamRepository()
        self.memberships = FakeMembershipRepository(self.teams)
        self.position_permissions = FakePositionPermissionRepository()
        self.overrides = FakeOverrideRepository()
        self.groups = FakeGroupRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def factory_for(uow: FakeUnitOfWork):
    """UoW factory yielding the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Seeding helpers ---


def add_action(
    uow: FakeUnitOfWork,
    code: str,
    risk_level: RiskLevel = RiskLevel.LOW,
    category: str | None = None,
    is_active: bool = True,
) -> ActionType:
    return uow.action_types.add(
        ActionType(
            id=uuid4(),
            code=code,
            name=code.replace(".", " ").title(),
            category=category or code.split(".")[0],
            risk_level=risk_level,
            is_active=is_active,
        )
    )


def add_team(uow: FakeUnitOfWork, name: str, parent: Team | None = None) -> Team:
    return uow.teams.add(
        Team(id=uuid4(), name=name, team_type="team", parent_team_id=parent.id if parent else None)
    )


def add_membership(
    uow: FakeUnitOfWork,
    person_id: str,
    team: Team,
    position_id: UUID | None = None,
    role: MemberRole = MemberRole.MEMBER,
    is_active: bool = True,
) -> Membership:
    return uow.memberships.add(
        Membership(
            id=uuid4(),
            person_id=person_id,
            team_id=team.id,
            member_role=role,
            position_id=position_id,
            is_active=is_active,
        )
    )


def grant_position(
    uow: FakeUnitOfWork,
    position_id: UUID,
    action: ActionType,
    scope: Scope,
    can_delegate: bool = False,
    is_active: bool = True,
) -> PositionPermission:
    return uow.position_permissions.add(
        PositionPermission(
            id=uuid4(),
            position_id=position_id,
            action_type_id=action.id,
            scope=scope,
            can_delegate=can_delegate,
            is_active=is_active,
        )
    )


def add_override(
    uow: FakeUnitOfWork,
    person_id: str,
    action: ActionType,
    is_granted: bool,
    scope: Scope | None = None,
    expires_at: datetime | None = None,
    revoked_at: datetime | None = None,
    granted_by: str | None = None,
) -> UserPermissionOverride:
    return uow.overrides.add(
        UserPermissionOverride(
            id=uuid4(),
            person_id=person_id,
            action_type_id=action.id,
            is_granted=is_granted,
            scope=scope,
            expires_at=expires_at,
            revoked_at=revoked_at,
            granted_by=granted_by,
        )
    )


def grant_group(
    uow: FakeUnitOfWork,
    person_id: str,
    action: ActionType,
    scope: Scope | None = Scope.ORGANIZATION,
    expires_at: datetime | None = None,
    name: str = "Auditors",
) -> PermissionGroup:
    group = uow.groups.add_group(PermissionGroup(id=uuid4(), name=name))
    uow.groups.add_action(
        PermissionGroupAction(group_id=group.id, action_type_id=action.id, scope=scope)
    )
    uow.groups.add_assignment(
        UserGroupAssignment(id=uuid4(), person_id=person_id, group_id=group.id, expires_at=expires_at)
    )
    return group


# --- Fixtures ---


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return factory_for(uow)


@pytest.fixture
def action_registry(uow_factory) -> CachedActionRegistry:
    """Registry over the fake action type repository."""
    return CachedActionRegistry(uow_factory, ttl_seconds=300)


@pytest.fixture
def check_permission(uow_factory, action_registry) -> CheckPermissionUseCase:
    """Engine entry point with a frozen clock."""
    return CheckPermissionUseCase(
        unit_of_work_factory=uow_factory,
        action_registry=action_registry,
        clock=lambda: NOW,
    )

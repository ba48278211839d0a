"""Unit tests for the delegable-permissions and expiring-grants reports."""

from datetime import timedelta
from uuid import uuid4

import pytest

from accessgraph.application.use_cases.permission.list_delegable import (
    ListDelegablePermissionsUseCase,
)
from accessgraph.application.use_cases.permission.list_expiring_grants import (
    MAX_LOOKAHEAD_DAYS,
    ListExpiringGrantsUseCase,
    urgency_for,
)
from accessgraph.domain.entities import Position
from accessgraph.domain.exceptions import ValidationError
from accessgraph.domain.value_objects import RiskLevel, Scope

from tests.conftest import (
    NOW,
    add_action,
    add_membership,
    add_override,
    add_team,
    grant_group,
    grant_position,
)


# --- ListDelegablePermissionsUseCase ---


@pytest.mark.asyncio
async def test_delegable_lists_only_flagged_grants(uow, uow_factory, action_registry) -> None:
    edit = add_action(uow, "wiki.edit")
    delete = add_action(uow, "wiki.delete", risk_level=RiskLevel.HIGH)
    export = add_action(uow, "crm.export")
    position = uow.teams.add_position(Position(id=uuid4(), name="Editor", level=2)).id
    add_membership(uow, "p1", add_team(uow, "Docs"), position)
    grant_position(uow, position, edit, Scope.TEAM, can_delegate=True)
    grant_position(uow, position, delete, Scope.TEAM)
    grant_position(uow, position, export, Scope.ORGANIZATION, can_delegate=True)

    overview = await ListDelegablePermissionsUseCase(uow_factory, action_registry).execute("p1")

    items = overview.delegable
    assert [i.action_code for i in items] == ["crm.export", "wiki.edit"]
    assert items[0].scope == Scope.ORGANIZATION
    assert items[0].position_id == position
    assert items[0].position_name == "Editor"


@pytest.mark.asyncio
async def test_delegable_skips_inactive_actions_and_memberships(
    uow, uow_factory, action_registry
) -> None:
    legacy = add_action(uow, "wiki.legacy", is_active=False)
    edit = add_action(uow, "wiki.edit")
    active_pos, former_pos = uuid4(), uuid4()
    add_membership(uow, "p1", add_team(uow, "Docs"), active_pos)
    add_membership(uow, "p1", add_team(uow, "Old"), former_pos, is_active=False)
    grant_position(uow, active_pos, legacy, Scope.TEAM, can_delegate=True)
    grant_position(uow, former_pos, edit, Scope.TEAM, can_delegate=True)

    overview = await ListDelegablePermissionsUseCase(uow_factory, action_registry).execute("p1")

    assert overview.delegable == []


@pytest.mark.asyncio
async def test_delegable_empty_without_positions(uow, uow_factory, action_registry) -> None:
    add_membership(uow, "p1", add_team(uow, "Docs"))

    overview = await ListDelegablePermissionsUseCase(uow_factory, action_registry).execute("p1")

    assert overview.delegable == []
    assert overview.active_delegations == []


@pytest.mark.asyncio
async def test_delegable_lists_active_delegations_made_by_person(
    uow, uow_factory, action_registry
) -> None:
    edit = add_action(uow, "wiki.edit")
    delete = add_action(uow, "wiki.delete")
    live = add_override(
        uow,
        "p2",
        edit,
        is_granted=True,
        scope=Scope.TEAM,
        expires_at=NOW + timedelta(days=2),
        granted_by="p1",
    )
    add_override(uow, "p3", edit, is_granted=True, granted_by="p1", expires_at=NOW)
    add_override(
        uow, "p4", edit, is_granted=True, granted_by="p1", revoked_at=NOW - timedelta(days=1)
    )
    add_override(uow, "p5", delete, is_granted=False, granted_by="p1")
    add_override(uow, "p6", delete, is_granted=True, granted_by="someone-else")
    use_case = ListDelegablePermissionsUseCase(uow_factory, action_registry, clock=lambda: NOW)

    overview = await use_case.execute("p1")

    assert overview.delegable == []
    assert len(overview.active_delegations) == 1
    delegation = overview.active_delegations[0]
    assert delegation.id == live.id
    assert delegation.person_id == "p2"
    assert delegation.action_code == "wiki.edit"
    assert delegation.scope == Scope.TEAM
    assert delegation.expires_at == NOW + timedelta(days=2)


# --- ListExpiringGrantsUseCase ---


@pytest.mark.parametrize(
    ("days", "expected"),
    [(0, "critical"), (1, "critical"), (2, "warning"), (3, "warning"), (4, "notice"), (30, "notice")],
)
def test_urgency_thresholds(days: int, expected: str) -> None:
    assert urgency_for(days) == expected


@pytest.fixture
def list_expiring(uow_factory, action_registry) -> ListExpiringGrantsUseCase:
    return ListExpiringGrantsUseCase(uow_factory, action_registry, clock=lambda: NOW)


@pytest.mark.asyncio
async def test_expiring_grants_sorted_with_urgency(uow, list_expiring) -> None:
    action = add_action(uow, "wiki.edit")
    add_override(
        uow, "p1", action, is_granted=True, scope=Scope.TEAM, expires_at=NOW + timedelta(days=5)
    )
    grant_group(uow, "p2", action, expires_at=NOW + timedelta(hours=20), name="Auditors")
    add_override(
        uow, "p3", action, is_granted=True, expires_at=NOW + timedelta(days=2, hours=1)
    )

    report = await list_expiring.execute(days=7)

    assert [g.person_id for g in report.items] == ["p2", "p3", "p1"]
    group, soon, later = report.items
    assert group.kind == "group"
    assert group.description == 'Group "Auditors" membership'
    assert (group.expires_in_days, group.urgency) == (1, "critical")
    assert soon.description == 'Permission "Wiki Edit" (organization)'
    assert (soon.expires_in_days, soon.urgency) == (3, "warning")
    assert later.description == 'Permission "Wiki Edit" (team)'
    assert (later.expires_in_days, later.urgency) == (5, "notice")


@pytest.mark.asyncio
async def test_expiring_grants_ignore_revocations_past_and_distant(uow, list_expiring) -> None:
    action = add_action(uow, "wiki.edit")
    add_override(uow, "p1", action, is_granted=False, expires_at=NOW + timedelta(days=1))
    add_override(uow, "p1", action, is_granted=True, expires_at=NOW - timedelta(days=1))
    add_override(uow, "p1", action, is_granted=True, expires_at=NOW + timedelta(days=10))
    add_override(
        uow,
        "p1",
        action,
        is_granted=True,
        expires_at=NOW + timedelta(days=1),
        revoked_at=NOW - timedelta(hours=1),
    )
    grant_group(uow, "p1", action)

    report = await list_expiring.execute(days=7)

    assert report.items == []
    assert report.summary.total == 0


@pytest.mark.asyncio
async def test_expiring_grants_filter_by_person(uow, list_expiring) -> None:
    action = add_action(uow, "wiki.edit")
    add_override(uow, "p1", action, is_granted=True, expires_at=NOW + timedelta(days=1))
    add_override(uow, "p2", action, is_granted=True, expires_at=NOW + timedelta(days=1))

    report = await list_expiring.execute(days=7, person_id="p2")

    assert [g.person_id for g in report.items] == ["p2"]


@pytest.mark.asyncio
async def test_expiring_grants_reject_non_positive_window(list_expiring) -> None:
    with pytest.raises(ValidationError):
        await list_expiring.execute(days=0)


@pytest.mark.asyncio
async def test_expiring_grants_reject_window_beyond_a_year(list_expiring) -> None:
    with pytest.raises(ValidationError):
        await list_expiring.execute(days=MAX_LOOKAHEAD_DAYS + 1)


@pytest.mark.asyncio
async def test_expiring_grants_summary_by_urgency(uow, list_expiring) -> None:
    action = add_action(uow, "wiki.edit")
    for person, delta in [
        ("p1", timedelta(hours=3)),
        ("p2", timedelta(hours=23)),
        ("p3", timedelta(days=2, hours=12)),
        ("p4", timedelta(days=6)),
    ]:
        add_override(uow, person, action, is_granted=True, expires_at=NOW + delta)

    report = await list_expiring.execute(days=7)

    summary = report.summary
    assert (summary.total, summary.critical, summary.warning, summary.notice) == (4, 2, 1, 1)
    groups = report.by_urgency()
    assert [g.person_id for g in groups["critical"]] == ["p1", "p2"]
    assert [g.person_id for g in groups["warning"]] == ["p3"]
    assert [g.person_id for g in groups["notice"]] == ["p4"]

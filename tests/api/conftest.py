"""Fixtures for API tests."""

import pytest

from accessgraph.application.use_cases.permission.check_many import CheckManyPermissionsUseCase
from accessgraph.application.use_cases.permission.enumerate_permissions import (
    EnumeratePermissionsUseCase,
)
from accessgraph.application.use_cases.permission.list_delegable import (
    ListDelegablePermissionsUseCase,
)
from accessgraph.application.use_cases.permission.list_expiring_grants import (
    ListExpiringGrantsUseCase,
)
from accessgraph.interfaces.api.app import create_app
from accessgraph.interfaces.api.middleware.auth import RequestUser
from accessgraph.interfaces.api.resources.health import HealthResource
from accessgraph.interfaces.api.resources.permissions import (
    DelegablePermissionsResource,
    ExpiringGrantsResource,
    PermissionCheckResource,
    PermissionsResource,
)

from tests.conftest import NOW

TEST_PERSON = "test-person-1"
TEST_ORG = "test-org-1"


class AuthBypassMiddleware:
    """Middleware that sets context.user for testing.

    ``X-Person-Id`` and ``X-Org-Id`` override the default test user; ``X-Org-Id: none``
    leaves the user without an organization.
    """

    async def process_request(self, req, resp):
        org_id = req.get_header("X-Org-Id", default=TEST_ORG)
        req.context.user = RequestUser(
            person_id=req.get_header("X-Person-Id", default=TEST_PERSON),
            org_id=None if org_id == "none" else org_id,
        )


@pytest.fixture
def app(uow_factory, action_registry, check_permission):
    """Falcon ASGI app wired to the in-memory unit of work."""
    check_many = CheckManyPermissionsUseCase(permission_checker=check_permission)
    enumerate_permissions = EnumeratePermissionsUseCase(
        permission_checker=check_permission,
        action_registry=action_registry,
    )
    list_delegable = ListDelegablePermissionsUseCase(
        unit_of_work_factory=uow_factory,
        action_registry=action_registry,
        clock=lambda: NOW,
    )
    list_expiring = ListExpiringGrantsUseCase(
        unit_of_work_factory=uow_factory,
        action_registry=action_registry,
        clock=lambda: NOW,
    )
    return create_app(
        check_resource=PermissionCheckResource(check_permission, check_many),
        permissions_resource=PermissionsResource(enumerate_permissions),
        delegable_resource=DelegablePermissionsResource(list_delegable),
        expiring_resource=ExpiringGrantsResource(list_expiring, check_permission),
        health_resource=HealthResource(),
        middleware=[AuthBypassMiddleware()],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)

"""Application entry point and composition root."""

import logging
from functools import partial

from accessgraph import __version__
from accessgraph.application.use_cases.permission.check_many import CheckManyPermissionsUseCase
from accessgraph.application.use_cases.permission.check_permission import CheckPermissionUseCase
from accessgraph.application.use_cases.permission.enumerate_permissions import (
    EnumeratePermissionsUseCase,
)
from accessgraph.application.use_cases.permission.list_delegable import (
    ListDelegablePermissionsUseCase,
)
from accessgraph.application.use_cases.permission.list_expiring_grants import (
    ListExpiringGrantsUseCase,
)
from accessgraph.config import get_settings
from accessgraph.infrastructure.auth.keycloak_provider import KeycloakProvider
from accessgraph.infrastructure.persistence.postgres.connection import create_pool, ping
from accessgraph.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from accessgraph.infrastructure.registry.action_registry import CachedActionRegistry
from accessgraph.interfaces.api.app import create_app
from accessgraph.interfaces.api.middleware.auth import AuthMiddleware
from accessgraph.interfaces.api.middleware.lifespan import LifespanMiddleware
from accessgraph.interfaces.api.resources.health import HealthResource
from accessgraph.interfaces.api.resources.permissions import (
    DelegablePermissionsResource,
    ExpiringGrantsResource,
    PermissionCheckResource,
    PermissionsResource,
)


def configure_logging(level: str) -> None:
    """Root logging setup for the service."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """CLI entry point."""
    print(f"AccessGraph v{__version__}")


def create_accessgraph_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level)

    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
            org_claim=settings.keycloak_org_claim,
        )
        if settings.keycloak_client_secret
        else None
    )

    action_registry = CachedActionRegistry(
        uow_factory, ttl_seconds=settings.action_registry_ttl_seconds
    )
    check_permission = CheckPermissionUseCase(
        unit_of_work_factory=uow_factory,
        action_registry=action_registry,
    )
    check_many = CheckManyPermissionsUseCase(permission_checker=check_permission)
    enumerate_permissions = EnumeratePermissionsUseCase(
        permission_checker=check_permission,
        action_registry=action_registry,
        concurrency=settings.check_concurrency,
    )
    list_delegable = ListDelegablePermissionsUseCase(
        unit_of_work_factory=uow_factory,
        action_registry=action_registry,
    )
    list_expiring = ListExpiringGrantsUseCase(
        unit_of_work_factory=uow_factory,
        action_registry=action_registry,
    )

    return create_app(
        check_resource=PermissionCheckResource(check_permission, check_many),
        permissions_resource=PermissionsResource(enumerate_permissions),
        delegable_resource=DelegablePermissionsResource(list_delegable),
        expiring_resource=ExpiringGrantsResource(
            list_expiring,
            check_permission,
            default_days=settings.expiry_lookahead_days,
        ),
        health_resource=HealthResource(readiness_check=partial(ping, pool)),
        middleware=[
            LifespanMiddleware(pool, action_registry),
            AuthMiddleware(keycloak),
        ],
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "accessgraph.main:create_accessgraph_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower(),
    )

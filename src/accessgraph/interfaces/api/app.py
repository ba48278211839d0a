"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from accessgraph.domain.exceptions import StoreUnavailable
from accessgraph.interfaces.api.errors import handle_store_unavailable, handle_unexpected
from accessgraph.interfaces.api.resources.health import HealthResource
from accessgraph.interfaces.api.resources.permissions import (
    DelegablePermissionsResource,
    ExpiringGrantsResource,
    PermissionCheckResource,
    PermissionsResource,
)


def create_app(
    check_resource: PermissionCheckResource,
    permissions_resource: PermissionsResource,
    delegable_resource: DelegablePermissionsResource,
    expiring_resource: ExpiringGrantsResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes and error handlers."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected)
    app.add_error_handler(StoreUnavailable, handle_store_unavailable)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/permissions", permissions_resource)
    app.add_route("/v1/permissions/check", check_resource)
    app.add_route("/v1/permissions/delegable", delegable_resource)
    app.add_route("/v1/permissions/expiring", expiring_resource)
    return app

"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from bintrack.interfaces.api.errors import register_error_handlers
from bintrack.interfaces.api.resources.health import HealthResource
from bintrack.interfaces.api.resources.objects import AccessResource, ObjectPermissionsResource
from bintrack.interfaces.api.resources.permissions import PermissionsResource


def create_app(
    permissions_resource: PermissionsResource,
    object_permissions_resource: ObjectPermissionsResource,
    access_resource: AccessResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes and error handlers."""
    app = falcon.asgi.App(middleware=middleware or [])
    register_error_handlers(app)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/permissions", permissions_resource)
    app.add_route(
        "/v1/objects/{object_type}/{object_id}/permissions",
        object_permissions_resource,
    )
    app.add_route(
        "/v1/objects/{object_type}/{object_id}/permissions/defaults",
        object_permissions_resource,
        suffix="defaults",
    )
    app.add_route(
        "/v1/objects/{object_type}/{object_id}/access/{action}",
        access_resource,
    )
    return app

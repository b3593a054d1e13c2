"""Application entry point and composition root."""

import logging

from bintrack import __version__
from bintrack.application.use_cases.permission.create_default_permissions import (
    CreateDefaultPermissionsUseCase,
)
from bintrack.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from bintrack.application.use_cases.permission.list_permissions import ListPermissionsUseCase
from bintrack.application.use_cases.permission.replace_permissions import (
    ReplacePermissionsUseCase,
)
from bintrack.application.use_cases.permission.revoke_permission import RevokePermissionUseCase
from bintrack.config import get_settings
from bintrack.infrastructure.auth.keycloak_provider import KeycloakProvider
from bintrack.infrastructure.permission.permission_checker import BintrackPermissionChecker
from bintrack.infrastructure.persistence.postgres.connection import create_pool
from bintrack.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from bintrack.interfaces.api.app import create_app
from bintrack.interfaces.api.middleware.auth import AuthMiddleware
from bintrack.interfaces.api.middleware.cors import CORSMiddleware
from bintrack.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from bintrack.interfaces.api.resources.health import HealthResource
from bintrack.interfaces.api.resources.objects import AccessResource, ObjectPermissionsResource
from bintrack.interfaces.api.resources.permissions import PermissionsResource
from bintrack.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point."""
    print(f"Bintrack v{__version__}")


def create_bintrack_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level, debug=settings.debug)

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
        )
        if settings.keycloak_client_secret
        else None
    )
    trust_user_header = keycloak is None and settings.environment == "development"
    if trust_user_header:
        logger.warning("Keycloak not configured; trusting X-User-Id header (development only)")

    permission_checker = BintrackPermissionChecker(uow_factory)
    grant_permission = GrantPermissionUseCase(unit_of_work_factory=uow_factory)
    revoke_permission = RevokePermissionUseCase(unit_of_work_factory=uow_factory)
    list_permissions = ListPermissionsUseCase(unit_of_work_factory=uow_factory)
    replace_permissions = ReplacePermissionsUseCase(
        unit_of_work_factory=uow_factory,
        grant_permission=grant_permission,
        revoke_permission=revoke_permission,
    )
    create_default_permissions = CreateDefaultPermissionsUseCase(
        unit_of_work_factory=uow_factory,
        grant_permission=grant_permission,
    )

    permissions_resource = PermissionsResource(
        uow_factory,
        permission_checker,
        list_permissions,
        grant_permission,
        revoke_permission,
    )
    object_permissions_resource = ObjectPermissionsResource(
        uow_factory,
        permission_checker,
        list_permissions,
        grant_permission,
        replace_permissions,
        create_default_permissions,
    )
    access_resource = AccessResource(permission_checker)
    health_resource = HealthResource(pool)

    app = create_app(
        permissions_resource=permissions_resource,
        object_permissions_resource=object_permissions_resource,
        access_resource=access_resource,
        health_resource=health_resource,
        middleware=[
            CORSMiddleware(settings.cors_origin_list),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak, trust_user_header=trust_user_header),
        ],
    )
    logger.info("Bintrack v%s configured (%s)", __version__, settings.environment)
    return app


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_bintrack_app(), host=settings.host, port=settings.port)

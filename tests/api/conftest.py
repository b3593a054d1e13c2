"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from bintrack.application.use_cases.permission.create_default_permissions import (
    CreateDefaultPermissionsUseCase,
)
from bintrack.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from bintrack.application.use_cases.permission.list_permissions import ListPermissionsUseCase
from bintrack.application.use_cases.permission.replace_permissions import (
    ReplacePermissionsUseCase,
)
from bintrack.application.use_cases.permission.revoke_permission import RevokePermissionUseCase
from bintrack.domain.value_objects import GlobalRole, ObjectType, OrgRole
from bintrack.infrastructure.permission.permission_checker import BintrackPermissionChecker
from bintrack.interfaces.api.app import create_app
from bintrack.interfaces.api.middleware.auth import RequestUser
from bintrack.interfaces.api.resources.health import HealthResource
from bintrack.interfaces.api.resources.objects import AccessResource, ObjectPermissionsResource
from bintrack.interfaces.api.resources.permissions import PermissionsResource

from tests.conftest import FakeUnitOfWork


class AuthBypassMiddleware:
    """Middleware that sets context.user from the X-Test-User header for testing."""

    async def process_request(self, req, resp):
        user_id = req.get_header("X-Test-User")
        req.context.user = RequestUser(user_id=user_id) if user_id else None


@pytest.fixture
def seeded(fake_uow: FakeUnitOfWork) -> FakeUnitOfWork:
    """Users, an organization and objects shared by all requests in a test.

    alice owns bin b1; item i1 belongs to acme, where bob is an ADMIN and
    carol a plain MEMBER; root is a global admin.
    """
    for user_id in ("alice", "bob", "carol", "dave"):
        fake_uow.users.add(user_id)
    fake_uow.users.add("root", GlobalRole.ADMIN)
    fake_uow.organizations.add("acme")
    fake_uow.memberships.add("acme", "bob", OrgRole.ADMIN)
    fake_uow.memberships.add("acme", "carol", OrgRole.MEMBER)
    fake_uow.objects.add(ObjectType.BIN, "b1", user_id="alice")
    fake_uow.objects.add(ObjectType.ITEM, "i1", organization_id="acme")
    return fake_uow


@pytest.fixture
def app(uow_factory, seeded):
    """Falcon ASGI app wired to the real checker over in-memory storage."""
    checker = BintrackPermissionChecker(unit_of_work_factory=uow_factory)
    list_permissions = ListPermissionsUseCase(unit_of_work_factory=uow_factory)
    grant_permission = GrantPermissionUseCase(unit_of_work_factory=uow_factory)
    revoke_permission = RevokePermissionUseCase(unit_of_work_factory=uow_factory)
    replace_permissions = ReplacePermissionsUseCase(
        unit_of_work_factory=uow_factory,
        grant_permission=grant_permission,
        revoke_permission=revoke_permission,
    )
    create_defaults = CreateDefaultPermissionsUseCase(
        unit_of_work_factory=uow_factory,
        grant_permission=grant_permission,
    )

    return create_app(
        permissions_resource=PermissionsResource(
            uow_factory, checker, list_permissions, grant_permission, revoke_permission
        ),
        object_permissions_resource=ObjectPermissionsResource(
            uow_factory,
            checker,
            list_permissions,
            grant_permission,
            replace_permissions,
            create_defaults,
        ),
        access_resource=AccessResource(checker),
        health_resource=HealthResource(),
        middleware=[AuthBypassMiddleware()],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)

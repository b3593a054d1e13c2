"""Per-object permission and access API resources."""

import falcon.asgi

from bintrack.application.dto.permission_dto import PermissionSpec
from bintrack.application.ports import PermissionChecker, UnitOfWorkFactory
from bintrack.application.use_cases.permission.create_default_permissions import (
    CreateDefaultPermissionsUseCase,
)
from bintrack.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from bintrack.application.use_cases.permission.list_permissions import ListPermissionsUseCase
from bintrack.application.use_cases.permission.replace_permissions import (
    ReplacePermissionsUseCase,
)
from bintrack.domain.exceptions import ObjectNotFound, PermissionDenied
from bintrack.domain.value_objects import ObjectType, PermissionAction, parse_enum
from bintrack.interfaces.api.middleware.auth import require_user
from bintrack.interfaces.api.resources.permissions import permission_to_dict


class ObjectPermissionsResource:
    """/v1/objects/{object_type}/{object_id}/permissions - manage all tuples on one object."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        permission_checker: PermissionChecker,
        list_permissions: ListPermissionsUseCase,
        grant_permission: GrantPermissionUseCase,
        replace_permissions: ReplacePermissionsUseCase,
        create_default_permissions: CreateDefaultPermissionsUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._list = list_permissions
        self._grant = grant_permission
        self._replace = replace_permissions
        self._defaults = create_default_permissions

    async def _authorize(
        self,
        req: falcon.asgi.Request,
        object_type: str,
        object_id: str,
        action: PermissionAction,
    ) -> str:
        """Return caller id; raise Unauthenticated or PermissionDenied otherwise."""
        user = require_user(req)
        allowed = await self._permission_checker.can_access(
            user.user_id, object_type, object_id, action
        )
        if not allowed:
            raise PermissionDenied(
                f"{action.value.capitalize()} access required on {object_type} {object_id}"
            )
        return user.user_id

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        object_type: str,
        object_id: str,
    ) -> None:
        """List permissions on object. Caller needs read."""
        await self._authorize(req, object_type, object_id, PermissionAction.READ)
        perms = await self._list.for_object(object_type, object_id)
        resp.media = {"items": [permission_to_dict(p) for p in perms]}
        resp.status = falcon.HTTP_200

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        object_type: str,
        object_id: str,
    ) -> None:
        """Grant a batch of subject/action pairs on object. Caller needs admin."""
        user_id = await self._authorize(req, object_type, object_id, PermissionAction.ADMIN)
        specs = PermissionSpec.list_from_body(await req.get_media())
        perms = await self._grant.execute_batch(object_type, object_id, specs, granted_by=user_id)
        resp.media = {"items": [permission_to_dict(p) for p in perms]}
        resp.status = falcon.HTTP_201

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        object_type: str,
        object_id: str,
    ) -> None:
        """Replace every permission on object. Caller needs admin."""
        user_id = await self._authorize(req, object_type, object_id, PermissionAction.ADMIN)
        specs = PermissionSpec.list_from_body(await req.get_media())
        perms = await self._replace.execute(object_type, object_id, specs, granted_by=user_id)
        resp.media = {"items": [permission_to_dict(p) for p in perms]}
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        object_type: str,
        object_id: str,
    ) -> None:
        """Revoke every permission on object. Caller needs admin."""
        await self._authorize(req, object_type, object_id, PermissionAction.ADMIN)
        revoked = await self._replace.clear(object_type, object_id)
        resp.media = {"revoked": revoked}
        resp.status = falcon.HTTP_200

    async def on_post_defaults(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        object_type: str,
        object_id: str,
    ) -> None:
        """Seed default permissions from the object's owner. Caller needs admin."""
        user_id = await self._authorize(req, object_type, object_id, PermissionAction.ADMIN)
        obj_type = parse_enum(ObjectType, object_type, "object_type")
        async with self._uow_factory() as uow:
            owned = await uow.objects.get(obj_type, object_id)
        if owned is None:
            raise ObjectNotFound(f"{obj_type.value.capitalize()} not found: {object_id}")

        perms = await self._defaults.execute(
            obj_type,
            object_id,
            owner_id=owned.user_id or user_id,
            organization_id=owned.organization_id,
        )
        resp.media = {"items": [permission_to_dict(p) for p in perms]}
        resp.status = falcon.HTTP_201


class AccessResource:
    """GET /v1/objects/{object_type}/{object_id}/access/{action} - check caller's access."""

    def __init__(self, permission_checker: PermissionChecker) -> None:
        self._permission_checker = permission_checker

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        object_type: str,
        object_id: str,
        action: str,
    ) -> None:
        user = require_user(req)
        obj_type = parse_enum(ObjectType, object_type, "object_type")
        act = parse_enum(PermissionAction, action, "action")
        allowed = await self._permission_checker.can_access(
            user.user_id, obj_type, object_id, act
        )
        resp.media = {
            "object_type": obj_type.value,
            "object_id": object_id,
            "action": act.value,
            "allowed": allowed,
        }
        resp.status = falcon.HTTP_200

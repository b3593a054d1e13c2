"""Permissions API resources."""

from collections.abc import Mapping

import falcon.asgi

from bintrack.application.dto.permission_dto import PermissionFilter, build_permission_key
from bintrack.application.ports import PermissionChecker, UnitOfWorkFactory
from bintrack.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from bintrack.application.use_cases.permission.list_permissions import ListPermissionsUseCase
from bintrack.application.use_cases.permission.revoke_permission import RevokePermissionUseCase
from bintrack.domain.entities import Permission, PermissionKey
from bintrack.domain.exceptions import PermissionDenied, ValidationError
from bintrack.domain.value_objects import PermissionAction, SubjectType
from bintrack.interfaces.api.middleware.auth import require_user


def permission_to_dict(p: Permission) -> dict:
    return {
        "id": str(p.id),
        "object_type": p.object_type.value,
        "object_id": p.object_id,
        "subject_type": p.subject_type.value,
        "subject_id": p.subject_id,
        "action": p.action.value,
        "granted_by": p.granted_by,
        "granted_at": p.granted_at.isoformat(),
    }


def _key_from(data: Mapping) -> PermissionKey:
    """Natural key from a body or query string, camelCase or snake_case."""

    def field(name: str, camel: str):
        return data.get(camel, data.get(name))

    return build_permission_key(
        field("object_type", "objectType"),
        field("object_id", "objectId"),
        field("subject_type", "subjectType"),
        field("subject_id", "subjectId"),
        data.get("action"),
    )


class PermissionsResource:
    """GET/POST/DELETE /v1/permissions - query, grant and revoke single tuples."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        permission_checker: PermissionChecker,
        list_permissions: ListPermissionsUseCase,
        grant_permission: GrantPermissionUseCase,
        revoke_permission: RevokePermissionUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._list = list_permissions
        self._grant = grant_permission
        self._revoke = revoke_permission

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List permissions matching query parameters.

        Listing one object's tuples needs READ on it; listing the caller's own
        user grants is always allowed; anything broader needs global admin.
        """
        user = require_user(req)
        permission_filter = PermissionFilter.from_params(req.params)
        if not await self._may_list(user.user_id, permission_filter):
            raise PermissionDenied("Permission denied")

        perms = await self._list.execute(permission_filter)
        resp.media = {"items": [permission_to_dict(p) for p in perms]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Grant permission. Caller must have admin on the object."""
        user = require_user(req)
        body = await req.get_media()
        if not isinstance(body, Mapping):
            raise ValidationError("Request body must be an object")
        key = _key_from(body)
        await self._require_admin(user.user_id, key)

        perm = await self._grant.execute(*key, granted_by=user.user_id)
        resp.media = permission_to_dict(perm)
        resp.status = falcon.HTTP_201

    async def on_delete(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Revoke permission identified by query parameters. Caller must have admin."""
        user = require_user(req)
        key = _key_from(req.params)
        await self._require_admin(user.user_id, key)

        await self._revoke.execute(*key)
        resp.status = falcon.HTTP_204

    async def _require_admin(self, user_id: str, key: PermissionKey) -> None:
        allowed = await self._permission_checker.can_access(
            user_id, key.object_type, key.object_id, PermissionAction.ADMIN
        )
        if not allowed:
            raise PermissionDenied(
                f"Admin access required on {key.object_type.value} {key.object_id}"
            )

    async def _may_list(self, user_id: str, permission_filter: PermissionFilter) -> bool:
        if permission_filter.object_type and permission_filter.object_id:
            return await self._permission_checker.can_access(
                user_id,
                permission_filter.object_type,
                permission_filter.object_id,
                PermissionAction.READ,
            )
        if (
            permission_filter.subject_type is SubjectType.USER
            and permission_filter.subject_id == user_id
        ):
            return True
        async with self._uow_factory() as uow:
            principal = await uow.users.get_by_id(user_id)
        return principal is not None and principal.is_admin

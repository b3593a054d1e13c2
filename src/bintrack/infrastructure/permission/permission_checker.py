"""Permission checker implementation - resolves context and runs the rule chain."""

import logging

from bintrack.application.ports import UnitOfWork, UnitOfWorkFactory
from bintrack.domain.entities import Principal
from bintrack.domain.services.access_rules import (
    ACCESS_RULES,
    AccessContext,
    first_matching_rule,
)
from bintrack.domain.value_objects import ObjectType, PermissionAction, parse_enum

logger = logging.getLogger(__name__)


class BintrackPermissionChecker:
    """Checks principal access against permission tuples, memberships and ownership."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory, rules=ACCESS_RULES) -> None:
        self._uow_factory = unit_of_work_factory
        self._rules = rules

    async def can_access(
        self,
        principal_id: str,
        object_type: ObjectType | str,
        object_id: str,
        action: PermissionAction | str,
    ) -> bool:
        """Check if principal may perform action on object.

        Raises ValidationError for unknown object types or actions, before any
        storage access. Every other outcome is a boolean; unknown principals
        and missing objects never allow by themselves.
        """
        object_type = parse_enum(ObjectType, object_type, "object_type")
        action = parse_enum(PermissionAction, action, "action")

        async with self._uow_factory() as uow:
            principal = await uow.users.get_by_id(principal_id) if principal_id else None
            if principal is None:
                logger.debug("Access denied: unknown principal %s", principal_id)
                return False
            ctx = await self._load_context(uow, principal, object_type, object_id, action)

        rule = first_matching_rule(ctx, self._rules)
        logger.debug(
            "Access %s: %s %s on %s %s (rule=%s)",
            "allowed" if rule else "denied",
            principal_id,
            action.value,
            object_type.value,
            object_id,
            rule,
        )
        return rule is not None

    async def _load_context(
        self,
        uow: UnitOfWork,
        principal: Principal,
        object_type: ObjectType,
        object_id: str,
        action: PermissionAction,
    ) -> AccessContext:
        if principal.is_admin:
            return AccessContext(
                principal=principal,
                object_type=object_type,
                object_id=object_id,
                action=action,
            )

        grants = await uow.permissions.list_subjects(object_type, object_id, action)
        memberships = await uow.memberships.list_for_user(principal.id)
        owned_object = await uow.objects.get(object_type, object_id)
        return AccessContext(
            principal=principal,
            object_type=object_type,
            object_id=object_id,
            action=action,
            memberships=tuple(memberships),
            owned_object=owned_object,
            grants=frozenset(grants),
        )

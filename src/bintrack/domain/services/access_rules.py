"""Access resolution rule chain.

Each rule is a pure predicate over an already-resolved AccessContext. Rules
are independent OR conditions: the first one returning True allows access and
nothing later can turn that into a deny. There is no explicit deny, so a
context no rule matches is denied.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from bintrack.domain.entities import OrganizationMembership, OwnedObject, Principal
from bintrack.domain.value_objects import ObjectType, PermissionAction, SubjectType


@dataclass(frozen=True)
class AccessContext:
    """Everything the rules need to decide one access request."""

    principal: Principal
    object_type: ObjectType
    object_id: str
    action: PermissionAction
    memberships: Sequence[OrganizationMembership] = ()
    owned_object: OwnedObject | None = None
    # (subject_type, subject_id) pairs holding a tuple for this object and action
    grants: frozenset[tuple[SubjectType, str]] = frozenset()

    def has_grant(self, subject_type: SubjectType, subject_id: str) -> bool:
        return (subject_type, subject_id) in self.grants


AccessRule = Callable[[AccessContext], bool]


def global_admin(ctx: AccessContext) -> bool:
    return ctx.principal.is_admin


def direct_user_grant(ctx: AccessContext) -> bool:
    return ctx.has_grant(SubjectType.USER, ctx.principal.id)


def organization_grant(ctx: AccessContext) -> bool:
    return any(
        ctx.has_grant(SubjectType.ORGANIZATION, m.organization_id)
        for m in ctx.memberships
    )


def implicit_organization_ownership(ctx: AccessContext) -> bool:
    """Members read their organization's objects; OWNER/ADMIN also write and administer."""
    obj = ctx.owned_object
    if obj is None or obj.organization_id is None:
        return False
    for membership in ctx.memberships:
        if membership.organization_id != obj.organization_id:
            continue
        if ctx.action is PermissionAction.READ:
            return True
        if membership.role.manages_objects:
            return True
    return False


def role_grant(ctx: AccessContext) -> bool:
    return ctx.has_grant(SubjectType.ROLE, ctx.principal.role.value)


def direct_ownership(ctx: AccessContext) -> bool:
    """Owners have every action on their own objects."""
    obj = ctx.owned_object
    return obj is not None and obj.user_id is not None and obj.user_id == ctx.principal.id


ACCESS_RULES: tuple[tuple[str, AccessRule], ...] = (
    ("global_admin", global_admin),
    ("direct_user_grant", direct_user_grant),
    ("organization_grant", organization_grant),
    ("implicit_organization_ownership", implicit_organization_ownership),
    ("role_grant", role_grant),
    ("direct_ownership", direct_ownership),
)


def first_matching_rule(
    ctx: AccessContext,
    rules: Sequence[tuple[str, AccessRule]] = ACCESS_RULES,
) -> str | None:
    """Return name of the first rule that allows access, or None."""
    for name, rule in rules:
        if rule(ctx):
            return name
    return None


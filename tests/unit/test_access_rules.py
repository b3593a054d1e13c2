"""Unit tests for the access resolution rule chain."""

from bintrack.domain.entities import OrganizationMembership, OwnedObject, Principal
from bintrack.domain.services.access_rules import (
    ACCESS_RULES,
    AccessContext,
    first_matching_rule,
)
from bintrack.domain.value_objects import (
    GlobalRole,
    ObjectType,
    OrgRole,
    PermissionAction,
    SubjectType,
)

USER = Principal(id="u1", role=GlobalRole.USER)
ADMIN = Principal(id="root", role=GlobalRole.ADMIN)


def _ctx(
    principal: Principal = USER,
    action: PermissionAction = PermissionAction.READ,
    **kwargs,
) -> AccessContext:
    return AccessContext(
        principal=principal,
        object_type=ObjectType.BIN,
        object_id="b1",
        action=action,
        **kwargs,
    )


def test_rule_order() -> None:
    assert [name for name, _ in ACCESS_RULES] == [
        "global_admin",
        "direct_user_grant",
        "organization_grant",
        "implicit_organization_ownership",
        "role_grant",
        "direct_ownership",
    ]


def test_empty_context_denied() -> None:
    assert first_matching_rule(_ctx()) is None


def test_global_admin_allows_everything() -> None:
    for action in PermissionAction:
        assert first_matching_rule(_ctx(ADMIN, action)) == "global_admin"


def test_direct_user_grant() -> None:
    ctx = _ctx(grants=frozenset({(SubjectType.USER, "u1")}))
    assert first_matching_rule(ctx) == "direct_user_grant"


def test_user_grant_for_someone_else_ignored() -> None:
    ctx = _ctx(grants=frozenset({(SubjectType.USER, "u2")}))
    assert first_matching_rule(ctx) is None


def test_organization_grant_requires_membership() -> None:
    grants = frozenset({(SubjectType.ORGANIZATION, "org1")})
    assert first_matching_rule(_ctx(grants=grants)) is None

    member = OrganizationMembership("org1", "u1", OrgRole.VIEWER)
    ctx = _ctx(action=PermissionAction.ADMIN, grants=grants, memberships=(member,))
    assert first_matching_rule(ctx) == "organization_grant"


class TestImplicitOrganizationOwnership:
    """Org members read org objects; OWNER and ADMIN manage them."""

    org_bin = OwnedObject(ObjectType.BIN, "b1", organization_id="org1")

    def test_member_reads(self) -> None:
        ctx = _ctx(
            memberships=(OrganizationMembership("org1", "u1", OrgRole.MEMBER),),
            owned_object=self.org_bin,
        )
        assert first_matching_rule(ctx) == "implicit_organization_ownership"

    def test_member_cannot_write(self) -> None:
        ctx = _ctx(
            action=PermissionAction.WRITE,
            memberships=(OrganizationMembership("org1", "u1", OrgRole.MEMBER),),
            owned_object=self.org_bin,
        )
        assert first_matching_rule(ctx) is None

    def test_editor_and_viewer_cannot_administer(self) -> None:
        for role in (OrgRole.EDITOR, OrgRole.VIEWER):
            ctx = _ctx(
                action=PermissionAction.ADMIN,
                memberships=(OrganizationMembership("org1", "u1", role),),
                owned_object=self.org_bin,
            )
            assert first_matching_rule(ctx) is None

    def test_owner_and_admin_manage(self) -> None:
        for role in (OrgRole.OWNER, OrgRole.ADMIN):
            for action in (PermissionAction.WRITE, PermissionAction.ADMIN):
                ctx = _ctx(
                    action=action,
                    memberships=(OrganizationMembership("org1", "u1", role),),
                    owned_object=self.org_bin,
                )
                assert first_matching_rule(ctx) == "implicit_organization_ownership"

    def test_other_organization_ignored(self) -> None:
        ctx = _ctx(
            memberships=(OrganizationMembership("org2", "u1", OrgRole.OWNER),),
            owned_object=self.org_bin,
        )
        assert first_matching_rule(ctx) is None

    def test_missing_object(self) -> None:
        ctx = _ctx(memberships=(OrganizationMembership("org1", "u1", OrgRole.OWNER),))
        assert first_matching_rule(ctx) is None


def test_role_grant_matches_global_role() -> None:
    ctx = _ctx(grants=frozenset({(SubjectType.ROLE, "USER")}))
    assert first_matching_rule(ctx) == "role_grant"

    ctx = _ctx(grants=frozenset({(SubjectType.ROLE, "ADMIN")}))
    assert first_matching_rule(ctx) is None


def test_direct_ownership_allows_every_action() -> None:
    owned = OwnedObject(ObjectType.BIN, "b1", user_id="u1")
    for action in PermissionAction:
        assert first_matching_rule(_ctx(action=action, owned_object=owned)) == "direct_ownership"


def test_unowned_object_denied() -> None:
    owned = OwnedObject(ObjectType.BIN, "b1")
    assert first_matching_rule(_ctx(owned_object=owned)) is None


def test_earlier_rule_wins() -> None:
    ctx = _ctx(
        grants=frozenset({(SubjectType.USER, "u1"), (SubjectType.ROLE, "USER")}),
        owned_object=OwnedObject(ObjectType.BIN, "b1", user_id="u1"),
    )
    assert first_matching_rule(ctx) == "direct_user_grant"


def test_custom_rule_chain() -> None:
    ctx = _ctx(owned_object=OwnedObject(ObjectType.BIN, "b1", user_id="u1"))
    only_grants = [r for r in ACCESS_RULES if r[0] == "direct_user_grant"]
    assert first_matching_rule(ctx, only_grants) is None

"""Organization and membership repository ports."""

from typing import Protocol

from bintrack.domain.entities import Organization, OrganizationMembership


class OrganizationRepository(Protocol):
    """Port for organization lookup."""

    async def get_by_id(self, organization_id: str) -> Organization | None: ...


class MembershipRepository(Protocol):
    """Port for organization membership lookup."""

    async def list_for_user(self, user_id: str) -> list[OrganizationMembership]: ...

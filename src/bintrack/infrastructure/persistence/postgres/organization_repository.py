"""PostgreSQL organization and membership repository implementations."""

from psycopg import AsyncConnection

from bintrack.domain.entities import Organization, OrganizationMembership
from bintrack.domain.value_objects import OrgRole


class PostgresOrganizationRepository:
    """Organization repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, organization_id: str) -> Organization | None:
        """Get organization by id."""
        cur = await self._conn.execute(
            "SELECT id, name, slug FROM organizations WHERE id = %s",
            (organization_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Organization(id=r[0], name=r[1], slug=r[2])


class PostgresMembershipRepository:
    """Organization membership repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_for_user(self, user_id: str) -> list[OrganizationMembership]:
        """List organizations the user belongs to, with the user's role in each."""
        cur = await self._conn.execute(
            "SELECT organization_id, user_id, role FROM organization_members WHERE user_id = %s",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [
            OrganizationMembership(organization_id=r[0], user_id=r[1], role=OrgRole(r[2]))
            for r in rows
        ]

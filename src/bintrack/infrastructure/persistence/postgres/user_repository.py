"""PostgreSQL user repository implementation."""

from psycopg import AsyncConnection

from bintrack.domain.entities import Principal
from bintrack.domain.value_objects import GlobalRole


class PostgresUserRepository:
    """User repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: str) -> Principal | None:
        """Get user by id."""
        cur = await self._conn.execute(
            "SELECT id, role, email, name FROM users WHERE id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Principal(id=r[0], role=GlobalRole(r[1]), email=r[2], name=r[3])

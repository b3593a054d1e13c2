"""PostgreSQL owner lookup for bins, items and categories."""

from psycopg import AsyncConnection, sql

from bintrack.domain.entities import OwnedObject
from bintrack.domain.value_objects import ObjectType

# Every object type lives in its own table with user_id/organization_id owner columns.
OBJECT_TABLES: dict[ObjectType, str] = {
    ObjectType.BIN: "bins",
    ObjectType.ITEM: "items",
    ObjectType.CATEGORY: "categories",
}


class PostgresOwnedObjectRepository:
    """Owned object repository implementation."""

    def __init__(self, conn: AsyncConnection, tables: dict[ObjectType, str] = OBJECT_TABLES) -> None:
        self._conn = conn
        self._tables = tables

    async def get(self, object_type: ObjectType, object_id: str) -> OwnedObject | None:
        """Get owner fields of object, or None if it does not exist."""
        table = self._tables[object_type]
        cur = await self._conn.execute(
            sql.SQL("SELECT id, user_id, organization_id FROM {} WHERE id = %s").format(
                sql.Identifier(table)
            ),
            (object_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return OwnedObject(
            object_type=object_type,
            id=r[0],
            user_id=r[1],
            organization_id=r[2],
        )

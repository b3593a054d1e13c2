"""PostgreSQL permission repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from bintrack.application.dto.permission_dto import PermissionFilter
from bintrack.domain.entities import Permission, PermissionKey
from bintrack.domain.value_objects import ObjectType, PermissionAction, SubjectType

_COLUMNS = (
    "id, object_type, object_id, subject_type, subject_id, action, granted_by, granted_at"
)


def _build_filter_conditions(permission_filter: PermissionFilter) -> tuple[list[str], list[object]]:
    """Build WHERE conditions and params for a permission filter."""
    conditions: list[str] = []
    params: list[object] = []
    for column, value in permission_filter.constraints().items():
        conditions.append(f"{column} = %s")
        params.append(str(value))
    return conditions, params


def _row_to_permission(r: tuple) -> Permission:
    return Permission(
        id=r[0] if isinstance(r[0], UUID) else UUID(str(r[0])),
        object_type=ObjectType(r[1]),
        object_id=r[2],
        subject_type=SubjectType(r[3]),
        subject_id=r[4],
        action=PermissionAction(r[5]),
        granted_by=r[6],
        granted_at=r[7],
    )


class PostgresPermissionRepository:
    """Permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def find(self, permission_filter: PermissionFilter) -> list[Permission]:
        """List permissions matching filter, most recently granted first."""
        conditions, params = _build_filter_conditions(permission_filter)
        where = (" WHERE " + " AND ".join(conditions)) if conditions else ""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permissions{where} ORDER BY granted_at DESC, id",
            tuple(params),
        )
        rows = await cur.fetchall()
        return [_row_to_permission(r) for r in rows]

    async def list_subjects(
        self, object_type: ObjectType, object_id: str, action: PermissionAction
    ) -> list[tuple[SubjectType, str]]:
        """List subjects holding action on object."""
        cur = await self._conn.execute(
            "SELECT subject_type, subject_id FROM permissions "
            "WHERE object_type = %s AND object_id = %s AND action = %s",
            (object_type.value, object_id, action.value),
        )
        rows = await cur.fetchall()
        return [(SubjectType(r[0]), r[1]) for r in rows]

    async def upsert(self, permission: Permission) -> Permission:
        """Insert permission or refresh granted_by/granted_at of the existing tuple."""
        cur = await self._conn.execute(
            "INSERT INTO permissions "
            "(id, object_type, object_id, subject_type, subject_id, action, granted_by, granted_at) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (object_type, object_id, subject_type, subject_id, action) "
            "DO UPDATE SET granted_by = EXCLUDED.granted_by, granted_at = EXCLUDED.granted_at "
            f"RETURNING {_COLUMNS}",
            (
                permission.id,
                permission.object_type.value,
                permission.object_id,
                permission.subject_type.value,
                permission.subject_id,
                permission.action.value,
                permission.granted_by,
                permission.granted_at,
            ),
        )
        r = await cur.fetchone()
        return _row_to_permission(r)

    async def delete(self, key: PermissionKey) -> bool:
        """Delete permission by natural key. Returns False if nothing was deleted."""
        cur = await self._conn.execute(
            "DELETE FROM permissions "
            "WHERE object_type = %s AND object_id = %s AND subject_type = %s "
            "AND subject_id = %s AND action = %s RETURNING id",
            tuple(str(part) for part in key),
        )
        return await cur.fetchone() is not None

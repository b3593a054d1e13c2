"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from bintrack.infrastructure.persistence.postgres.organization_repository import (
    PostgresMembershipRepository,
    PostgresOrganizationRepository,
)
from bintrack.infrastructure.persistence.postgres.owned_object_repository import (
    PostgresOwnedObjectRepository,
)
from bintrack.infrastructure.persistence.postgres.permission_repository import (
    PostgresPermissionRepository,
)
from bintrack.infrastructure.persistence.postgres.user_repository import (
    PostgresUserRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn = None
        self._conn_cm = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._permissions = PostgresPermissionRepository(self._conn)
        self._users = PostgresUserRepository(self._conn)
        self._organizations = PostgresOrganizationRepository(self._conn)
        self._memberships = PostgresMembershipRepository(self._conn)
        self._objects = PostgresOwnedObjectRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def permissions(self) -> PostgresPermissionRepository:
        return self._permissions

    @property
    def users(self) -> PostgresUserRepository:
        return self._users

    @property
    def organizations(self) -> PostgresOrganizationRepository:
        return self._organizations

    @property
    def memberships(self) -> PostgresMembershipRepository:
        return self._memberships

    @property
    def objects(self) -> PostgresOwnedObjectRepository:
        return self._objects

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory

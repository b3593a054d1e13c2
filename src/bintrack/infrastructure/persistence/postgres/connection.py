"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool


def create_pool(
    conninfo: str,
    min_size: int = 2,
    max_size: int = 10,
    name: str = "bintrack",
) -> AsyncConnectionPool:
    """Create the shared pool, unopened.

    PoolLifespanMiddleware opens it on ASGI startup. Connections are checked
    on checkout, since every access check borrows one.
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        name=name,
        check=AsyncConnectionPool.check_connection,
        open=False,
    )

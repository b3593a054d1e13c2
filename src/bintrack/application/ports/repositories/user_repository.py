"""User repository port."""

from typing import Protocol

from bintrack.domain.entities import Principal


class UserRepository(Protocol):
    """Port for principal lookup."""

    async def get_by_id(self, user_id: str) -> Principal | None: ...

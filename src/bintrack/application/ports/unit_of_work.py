"""Unit of Work port - transactional boundary."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from bintrack.application.ports.repositories.organization_repository import (
    MembershipRepository,
    OrganizationRepository,
)
from bintrack.application.ports.repositories.owned_object_repository import (
    OwnedObjectRepository,
)
from bintrack.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from bintrack.application.ports.repositories.user_repository import UserRepository


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def permissions(self) -> PermissionRepository: ...

    @property
    def users(self) -> UserRepository: ...

    @property
    def organizations(self) -> OrganizationRepository: ...

    @property
    def memberships(self) -> MembershipRepository: ...

    @property
    def objects(self) -> OwnedObjectRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory returning an async context manager around one UnitOfWork."""

    def __call__(self) -> AbstractAsyncContextManager[UnitOfWork]: ...

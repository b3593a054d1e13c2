"""Pytest fixtures for Bintrack tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace

import pytest

from bintrack.application.dto.permission_dto import PermissionFilter
from bintrack.domain.entities import (
    Organization,
    OrganizationMembership,
    OwnedObject,
    Permission,
    PermissionKey,
    Principal,
)
from bintrack.domain.value_objects import (
    GlobalRole,
    ObjectType,
    OrgRole,
    PermissionAction,
    SubjectType,
)


# --- Fake repositories ---


class FakePermissionRepository:
    """In-memory permission repository keyed by natural key."""

    def __init__(self) -> None:
        self._by_key: dict[PermissionKey, Permission] = {}
        self.calls = 0

    async def find(self, permission_filter: PermissionFilter) -> list[Permission]:
        self.calls += 1
        items = [p for p in self._by_key.values() if permission_filter.matches(p)]
        items.sort(key=lambda p: p.granted_at, reverse=True)
        return items

    async def list_subjects(
        self,
        object_type: ObjectType,
        object_id: str,
        action: PermissionAction,
    ) -> list[tuple[SubjectType, str]]:
        self.calls += 1
        return [
            (p.subject_type, p.subject_id)
            for p in self._by_key.values()
            if p.object_type is object_type
            and p.object_id == object_id
            and p.action is action
        ]

    async def upsert(self, permission: Permission) -> Permission:
        self.calls += 1
        existing = self._by_key.get(permission.key)
        if existing:
            permission = replace(
                existing,
                granted_by=permission.granted_by,
                granted_at=permission.granted_at,
            )
        self._by_key[permission.key] = permission
        return permission

    async def delete(self, key: PermissionKey) -> bool:
        self.calls += 1
        return self._by_key.pop(key, None) is not None

    def all(self) -> list[Permission]:
        """Helper to inspect stored tuples."""
        return list(self._by_key.values())


class FakeUserRepository:
    """In-memory user repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Principal] = {}
        self.calls = 0

    async def get_by_id(self, user_id: str) -> Principal | None:
        self.calls += 1
        return self._by_id.get(user_id)

    def add(self, user_id: str, role: GlobalRole = GlobalRole.USER) -> Principal:
        """Helper to add user for tests."""
        principal = Principal(id=user_id, role=role, email=f"{user_id}@example.com")
        self._by_id[user_id] = principal
        return principal


class FakeOrganizationRepository:
    """In-memory organization repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Organization] = {}

    async def get_by_id(self, organization_id: str) -> Organization | None:
        return self._by_id.get(organization_id)

    def add(self, organization_id: str) -> Organization:
        org = Organization(id=organization_id, name=organization_id.title(), slug=organization_id)
        self._by_id[organization_id] = org
        return org


class FakeMembershipRepository:
    """In-memory membership repository."""

    def __init__(self) -> None:
        self._store: list[OrganizationMembership] = []

    async def list_for_user(self, user_id: str) -> list[OrganizationMembership]:
        return [m for m in self._store if m.user_id == user_id]

    def add(
        self, organization_id: str, user_id: str, role: OrgRole = OrgRole.MEMBER
    ) -> OrganizationMembership:
        membership = OrganizationMembership(organization_id, user_id, role)
        self._store.append(membership)
        return membership


class FakeOwnedObjectRepository:
    """In-memory bins, items and categories."""

    def __init__(self) -> None:
        self._by_key: dict[tuple[ObjectType, str], OwnedObject] = {}

    async def get(self, object_type: ObjectType, object_id: str) -> OwnedObject | None:
        return self._by_key.get((object_type, object_id))

    def add(
        self,
        object_type: ObjectType,
        object_id: str,
        user_id: str | None = None,
        organization_id: str | None = None,
    ) -> OwnedObject:
        obj = OwnedObject(object_type, object_id, user_id, organization_id)
        self._by_key[(object_type, object_id)] = obj
        return obj


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.permissions = FakePermissionRepository()
        self.users = FakeUserRepository()
        self.organizations = FakeOrganizationRepository()
        self.memberships = FakeMembershipRepository()
        self.objects = FakeOwnedObjectRepository()
        self.committed = 0

    async def commit(self) -> None:
        self.committed += 1

    async def rollback(self) -> None:
        pass


def shared_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same UoW on every call, so state survives between use cases."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return shared_uow_factory(fake_uow)


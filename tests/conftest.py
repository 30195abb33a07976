"""Pytest fixtures for roleguard tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

import pytest

from roleguard.domain.entities import Role, User
from roleguard.domain.permissions_codec import encode_permissions


# --- Fake repositories ---


class FakeUserRepository:
    """In-memory user repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, User] = {}

    async def get_by_id(self, user_id: UUID) -> User | None:
        return self._by_id.get(user_id)

    def add_user(self, email: str, name: str | None = None) -> User:
        """Helper to add user for tests."""
        user = User(id=uuid4(), email=email, name=name)
        self._by_id[user.id] = user
        return user


class FakeRoleRepository:
    """In-memory role repository.

    Rows keep permissions as encoded text and every read hydrates a fresh
    Role, the way the PostgreSQL repository does.
    """

    def __init__(self, users: FakeUserRepository | None = None) -> None:
        self._rows: dict[UUID, dict[str, Any]] = {}
        self._members: dict[UUID, list[UUID]] = {}
        self._users = users
        self.updates = 0

    def _hydrate(self, row: dict[str, Any]) -> Role:
        return Role.from_persisted(**row)

    def row_for(self, slug: str) -> dict[str, Any] | None:
        """Stored row by slug, for assertions."""
        for row in self._rows.values():
            if row["slug"] == slug:
                return row
        return None

    async def get_by_slug(self, slug: str) -> Role | None:
        row = self.row_for(slug)
        return self._hydrate(row) if row else None

    async def list_all(self) -> list[Role]:
        rows = sorted(self._rows.values(), key=lambda r: r["slug"])
        return [self._hydrate(r) for r in rows]

    async def create(self, slug: str, name: str, permissions: dict[str, Any]) -> Role:
        role_id = self.add_row(slug, name, encode_permissions(permissions))
        return self._hydrate(self._rows[role_id])

    async def update(self, role: Role) -> None:
        self._rows[role.id].update(
            slug=role.slug,
            name=role.name,
            permissions=role.encoded_permissions(),
            updated_at=datetime.now(UTC),
        )
        self.updates += 1

    async def delete(self, role_id: UUID) -> None:
        self._rows.pop(role_id, None)
        self._members.pop(role_id, None)

    async def list_users(self, role_id: UUID) -> list[Any]:
        users = []
        for user_id in self._members.get(role_id, []):
            user = await self._users.get_by_id(user_id) if self._users else None
            if user:
                users.append(user)
        return users

    async def attach_user(self, role_id: UUID, user_id: UUID) -> None:
        members = self._members.setdefault(role_id, [])
        if user_id not in members:
            members.append(user_id)

    async def detach_user(self, role_id: UUID, user_id: UUID) -> None:
        members = self._members.get(role_id, [])
        if user_id in members:
            members.remove(user_id)

    def add_row(self, slug: str, name: str, permissions: str | None = "") -> UUID:
        """Helper to store a raw row (permissions already encoded)."""
        now = datetime.now(UTC)
        role_id = uuid4()
        self._rows[role_id] = {
            "id": role_id,
            "slug": slug,
            "name": name,
            "permissions": permissions,
            "created_at": now,
            "updated_at": now,
        }
        return role_id


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.users = FakeUserRepository()
        self.roles = FakeRoleRepository(self.users)

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory that yields the same UoW on every call, so state survives."""

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
    """UoW factory sharing ``fake_uow`` across use case calls."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def editor_role() -> Role:
    """Role granting edit-post and explicitly denying delete-post."""
    return Role(
        id=uuid4(),
        slug="editor",
        name="Editor",
        permissions={"edit-post": True, "delete-post": False},
    )

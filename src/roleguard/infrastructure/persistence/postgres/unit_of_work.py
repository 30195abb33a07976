"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

from psycopg_pool import AsyncConnectionPool

from roleguard.domain.entities import User
from roleguard.domain.permissions import EvaluatorFactory, StandardPermissions
from roleguard.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)
from roleguard.infrastructure.persistence.postgres.user_repository import (
    PostgresUserRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(
        self,
        pool: AsyncConnectionPool,
        users_table: str = "users",
        user_factory: Callable[..., Any] = User,
        evaluator_factory: EvaluatorFactory = StandardPermissions,
    ) -> None:
        self._pool = pool
        self._users_table = users_table
        self._user_factory = user_factory
        self._evaluator_factory = evaluator_factory
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._roles = PostgresRoleRepository(
            self._conn,
            users_table=self._users_table,
            user_factory=self._user_factory,
            evaluator_factory=self._evaluator_factory,
        )
        self._users = PostgresUserRepository(
            self._conn,
            users_table=self._users_table,
            user_factory=self._user_factory,
        )
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    @property
    def users(self) -> PostgresUserRepository:
        return self._users

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(
    pool: AsyncConnectionPool,
    users_table: str = "users",
    user_factory: Callable[..., Any] = User,
    evaluator_factory: EvaluatorFactory = StandardPermissions,
) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(
            pool,
            users_table=users_table,
            user_factory=user_factory,
            evaluator_factory=evaluator_factory,
        )
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory

"""PostgreSQL user repository implementation."""

from collections.abc import Callable
from typing import Any
from uuid import UUID

from psycopg import AsyncConnection, sql
from psycopg.rows import dict_row

from roleguard.domain.entities import User


class PostgresUserRepository:
    """Reads users from the configured users table."""

    def __init__(
        self,
        conn: AsyncConnection,
        users_table: str = "users",
        user_factory: Callable[..., Any] = User,
    ) -> None:
        self._conn = conn
        self._users_table = users_table
        self._user_factory = user_factory

    async def get_by_id(self, user_id: UUID) -> Any | None:
        """Get user by id."""
        query = sql.SQL("SELECT * FROM {users} WHERE id = %s").format(
            users=sql.Identifier(self._users_table)
        )
        async with self._conn.cursor(row_factory=dict_row) as cur:
            await cur.execute(query, (user_id,))
            r = await cur.fetchone()
        if not r:
            return None
        return self._user_factory(**r)

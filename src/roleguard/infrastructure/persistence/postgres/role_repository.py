"""PostgreSQL role repository implementation."""

from collections.abc import Callable
from typing import Any
from uuid import UUID

from psycopg import AsyncConnection, sql
from psycopg.rows import dict_row

from roleguard.domain.entities import Role, User
from roleguard.domain.permissions import EvaluatorFactory, StandardPermissions
from roleguard.domain.permissions_codec import encode_permissions

_ROLE_COLUMNS = "id, slug, name, permissions, created_at, updated_at"


class PostgresRoleRepository:
    """Role repository implementation.

    ``users_table`` and ``user_factory`` select which user rows roles are
    related to and what objects they hydrate into; the factory receives each
    user row as keyword arguments.
    """

    def __init__(
        self,
        conn: AsyncConnection,
        users_table: str = "users",
        user_factory: Callable[..., Any] = User,
        evaluator_factory: EvaluatorFactory = StandardPermissions,
    ) -> None:
        self._conn = conn
        self._users_table = users_table
        self._user_factory = user_factory
        self._evaluator_factory = evaluator_factory

    def _to_role(self, r: tuple) -> Role:
        return Role.from_persisted(
            id=r[0],
            slug=r[1],
            name=r[2],
            permissions=r[3],
            created_at=r[4],
            updated_at=r[5],
            evaluator_factory=self._evaluator_factory,
        )

    async def get_by_slug(self, slug: str) -> Role | None:
        """Get role by slug."""
        cur = await self._conn.execute(
            f"SELECT {_ROLE_COLUMNS} FROM roles WHERE slug = %s",
            (slug,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return self._to_role(r)

    async def list_all(self) -> list[Role]:
        """List all roles ordered by slug."""
        cur = await self._conn.execute(f"SELECT {_ROLE_COLUMNS} FROM roles ORDER BY slug")
        rows = await cur.fetchall()
        return [self._to_role(r) for r in rows]

    async def create(self, slug: str, name: str, permissions: dict[str, Any]) -> Role:
        """Insert role; id and timestamps are assigned by the database."""
        cur = await self._conn.execute(
            "INSERT INTO roles (slug, name, permissions, created_at, updated_at) "
            f"VALUES (%s, %s, %s, now(), now()) RETURNING {_ROLE_COLUMNS}",
            (slug, name, encode_permissions(permissions)),
        )
        r = await cur.fetchone()
        return self._to_role(r)

    async def update(self, role: Role) -> None:
        """Update slug, name and permissions."""
        await self._conn.execute(
            "UPDATE roles SET slug=%s, name=%s, permissions=%s, updated_at=now() WHERE id=%s",
            (role.slug, role.name, role.encoded_permissions(), role.id),
        )

    async def delete(self, role_id: UUID) -> None:
        """Delete role. Memberships cascade."""
        await self._conn.execute(
            "DELETE FROM roles WHERE id = %s",
            (role_id,),
        )

    async def list_users(self, role_id: UUID) -> list[Any]:
        """List users holding the role."""
        query = sql.SQL(
            "SELECT u.* FROM {users} u "
            "JOIN role_users ru ON ru.user_id = u.id "
            "WHERE ru.role_id = %s ORDER BY ru.created_at"
        ).format(users=sql.Identifier(self._users_table))
        async with self._conn.cursor(row_factory=dict_row) as cur:
            await cur.execute(query, (role_id,))
            rows = await cur.fetchall()
        return [self._user_factory(**r) for r in rows]

    async def attach_user(self, role_id: UUID, user_id: UUID) -> None:
        """Add membership; existing membership is kept as is."""
        await self._conn.execute(
            "INSERT INTO role_users (role_id, user_id, created_at, updated_at) "
            "VALUES (%s, %s, now(), now()) ON CONFLICT (role_id, user_id) DO NOTHING",
            (role_id, user_id),
        )

    async def detach_user(self, role_id: UUID, user_id: UUID) -> None:
        """Remove membership."""
        await self._conn.execute(
            "DELETE FROM role_users WHERE role_id = %s AND user_id = %s",
            (role_id, user_id),
        )

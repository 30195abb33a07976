"""User repository port."""

from typing import Any, Protocol
from uuid import UUID


class UserRepository(Protocol):
    """Port for looking up users that roles are attached to."""

    async def get_by_id(self, user_id: UUID) -> Any | None: ...

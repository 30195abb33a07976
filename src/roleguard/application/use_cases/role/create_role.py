"""Create role use case."""

import logging
from typing import Any

from roleguard.application.ports import UnitOfWorkFactory
from roleguard.domain.entities import Role
from roleguard.domain.exceptions import DuplicateRole, ValidationError
from roleguard.domain.permissions import GRANT_VALUE_TYPES

logger = logging.getLogger(__name__)


class CreateRoleUseCase:
    """Create a role with a unique slug and optional initial grants."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        slug: str,
        name: str,
        permissions: dict[str, Any] | None = None,
    ) -> Role:
        """Create role. Slug must not be taken."""
        if not isinstance(slug, str) or not slug.strip():
            raise ValidationError("Role slug must be a non-empty string")
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Role name must be a non-empty string")
        slug = slug.strip()
        name = name.strip()
        if permissions is not None and not isinstance(permissions, dict):
            raise ValidationError("Role permissions must be an object")
        for value in (permissions or {}).values():
            if not isinstance(value, GRANT_VALUE_TYPES):
                raise ValidationError(
                    "Permission values must be booleans, numbers, strings or null"
                )

        async with self._uow_factory() as uow:
            if await uow.roles.get_by_slug(slug):
                raise DuplicateRole(f"Role with slug {slug!r} already exists")
            role = await uow.roles.create(slug, name, dict(permissions or {}))

        logger.info("Created role %s (%s)", role.slug, role.id)
        return role

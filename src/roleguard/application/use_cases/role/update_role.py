"""Update role use case."""

from roleguard.application.ports import UnitOfWorkFactory
from roleguard.domain.entities import Role
from roleguard.domain.exceptions import DuplicateRole, NotFound, ValidationError


class UpdateRoleUseCase:
    """Change a role's slug and/or display name."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        slug: str,
        new_slug: str | None = None,
        name: str | None = None,
    ) -> Role:
        if new_slug is not None and (not isinstance(new_slug, str) or not new_slug.strip()):
            raise ValidationError("Role slug must be a non-empty string")
        if name is not None and (not isinstance(name, str) or not name.strip()):
            raise ValidationError("Role name must be a non-empty string")

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_slug(slug)
            if not role:
                raise NotFound("Role", slug)

            if new_slug is not None and new_slug.strip() != role.slug:
                new_slug = new_slug.strip()
                if await uow.roles.get_by_slug(new_slug):
                    raise DuplicateRole(f"Role with slug {new_slug!r} already exists")
                role.slug = new_slug
            if name is not None:
                role.name = name.strip()

            await uow.roles.update(role)
            return role

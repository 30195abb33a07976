"""Check access use case."""

from roleguard.application.ports import UnitOfWorkFactory
from roleguard.domain.exceptions import NotFound, ValidationError


class CheckAccessUseCase:
    """Answer whether a role grants all (or any) of the given permissions."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        slug: str,
        permissions: list[str],
        any_of: bool = False,
    ) -> bool:
        """Check permissions against role grants. Empty list is rejected."""
        if not permissions:
            raise ValidationError("At least one permission is required")

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_slug(slug)
            if not role:
                raise NotFound("Role", slug)

        if any_of:
            return role.has_any_access(permissions)
        return role.has_access(permissions)

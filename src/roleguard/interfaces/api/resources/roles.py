"""Roles API resources."""

import falcon.asgi

from roleguard.application.use_cases.role.create_role import CreateRoleUseCase
from roleguard.application.use_cases.role.delete_role import DeleteRoleUseCase
from roleguard.application.use_cases.role.get_role import GetRoleUseCase
from roleguard.application.use_cases.role.update_role import UpdateRoleUseCase
from roleguard.domain.exceptions import DuplicateRole, NotFound, ValidationError
from roleguard.interfaces.api.resources.serializers import role_to_dict


class RolesResource:
    """GET/POST /v1/roles - list and create roles."""

    def __init__(
        self,
        unit_of_work_factory: type,
        create_role: CreateRoleUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._create = create_role

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List roles."""
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_all()
        resp.media = {"items": [role_to_dict(r) for r in roles]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create role."""
        body = await req.get_media()
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Request body must be an object"}
            return
        try:
            slug = body["slug"]
            name = body["name"]
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return

        try:
            role = await self._create.execute(slug, name, body.get("permissions"))
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except DuplicateRole as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}
            return

        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_201


class RoleResource:
    """GET/PATCH/DELETE /v1/roles/{slug}."""

    def __init__(
        self,
        get_role: GetRoleUseCase,
        update_role: UpdateRoleUseCase,
        delete_role: DeleteRoleUseCase,
    ) -> None:
        self._get = get_role
        self._update = update_role
        self._delete = delete_role

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, slug: str
    ) -> None:
        """Get role; ?users=true includes its users."""
        with_users = req.get_param_as_bool("users", default=False)
        try:
            role = await self._get.execute(slug, with_users=with_users)
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        resp.media = role_to_dict(role, with_users=with_users)
        resp.status = falcon.HTTP_200

    async def on_patch(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, slug: str
    ) -> None:
        """Rename role (slug and/or name)."""
        body = await req.get_media()
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Request body must be an object"}
            return
        try:
            role = await self._update.execute(
                slug, new_slug=body.get("slug"), name=body.get("name")
            )
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except DuplicateRole as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}
            return
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, slug: str
    ) -> None:
        """Delete role."""
        try:
            await self._delete.execute(slug)
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        resp.status = falcon.HTTP_204

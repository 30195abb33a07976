"""Role permission API resources."""

import falcon.asgi

from roleguard.application.use_cases.permission.add_permission import AddPermissionUseCase
from roleguard.application.use_cases.permission.remove_permission import (
    RemovePermissionUseCase,
)
from roleguard.application.use_cases.permission.update_permission import (
    UpdatePermissionUseCase,
)
from roleguard.domain.exceptions import NotFound, ValidationError
from roleguard.interfaces.api.resources.serializers import role_to_dict


class RolePermissionsResource:
    """POST /v1/roles/{slug}/permissions - add a grant (existing grants are kept)."""

    def __init__(self, add_permission: AddPermissionUseCase) -> None:
        self._add = add_permission

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, slug: str
    ) -> None:
        body = await req.get_media()
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Request body must be an object"}
            return
        try:
            permission = body["permission"]
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return

        try:
            role = await self._add.execute(slug, permission, body.get("value", True))
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_200


class RolePermissionResource:
    """PUT/DELETE /v1/roles/{slug}/permissions/{permission}."""

    def __init__(
        self,
        update_permission: UpdatePermissionUseCase,
        remove_permission: RemovePermissionUseCase,
    ) -> None:
        self._update = update_permission
        self._remove = remove_permission

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        slug: str,
        permission: str,
    ) -> None:
        """Change an existing grant; unknown permissions are left absent."""
        body = await req.get_media()
        if not isinstance(body, dict) or "value" not in body:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Missing required field: 'value'"}
            return
        try:
            role = await self._update.execute(slug, permission, body["value"])
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        slug: str,
        permission: str,
    ) -> None:
        try:
            role = await self._remove.execute(slug, permission)
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_200

"""Role membership API resources."""

from uuid import UUID

import falcon.asgi

from roleguard.application.use_cases.role.get_role import GetRoleUseCase
from roleguard.application.use_cases.role.role_users import (
    AttachUserUseCase,
    DetachUserUseCase,
)
from roleguard.domain.exceptions import NotFound
from roleguard.interfaces.api.resources.serializers import user_to_dict


class RoleUsersResource:
    """GET /v1/roles/{slug}/users - users holding the role."""

    def __init__(self, get_role: GetRoleUseCase) -> None:
        self._get = get_role

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, slug: str
    ) -> None:
        try:
            role = await self._get.execute(slug, with_users=True)
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        resp.media = {"items": [user_to_dict(u) for u in role.get_users()]}
        resp.status = falcon.HTTP_200


class RoleUserResource:
    """PUT/DELETE /v1/roles/{slug}/users/{user_id} - attach or detach a user."""

    def __init__(
        self,
        attach_user: AttachUserUseCase,
        detach_user: DetachUserUseCase,
    ) -> None:
        self._attach = attach_user
        self._detach = detach_user

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        slug: str,
        user_id: str,
    ) -> None:
        await self._change(resp, self._attach, slug, user_id)

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        slug: str,
        user_id: str,
    ) -> None:
        await self._change(resp, self._detach, slug, user_id)

    async def _change(self, resp, use_case, slug: str, user_id: str) -> None:
        try:
            uid = UUID(user_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid user ID"}
            return
        try:
            await use_case.execute(slug, uid)
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        resp.status = falcon.HTTP_204

"""Access check API resource."""

import falcon.asgi

from roleguard.application.use_cases.access.check_access import CheckAccessUseCase
from roleguard.domain.exceptions import NotFound, ValidationError

_MODES = ("all", "any")


class RoleAccessResource:
    """GET /v1/roles/{slug}/access?permission=a&permission=b&mode=all|any."""

    def __init__(self, check_access: CheckAccessUseCase) -> None:
        self._check = check_access

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, slug: str
    ) -> None:
        permissions = req.get_param_as_list("permission") or []
        mode = req.get_param("mode", default="all")
        if mode not in _MODES:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"mode must be one of {', '.join(_MODES)}"}
            return

        try:
            granted = await self._check.execute(slug, permissions, any_of=mode == "any")
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = {
            "role": slug,
            "permissions": permissions,
            "mode": mode,
            "granted": granted,
        }
        resp.status = falcon.HTTP_200

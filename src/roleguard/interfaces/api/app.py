"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App
from psycopg_pool import AsyncConnectionPool

from roleguard.application.use_cases.access.check_access import CheckAccessUseCase
from roleguard.application.use_cases.permission.add_permission import AddPermissionUseCase
from roleguard.application.use_cases.permission.remove_permission import (
    RemovePermissionUseCase,
)
from roleguard.application.use_cases.permission.update_permission import (
    UpdatePermissionUseCase,
)
from roleguard.application.use_cases.role.create_role import CreateRoleUseCase
from roleguard.application.use_cases.role.delete_role import DeleteRoleUseCase
from roleguard.application.use_cases.role.get_role import GetRoleUseCase
from roleguard.application.use_cases.role.role_users import (
    AttachUserUseCase,
    DetachUserUseCase,
)
from roleguard.application.use_cases.role.update_role import UpdateRoleUseCase
from roleguard.interfaces.api.resources.access import RoleAccessResource
from roleguard.interfaces.api.resources.health import HealthResource
from roleguard.interfaces.api.resources.permissions import (
    RolePermissionResource,
    RolePermissionsResource,
)
from roleguard.interfaces.api.resources.roles import RoleResource, RolesResource
from roleguard.interfaces.api.resources.users import RoleUserResource, RoleUsersResource

logger = logging.getLogger(__name__)


async def _handle_unexpected(req, resp, ex, params) -> None:
    logger.error("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    unit_of_work_factory: type,
    middleware: list | None = None,
    pool: AsyncConnectionPool | None = None,
) -> App:
    """Create Falcon ASGI app with use cases and routes wired to the UoW factory."""
    get_role = GetRoleUseCase(unit_of_work_factory)

    roles = RolesResource(unit_of_work_factory, CreateRoleUseCase(unit_of_work_factory))
    role = RoleResource(
        get_role,
        UpdateRoleUseCase(unit_of_work_factory),
        DeleteRoleUseCase(unit_of_work_factory),
    )
    role_permissions = RolePermissionsResource(AddPermissionUseCase(unit_of_work_factory))
    role_permission = RolePermissionResource(
        UpdatePermissionUseCase(unit_of_work_factory),
        RemovePermissionUseCase(unit_of_work_factory),
    )
    access = RoleAccessResource(CheckAccessUseCase(unit_of_work_factory))
    role_users = RoleUsersResource(get_role)
    role_user = RoleUserResource(
        AttachUserUseCase(unit_of_work_factory),
        DetachUserUseCase(unit_of_work_factory),
    )
    health = HealthResource(pool)

    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _handle_unexpected)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/roles", roles)
    app.add_route("/v1/roles/{slug}", role)
    app.add_route("/v1/roles/{slug}/permissions", role_permissions)
    app.add_route("/v1/roles/{slug}/permissions/{permission}", role_permission)
    app.add_route("/v1/roles/{slug}/access", access)
    app.add_route("/v1/roles/{slug}/users", role_users)
    app.add_route("/v1/roles/{slug}/users/{user_id}", role_user)
    return app

"""JSON shapes for roles and users."""

from dataclasses import asdict, is_dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from roleguard.domain.entities import Role


def _plain(value: Any) -> Any:
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def user_to_dict(user: Any) -> dict[str, Any]:
    """Serialize any user object - dataclass, pydantic-like or plain."""
    if is_dataclass(user):
        data = asdict(user)
    elif hasattr(user, "model_dump"):
        data = user.model_dump()
    else:
        data = dict(vars(user))
    return {k: _plain(v) for k, v in data.items() if not k.startswith("_")}


def role_to_dict(role: Role, with_users: bool = False) -> dict[str, Any]:
    data = {
        "id": _plain(role.id),
        "slug": role.slug,
        "name": role.name,
        "permissions": dict(role.permissions),
        "created_at": _plain(role.created_at),
        "updated_at": _plain(role.updated_at),
    }
    if with_users:
        data["users"] = [user_to_dict(u) for u in role.get_users()]
    return data

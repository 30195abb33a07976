"""Role entity for RBAC."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar
from uuid import UUID

from roleguard.domain.exceptions import MethodNotSupported
from roleguard.domain.permissions import (
    EvaluatorFactory,
    PermissionsEvaluator,
    StandardPermissions,
)
from roleguard.domain.permissions_codec import decode_permissions, encode_permissions

logger = logging.getLogger(__name__)


@dataclass
class Role:
    """Role - named set of permission grants, assignable to users.

    ``permissions`` maps permission name to grant value and is changed only
    through ``add_permission``, ``update_permission`` and ``remove_permission``.
    Access checks go through an evaluator built lazily from the mapping; the
    cached evaluator is dropped whenever the mapping changes.
    """

    FORWARDED_METHODS: ClassVar[frozenset[str]] = frozenset({"has_access", "has_any_access"})

    id: UUID
    slug: str
    name: str
    permissions: dict[str, Any] = field(default_factory=dict)
    users: list[Any] = field(default_factory=list, compare=False)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    evaluator_factory: EvaluatorFactory = field(
        default=StandardPermissions, repr=False, compare=False
    )
    _evaluator: PermissionsEvaluator | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @classmethod
    def from_persisted(
        cls,
        id: UUID,
        slug: str,
        name: str,
        permissions: str | bytes | None,
        **kwargs: Any,
    ) -> "Role":
        """Hydrate a role from stored columns, decoding the permissions text."""
        return cls(
            id=id,
            slug=slug,
            name=name,
            permissions=decode_permissions(permissions),
            **kwargs,
        )

    def encoded_permissions(self) -> str:
        """Permissions as stored: JSON object text, '' when there are none."""
        return encode_permissions(self.permissions)

    def get_role_id(self) -> UUID:
        return self.id

    def get_role_slug(self) -> str:
        return self.slug

    def get_users(self) -> list[Any]:
        return self.users

    def get_permissions(self) -> PermissionsEvaluator:
        """Return the evaluator for the current grants, building it on first use."""
        if self._evaluator is None:
            self._evaluator = self.evaluator_factory(self.permissions)
        return self._evaluator

    def add_permission(self, permission: str, value: Any) -> "Role":
        """Grant ``permission`` unless it is already present. Never overwrites."""
        if permission in self.permissions:
            logger.debug("Role %s already has %r, add skipped", self.slug, permission)
            return self
        self._replace_permissions({**self.permissions, permission: value})
        return self

    def update_permission(self, permission: str, value: Any) -> "Role":
        """Change the value of an existing ``permission``. Never creates one."""
        if permission not in self.permissions:
            logger.debug("Role %s has no %r, update skipped", self.slug, permission)
            return self
        permissions = dict(self.permissions)
        permissions[permission] = value
        self._replace_permissions(permissions)
        return self

    def remove_permission(self, permission: str) -> "Role":
        """Drop ``permission`` if present."""
        if permission not in self.permissions:
            logger.debug("Role %s has no %r, remove skipped", self.slug, permission)
            return self
        permissions = dict(self.permissions)
        del permissions[permission]
        self._replace_permissions(permissions)
        return self

    def has_access(self, *permissions: str | Iterable[str]) -> bool:
        return self.get_permissions().has_access(*permissions)

    def has_any_access(self, *permissions: str | Iterable[str]) -> bool:
        return self.get_permissions().has_any_access(*permissions)

    def _replace_permissions(self, permissions: dict[str, Any]) -> None:
        self.permissions = permissions
        self._evaluator = None

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes that do not exist.
        raise MethodNotSupported(type(self).__name__, name)

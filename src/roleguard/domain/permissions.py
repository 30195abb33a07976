"""Permission evaluator contract and the default exact-match evaluator."""

from collections.abc import Callable, Iterable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PermissionsEvaluator(Protocol):
    """Answers access questions against one role's permission mapping."""

    def has_access(self, *permissions: str | Iterable[str]) -> bool:
        """True when every given permission is granted."""
        ...

    def has_any_access(self, *permissions: str | Iterable[str]) -> bool:
        """True when at least one given permission is granted."""
        ...


EvaluatorFactory = Callable[[Mapping[str, Any]], PermissionsEvaluator]

# JSON scalars; grants are never nested structures
GRANT_VALUE_TYPES = (bool, int, float, str, type(None))


def flatten_permissions(permissions: tuple[str | Iterable[str], ...]) -> list[str]:
    """Accept ``("a", "b")``, ``(["a", "b"],)`` or a mix; return names in order."""
    names: list[str] = []
    for item in permissions:
        if isinstance(item, (bytes, bytearray)):
            raise TypeError("Permission names must be str, not bytes")
        if isinstance(item, str):
            names.append(item)
        else:
            names.extend(item)
    return names


class StandardPermissions:
    """Exact-name evaluator. A permission is granted when its value is truthy."""

    def __init__(self, permissions: Mapping[str, Any]) -> None:
        self._permissions = dict(permissions)

    def __repr__(self) -> str:
        return f"StandardPermissions({self._permissions!r})"

    def is_granted(self, permission: str) -> bool:
        return bool(self._permissions.get(permission, False))

    def has_access(self, *permissions: str | Iterable[str]) -> bool:
        names = flatten_permissions(permissions)
        # asking about nothing grants nothing; all() alone would say True
        if not names:
            return False
        return all(self.is_granted(name) for name in names)

    def has_any_access(self, *permissions: str | Iterable[str]) -> bool:
        return any(self.is_granted(name) for name in flatten_permissions(permissions))

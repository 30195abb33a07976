"""Domain exceptions."""


class RoleGuardError(Exception):
    """Base exception for roleguard."""

    pass


class NotFound(RoleGuardError):
    """Requested resource was not found."""

    def __init__(self, resource: str, key: object) -> None:
        super().__init__(f"{resource} not found: {key}")
        self.resource = resource
        self.key = key


class DuplicateRole(RoleGuardError):
    """Role with the same slug already exists."""

    pass


class ValidationError(RoleGuardError):
    """Validation failed for input data."""

    pass


class MethodNotSupported(RoleGuardError, AttributeError):
    """Method is neither defined on the role nor forwarded to its evaluator."""

    def __init__(self, owner: str, method: str) -> None:
        super().__init__(f"Call to undefined method {owner}.{method}()")
        self.owner = owner
        self.method = method

"""User entity - default target of the role membership relation."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class User:
    """User that can hold roles."""

    id: UUID
    email: str
    name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum


class Role(str, Enum):
    """Access level assigned to a user at creation."""
    USER = 'USER'
    ADMIN = 'ADMIN'


@dataclass
class User:
    """Domain model representing a user."""
    id: str
    name: str
    email: str
    created_at: datetime
    role: Role = Role.USER
    image: str | None = None
    password_hash: str | None = None


@dataclass(frozen=True)
class ProfileStats:
    """A user together with counts of the content they authored or liked."""
    user: User
    blog_count: int = 0
    like_count: int = 0
    comment_count: int = 0


@dataclass(frozen=True)
class UserUpdate:
    """Partial update of the mutable user fields.

    Fields left as None are not written.
    """
    name: str | None = None
    email: str | None = None
    password_hash: str | None = None

    def changes(self) -> dict[str, str]:
        """Return the supplied fields keyed by attribute name, in declaration order."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

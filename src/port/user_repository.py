from typing import Protocol

from domain.model.user import ProfileStats, Role, User, UserUpdate


class UserRepository(Protocol):
    """Protocol defining the interface for user data access."""
    async def create(
        self, name: str, email: str, password_hash: str, role: Role = Role.USER
    ) -> User:
        """Insert a new user. Raise DuplicateError if the email is taken."""
        ...

    async def get_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        ...

    async def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    async def get_profile_with_counts(self, email: str) -> ProfileStats | None:
        """Find a user by email along with blog, like and comment counts."""
        ...

    async def update(self, user_id: str, changes: UserUpdate) -> User:
        """Write the supplied fields and return the updated user.

        Raise NotFoundError if the user does not exist and DuplicateError
        if the new email is taken.
        """
        ...

    async def ping(self) -> bool:
        """Return True if the backing store is reachable."""
        ...

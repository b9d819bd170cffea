"""Registration service — account creation business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging

from domain.model.errors import DuplicateError, ValidationError
from domain.model.user import Role, User
from port.user_repository import UserRepository
from utils.passwords import hash_password_async

logger = logging.getLogger(__name__)


async def register(
    repo: UserRepository,
    name: str | None,
    email: str | None,
    password: str | None,
) -> User:
    """Register a new user with the default role.

    Returns the created User domain object (still carrying its password hash;
    callers strip it before responding).

    Raises:
        ValidationError: name, email or password missing
        DuplicateError: email already registered
    """
    if not name or not email or not password:
        raise ValidationError("Missing required fields")

    # Fast path for a clear message; the unique constraint is the real guard
    if await repo.get_by_email(email):
        raise DuplicateError("User with this email already exists")

    password_hash = await hash_password_async(password)

    try:
        user = await repo.create(
            name=name, email=email, password_hash=password_hash, role=Role.USER
        )
    except DuplicateError as e:
        raise DuplicateError("User with this email already exists") from e

    logger.info("User registered", extra={"userId": user.id, "email": email})
    return user

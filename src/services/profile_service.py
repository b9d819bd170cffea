"""Profile service — profile retrieval and update business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging

from domain.model.errors import DuplicateError, NotFoundError, ValidationError
from domain.model.user import User, UserUpdate
from port.user_repository import UserRepository
from utils.passwords import hash_password_async, verify_password_async

logger = logging.getLogger(__name__)


async def get_profile(repo: UserRepository, session_email: str) -> User:
    """Load the profile of the signed-in user.

    Blog, like and comment counts are fetched with the profile but are not
    part of the returned user.

    Raises:
        NotFoundError: no user with the session email
    """
    stats = await repo.get_profile_with_counts(session_email)
    if not stats:
        raise NotFoundError("User not found")

    logger.debug("Profile loaded", extra={
        "userId": stats.user.id,
        "blogCount": stats.blog_count,
        "likeCount": stats.like_count,
        "commentCount": stats.comment_count,
    })
    return stats.user


async def update_profile(
    repo: UserRepository,
    session_email: str,
    name: str | None,
    email: str | None,
    current_password: str | None = None,
    new_password: str | None = None,
) -> User:
    """Update name, email and optionally password of the signed-in user.

    Returns the updated User domain object.

    Raises:
        NotFoundError: no user with the session email, or the account has no password
        ValidationError: name or email missing, or new password given without
            a correct current password
        DuplicateError: the new email belongs to another user
    """
    user = await repo.get_by_email(session_email)
    if not user or not user.password_hash:
        raise NotFoundError("User not found")

    if not name or not email:
        raise ValidationError("Missing required fields")

    if new_password:
        if not current_password:
            raise ValidationError("Current password is required to set a new password")
        if not await verify_password_async(current_password, user.password_hash):
            raise ValidationError("Current password is incorrect")

    if email != session_email and await repo.get_by_email(email):
        raise DuplicateError("Email is already taken")

    changes = UserUpdate(
        name=name,
        email=email,
        password_hash=await hash_password_async(new_password) if new_password else None,
    )
    updated = await repo.update(user.id, changes)

    logger.info("Profile updated", extra={
        "userId": user.id,
        "emailChanged": updated.email != session_email,
        "passwordChanged": changes.password_hash is not None,
    })
    return updated

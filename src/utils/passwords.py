"""Password hashing and verification with bcrypt."""

import asyncio
import os

import bcrypt

from domain.model.errors import HashError

# bcrypt configuration
# 10 rounds (2^10 iterations) keeps digests interchangeable with existing $2a$10$ / $2b$10$ hashes
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

# bcrypt only looks at the first 72 bytes of a password
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode('utf-8')[:_BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Bcrypt hashed password as string
    """
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(_encode(password), salt).decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash.

    Args:
        plain_password: Plain text password
        hashed_password: Bcrypt hashed password (string format)

    Returns:
        True if password matches, False otherwise

    Raises:
        HashError: hashed_password is not a bcrypt digest
    """
    try:
        return bcrypt.checkpw(_encode(plain_password), hashed_password.encode('utf-8'))
    except ValueError as e:
        raise HashError("Malformed password digest") from e


async def hash_password_async(password: str) -> str:
    return await asyncio.to_thread(hash_password, password)


async def verify_password_async(plain_password: str, hashed_password: str) -> bool:
    return await asyncio.to_thread(verify_password, plain_password, hashed_password)

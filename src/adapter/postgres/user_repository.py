"""PostgreSQL implementation of UserRepository."""

import uuid
from logging import getLogger

import asyncpg

from adapter.postgres.connection import USERS_TABLE_NAME
from domain.model.errors import DuplicateError, NotFoundError
from domain.model.user import ProfileStats, Role, User, UserUpdate

logger = getLogger(__name__)

# UserUpdate attribute -> column. The only columns an update may touch.
_UPDATABLE_COLUMNS = {
    'name': 'name',
    'email': 'email',
    'password_hash': 'password',
}

_PROFILE_WITH_COUNTS_QUERY = f"""
    SELECT
        u.*,
        COUNT(DISTINCT b.id) AS blog_count,
        COUNT(DISTINCT l.id) AS like_count,
        COUNT(DISTINCT c.id) AS comment_count
    FROM {USERS_TABLE_NAME} u
    LEFT JOIN blogs b ON b.author_id = u.id
    LEFT JOIN likes l ON l.user_id = u.id
    LEFT JOIN comments c ON c.author_id = u.id
    WHERE u.email = $1
    GROUP BY u.id
"""


class PostgresUserRepository:
    def __init__(self, pool: asyncpg.Pool):
        self.pool = pool

    def _to_domain(self, row) -> User:
        """Convert a users row to User domain model."""
        return User(
            id=str(row['id']),
            name=row['name'],
            email=row['email'],
            created_at=row['created_at'],
            role=Role(row['role']),
            image=row['image'],
            password_hash=row['password'],
        )

    async def create(
        self, name: str, email: str, password_hash: str, role: Role = Role.USER
    ) -> User:
        """Insert a new user and return the User object."""
        user_id = uuid.uuid4().hex
        try:
            async with self.pool.acquire() as conn:
                row = await conn.fetchrow(
                    f"""
                    INSERT INTO {USERS_TABLE_NAME} (id, name, email, password, role)
                    VALUES ($1, $2, $3, $4, $5)
                    RETURNING *
                    """,
                    user_id, name, email, password_hash, role.value,
                )
        except asyncpg.UniqueViolationError as e:
            logger.warning("User creation failed: email already exists", extra={"email": email})
            raise DuplicateError("User with this email already exists") from e

        logger.info("User created", extra={"userId": user_id, "email": email})
        return self._to_domain(row)

    async def update(self, user_id: str, changes: UserUpdate) -> User:
        """Write the supplied fields and return the full updated row."""
        fields = changes.changes()
        if not fields:
            user = await self.get_by_id(user_id)
            if not user:
                raise NotFoundError("User not found")
            return user

        assignments = ", ".join(
            f"{_UPDATABLE_COLUMNS[attr]} = ${i}"
            for i, attr in enumerate(fields, start=2)
        )
        try:
            async with self.pool.acquire() as conn:
                row = await conn.fetchrow(
                    f"UPDATE {USERS_TABLE_NAME} SET {assignments} WHERE id = $1 RETURNING *",
                    user_id, *fields.values(),
                )
        except asyncpg.UniqueViolationError as e:
            logger.warning("User update failed: email already exists", extra={"userId": user_id})
            raise DuplicateError("Email is already taken") from e

        if row is None:
            raise NotFoundError("User not found")

        logger.debug("User updated", extra={"userId": user_id, "fields": [a for a in fields if a != 'password_hash']})
        return self._to_domain(row)

    async def get_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        async with self.pool.acquire() as conn:
            row = await conn.fetchrow(
                f"SELECT * FROM {USERS_TABLE_NAME} WHERE email = $1", email
            )
        return self._to_domain(row) if row else None

    async def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        async with self.pool.acquire() as conn:
            row = await conn.fetchrow(
                f"SELECT * FROM {USERS_TABLE_NAME} WHERE id = $1", user_id
            )
        return self._to_domain(row) if row else None

    async def get_profile_with_counts(self, email: str) -> ProfileStats | None:
        """Find a user by email along with counts of related content.

        LEFT JOINs keep users that have no blogs, likes or comments.
        """
        async with self.pool.acquire() as conn:
            row = await conn.fetchrow(_PROFILE_WITH_COUNTS_QUERY, email)
        if not row:
            return None
        return ProfileStats(
            user=self._to_domain(row),
            blog_count=int(row['blog_count']),
            like_count=int(row['like_count']),
            comment_count=int(row['comment_count']),
        )

    async def ping(self) -> bool:
        try:
            async with self.pool.acquire() as conn:
                return await conn.fetchval("SELECT 1") == 1
        except (OSError, asyncpg.PostgresError) as e:
            logger.warning("Database ping failed", extra={"error": str(e)[:200]})
            return False

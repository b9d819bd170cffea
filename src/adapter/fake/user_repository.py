"""In-memory implementation of UserRepository for testing."""

import uuid
from dataclasses import replace
from datetime import datetime, timezone

from domain.model.errors import DuplicateError, NotFoundError
from domain.model.user import ProfileStats, Role, User, UserUpdate


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}
        # related rows owned by other subsystems, keyed by user id
        self.blogs: dict[str, set[str]] = {}
        self.likes: dict[str, set[str]] = {}
        self.comments: dict[str, set[str]] = {}
        self.update_calls = 0

    # ── write operations ─────────────────────────────────────

    async def create(
        self, name: str, email: str, password_hash: str, role: Role = Role.USER
    ) -> User:
        if self._find_email(email):
            raise DuplicateError("User with this email already exists")

        user = User(
            id=uuid.uuid4().hex,
            name=name,
            email=email,
            created_at=datetime.now(timezone.utc),
            role=role,
            password_hash=password_hash,
        )
        self.store[user.id] = user
        return replace(user)

    async def update(self, user_id: str, changes: UserUpdate) -> User:
        user = self.store.get(user_id)
        if not user:
            raise NotFoundError("User not found")

        fields = changes.changes()
        owner = self._find_email(fields.get('email'))
        if owner and owner.id != user_id:
            raise DuplicateError("Email is already taken")

        self.update_calls += 1
        updated = replace(user, **fields)
        self.store[user_id] = updated
        return replace(updated)

    # ── related rows ─────────────────────────────────────────

    def add_blog(self, user_id: str, blog_id: str | None = None) -> None:
        self.blogs.setdefault(user_id, set()).add(blog_id or uuid.uuid4().hex)

    def add_like(self, user_id: str, like_id: str | None = None) -> None:
        self.likes.setdefault(user_id, set()).add(like_id or uuid.uuid4().hex)

    def add_comment(self, user_id: str, comment_id: str | None = None) -> None:
        self.comments.setdefault(user_id, set()).add(comment_id or uuid.uuid4().hex)

    # ── read operations ──────────────────────────────────────

    async def get_by_email(self, email: str) -> User | None:
        user = self._find_email(email)
        return replace(user) if user else None

    async def get_by_id(self, user_id: str) -> User | None:
        user = self.store.get(user_id)
        return replace(user) if user else None

    async def get_profile_with_counts(self, email: str) -> ProfileStats | None:
        user = self._find_email(email)
        if not user:
            return None
        return ProfileStats(
            user=replace(user),
            blog_count=len(self.blogs.get(user.id, ())),
            like_count=len(self.likes.get(user.id, ())),
            comment_count=len(self.comments.get(user.id, ())),
        )

    async def ping(self) -> bool:
        return True

    def _find_email(self, email: str | None) -> User | None:
        if email is None:
            return None
        for user in self.store.values():
            if user.email == email:
                return user
        return None

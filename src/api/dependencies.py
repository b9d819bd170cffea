import os
from functools import lru_cache

from fastapi import HTTPException, Request

from adapter.postgres.user_repository import PostgresUserRepository
from adapter.session.jwt_session import JWTSessionVerifier
from port.session_verifier import SessionVerifier
from port.user_repository import UserRepository


def _get_pool(request: Request):
    """Get the connection pool created at startup, raising 503 if unavailable."""
    pool = getattr(request.app.state, "db_pool", None)
    if pool is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return pool


def get_user_repo(request: Request) -> UserRepository:
    return PostgresUserRepository(_get_pool(request))


@lru_cache
def get_session_verifier() -> SessionVerifier:
    return JWTSessionVerifier(
        secret_key=os.getenv("SESSION_SECRET_KEY", ""),
        expiration_days=int(os.getenv("SESSION_EXPIRATION_DAYS", "30")),
    )

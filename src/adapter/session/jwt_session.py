"""JWT implementation of SessionVerifier.

Tokens are HS256-signed with the user's email in the ``sub`` claim.
"""

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"


class JWTSessionVerifier:
    def __init__(self, secret_key: str, expiration_days: int = 30):
        if not secret_key:
            raise ValueError(
                "SESSION_SECRET_KEY environment variable is required. "
                "Generate a secure key with: openssl rand -hex 32"
            )
        self.secret_key = secret_key
        self.expiration_days = expiration_days

    def issue(self, email: str) -> str:
        """Create a session token for the given email."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": email,
            "exp": now + timedelta(days=self.expiration_days),
            "iat": now,
        }
        return jwt.encode(payload, self.secret_key, algorithm=JWT_ALGORITHM)

    def resolve(self, token: str | None) -> str | None:
        """Verify the token and return its email, or None if absent or invalid."""
        if not token:
            return None
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[JWT_ALGORITHM],
                options={"require_exp": True},
            )
        except JWTError as e:
            logger.debug(f"Session verification failed: {e}")
            return None

        email = payload.get("sub")
        if not isinstance(email, str) or not email:
            return None
        return email

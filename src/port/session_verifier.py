"""Port definition for SessionVerifier."""

from typing import Protocol


class SessionVerifier(Protocol):
    def resolve(self, token: str | None) -> str | None:
        """Return the email the session token belongs to, or None."""
        ...

"""Session authentication dependencies."""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from api.dependencies import get_session_verifier
from domain.model.errors import UnauthorizedError
from port.session_verifier import SessionVerifier

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_session_email(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    verifier: SessionVerifier = Depends(get_session_verifier),
) -> str:
    """Resolve the caller's email from the session token. Raises 401 if absent or invalid."""
    token = credentials.credentials if credentials else None
    email = verifier.resolve(token)
    if not email:
        raise UnauthorizedError("Unauthorized")
    return email

"""Profile routes for the signed-in user.

Endpoints:
- GET /api/auth/profile: Get the caller's profile
- PUT /api/auth/profile: Update name, email and optionally password
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_user_repo
from api.models import ProfileUpdateRequest, UserResponse
from api.security import get_session_email
from port.user_repository import UserRepository
from services import profile_service

router = APIRouter(prefix="/api/auth", tags=["profile"])


@router.get("/profile", response_model=UserResponse)
async def get_profile(
    session_email: str = Depends(get_session_email),
    repo: UserRepository = Depends(get_user_repo),
):
    """Get the caller's profile."""
    user = await profile_service.get_profile(repo, session_email)
    return UserResponse.from_domain(user)


@router.put("/profile", response_model=UserResponse)
async def update_profile(
    request: ProfileUpdateRequest,
    session_email: str = Depends(get_session_email),
    repo: UserRepository = Depends(get_user_repo),
):
    """Update the caller's profile.

    Setting newPassword requires the correct currentPassword.
    """
    user = await profile_service.update_profile(
        repo,
        session_email,
        name=request.name,
        email=request.email,
        current_password=request.current_password,
        new_password=request.new_password,
    )
    return UserResponse.from_domain(user)

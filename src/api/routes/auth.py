"""Authentication routes (register)."""

from fastapi import APIRouter, Depends, status

from api.dependencies import get_user_repo
from api.models import RegisterRequest, UserResponse
from port.user_repository import UserRepository
from services import registration_service

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, repo: UserRepository = Depends(get_user_repo)):
    """Register a new user.

    Args:
        request: Registration request with name, email, password

    Returns:
        Created user (without password)

    Raises:
        400 if a field is missing or the email is already registered
    """
    user = await registration_service.register(
        repo,
        name=request.name,
        email=request.email,
        password=request.password,
    )
    return UserResponse.from_domain(user)

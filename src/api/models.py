"""Pydantic models for API request/response."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.model.user import User


class UserResponse(BaseModel):
    """Public representation of a user. Never carries the password hash."""
    id: str = Field(..., description="User ID")
    name: str
    email: str
    image: Optional[str] = Field(None, description="Avatar reference")
    role: str = Field(..., description="Access level: USER or ADMIN")
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            image=user.image,
            role=user.role.value,
            created_at=user.created_at,
        )


class RegisterRequest(BaseModel):
    """Request model for user registration.

    Fields are optional here so that missing ones are reported as a 400
    business error rather than a schema error.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class ProfileUpdateRequest(BaseModel):
    """Request model for profile update."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    email: Optional[str] = None
    current_password: Optional[str] = Field(None, alias="currentPassword")
    new_password: Optional[str] = Field(None, alias="newPassword")

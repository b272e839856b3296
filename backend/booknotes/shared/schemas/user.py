"""
User Schemas

Registration, login and profile payloads.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, EmailStr, Field

from booknotes.shared.models.user import User
from booknotes.shared.schemas.common import BaseSchema

if TYPE_CHECKING:
    from booknotes.shared.services.auth_service import AuthResult


class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6, description="At least 6 characters")
    name: str = Field(default="", max_length=200)
    address: Optional[str] = None


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class UserUpdate(BaseModel):
    """Partial profile update. Omitted fields are left unchanged."""

    name: Optional[str] = Field(default=None, max_length=200)
    address: Optional[str] = None
    avatar_url: Optional[str] = None


class UserResponse(BaseSchema):
    """Public view of an account; never includes the password hash."""

    id: str
    email: str
    name: str
    address: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=str(user.id),
            email=user.email,
            name=user.name,
            address=user.address,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
        )


class PublicUserResponse(BaseSchema):
    """What other users may see: no email, no address."""

    id: str
    name: str
    avatar_url: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "PublicUserResponse":
        return cls(id=str(user.id), name=user.name, avatar_url=user.avatar_url, created_at=user.created_at)


class AuthResponse(BaseModel):
    user: UserResponse
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(description="Token lifetime in seconds")

    @classmethod
    def from_result(cls, result: "AuthResult") -> "AuthResponse":
        return cls(
            user=UserResponse.from_user(result.user),
            access_token=result.access_token,
            expires_in=result.expires_in,
        )

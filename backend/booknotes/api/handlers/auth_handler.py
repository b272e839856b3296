"""
Authentication Handler

    POST /api/auth/register   201 → AuthResponse      (400 bad input, 409 email taken)
    POST /api/auth/login      200 → AuthResponse      (401 bad credentials)
    GET  /api/auth/me         200 → UserResponse      (401 without a valid token)
"""

from fastapi import APIRouter, Depends, status

from booknotes.shared.schemas.user import AuthResponse, UserCreate, UserLogin, UserResponse
from booknotes.shared.services.auth_service import AuthService
from booknotes.api.dependencies import CurrentUser
from booknotes.api.dependencies.services import get_auth_service


router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: UserCreate,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Create an account and return a token for it."""
    result = await auth_service.register_user(
        email=payload.email,
        password=payload.password,
        name=payload.name,
        address=payload.address,
    )
    return AuthResponse.from_result(result)


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: UserLogin,
    auth_service: AuthService = Depends(get_auth_service),
):
    result = await auth_service.login_user(email=payload.email, password=payload.password)
    return AuthResponse.from_result(result)


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: CurrentUser):
    return UserResponse.from_user(current_user)

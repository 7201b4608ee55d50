"""Auth API: staff login and current user.

Uses only injected dependencies (get_user_repo, get_auth_security).
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import (
    AuthSecurity,
    get_auth_security,
    get_current_user,
    get_user_repo,
)
from app.application.dtos.user import UserResult
from app.core.limiter import limit_auth
from app.domain.exceptions import AuthenticationException
from app.infrastructure.persistence.repositories import UserRepository
from app.schemas.auth import LoginRequest, TokenResponse, UserResponse

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
@limit_auth
async def login(
    request: Request,
    body: LoginRequest,
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
    auth_security: Annotated[AuthSecurity, Depends(get_auth_security)],
):
    """Authenticate with username and password; return a bearer JWT."""
    user = await user_repo.authenticate(body.username, body.password)
    if not user:
        raise AuthenticationException("Invalid credentials")
    return TokenResponse(access_token=auth_security.create_access_token(user))


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: Annotated[UserResult, Depends(get_current_user)],
):
    """Return the authenticated staff user."""
    return UserResponse.model_validate(current_user)

"""Auth dependencies: bearer token → current staff user, role checks (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.user import UserResult
from app.domain.enums import UserRole
from app.domain.exceptions import AuthenticationException, AuthorizationException
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.repositories import UserRepository
from app.infrastructure.security.jwt import create_access_token, verify_token
from app.shared.context import set_current_user

_http_bearer = HTTPBearer(auto_error=False)

# Roles allowed to manage signups and send early-access notifications.
STAFF_ROLES = (UserRole.ADMIN, UserRole.EDITOR)


class AuthSecurity:
    """Token creation provided via DI (no direct infra imports in routes)."""

    def create_access_token(self, user: UserResult) -> str:
        return create_access_token(
            {"sub": user.id, "username": user.username, "role": user.role}
        )


def get_auth_security() -> AuthSecurity:
    return AuthSecurity()


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    """User repository (read path: login, token resolution)."""
    return UserRepository(db)


async def get_current_user_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> UserResult | None:
    """Return current user from JWT if present and valid; else None."""
    if not credentials:
        return None
    try:
        payload = verify_token(credentials.credentials)
    except ValueError:
        return None
    user = await user_repo.get_by_id(payload["sub"])
    if not user or not user.is_active:
        return None
    set_current_user(user.id)
    return user


async def get_current_user(
    current_user: Annotated[UserResult | None, Depends(get_current_user_optional)],
) -> UserResult:
    """Return current user from JWT; raise 401 if missing or invalid."""
    if current_user is None:
        raise AuthenticationException("Not authenticated")
    return current_user


def require_roles(*roles: UserRole):
    """Dependency factory: require JWT auth and one of the given roles."""
    allowed = {r.value for r in roles}

    async def _require(
        current_user: Annotated[UserResult, Depends(get_current_user)],
    ) -> UserResult:
        if current_user.role not in allowed:
            raise AuthorizationException(sorted(allowed))
        return current_user

    return _require


require_staff = require_roles(*STAFF_ROLES)

"""Early-access signup use cases: public signup, admin listing, and review status."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.enums import SignupStatus
from app.domain.exceptions import (
    DuplicateSignupException,
    ResourceNotFoundException,
    ValidationException,
)

if TYPE_CHECKING:
    from app.application.dtos.signup import SignupCreate, SignupPage, SignupResult
    from app.application.interfaces.repositories import ISignupRepository


class SignupService:
    """Signups feed the recipient list of early-access notifications."""

    def __init__(self, signup_repo: "ISignupRepository") -> None:
        self.signup_repo = signup_repo

    async def sign_up(self, app_id: str, data: "SignupCreate") -> "SignupResult":
        """Create a pending signup. App must be active; one signup per email per app."""
        if not await self.signup_repo.app_is_active(app_id):
            raise ResourceNotFoundException("app", app_id)
        if await self.signup_repo.exists_for_email(app_id, data.email):
            raise DuplicateSignupException(app_id)
        return await self.signup_repo.create_signup(app_id, data)

    async def list_signups(
        self,
        app_id: str,
        page: int = 1,
        limit: int = 20,
        status: str | None = None,
    ) -> "SignupPage":
        if status is not None and status not in SignupStatus.values():
            raise ValidationException(f"Invalid status: {status}", field="status")
        return await self.signup_repo.list_for_app(
            app_id, page=max(1, page), limit=max(1, limit), status=status
        )

    async def update_status(self, signup_id: str, status: str) -> "SignupResult":
        if status not in SignupStatus.values():
            raise ValidationException("Invalid status", field="status")
        updated = await self.signup_repo.update_status(signup_id, status)
        if updated is None:
            raise ResourceNotFoundException("signup", signup_id)
        return updated

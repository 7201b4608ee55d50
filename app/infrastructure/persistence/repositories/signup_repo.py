"""Early-access signup repository. Interface methods return application DTOs."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.notification import NotificationRecipient
from app.application.dtos.signup import SignupCreate, SignupPage, SignupResult
from app.domain.enums import SignupStatus
from app.domain.exceptions import DuplicateSignupException
from app.infrastructure.persistence.models.content import ResearchApp
from app.infrastructure.persistence.models.early_access_signup import EarlyAccessSignup
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc


def _signup_to_result(s: EarlyAccessSignup) -> SignupResult:
    """Map ORM EarlyAccessSignup to application SignupResult."""
    return SignupResult(
        id=s.id,
        app_id=s.app_id,
        email=s.email,
        name=s.name,
        company=s.company,
        interests=list(s.interests or []),
        status=s.status,
        created_at=ensure_utc(s.created_at),
    )


class SignupRepository(BaseRepository[EarlyAccessSignup]):
    """Signups per app; approved signups are the notification recipients."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, EarlyAccessSignup)

    async def app_is_active(self, app_id: str) -> bool:
        result = await self.db.execute(
            select(ResearchApp.id).where(
                ResearchApp.id == app_id, ResearchApp.is_active.is_(True)
            )
        )
        return result.scalar_one_or_none() is not None

    async def exists_for_email(self, app_id: str, email: str) -> bool:
        result = await self.db.execute(
            select(EarlyAccessSignup.id).where(
                EarlyAccessSignup.app_id == app_id,
                EarlyAccessSignup.email == email,
            )
        )
        return result.scalar_one_or_none() is not None

    async def create_signup(self, app_id: str, data: SignupCreate) -> SignupResult:
        """Insert a pending signup. A concurrent insert for the same email raises DuplicateSignupException."""
        signup = EarlyAccessSignup(
            app_id=app_id,
            email=data.email,
            name=data.name,
            company=data.company,
            interests=list(data.interests) or None,
            status=SignupStatus.PENDING.value,
        )
        try:
            created = await self.create(signup)
        except IntegrityError as e:
            raise DuplicateSignupException(app_id) from e
        return _signup_to_result(created)

    async def list_for_app(
        self, app_id: str, page: int, limit: int, status: str | None = None
    ) -> SignupPage:
        """One page of signups for app_id (newest first), optionally filtered by status."""
        conditions = [EarlyAccessSignup.app_id == app_id]
        if status:
            conditions.append(EarlyAccessSignup.status == status)
        total = await self.db.scalar(
            select(func.count()).select_from(EarlyAccessSignup).where(*conditions)
        )
        result = await self.db.execute(
            select(EarlyAccessSignup)
            .where(*conditions)
            .order_by(EarlyAccessSignup.created_at.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        return SignupPage(
            items=[_signup_to_result(s) for s in result.scalars().all()],
            page=page,
            limit=limit,
            total_items=total or 0,
        )

    async def update_status(self, signup_id: str, status: str) -> SignupResult | None:
        signup = await self._get(signup_id)
        if signup is None:
            return None
        signup.status = status
        updated = await self.update(signup)
        return _signup_to_result(updated)

    async def list_approved_recipients(self, app_id: str) -> list[NotificationRecipient]:
        result = await self.db.execute(
            select(EarlyAccessSignup.email, EarlyAccessSignup.name)
            .where(
                EarlyAccessSignup.app_id == app_id,
                EarlyAccessSignup.status == SignupStatus.APPROVED.value,
            )
            .order_by(EarlyAccessSignup.created_at.asc(), EarlyAccessSignup.id.asc())
        )
        return [
            NotificationRecipient(email=row.email, display_name=row.name)
            for row in result.all()
        ]

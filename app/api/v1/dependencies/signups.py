"""Early-access signup dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.use_cases.signups import SignupService
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import SignupRepository


async def get_signup_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SignupRepository:
    return SignupRepository(db)


async def get_signup_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> SignupRepository:
    return SignupRepository(db)


async def get_signup_service(
    signup_repo: Annotated[SignupRepository, Depends(get_signup_repo_for_write)],
) -> SignupService:
    """Signup use case (create, list, review) on a transactional session."""
    return SignupService(signup_repo)

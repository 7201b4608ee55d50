"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.content_store_repo import (
    ContentStoreRepository,
)
from app.infrastructure.persistence.repositories.signup_repo import SignupRepository
from app.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "ContentStoreRepository",
    "SignupRepository",
    "UserRepository",
]

"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from app.domain.enums import ContentType

if TYPE_CHECKING:
    from app.application.dtos.search import SearchHit, SearchStats
    from app.application.dtos.signup import SignupCreate, SignupPage, SignupResult
    from app.application.dtos.notification import NotificationRecipient
    from app.application.dtos.user import UserResult


# Content store interface (public, searchable content)
class IContentStore(Protocol):
    """Protocol for read access to public blogs, webinars, and apps.

    Implementations raise StoreUnavailableException when the backing store
    cannot be reached.
    """

    async def fetch_public_hits(
        self, content_type: ContentType, query_text: str, limit: int
    ) -> list[SearchHit]:
        """Return up to limit public rows of content_type whose text fields contain query_text."""

    async def fetch_public_titles(
        self, content_type: ContentType, query_text: str, limit: int
    ) -> list[str]:
        """Return up to limit public titles of content_type containing query_text."""

    async def count_public(self) -> SearchStats:
        """Return counts of public content per kind."""


# Early-access signup repository interface
class ISignupRepository(Protocol):
    """Protocol for early-access signups (recipient source for notifications)."""

    async def app_is_active(self, app_id: str) -> bool:
        """Return True if the app exists and is active."""

    async def exists_for_email(self, app_id: str, email: str) -> bool:
        """Return True if email already signed up for app_id."""

    async def create_signup(self, app_id: str, data: SignupCreate) -> SignupResult:
        """Persist a pending signup."""

    async def list_for_app(
        self, app_id: str, page: int, limit: int, status: str | None = None
    ) -> SignupPage:
        """Return one page of signups for app_id, newest first."""

    async def update_status(self, signup_id: str, status: str) -> SignupResult | None:
        """Set status; return None when the signup does not exist."""

    async def list_approved_recipients(self, app_id: str) -> list[NotificationRecipient]:
        """Return approved signups for app_id as notification recipients, oldest first."""


# User repository interface
class IUserRepository(Protocol):
    """Protocol for staff user lookup and authentication."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by id, or None."""

    async def authenticate(self, username: str, password: str) -> UserResult | None:
        """Return user when credentials match and user is active; else None."""

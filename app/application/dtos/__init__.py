"""Application DTOs (no ORM dependency)."""

from app.application.dtos.notification import (
    DeliveryFailure,
    NotificationJob,
    NotificationRecipient,
    NotificationResult,
)
from app.application.dtos.search import ScoredHit, SearchHit, SearchQuery, SearchStats
from app.application.dtos.signup import SignupCreate, SignupPage, SignupResult
from app.application.dtos.user import UserResult

__all__ = [
    "DeliveryFailure",
    "NotificationJob",
    "NotificationRecipient",
    "NotificationResult",
    "ScoredHit",
    "SearchHit",
    "SearchQuery",
    "SearchStats",
    "SignupCreate",
    "SignupPage",
    "SignupResult",
    "UserResult",
]

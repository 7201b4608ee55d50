"""Application use cases: one entry point per workflow."""

from app.application.use_cases.notifications import EarlyAccessNotificationService
from app.application.use_cases.search import SearchService
from app.application.use_cases.signups import SignupService

__all__ = [
    "EarlyAccessNotificationService",
    "SearchService",
    "SignupService",
]

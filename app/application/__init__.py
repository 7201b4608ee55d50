"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (content store, signup repo, mail transport).
"""

from app.application.interfaces import (
    IContentStore,
    IMailTransport,
    ISignupRepository,
    IUserRepository,
)
from app.application.services import BulkNotifier, MailRenderer, RelevanceRanker
from app.application.use_cases import (
    EarlyAccessNotificationService,
    SearchService,
    SignupService,
)

__all__ = [
    "BulkNotifier",
    "EarlyAccessNotificationService",
    "IContentStore",
    "IMailTransport",
    "ISignupRepository",
    "IUserRepository",
    "MailRenderer",
    "RelevanceRanker",
    "SearchService",
    "SignupService",
]

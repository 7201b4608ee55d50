"""Application services: relevance ranking, mail personalization, bulk notification."""

from app.application.services.bulk_notifier import BulkNotifier
from app.application.services.mail_renderer import MailRenderer
from app.application.services.relevance_ranker import RelevanceRanker

__all__ = [
    "BulkNotifier",
    "MailRenderer",
    "RelevanceRanker",
]

"""Early-access notification use case: approved signups → bulk personalized mail."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.dtos.notification import NotificationJob, NotificationResult
from app.domain.exceptions import NoRecipientsException, ValidationException
from app.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from app.application.interfaces.repositories import ISignupRepository
    from app.application.services.bulk_notifier import BulkNotifier

logger = logging.getLogger(__name__)


class EarlyAccessNotificationService:
    """Notifies every approved early-access signup of an app."""

    def __init__(
        self,
        signup_repo: "ISignupRepository",
        notifier: "BulkNotifier",
    ) -> None:
        self.signup_repo = signup_repo
        self.notifier = notifier

    @traced("notifications.notify_early_access")
    async def notify_early_access(
        self,
        app_id: str,
        subject: str | None,
        message: str | None,
        result: NotificationResult | None = None,
    ) -> NotificationResult:
        """Send subject/message (with {{name}} token) to approved signups of app_id.

        Raises:
            ValidationException: subject or message missing.
            NoRecipientsException: app has no approved signups.
        """
        if not subject or not subject.strip() or not message or not message.strip():
            raise ValidationException("Subject and message are required")

        recipients = await self.signup_repo.list_approved_recipients(app_id)
        if not recipients:
            raise NoRecipientsException(app_id)

        job = NotificationJob(
            subject=subject,
            message_template=message,
            recipients=tuple(recipients),
        )
        logger.info(
            "Notifying %d approved early-access users for app %s", len(recipients), app_id
        )
        result = await self.notifier.notify_all(job, result)
        add_span_attributes(
            **{
                "notify.recipients": len(recipients),
                "notify.sent": result.sent_count,
                "notify.failed": result.failed_count,
            }
        )
        return result

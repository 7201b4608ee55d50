"""Bulk personalized notifier: sequential sends with per-recipient failure accounting."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from app.application.dtos.notification import NotificationJob, NotificationResult
from app.application.services.mail_renderer import MailRenderer
from app.domain.exceptions import MailDeliveryError, ValidationException

if TYPE_CHECKING:
    from app.application.interfaces.services import IMailTransport

logger = logging.getLogger(__name__)


class BulkNotifier:
    """Sends one personalized message per recipient through a mail transport.

    Recipients are processed one at a time in list order. A failed or timed
    out delivery is recorded in the result and the loop moves on; nothing is
    retried.
    """

    def __init__(
        self,
        transport: "IMailTransport",
        renderer: MailRenderer | None = None,
        *,
        send_timeout_seconds: float | None = None,
    ) -> None:
        self.transport = transport
        self.renderer = renderer or MailRenderer()
        self.send_timeout_seconds = send_timeout_seconds

    @staticmethod
    def _check_preconditions(job: NotificationJob) -> None:
        if not job.subject or not job.subject.strip():
            raise ValidationException("Subject is required", field="subject")
        if not job.message_template or not job.message_template.strip():
            raise ValidationException("Message is required", field="message")
        if not job.recipients:
            raise ValidationException(
                "At least one recipient is required", field="recipients"
            )

    async def _deliver(self, to: str, subject: str, body: str) -> None:
        if self.send_timeout_seconds is None:
            await self.transport.send(to, subject, body)
            return
        await asyncio.wait_for(
            self.transport.send(to, subject, body),
            timeout=self.send_timeout_seconds,
        )

    async def notify_all(
        self,
        job: NotificationJob,
        result: NotificationResult | None = None,
    ) -> NotificationResult:
        """Send job to every recipient and return the sent/failed tally.

        Args:
            job: Subject, message template, and ordered recipients.
            result: Optional accumulator owned by the caller; on cancellation
                it holds every outcome recorded before the cancel point.

        Returns:
            The accumulated NotificationResult (all-failed is a normal return).

        Raises:
            ValidationException: Empty subject, message, or recipient list.
        """
        self._check_preconditions(job)
        result = result if result is not None else NotificationResult()

        try:
            for recipient in job.recipients:
                body = self.renderer.render(
                    job.message_template,
                    job.personalization_field,
                    recipient.display_name,
                )
                try:
                    await self._deliver(recipient.email, job.subject, body)
                except MailDeliveryError as e:
                    result.record_failure(recipient.email, e.reason)
                    logger.warning("Failed to send email to %s: %s", recipient.email, e.reason)
                except asyncio.TimeoutError:
                    reason = f"Delivery timed out after {self.send_timeout_seconds} seconds"
                    result.record_failure(recipient.email, reason)
                    logger.warning("Failed to send email to %s: %s", recipient.email, reason)
                except Exception as e:
                    result.record_failure(recipient.email, str(e) or e.__class__.__name__)
                    logger.exception("Unexpected transport error for %s", recipient.email)
                else:
                    result.record_sent()
                    logger.info("Email sent to %s", recipient.email)
        except asyncio.CancelledError:
            logger.warning(
                "Bulk notification cancelled after %d of %d recipients (sent=%d, failed=%d)",
                result.attempted,
                len(job.recipients),
                result.sent_count,
                result.failed_count,
            )
            raise

        logger.info(
            "Bulk notification finished: sent=%d failed=%d (subject=%r)",
            result.sent_count,
            result.failed_count,
            job.subject[:80],
        )
        return result

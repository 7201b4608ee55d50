"""Log-only mail transport for development: records the message instead of sending it."""

from __future__ import annotations

import logging

from app.shared.telemetry.logging import get_logger
from app.shared.utils.datetime import utc_now

logger = get_logger(__name__)


class LogOnlyMailTransport:
    """IMailTransport implementation that logs instead of sending email.

    Use when no SMTP relay is configured. Keeps every sent message in
    ``outbox`` so local runs can inspect what would have gone out.
    """

    def __init__(self) -> None:
        self.outbox: list[tuple[str, str, str]] = []

    async def send(self, to: str, subject: str, body: str) -> None:
        """Log the message; no actual email sent."""
        self.outbox.append((to, subject, body))
        logger.info("Mail: would send to %s (subject=%r)", to, (subject or "")[:80])
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Mail body for %s at %s (first 500 chars): %s",
                to,
                utc_now().isoformat(),
                (body or "")[:500],
            )

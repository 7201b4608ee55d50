"""SMTP mail transport (aiosmtplib). One message per send, text body plus HTML alternative."""

from __future__ import annotations

from email.message import EmailMessage

import aiosmtplib

from app.domain.exceptions import MailDeliveryError
from app.infrastructure.external.email.layout import EmailLayoutRenderer
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class SmtpMailTransport:
    """IMailTransport implementation that delivers through an SMTP relay."""

    def __init__(
        self,
        *,
        hostname: str,
        port: int,
        sender: str,
        username: str | None = None,
        password: str | None = None,
        start_tls: bool = True,
        timeout: float | None = None,
        layout: EmailLayoutRenderer | None = None,
    ) -> None:
        self.hostname = hostname
        self.port = port
        self.sender = sender
        self.username = username
        self.password = password
        self.start_tls = start_tls
        self.timeout = timeout
        self.layout = layout or EmailLayoutRenderer()

    def build_message(self, to: str, subject: str, body: str) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = self.sender
        msg["To"] = to
        msg["Subject"] = subject
        msg.set_content(body)
        msg.add_alternative(self.layout.render(subject, body), subtype="html")
        return msg

    async def send(self, to: str, subject: str, body: str) -> None:
        """Send one message. Raises MailDeliveryError if the relay rejects it or is unreachable."""
        msg = self.build_message(to, subject, body)
        try:
            await aiosmtplib.send(
                msg,
                hostname=self.hostname,
                port=self.port,
                username=self.username,
                password=self.password,
                start_tls=self.start_tls,
                timeout=self.timeout,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.warning("SMTP send to %s failed: %s", to, e)
            raise MailDeliveryError(to, str(e) or type(e).__name__) from e

"""Mail transport factory: creates the SMTP or log-only backend from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.interfaces.services import IMailTransport

if TYPE_CHECKING:
    from app.core.config import Settings


class MailTransportFactory:
    """Factory for mail transport instances based on configuration."""

    @staticmethod
    def create_mail_transport(settings: "Settings | None" = None) -> IMailTransport:
        """Create mail transport from settings.

        Args:
            settings: Application settings; if None, uses get_settings().

        Returns:
            SmtpMailTransport or LogOnlyMailTransport.

        Raises:
            ValueError: Unknown backend or missing required config.
        """
        from app.core.config import get_settings

        s = settings or get_settings()
        backend = s.mail_backend.lower()

        if backend == "log":
            from app.infrastructure.external.email.log_transport import (
                LogOnlyMailTransport,
            )

            return LogOnlyMailTransport()
        if backend == "smtp":
            from app.infrastructure.external.email.layout import EmailLayoutRenderer
            from app.infrastructure.external.email.smtp_transport import (
                SmtpMailTransport,
            )

            if not s.smtp_host or not s.mail_sender:
                raise ValueError("SMTP_HOST and MAIL_SENDER required for smtp backend")
            return SmtpMailTransport(
                hostname=s.smtp_host,
                port=s.smtp_port,
                sender=s.mail_sender,
                username=s.smtp_username or None,
                password=(s.smtp_password.get_secret_value() if s.smtp_password else None) or None,
                start_tls=s.smtp_start_tls,
                timeout=s.mail_send_timeout_seconds,
                layout=EmailLayoutRenderer(signature=s.mail_team_signature),
            )
        raise ValueError(f"Unknown mail backend: {backend}. Supported: 'smtp', 'log'")

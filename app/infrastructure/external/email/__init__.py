"""Outgoing mail: transports, factory and HTML layout."""

from app.infrastructure.external.email.factory import MailTransportFactory
from app.infrastructure.external.email.layout import EmailLayoutRenderer
from app.infrastructure.external.email.log_transport import LogOnlyMailTransport
from app.infrastructure.external.email.smtp_transport import SmtpMailTransport

__all__ = [
    "EmailLayoutRenderer",
    "LogOnlyMailTransport",
    "MailTransportFactory",
    "SmtpMailTransport",
]

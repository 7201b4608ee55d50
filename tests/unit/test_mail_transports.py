"""Mail transports, transport factory, and HTML layout."""

from unittest.mock import AsyncMock

import aiosmtplib
import pytest

from app.core.config import Settings
from app.domain.exceptions import MailDeliveryError
from app.infrastructure.external.email import (
    EmailLayoutRenderer,
    LogOnlyMailTransport,
    MailTransportFactory,
    SmtpMailTransport,
)


def _smtp() -> SmtpMailTransport:
    return SmtpMailTransport(
        hostname="smtp.test",
        port=2525,
        sender="noreply@tqrs.test",
        username="mailer",
        password="secret",
        timeout=3.0,
    )


def test_layout_escapes_message_and_keeps_paragraphs() -> None:
    html = EmailLayoutRenderer(signature="The Team").render(
        "Launch", "Hi <Ada>,\n\nIt is live & ready."
    )
    assert "Hi &lt;Ada&gt;," in html
    assert "It is live &amp; ready." in html
    assert html.count("<p>") >= 2
    assert "The Team" in html


def test_smtp_message_has_text_and_html_parts() -> None:
    msg = _smtp().build_message("ada@example.com", "Launch", "Hi Ada")
    assert msg["To"] == "ada@example.com"
    assert msg["From"] == "noreply@tqrs.test"
    assert msg["Subject"] == "Launch"
    assert msg.get_body(preferencelist=("plain",)).get_content().strip() == "Hi Ada"
    assert "Hi Ada" in msg.get_body(preferencelist=("html",)).get_content()


async def test_smtp_send_passes_connection_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    send = AsyncMock()
    monkeypatch.setattr(aiosmtplib, "send", send)
    await _smtp().send("ada@example.com", "Launch", "Hi Ada")
    kwargs = send.await_args.kwargs
    assert kwargs["hostname"] == "smtp.test"
    assert kwargs["port"] == 2525
    assert kwargs["username"] == "mailer"
    assert kwargs["start_tls"] is True
    assert kwargs["timeout"] == 3.0


async def test_smtp_errors_become_mail_delivery_error(monkeypatch: pytest.MonkeyPatch) -> None:
    send = AsyncMock(side_effect=aiosmtplib.SMTPRecipientsRefused([]))
    monkeypatch.setattr(aiosmtplib, "send", send)
    with pytest.raises(MailDeliveryError) as exc_info:
        await _smtp().send("ada@example.com", "Launch", "Hi Ada")
    assert exc_info.value.recipient == "ada@example.com"
    assert exc_info.value.reason


async def test_log_transport_keeps_outbox() -> None:
    transport = LogOnlyMailTransport()
    await transport.send("ada@example.com", "Launch", "Hi Ada")
    assert transport.outbox == [("ada@example.com", "Launch", "Hi Ada")]


def test_factory_builds_backend_from_settings() -> None:
    base = {"database_url": "sqlite+aiosqlite:///:memory:", "secret_key": "k"}
    log = MailTransportFactory.create_mail_transport(Settings(**base, mail_backend="log"))
    assert isinstance(log, LogOnlyMailTransport)
    smtp = MailTransportFactory.create_mail_transport(
        Settings(**base, mail_backend="smtp", smtp_host="smtp.test", mail_sender="a@b.co")
    )
    assert isinstance(smtp, SmtpMailTransport)
    assert smtp.hostname == "smtp.test"


def test_smtp_backend_requires_host() -> None:
    with pytest.raises(ValueError):
        Settings(
            database_url="sqlite+aiosqlite:///:memory:",
            secret_key="k",
            mail_backend="smtp",
            mail_sender="a@b.co",
        )

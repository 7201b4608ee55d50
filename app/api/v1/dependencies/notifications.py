"""Early-access notification dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.application.interfaces.services import IMailTransport
from app.application.services.bulk_notifier import BulkNotifier
from app.application.use_cases.notifications import EarlyAccessNotificationService
from app.core.config import get_settings
from app.infrastructure.external.email.factory import MailTransportFactory
from app.infrastructure.persistence.repositories import SignupRepository

from .signups import get_signup_repo


def get_mail_transport(request: Request) -> IMailTransport:
    """Mail transport from settings; built once and kept on app.state."""
    transport = getattr(request.app.state, "mail_transport", None)
    if transport is None:
        transport = MailTransportFactory.create_mail_transport()
        request.app.state.mail_transport = transport
    return transport


def get_bulk_notifier(
    transport: Annotated[IMailTransport, Depends(get_mail_transport)],
) -> BulkNotifier:
    return BulkNotifier(
        transport,
        send_timeout_seconds=get_settings().mail_send_timeout_seconds,
    )


async def get_notification_service(
    signup_repo: Annotated[SignupRepository, Depends(get_signup_repo)],
    notifier: Annotated[BulkNotifier, Depends(get_bulk_notifier)],
) -> EarlyAccessNotificationService:
    """Notify use case: approved signups (read session) → bulk notifier."""
    return EarlyAccessNotificationService(signup_repo, notifier)

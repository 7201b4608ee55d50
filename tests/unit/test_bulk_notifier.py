"""BulkNotifier unit tests with a mocked mail transport."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.notification import (
    NotificationJob,
    NotificationRecipient,
    NotificationResult,
)
from app.application.services.bulk_notifier import BulkNotifier
from app.domain.exceptions import MailDeliveryError, ValidationException

RECIPIENTS = (
    NotificationRecipient("one@example.com", "One"),
    NotificationRecipient("two@example.com", "Two"),
    NotificationRecipient("three@example.com", None),
)


def _job(recipients=RECIPIENTS, subject="Launch", message="Hi {{name}}, it is live") -> NotificationJob:
    return NotificationJob(subject=subject, message_template=message, recipients=tuple(recipients))


async def test_failure_for_second_recipient_is_recorded_and_loop_continues() -> None:
    transport = AsyncMock()

    async def send(to, subject, body):
        if to == "two@example.com":
            raise MailDeliveryError(to, "mailbox unavailable")

    transport.send.side_effect = send
    result = await BulkNotifier(transport).notify_all(_job())

    assert result.sent_count == 2
    assert result.failed_count == 1
    assert [(e.email, e.error_message) for e in result.errors] == [
        ("two@example.com", "mailbox unavailable")
    ]
    assert [c.args[0] for c in transport.send.await_args_list] == [
        "one@example.com",
        "two@example.com",
        "three@example.com",
    ]


async def test_each_body_is_personalized() -> None:
    transport = AsyncMock()
    await BulkNotifier(transport).notify_all(_job())
    bodies = [c.args[2] for c in transport.send.await_args_list]
    subjects = {c.args[1] for c in transport.send.await_args_list}
    assert bodies == ["Hi One, it is live", "Hi Two, it is live", "Hi there, it is live"]
    assert subjects == {"Launch"}


async def test_all_failed_is_a_normal_result() -> None:
    transport = AsyncMock()
    transport.send.side_effect = ConnectionError("relay down")
    result = await BulkNotifier(transport).notify_all(_job())
    assert result.sent_count == 0
    assert result.failed_count == 3
    assert {e.error_message for e in result.errors} == {"relay down"}


async def test_empty_recipients_rejected_without_transport_call() -> None:
    transport = AsyncMock()
    with pytest.raises(ValidationException):
        await BulkNotifier(transport).notify_all(_job(recipients=()))
    transport.send.assert_not_awaited()


@pytest.mark.parametrize(("subject", "message"), [("", "Hi"), ("Launch", "  ")])
async def test_empty_subject_or_message_rejected(subject: str, message: str) -> None:
    transport = AsyncMock()
    with pytest.raises(ValidationException):
        await BulkNotifier(transport).notify_all(_job(subject=subject, message=message))
    transport.send.assert_not_awaited()


async def test_slow_delivery_times_out_and_counts_as_failure() -> None:
    transport = AsyncMock()

    async def send(to, subject, body):
        if to == "one@example.com":
            await asyncio.sleep(5)

    transport.send.side_effect = send
    result = await BulkNotifier(transport, send_timeout_seconds=0.05).notify_all(_job())
    assert result.sent_count == 2
    assert result.failed_count == 1
    assert result.errors[0].email == "one@example.com"
    assert "timed out" in result.errors[0].error_message


async def test_cancellation_keeps_partial_result() -> None:
    transport = AsyncMock()
    second_started = asyncio.Event()

    async def send(to, subject, body):
        if to == "two@example.com":
            second_started.set()
            await asyncio.sleep(10)

    transport.send.side_effect = send
    result = NotificationResult()
    task = asyncio.create_task(BulkNotifier(transport).notify_all(_job(), result))
    await second_started.wait()
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert result.sent_count == 1
    assert result.failed_count == 0
    assert transport.send.await_count == 2

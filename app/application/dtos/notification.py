"""DTOs for bulk personalized notifications."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NotificationRecipient:
    """One addressee; display_name feeds the {{name}} personalization token."""

    email: str
    display_name: str | None = None


@dataclass(frozen=True)
class NotificationJob:
    """One bulk send: shared subject and template, ordered recipients."""

    subject: str
    message_template: str
    recipients: tuple[NotificationRecipient, ...]
    personalization_field: str = "name"


@dataclass(frozen=True)
class DeliveryFailure:
    """A recipient whose delivery attempt failed, with the transport's reason."""

    email: str
    error_message: str


@dataclass
class NotificationResult:
    """Sent/failed tally accumulated while a job runs.

    Mutable so a caller holding the instance keeps the partial accounting
    if the job is cancelled mid-flight.
    """

    sent_count: int = 0
    failed_count: int = 0
    errors: list[DeliveryFailure] = field(default_factory=list)

    def record_sent(self) -> None:
        self.sent_count += 1

    def record_failure(self, email: str, error_message: str) -> None:
        self.failed_count += 1
        self.errors.append(DeliveryFailure(email=email, error_message=error_message))

    @property
    def attempted(self) -> int:
        return self.sent_count + self.failed_count

"""Early-access notification API schemas."""

from pydantic import BaseModel, Field

from app.application.dtos.notification import NotificationResult


class NotifyEarlyAccessRequest(BaseModel):
    """Subject and message for all approved signups. {{name}} is replaced per recipient.

    Both fields are checked by the use case so a missing value answers 400.
    """

    subject: str | None = Field(None, description="Mail subject")
    message: str | None = Field(None, description="Plain-text body; may contain {{name}}")


class DeliveryErrorResponse(BaseModel):
    email: str
    error: str


class NotificationDetails(BaseModel):
    sent: int
    failed: int
    errors: list[DeliveryErrorResponse]


class NotifyEarlyAccessResponse(BaseModel):
    """Outcome of a bulk notification; returned even when every delivery failed."""

    message: str
    details: NotificationDetails
    completed: bool = Field(True, description="False when the job deadline stopped it early")

    @classmethod
    def from_result(
        cls, result: NotificationResult, stopped_after: float | None = None
    ) -> "NotifyEarlyAccessResponse":
        """Build the response; stopped_after is the deadline (seconds) that cut the job short."""
        message = (
            f"Notification sent to {result.sent_count} users, "
            f"failed for {result.failed_count}"
        )
        if stopped_after is not None:
            message += f"; stopped after {stopped_after:g} seconds"
        return cls(
            message=message,
            completed=stopped_after is None,
            details=NotificationDetails(
                sent=result.sent_count,
                failed=result.failed_count,
                errors=[
                    DeliveryErrorResponse(email=e.email, error=e.error_message)
                    for e in result.errors
                ],
            ),
        )

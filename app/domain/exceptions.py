"""Domain exceptions for the CMS backend.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class CmsException(Exception):
    """Base exception for all CMS application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(CmsException):
    """Raised when input validation fails (missing subject, empty recipients, ...)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(CmsException):
    """Raised when authentication fails (e.g. invalid credentials or token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(CmsException):
    """Raised when the user's role does not allow the operation."""

    def __init__(
        self,
        required_roles: list[str] | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with the roles that would have been accepted.

        Args:
            required_roles: Roles allowed to perform the operation.
            message: Human-readable message.
        """
        details: dict[str, Any] = {}
        if required_roles:
            details["required_roles"] = required_roles
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(CmsException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'app', 'signup').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class DuplicateSignupException(CmsException):
    """Raised when an email is already signed up for early access to an app."""

    def __init__(self, app_id: str) -> None:
        super().__init__(
            "Email already signed up for this app",
            "DUPLICATE_SIGNUP",
            {"app_id": app_id},
        )


class StoreUnavailableException(CmsException):
    """Raised when the content store cannot serve a read (connection error or timeout).

    Search fails as a whole; partial cross-type results are never returned.
    """

    def __init__(self, content_type: str | None = None, reason: str | None = None) -> None:
        """Initialize with the content type whose fetch failed.

        Args:
            content_type: 'blog', 'webinar' or 'app' when known.
            reason: Internal reason, logged but kept out of the client message.
        """
        details: dict[str, Any] = {}
        if content_type:
            details["content_type"] = content_type
        self.reason = reason
        super().__init__(
            "Content is temporarily unavailable; please retry.",
            "STORE_UNAVAILABLE",
            details,
        )


class NoRecipientsException(CmsException):
    """Raised when a notify request resolves to zero approved recipients."""

    def __init__(self, app_id: str) -> None:
        super().__init__(
            "No approved early access users found for this app",
            "NO_RECIPIENTS",
            {"app_id": app_id},
        )


class MailDeliveryError(CmsException):
    """Raised by a mail transport when a single delivery fails.

    The bulk notifier records it per recipient; it never escapes a job.
    """

    def __init__(self, recipient: str, reason: str) -> None:
        self.recipient = recipient
        self.reason = reason
        super().__init__(reason, "MAIL_DELIVERY_ERROR", {"recipient": recipient})


class DatabaseNotConfiguredException(CmsException):
    """Raised when a request needs the database but DATABASE_URL is unusable."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )

"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import AppStatus, BlogStatus, ContentType, SignupStatus, UserRole
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    CmsException,
    DuplicateSignupException,
    MailDeliveryError,
    NoRecipientsException,
    ResourceNotFoundException,
    StoreUnavailableException,
    ValidationException,
)

__all__ = [
    # Enums
    "AppStatus",
    "BlogStatus",
    "ContentType",
    "SignupStatus",
    "UserRole",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "CmsException",
    "DuplicateSignupException",
    "MailDeliveryError",
    "NoRecipientsException",
    "ResourceNotFoundException",
    "StoreUnavailableException",
    "ValidationException",
]

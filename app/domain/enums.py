"""Domain enumerations for the CMS.

Enums represent fixed sets of domain values (content kinds, lifecycle
statuses, staff roles).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class ContentType(_ValuesMixin, str, Enum):
    """Searchable content kinds. Declaration order is the search fetch order."""

    BLOG = "blog"
    WEBINAR = "webinar"
    APP = "app"


class BlogStatus(_ValuesMixin, str, Enum):
    """Blog post publication status. Only PUBLISHED posts are public."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class AppStatus(_ValuesMixin, str, Enum):
    """App lifecycle stage."""

    DEVELOPMENT = "development"
    BETA = "beta"
    RELEASED = "released"


class SignupStatus(_ValuesMixin, str, Enum):
    """Early-access signup review status. Only APPROVED signups are notified."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class UserRole(_ValuesMixin, str, Enum):
    """Staff role. ADMIN and EDITOR manage content and notifications."""

    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"

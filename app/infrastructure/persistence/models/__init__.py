"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.content import BlogPost, ResearchApp, Webinar
from app.infrastructure.persistence.models.early_access_signup import EarlyAccessSignup
from app.infrastructure.persistence.models.mixins import (
    CmsModel,
    CuidMixin,
    TimestampMixin,
)
from app.infrastructure.persistence.models.user import User

__all__ = [
    "BlogPost",
    "CmsModel",
    "CuidMixin",
    "EarlyAccessSignup",
    "ResearchApp",
    "TimestampMixin",
    "User",
    "Webinar",
]

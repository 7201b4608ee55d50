"""Early-access signup ORM model."""

from typing import Any

from sqlalchemy import JSON, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import SignupStatus
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CmsModel


class EarlyAccessSignup(CmsModel, Base):
    """Signup for early access to an app. Unique (app_id, email)."""

    __tablename__ = "early_access_signups"

    app_id: Mapped[str] = mapped_column(
        String, ForeignKey("apps.id", ondelete="CASCADE"), nullable=False, index=True
    )
    email: Mapped[str] = mapped_column(String, nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    company: Mapped[str | None] = mapped_column(String, nullable=True)
    interests: Mapped[list[Any] | None] = mapped_column(JSON, nullable=True)
    status: Mapped[str] = mapped_column(
        String, nullable=False, default=SignupStatus.PENDING.value, index=True
    )

    __table_args__ = (
        UniqueConstraint("app_id", "email", name="uq_signup_app_email"),
    )

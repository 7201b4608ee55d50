"""Early-access signup API schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.domain.enums import SignupStatus


class SignupCreateRequest(BaseModel):
    """Public early-access signup for one app."""

    email: EmailStr
    name: str = Field(..., min_length=1, max_length=255)
    company: str | None = Field(None, max_length=255)
    interests: list[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name is required")
        return v.strip()


class SignupCreateResponse(BaseModel):
    message: str = "Early access signup successful"
    signup_id: str


class SignupResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    app_id: str
    email: str
    name: str
    company: str | None = None
    interests: list[Any] = Field(default_factory=list)
    status: str
    created_at: datetime


class PaginationResponse(BaseModel):
    """Page position; total is the number of pages."""

    current: int
    total: int
    has_next: bool
    has_prev: bool


class SignupListResponse(BaseModel):
    signups: list[SignupResponse]
    pagination: PaginationResponse


class SignupStatusUpdateRequest(BaseModel):
    status: SignupStatus


class MessageResponse(BaseModel):
    message: str

"""Pydantic request/response schemas for the API."""

from app.schemas.auth import LoginRequest, TokenResponse, UserResponse
from app.schemas.health import HealthResponse, ReadinessResponse
from app.schemas.notification import (
    NotificationDetails,
    NotifyEarlyAccessRequest,
    NotifyEarlyAccessResponse,
)
from app.schemas.search import (
    SearchFilters,
    SearchResponse,
    SearchResultItemResponse,
    SearchStatsResponse,
    SuggestionsResponse,
)
from app.schemas.signup import (
    MessageResponse,
    PaginationResponse,
    SignupCreateRequest,
    SignupCreateResponse,
    SignupListResponse,
    SignupResponse,
    SignupStatusUpdateRequest,
)

__all__ = [
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "NotificationDetails",
    "NotifyEarlyAccessRequest",
    "NotifyEarlyAccessResponse",
    "PaginationResponse",
    "ReadinessResponse",
    "SearchFilters",
    "SearchResponse",
    "SearchResultItemResponse",
    "SearchStatsResponse",
    "SignupCreateRequest",
    "SignupCreateResponse",
    "SignupListResponse",
    "SignupResponse",
    "SignupStatusUpdateRequest",
    "SuggestionsResponse",
    "TokenResponse",
    "UserResponse",
]

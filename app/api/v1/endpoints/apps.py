"""Apps API: early-access signups and early-access notifications.

Signup is public; listing, review, and notify require an admin or editor.
"""

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import (
    get_notification_service,
    get_signup_service,
    require_staff,
)
from app.application.dtos.notification import NotificationResult
from app.application.dtos.signup import SignupCreate
from app.application.dtos.user import UserResult
from app.application.use_cases.notifications import EarlyAccessNotificationService
from app.application.use_cases.signups import SignupService
from app.core.config import get_settings
from app.core.limiter import limit_notify, limit_signup
from app.domain.enums import SignupStatus
from app.schemas.notification import NotifyEarlyAccessRequest, NotifyEarlyAccessResponse
from app.schemas.signup import (
    MessageResponse,
    PaginationResponse,
    SignupCreateRequest,
    SignupCreateResponse,
    SignupListResponse,
    SignupResponse,
    SignupStatusUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/{app_id}/signup", response_model=SignupCreateResponse, status_code=201)
@limit_signup
async def sign_up(
    request: Request,
    app_id: str,
    body: SignupCreateRequest,
    signup_svc: Annotated[SignupService, Depends(get_signup_service)],
):
    """Register interest in an active app (public). One signup per email per app."""
    created = await signup_svc.sign_up(
        app_id,
        SignupCreate(
            email=str(body.email),
            name=body.name,
            company=body.company,
            interests=list(body.interests),
        ),
    )
    return SignupCreateResponse(signup_id=created.id)


@router.get("/{app_id}/signups", response_model=SignupListResponse)
async def list_signups(
    app_id: str,
    signup_svc: Annotated[SignupService, Depends(get_signup_service)],
    _: Annotated[UserResult, Depends(require_staff)],
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    status: SignupStatus | None = Query(None),
):
    """Paginated signups for an app, newest first."""
    result = await signup_svc.list_signups(
        app_id, page=page, limit=limit, status=status.value if status else None
    )
    return SignupListResponse(
        signups=[SignupResponse.model_validate(s) for s in result.items],
        pagination=PaginationResponse(
            current=result.page,
            total=result.total_pages,
            has_next=result.has_next,
            has_prev=result.has_prev,
        ),
    )


@router.put("/signups/{signup_id}", response_model=MessageResponse)
async def update_signup_status(
    signup_id: str,
    body: SignupStatusUpdateRequest,
    signup_svc: Annotated[SignupService, Depends(get_signup_service)],
    _: Annotated[UserResult, Depends(require_staff)],
):
    """Approve, reject, or reset a signup to pending."""
    await signup_svc.update_status(signup_id, body.status.value)
    return MessageResponse(message="Signup status updated successfully")


@router.post("/{app_id}/notify-early-access", response_model=NotifyEarlyAccessResponse)
@limit_notify
async def notify_early_access(
    request: Request,
    app_id: str,
    body: NotifyEarlyAccessRequest,
    notification_svc: Annotated[
        EarlyAccessNotificationService, Depends(get_notification_service)
    ],
    _: Annotated[UserResult, Depends(require_staff)],
):
    """Mail every approved early-access signup of the app.

    Answers 200 with per-recipient accounting even when every delivery failed.
    The job is bounded by notify_job_timeout_seconds; when the deadline hits,
    the deliveries made so far are reported with completed=false.
    """
    result = NotificationResult()
    deadline = get_settings().notify_job_timeout_seconds
    try:
        async with asyncio.timeout(deadline):
            await notification_svc.notify_early_access(
                app_id, body.subject, body.message, result=result
            )
    except TimeoutError:
        logger.warning(
            "Notify job for app %s stopped after %ss (sent=%d, failed=%d)",
            app_id,
            deadline,
            result.sent_count,
            result.failed_count,
        )
        return NotifyEarlyAccessResponse.from_result(result, stopped_after=deadline)
    return NotifyEarlyAccessResponse.from_result(result)

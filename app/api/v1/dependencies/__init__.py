"""API v1 dependencies (composition root).

Routes depend only on these providers, never on infrastructure directly.
"""

from app.api.v1.dependencies.auth import (
    STAFF_ROLES,
    AuthSecurity,
    get_auth_security,
    get_current_user,
    get_current_user_optional,
    get_user_repo,
    require_roles,
    require_staff,
)
from app.api.v1.dependencies.db import get_db, get_db_transactional
from app.api.v1.dependencies.notifications import (
    get_bulk_notifier,
    get_mail_transport,
    get_notification_service,
)
from app.api.v1.dependencies.search import get_content_store, get_search_service
from app.api.v1.dependencies.signups import (
    get_signup_repo,
    get_signup_repo_for_write,
    get_signup_service,
)

__all__ = [
    "STAFF_ROLES",
    "AuthSecurity",
    "get_auth_security",
    "get_bulk_notifier",
    "get_content_store",
    "get_current_user",
    "get_current_user_optional",
    "get_db",
    "get_db_transactional",
    "get_mail_transport",
    "get_notification_service",
    "get_search_service",
    "get_signup_repo",
    "get_signup_repo_for_write",
    "get_signup_service",
    "get_user_repo",
    "require_roles",
    "require_staff",
]

"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

LOGIN_LIMIT = "10/minute"
SIGNUP_LIMIT = "20/minute"
NOTIFY_LIMIT = "5/minute"

limit_auth = limiter.limit(LOGIN_LIMIT)
limit_signup = limiter.limit(SIGNUP_LIMIT)
limit_notify = limiter.limit(NOTIFY_LIMIT)

"""DB session dependencies (composition root).

Reads use get_db; writes use get_db_transactional (commit on success,
rollback on error).
"""

from app.infrastructure.persistence.database import get_db, get_db_transactional

__all__ = ["get_db", "get_db_transactional"]

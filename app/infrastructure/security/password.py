"""Password hashing for staff accounts (bcrypt over a SHA-256 pre-hash).

The pre-hash keeps passwords longer than bcrypt's 72-byte input limit from
being truncated. Work factor comes from settings.bcrypt_rounds.
"""

import base64
import hashlib

import bcrypt

from app.core.config import get_settings


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def get_password_hash(password: str) -> str:
    """Return a bcrypt hash suitable for User.hashed_password."""
    rounds = get_settings().bcrypt_rounds
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches hashed_password; False for malformed hashes."""
    try:
        return bool(
            bcrypt.checkpw(_prehash(plain_password), hashed_password.encode("utf-8"))
        )
    except (ValueError, TypeError):
        return False

"""Primary keys for ORM rows."""

from cuid2 import Cuid

CUID_LENGTH = 25

_cuid = Cuid(length=CUID_LENGTH)


def generate_cuid() -> str:
    """Return a new CUID2 string (lowercase, starts with a letter)."""
    return _cuid.generate()
